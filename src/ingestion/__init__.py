"""
Data ingestion module for ProviderDQ.

Handles discovery of provider and credential feed files on the local
filesystem and loading them as string-typed pandas DataFrames.
"""
