"""
Archive module for ProviderDQ.

Moves scanned input CSV files into the archive folder.
"""
