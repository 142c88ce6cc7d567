"""
Configuration module for ProviderDQ.

Loads the folder and file pattern settings shared by the validation
and archival passes.
"""
