"""
ProviderDQ - Provider and Credential Feed Quality Gate

Daily ingestion-time quality checks for provider roster and credential
roster CSV feeds, followed by archival of the scanned input files.
"""

__version__ = "1.0.0"
__author__ = "ProviderDQ Team"
