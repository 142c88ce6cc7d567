"""
Entry points for ProviderDQ.

Validation and archival run as separate invocations.
"""
