"""
Validation module for ProviderDQ.

Column presence, missing ProviderID and expired-but-active credential
checks for provider and credential feeds.
"""
