"""
Reporting module for ProviderDQ.

Writes data quality findings to a timestamped log file and the console.
"""
