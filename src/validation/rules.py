"""
Validation rules for provider and credential feeds.
"""

PROVIDER_REQUIRED_COLUMNS = [
    "ProviderID",
    "FirstName",
    "LastName",
    "NPI",
    "Specialty",
    "Status",
]

CREDENTIAL_REQUIRED_COLUMNS = [
    "CredentialID",
    "ProviderID",
    "CredentialType",
    "CredentialNumber",
    "IssueDate",
    "ExpiryDate",
    "Status",
]

KEY_COLUMN = "ProviderID"
STATUS_COLUMN = "Status"
EXPIRY_COLUMN = "ExpiryDate"
EXPIRY_DATE_FORMAT = "%Y-%m-%d"

# Case-sensitive exact match
ACTIVE_STATUS = "Active"

MISSING_COLUMN_MESSAGE = "Missing required column '{column}' in {feed} file: {file_name}"
MISSING_KEY_MESSAGE = "Found {count} rows with missing ProviderID in {file_name}"
EXPIRED_ACTIVE_MESSAGE = "Found {count} credentials marked Active but expired in {file_name}"
