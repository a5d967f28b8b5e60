"""Shared application constants.

Constants used by multiple modules are defined here to ensure consistency.
Module-specific constants should be defined as class-level attributes on
their respective service classes instead.
"""

# Remote endpoints (relative to settings.API_URL)
GROUP_ENDPOINT = "group"
MEDIA_ENDPOINT = "media"
MEDIA_UPLOAD_ENDPOINT = "media/upload"
LOGIN_ENDPOINT = "auth/admin/login"

# Multipart field names for the upload-intake endpoint
UPLOAD_FILE_FIELD = "file"
UPLOAD_GROUP_IDS_FIELD = "groupIds[]"
UPLOAD_NAME_FIELD = "name"

# Separator used when the repository returns a list of messages
MESSAGE_SEPARATOR = ", "

# Substrings hinting that a 503 refers to the aggregate volume of unprocessed
# files rather than to throughput. Matched against the lower-cased message.
PENDING_VOLUME_NUMERAL = "5"
PENDING_VOLUME_TOKENS = (
    # size units
    "gb",
    "гб",
    # "not ready" / "unprocessed"
    "not ready",
    "unprocessed",
    "не готов",
    "неготов",
    "необработ",
    # "total" / "sum"
    "total",
    "сумма",
    "суммар",
    "всего",
)

# Display fallbacks
UNTITLED_MEDIA_LABEL = "Untitled"
UNKNOWN_GROUP_LABEL = "Unknown"
UNASSIGNED_LABEL = "Unassigned"
DISABLED_GROUP_SUFFIX = " (disabled)"
