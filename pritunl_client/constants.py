"""
Constants for the Pritunl API client.
Header names match the ones the Pritunl server checks on every API call.
"""

# HTTP Headers
HEADER_AUTH_TOKEN = "Auth-Token"
HEADER_AUTH_TIMESTAMP = "Auth-Timestamp"
HEADER_AUTH_NONCE = "Auth-Nonce"
HEADER_AUTH_SIGNATURE = "Auth-Signature"

CONTENT_TYPE_JSON = "application/json"

# Separator used to build the signed string
AUTH_STRING_SEPARATOR = "&"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 120,      # 2 minutes, HTTP timeout in seconds
    'verify_tls': True,  # bool, or path to a CA bundle
}

# Statuses returned to the caller without raising
PASSTHROUGH_STATUSES = (401, 404)

# Environment variables read by Credentials.from_env / PritunlClient.from_env
ENV_HOST = "PRITUNL_HOST"
ENV_TOKEN = "PRITUNL_TOKEN"
ENV_SECRET = "PRITUNL_SECRET"
ENV_INSECURE = "PRITUNL_INSECURE"
