# config/constants.py

"""Constants for the request debugger."""

# Storage keys shared with the host console
DEFAULT_STORAGE_KEY = "apiDebuggerTabs"
DEFAULT_TOKEN_STORAGE_KEY = "token"

# New draft defaults
DEFAULT_DRAFT_PATH = "/api/"
DEFAULT_DRAFT_NAME = "Request {index}"
DRAFT_ID_PREFIX = "tab-"
AUTHORIZATION_HEADER = "Authorization"

# Headers every request starts from; draft rows overlay these
BASE_REQUEST_HEADERS = {"Content-Type": "application/json"}

JSON_CONTENT_TYPE = "application/json"

# Characters encodeURIComponent leaves untouched besides alphanumerics
URI_COMPONENT_SAFE = "-_.!~*'()"

# Messages surfaced on drafts and exports
REQUEST_FAILED_MESSAGE = "Request failed"
UNSERIALIZABLE_RESPONSE_MESSAGE = "[unable to serialize response]"
