"""
Library-wide constants for SimpleHTTP.

Header names, media types and tuning values used by the client and the CLI.
"""

# Header names
CONTENT_TYPE = "Content-Type"
CONTENT_LENGTH = "Content-Length"
TRANSFER_ENCODING = "Transfer-Encoding"

# Media types and charsets
APPLICATION_JSON = "application/json"
DEFAULT_JSON_CHARSET = "UTF-8"
DEFAULT_TEXT_CHARSET = "ISO-8859-1"

# HTTP verbs issued by the client
METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_DELETE = "DELETE"

# Streaming
DOWNLOAD_CHUNK_SIZE = 64 * 1024

# Statuses that never carry a response body
NO_ENTITY_STATUSES = frozenset({204, 205, 304})

# Time conversion
MILLISECONDS_PER_SECOND = 1000

# Logging defaults
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_FILE = "logs/simplehttp.log"

# Configuration
CONFIG_DIRECTORY_NAME = "simplehttp"
CONFIG_FILE_NAME = "config.toml"

# Request attributes attached to client log records
HTTP_LOG_FIELDS = ("method", "uri", "status", "bytes", "destination")
