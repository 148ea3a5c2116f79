from enum import Enum

# Resolver used for the metadata value stamped into datastreams
HANDLE_RESOLVER_URL = "http://hdl.handle.net"

# Stylesheet parameter receiving the resolvable handle URL
HANDLE_VALUE_PARAM = "handle_value"


# Severity of an outcome message, mirrors the caller's log channels
class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# Message templates for metadata outcomes ({name} placeholders)
class MetadataMessage(str, Enum):
    DATASTREAM_MISSING = "The {dsid} datastream does not exist on {pid}."
    CONTENT_UNPARSABLE = "Unable to parse the content of the {dsid} datastream for {pid}."
    STYLESHEET_UNAVAILABLE = "Unable to load the stylesheet {xsl} for {pid}."
    TRANSFORM_FAILED = (
        "Appending the Handle value for {pid} to the {dsid} datastream failed!"
    )
    HANDLE_APPENDED = "Added Handle to {pid} in the {dsid} datastream."


# Environment variables read by parse_environment_variables
class HandleEnvVars:
    PREFIX = "HANDLE_PREFIX"
    ADMIN_USERNAME = "HANDLE_ADMIN_USERNAME"
    ADMIN_PASSWORD = "HANDLE_ADMIN_PASSWORD"
    ALTERNATE_HOST = "HANDLE_ALTERNATE_HOST"
    USE_ALIAS = "HANDLE_USE_ALIAS"
    SITE_URL = "HANDLE_SITE_URL"
    OBJECTS_PATH = "HANDLE_OBJECTS_PATH"
    SERVICE_URL = "HANDLE_SERVICE_URL"
    BACKEND = "HANDLE_BACKEND"
    REQUEST_TIMEOUT = "HANDLE_REQUEST_TIMEOUT"
    VERIFY_SSL = "HANDLE_VERIFY_SSL"


class HandleDefaults:
    PREFIX = "1234567"
    ADMIN_USERNAME = "300:0.NA/1234567"
    SITE_URL = "http://localhost"
    OBJECTS_PATH = "islandora/object"
    SERVICE_URL = "https://localhost:8000"
    BACKEND = "rest"
    REQUEST_TIMEOUT = 30
