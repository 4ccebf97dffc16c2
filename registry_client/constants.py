# Registry Client Constants
# All magic numbers and strings are defined here for maintainability

# API Version
API_VERSION = "v3"
API_BASE_ROUTE = f"/api/{API_VERSION}"

# API Endpoints
API_PING_ROUTE = f"{API_BASE_ROUTE}/ping"
API_REGISTER_ROUTE = f"{API_BASE_ROUTE}/registration"
API_ALL_REGISTRATION_ROUTE = f"{API_BASE_ROUTE}/registration/all"
API_REGISTRATION_BY_SERVICE_ID_ROUTE = f"{API_BASE_ROUTE}/registration/"

# HTTP Status Codes
HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
HTTP_MULTIPLE_CHOICES = 300
HTTP_NOT_FOUND = 404

# HTTP Methods
HTTP_GET = "GET"
HTTP_POST = "POST"
HTTP_PUT = "PUT"
HTTP_DELETE = "DELETE"

# HTTP Headers
AUTHORIZATION_HEADER = "Authorization"
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
BEARER_PREFIX = "Bearer "

# Registry Types
REGISTRY_TYPE_KEEPER = "keeper"

# Health Check
HEALTH_CHECK_TYPE_HTTP = "http"
STATUS_UP = "up"

# Default Values
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_PROTOCOL = "http"
DEFAULT_REGISTRY_HOST = "localhost"
DEFAULT_REGISTRY_PORT = 59890
DEFAULT_CHECK_ROUTE = API_PING_ROUTE

# Error Messages
ERROR_SERVICE_INFO_NOT_SET = (
    "unable to register service with registry: Service information not set"
)
ERROR_UNKNOWN_REGISTRY_TYPE = "unknown registry type '{}' requested"
ERROR_HTTP = "http error: {}"
ERROR_TIMEOUT = "http error: request exceeded the {}s timeout"
ERROR_DECODE_RESPONSE = "failed to decode response body: {}"
ERROR_CHECK_REGISTRY_STATUS = "failed to check the {} service registry status: {}"
ERROR_REGISTER = "failed to register {}: {}"
ERROR_UNREGISTER = "failed to unregister {}: {}"
ERROR_GET_ENDPOINT = "failed to get service endpoint: {}"
ERROR_GET_ALL_ENDPOINTS = "failed to get all service endpoints: {}"
ERROR_GET_SERVICE_REGISTRY = "failed to get {} service registry: {}"
ERROR_CHECK_AVAILABILITY = "failed to check service availability: {}"
ERROR_SERVICE_NOT_HEALTHY = "{} service not healthy..."
ERROR_SERVICE_NOT_REGISTERED = "{} service is not registered. Might not have started..."
ERROR_MISSING_TOKEN = "failed to add authentication data: access token is empty"

# Log Messages
LOG_SENDING_REQUEST = "Sending {} request to {}"
LOG_SERVICE_REGISTERED = "Service {} registered at {}:{} ({})"
LOG_SERVICE_UNREGISTERED = "Service {} unregistered"
