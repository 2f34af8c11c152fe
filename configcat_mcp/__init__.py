"""ConfigCat MCP server package."""

from .adapter import ConfigCatToolAdapter, create_configcat_adapter
from .binder import BoundRequest, bind_request
from .client import ConfigCatHttpClient
from .config import (
    CONFIGCAT_BASE_URL,
    HTTP_TIMEOUT_SECONDS,
    MCP_PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
    Credentials,
    load_credentials,
)
from .endpoints import (
    DEFAULT_ENDPOINTS,
    EndpointDescriptor,
    HttpMethod,
    ParameterBinding,
    ParameterLocation,
    header_param,
    path_param,
    query_param,
)
from .errors import (
    ArgumentValidationError,
    BindingError,
    ConfigurationError,
    ContractViolation,
    GatewayFailure,
    TransportFailure,
    UnknownToolError,
    UpstreamFailure,
    Violation,
)
from .models import (
    ErrorCode,
    InitializeResult,
    JsonRpcErrorData,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    TextContent,
    Tool,
    ToolCallParams,
    ToolCallResult,
    make_error_response,
    make_success_response,
)
from .registry import EndpointRegistry
from .schema import compile_schema, validate_arguments

__all__ = [
    # Adapter
    "ConfigCatToolAdapter",
    "create_configcat_adapter",
    # Pipeline stages
    "EndpointRegistry",
    "compile_schema",
    "validate_arguments",
    "BoundRequest",
    "bind_request",
    "ConfigCatHttpClient",
    # Endpoints
    "EndpointDescriptor",
    "HttpMethod",
    "ParameterBinding",
    "ParameterLocation",
    "path_param",
    "query_param",
    "header_param",
    "DEFAULT_ENDPOINTS",
    # Config
    "CONFIGCAT_BASE_URL",
    "HTTP_TIMEOUT_SECONDS",
    "MCP_PROTOCOL_VERSION",
    "SERVER_NAME",
    "SERVER_VERSION",
    "Credentials",
    "load_credentials",
    # Errors
    "GatewayFailure",
    "ContractViolation",
    "UnknownToolError",
    "ArgumentValidationError",
    "BindingError",
    "UpstreamFailure",
    "TransportFailure",
    "ConfigurationError",
    "Violation",
    # Models
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcErrorResponse",
    "JsonRpcErrorData",
    "Tool",
    "ToolCallParams",
    "ToolCallResult",
    "TextContent",
    "ListToolsResult",
    "InitializeResult",
    "ErrorCode",
    "make_error_response",
    "make_success_response",
]
