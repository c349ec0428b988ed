from .api_client import API_KEY_HEADER, PROTOCOL_VERSION, APIClient
from .config import DEFAULT_ENDPOINT, ReporterConfig
from .errors import ConfigurationError, ReporterError
from .reporter import Reporter, RequestResult

__all__ = [
    "API_KEY_HEADER",
    "APIClient",
    "ConfigurationError",
    "DEFAULT_ENDPOINT",
    "PROTOCOL_VERSION",
    "Reporter",
    "ReporterConfig",
    "ReporterError",
    "RequestResult",
]
