from .api import configure, create_contact, current_config, request, search_contacts, self_test, update_contact
from .client import IntercomClient
from .config_types import ClientConfig
from .errors import IntercomClientError, NetworkError, SelfTestError
from .result import Failure, Result, Success

__all__ = [
    "ClientConfig",
    "Failure",
    "IntercomClient",
    "IntercomClientError",
    "NetworkError",
    "Result",
    "SelfTestError",
    "Success",
    "configure",
    "create_contact",
    "current_config",
    "request",
    "search_contacts",
    "self_test",
    "update_contact",
]
