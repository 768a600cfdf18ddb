"""REST runtime abstractions."""

from ...utils.http import HTTPClient
from .executor import RESTExecutor

__all__ = [
    "HTTPClient",
    "RESTExecutor",
]
