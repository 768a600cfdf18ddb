"""Runtime components: request execution, pagination and streaming."""

from .paginator import Paginator
from .rest import RESTExecutor
from .stream import SeenSet, Stream, StreamEvent

__all__ = [
    "Paginator",
    "RESTExecutor",
    "SeenSet",
    "Stream",
    "StreamEvent",
]
