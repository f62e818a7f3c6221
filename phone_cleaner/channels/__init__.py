"""Method channels."""

from .base import BaseChannel, MethodCallError, MethodNotImplemented
from .registry import register_channel, get_channel, get_all_channels
from .storage import StorageChannel

__all__ = [
    "BaseChannel",
    "MethodCallError",
    "MethodNotImplemented",
    "register_channel",
    "get_channel",
    "get_all_channels",
    "StorageChannel",
]
