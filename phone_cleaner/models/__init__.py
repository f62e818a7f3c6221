"""Data models."""

from .channel import (
    ChannelError,
    ChannelFrame,
    ChannelInfo,
    MethodCall,
    MethodResponse,
    ResponseStatus,
)

__all__ = [
    "ChannelError",
    "ChannelFrame",
    "ChannelInfo",
    "MethodCall",
    "MethodResponse",
    "ResponseStatus",
]
