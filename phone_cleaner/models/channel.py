"""Method channel models."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class ResponseStatus(str, Enum):
    SUCCESS = "success"
    NOT_IMPLEMENTED = "not_implemented"
    ERROR = "error"


class MethodCall(BaseModel):
    method: str
    arguments: Any = None


class ChannelError(BaseModel):
    code: str
    message: str = ""
    details: Any = None


class MethodResponse(BaseModel):
    status: ResponseStatus
    result: Any = None
    error: Optional[ChannelError] = None

    @classmethod
    def success(cls, result: Any) -> "MethodResponse":
        return cls(status=ResponseStatus.SUCCESS, result=result)

    @classmethod
    def not_implemented(cls) -> "MethodResponse":
        return cls(status=ResponseStatus.NOT_IMPLEMENTED)

    @classmethod
    def failure(cls, code: str, message: str = "", details: Any = None) -> "MethodResponse":
        return cls(
            status=ResponseStatus.ERROR,
            error=ChannelError(code=code, message=message, details=details),
        )


class ChannelInfo(BaseModel):
    name: str
    description: str = ""
    methods: list[str] = Field(default_factory=list)


class ChannelFrame(MethodCall):
    """A method call addressed to a channel over the WebSocket."""
    id: Any = None
    channel: str
