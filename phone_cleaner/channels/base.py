"""Abstract method channel interface."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..models.channel import ChannelInfo, MethodCall, MethodResponse

logger = logging.getLogger(__name__)


class MethodNotImplemented(Exception):
    """The channel does not recognize the requested method."""

    def __init__(self, method: str):
        super().__init__(method)
        self.method = method


class MethodCallError(Exception):
    """A recognized method failed with a structured error."""

    def __init__(self, code: str, message: str = "", details: Any = None):
        super().__init__(message or code)
        self.code = code
        self.message = message
        self.details = details


class BaseChannel(ABC):
    """All channels implement this interface."""

    name: str = ""
    description: str = ""
    methods: tuple[str, ...] = ()

    @abstractmethod
    def handle(self, call: MethodCall) -> Any:
        """Return the method's result or raise MethodNotImplemented."""
        ...

    def invoke(self, call: MethodCall) -> MethodResponse:
        """Run one call and wrap its outcome in exactly one response."""
        try:
            response = MethodResponse.success(self.handle(call))
        except MethodNotImplemented:
            return MethodResponse.not_implemented()
        except MethodCallError as e:
            response = MethodResponse.failure(e.code, e.message, e.details)
        except Exception as e:
            logger.exception("Channel %s failed on %s", self.name, call.method)
            return MethodResponse.failure("internal_error", str(e))

        # Transports dump with mode="json"; anything that can't be encoded stops here
        try:
            response.model_dump(mode="json")
        except Exception as e:
            logger.exception("Channel %s returned an unencodable response for %s", self.name, call.method)
            return MethodResponse.failure("internal_error", f"Unencodable result: {e}")
        return response

    def info(self) -> ChannelInfo:
        return ChannelInfo(
            name=self.name,
            description=self.description,
            methods=list(self.methods),
        )
