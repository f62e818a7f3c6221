"""Channel registration."""

import logging
from typing import Optional
from .base import BaseChannel

logger = logging.getLogger(__name__)

_registry: dict[str, BaseChannel] = {}


def register_channel(channel: BaseChannel) -> None:
    if channel.name in _registry:
        logger.debug("Replacing channel %s", channel.name)
    _registry[channel.name] = channel
    logger.info("Registered channel %s", channel.name)


def get_channel(name: str) -> Optional[BaseChannel]:
    return _registry.get(name)


def get_all_channels() -> dict[str, BaseChannel]:
    return dict(_registry)
