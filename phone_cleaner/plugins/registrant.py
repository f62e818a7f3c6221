"""Activate every configured plugin against the application.

A plugin is any callable taking the FastAPI app, named by an import string
such as ``"my_pkg.bridge:register"``. Plugins typically register their own
channels. Failures are logged and skipped so a broken plugin never keeps
the app from starting.
"""

import importlib
import logging
from typing import Callable, Iterable, Optional

from fastapi import FastAPI

from ..config import settings

logger = logging.getLogger(__name__)


def load_plugin(spec: str) -> Callable[[FastAPI], None]:
    """Resolve ``"module:attr"`` to a callable."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Plugin '{spec}' must look like 'module:callable'")
    module = importlib.import_module(module_name)
    plugin = module
    for part in attr.split("."):
        plugin = getattr(plugin, part)
    if not callable(plugin):
        raise TypeError(f"Plugin '{spec}' is not callable")
    return plugin


def register_plugins(app: FastAPI, plugins: Optional[Iterable[str]] = None) -> None:
    specs = settings.plugins if plugins is None else plugins
    for spec in specs:
        try:
            plugin = load_plugin(spec)
            plugin(app)
        except Exception:
            logger.exception("Plugin %s failed to register", spec)
            continue
        logger.info("Registered plugin %s", spec)
