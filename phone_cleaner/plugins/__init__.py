"""Startup plugin registration."""

from .registrant import register_plugins

__all__ = ["register_plugins"]
