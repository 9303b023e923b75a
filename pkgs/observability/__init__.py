"""Observability infrastructure for logging."""

from .logging import setup_logging, resolve_level, PROJECT_NAMESPACES

__all__ = ['setup_logging', 'resolve_level', 'PROJECT_NAMESPACES']
