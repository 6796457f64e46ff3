"""Config package - Environment-driven settings."""

from .settings import Settings

__all__ = ['Settings']
