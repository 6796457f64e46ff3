"""Serving package - Filesystem driver for the conversion pipeline."""

from .storage_service import DocumentStorageService

__all__ = ['DocumentStorageService']
