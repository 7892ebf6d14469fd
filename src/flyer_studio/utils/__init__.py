"""Shared utilities."""

from flyer_studio.utils.file_utils import write_atomically

__all__ = ["write_atomically"]
