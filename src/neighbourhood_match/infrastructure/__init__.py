"""Concrete infrastructure implementations."""

from .filesystem import JsonObjectError, LocalFileSystem

__all__ = ["JsonObjectError", "LocalFileSystem"]
