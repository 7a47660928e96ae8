"""Errors raised by the external collaborators of a census run."""

from __future__ import annotations


class ExternalToolError(RuntimeError):
    """Raised when ctags or git cannot be run or exits unsuccessfully."""


class CtagsNotFoundError(ExternalToolError):
    """Raised when no Universal Ctags binary can be located."""


__all__ = ["CtagsNotFoundError", "ExternalToolError"]
