"""Structural extraction collaborators."""

from .ctags import CtagsExtractor, find_ctags, parse_ctags_output

__all__ = ["CtagsExtractor", "find_ctags", "parse_ctags_output"]
