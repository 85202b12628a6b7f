"""Gitiary: commit activity analytics for a handful of repositories."""

__version__ = "0.1.0"
