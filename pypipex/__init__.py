"""Run command pipelines between files, with here-document input."""

__version__ = "0.1.0"