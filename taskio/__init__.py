"""Taskio: task tracking backend with combined search and filtering."""

__version__ = "1.0.0"
