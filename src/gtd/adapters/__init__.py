"""Adapters - I/O implementations of ports."""

from .http_api import HttpTaskAdapter, AuthenticationError
from .json_file import JsonFileTaskStore, TaskSourceError

__all__ = [
    "HttpTaskAdapter",
    "AuthenticationError",
    "JsonFileTaskStore",
    "TaskSourceError",
]
