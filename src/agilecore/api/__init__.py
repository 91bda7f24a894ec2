"""REST API exposing the agilecore engines."""

from agilecore.api.app import app, create_app
from agilecore.api.models import APIResponse

__all__ = [
    "APIResponse",
    "app",
    "create_app",
]
