"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from agilecore.config import Settings, get_settings


def get_api_settings(request: Request) -> Settings:
    """Dependency that provides the app's Settings.

    Apps built by create_app() carry their settings on app.state; a bare
    app mounting a router falls back to the process-wide settings.
    """
    settings = getattr(request.app.state, "settings", None)
    return get_settings() if settings is None else settings


# Type alias for dependency injection
SettingsDep = Annotated[Settings, Depends(get_api_settings)]
