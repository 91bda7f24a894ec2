"""agilecore - Board & sprint analytics and ordering engine."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the installed agilecore version."""
    return __version__
