"""Custom exceptions for agilecore."""


class AgileCoreError(Exception):
    """Base exception for agilecore errors."""


class InputShapeError(AgileCoreError, ValueError):
    """Caller passed a record or argument the engines cannot read."""
