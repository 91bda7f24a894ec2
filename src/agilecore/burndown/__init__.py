"""Burndown Generator - Ideal vs. actual remaining work per sprint day."""

from agilecore.burndown.generator import generate_burndown, remaining_points_on
from agilecore.burndown.models import BurndownSeries

__all__ = [
    "BurndownSeries",
    "generate_burndown",
    "remaining_points_on",
]
