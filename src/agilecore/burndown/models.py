"""Data models for the Burndown Generator."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BurndownSeries:
    """Day-by-day burndown of a sprint.

    All three sequences have one entry per calendar day from the start date
    to the end date inclusive, aligned by index.

    Attributes:
        labels: Display-formatted date of each day.
        ideal_line: Linear decay from the sprint's total story points to 0.
        actual_line: Story points not Done as of the end of each day.
        degraded: True when completion history was missing and actual_line
            repeats the current remaining total for every day instead of
            real history.
    """

    labels: list[str] = field(default_factory=list)
    ideal_line: list[float] = field(default_factory=list)
    actual_line: list[int] = field(default_factory=list)
    degraded: bool = False

    @property
    def total_days(self) -> int:
        return max(0, len(self.labels) - 1)
