"""
Series models for the case trend service.

This module defines the dense day-indexed series produced by the densifier,
the trimmed reconstruction handed to callers, the 5-day trend comparison,
and the per-series report returned by the API. All models are derived on
every request and never persisted.
"""

from typing import Optional

from pydantic import BaseModel, Field, computed_field, model_validator

from casetrend.models.enums import AlertLevel, TrendDirection
from casetrend.models.keys import Number


class DayPoint(BaseModel):
    """One day of a series: epoch-millisecond day and its value."""

    day: int = Field(description="Epoch milliseconds on the series' daily grid")
    value: Number = Field(description="Counter value for the day")


class DenseSeries(BaseModel):
    """
    Contiguous daily series for one series key.

    Cases and deaths share one day axis. Every list has the same length and
    `days` ascends in steps of exactly one day from the first observation.

    Attributes:
        days: Epoch-millisecond day of each point
        labels: Human-readable UTC label of each day (e.g. "5 Mar '20")
        case_values: Daily case counts, zero where the store had no entry
        death_values: Daily death counts, zero where the store had no entry
    """

    days: list[int] = Field(default_factory=list, description="Epoch-millisecond days")
    labels: list[str] = Field(default_factory=list, description="Display label per day")
    case_values: list[Number] = Field(default_factory=list, description="Daily cases")
    death_values: list[Number] = Field(default_factory=list, description="Daily deaths")

    @model_validator(mode="after")
    def validate_aligned(self) -> "DenseSeries":
        """All parallel lists must have the same length."""
        n = len(self.days)
        if not (len(self.labels) == len(self.case_values) == len(self.death_values) == n):
            raise ValueError(
                "days, labels, case_values and death_values must have equal length"
            )
        return self

    def __len__(self) -> int:
        return len(self.days)

    @property
    def is_empty(self) -> bool:
        return not self.days

    def case_points(self) -> list[DayPoint]:
        return [DayPoint(day=d, value=v) for d, v in zip(self.days, self.case_values)]

    def death_points(self) -> list[DayPoint]:
        return [DayPoint(day=d, value=v) for d, v in zip(self.days, self.death_values)]


class ReconstructedSeries(DenseSeries):
    """Dense series after trailing-incompleteness trimming."""

    trimmed: bool = Field(
        default=False, description="True when an incomplete trailing day was dropped"
    )


def format_count(value: Number) -> str:
    """Thousands-separated count; floats are rounded to two decimals ("1,234.5")."""
    if isinstance(value, float):
        if value.is_integer():
            return f"{int(value):,}"
        return f"{value:,.2f}".rstrip("0").rstrip(".")
    return f"{value:,}"


class TrendComparison(BaseModel):
    """
    Sum of the last 5 days of cases against the 5 days before them.

    Attributes:
        current_window_sum: Sum of the most recent 5 values
        previous_window_sum: Sum of the 5 values preceding those
        direction: more, fewer or same
        difference: Absolute difference between the two sums
        alert_level: warning when cases are rising, info otherwise
    """

    current_window_sum: Number = Field(description="Sum of the last 5 days")
    previous_window_sum: Number = Field(description="Sum of the 5 days before those")
    direction: TrendDirection = Field(description="Trend direction")
    difference: Number = Field(description="Absolute difference of the sums")
    alert_level: AlertLevel = Field(description="Display severity")

    def describe(self, subject: str) -> str:
        """One-sentence narrative of the comparison for `subject`."""
        if self.direction == TrendDirection.SAME:
            change = "the same number of cases"
        else:
            change = f"{format_count(self.difference)} {self.direction.value} cases"
        return (
            f"During the last 5 days, {subject} reported {change} "
            f"than during the previous 5 days."
        )


class SeriesTotals(BaseModel):
    """Running totals stored under the scalar keys of a series."""

    total_cases: Optional[Number] = Field(default=None, description="Total cases")
    total_deaths: Optional[Number] = Field(default=None, description="Total deaths")


class SeriesReport(BaseModel):
    """
    Everything the page-rendering layer needs for one series key.

    `series` and `trend` are None when the data is absent, too short, or was
    rejected as corrupt; `errors` then explains the rejection.
    """

    series_key: str = Field(description="Normalised series key")
    display_name: str = Field(description="Country name of the series")
    generated_at: int = Field(description="Clock value (epoch ms) used for reconstruction")
    series: Optional[ReconstructedSeries] = Field(default=None)
    totals: SeriesTotals = Field(default_factory=SeriesTotals)
    trend: Optional[TrendComparison] = Field(default=None)
    trend_summary: Optional[str] = Field(default=None)
    travel_restrictions: Optional[str] = Field(default=None)
    errors: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def has_data(self) -> bool:
        return self.series is not None and not self.series.is_empty
