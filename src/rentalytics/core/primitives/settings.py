# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import FrozenSet, Optional

from pydantic import Field

from .enums import BucketGranularity
from .model import Model
from .types import DecimalBetween0And1, PositiveInt


class AnalyticsSettings(Model):
    """
    Caller-supplied parameters for the analytics engines.

    Nothing about time filtering or bucketing is hard-coded in the engines;
    the caller decides which years are complete, what "today" is for the
    rent roll and how far forward to run depreciation schedules.

    Usage Examples:
        # Defaults: monthly cash flow, every year in the data, as of today
        settings = AnalyticsSettings()

        # Year-end report for the two complete years of a ledger
        settings = AnalyticsSettings(
            yoy_years={2024, 2025},
            as_of=date(2025, 12, 31),
        )
    """

    cash_flow_granularity: BucketGranularity = Field(
        default=BucketGranularity.MONTH,
        description="Bucket size for the cash flow time series.",
    )
    yoy_years: FrozenSet[int] = Field(
        default_factory=frozenset,
        description=(
            "Complete calendar years included in the year-over-year comparison. "
            "Empty means every year present in the data; callers should exclude "
            "partial years (e.g. the current year-to-date)."
        ),
    )
    as_of: date = Field(
        default_factory=date.today,
        description="Snapshot date for the rent roll.",
    )
    through_year: Optional[int] = Field(
        default=None,
        ge=1,
        le=9999,
        description=(
            "Last tax year of each depreciation schedule. Defaults to as_of.year; "
            "a later year projects the schedules forward."
        ),
    )
    vacancy_days_per_month: PositiveInt = Field(
        default=30,
        description="Flat month length used to derive a daily rent rate for vacancy cost.",
    )
    half_year_factor: DecimalBetween0And1 = Field(
        default=Decimal("0.5"),
        description="Fraction of the normal CCA rate claimable in the acquisition year.",
    )
    strict_cca_rates: bool = Field(
        default=True,
        description="If True, an asset whose cca_rate differs from its class's prescribed rate is rejected.",
    )
    fail_on_error: bool = Field(
        default=True,
        description="If True, raise schedule errors; otherwise, log and leave the failing asset out.",
    )
    percentage_places: int = Field(default=1, ge=0, le=6)
    currency_places: int = Field(default=2, ge=0, le=6)

    @property
    def depreciation_through_year(self) -> int:
        return self.through_year if self.through_year is not None else self.as_of.year
