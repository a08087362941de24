# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Capital Cost Allowance (CCA) schedules.

CCA is Canada's tax depreciation for capital assets: each CCA class has a
fixed declining-balance rate applied to the Undepreciated Capital Cost
(UCC) left after prior claims. A $1,000 class 8 (20%) asset claims:

    Year 1: $100  (half-year rule: 20% x $1,000 x 50%)
    Year 2: $180  (20% x $900 remaining UCC)
    Year 3: $144  (20% x $720 remaining UCC)

Each schedule is a UCC state machine stepped one tax year at a time. The
first period since acquisition is a distinct transition (half-year rule);
every later period applies the full rate. Each year's claim is rounded to
cents when it is computed, so rounding never compounds across years.

Disposal handling (recapture, terminal loss, capital gain) is experimental
and should be reviewed before relying on it for filed returns.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from ..core.calculations import LedgerCalculations
from ..core.ledger import Asset, Ledger
from ..core.primitives import (
    AnalyticsSettings,
    CCAClassEnum,
    DecimalBetween0And1,
    Model,
)
from .results import AnalysisTable

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


class DepreciationError(ValueError):
    """A schedule cannot be computed without emitting a wrong number."""


class DepreciationRow(Model):
    """
    One tax year of an asset's CCA schedule.

    The disposal columns are only set on the terminal (disposal) row.
    """

    asset_id: int
    description: str
    cca_class: CCAClassEnum
    year: int
    opening_ucc: Decimal
    cca_claimed: Decimal
    closing_ucc: Decimal
    proceeds: Optional[Decimal] = None
    recapture: Optional[Decimal] = None
    terminal_loss: Optional[Decimal] = None
    capital_gain: Optional[Decimal] = None


class CapitalCostAllowance(Model):
    """
    CCA schedule for a single asset.

    Attributes:
        asset: Asset to depreciate
        through_year: Last tax year to compute (inclusive)
        half_year_factor: Share of the rate claimable in the acquisition year
        strict_rates: Reject an asset whose rate differs from its class's rate

    Examples:
        >>> fridge = Asset(
        ...     id=2, property_id=1, description="Refrigerator - Room R5",
        ...     cca_class=CCAClassEnum.CLASS_8, cca_rate=Decimal("0.2000"),
        ...     acquisition_date=date(2024, 8, 8), acquisition_cost=Decimal("680.00"),
        ... )
        >>> rows = CapitalCostAllowance(asset=fridge, through_year=2025).schedule
        >>> [(r.year, r.cca_claimed, r.closing_ucc) for r in rows]
        [(2024, Decimal('68.00'), Decimal('612.00')), (2025, Decimal('122.40'), Decimal('489.60'))]
    """

    asset: Asset
    through_year: int
    half_year_factor: DecimalBetween0And1 = Decimal("0.5")
    strict_rates: bool = True
    currency_places: int = Field(default=2, ge=0)

    @property
    def rate(self) -> Decimal:
        """Declining-balance rate for the asset, checked against its class."""
        asset = self.asset
        try:
            prescribed = CCAClassEnum(asset.cca_class).prescribed_rate
        except (ValueError, KeyError):
            raise DepreciationError(
                f"Asset {asset.id} has unknown CCA class {asset.cca_class!r}"
            ) from None
        if self.strict_rates and asset.cca_rate != prescribed:
            raise DepreciationError(
                f"Asset {asset.id} rate {asset.cca_rate} does not match "
                f"{asset.cca_class.value} rate {prescribed}"
            )
        return asset.cca_rate

    @property
    def schedule(self) -> List[DepreciationRow]:
        """
        Per-year rows from the acquisition year to ``through_year``, or to the
        disposal year when the asset is disposed of on or before it.

        Transitions:
            - First period: CCA = round(UCC x rate x half_year_factor, 2)
            - Later periods: CCA = round(UCC x rate, 2)
            - Disposal year (terminal): no CCA; proceeds settle the UCC to zero

        Returns:
            Rows in year order; empty when through_year precedes acquisition.

        Raises:
            DepreciationError: Unknown class, mismatched rate, or a UCC that
                would go negative
        """
        asset = self.asset
        rate = self.rate
        disposal_year = asset.disposal_year

        rows: List[DepreciationRow] = []
        ucc = asset.acquisition_cost
        first_period = True
        for year in range(asset.acquisition_year, self.through_year + 1):
            if year == disposal_year:
                rows.append(self._dispose(year, ucc))
                break

            factor = self.half_year_factor if first_period else Decimal(1)
            cca = LedgerCalculations.round_half_up(ucc * rate * factor, self.currency_places)
            closing = ucc - cca
            if closing < 0:
                raise DepreciationError(
                    f"Asset {asset.id} UCC would fall to {closing} in {year} "
                    f"(opening {ucc}, claim {cca})"
                )
            rows.append(self._row(year, ucc, cca, closing))
            ucc = closing
            first_period = False

        return rows

    def _dispose(self, year: int, ucc: Decimal) -> DepreciationRow:
        """
        Terminal transition for the disposal year.

        Proceeds are capped at original cost. Proceeds below the UCC leave a
        terminal loss; proceeds above it are recaptured, and any sale price
        above original cost is a capital gain. A disposal with no recorded
        amount is treated as zero proceeds.
        """
        asset = self.asset
        amount = asset.disposal_amount if asset.disposal_amount is not None else ZERO
        proceeds = min(amount, asset.acquisition_cost)
        logger.info(
            f"Asset {asset.id} disposed in {year}: UCC {ucc}, proceeds {proceeds} "
            "(disposal computation is experimental)"
        )
        return self._row(
            year,
            ucc,
            ZERO,
            ZERO,
            proceeds=proceeds,
            recapture=max(proceeds - ucc, ZERO),
            terminal_loss=max(ucc - proceeds, ZERO),
            capital_gain=max(amount - asset.acquisition_cost, ZERO),
        )

    def _row(self, year, opening, cca, closing, **disposal) -> DepreciationRow:
        return DepreciationRow(
            asset_id=self.asset.id,
            description=self.asset.description,
            cca_class=self.asset.cca_class,
            year=year,
            opening_ucc=opening,
            cca_claimed=cca,
            closing_ucc=closing,
            **disposal,
        )


def schedule_for(
    asset: Asset, through_year: int, settings: Optional[AnalyticsSettings] = None
) -> List[DepreciationRow]:
    """CCA schedule rows for one asset."""
    settings = settings or AnalyticsSettings()
    return CapitalCostAllowance(
        asset=asset,
        through_year=through_year,
        half_year_factor=settings.half_year_factor,
        strict_rates=settings.strict_cca_rates,
        currency_places=settings.currency_places,
    ).schedule


def depreciation(
    ledger: Ledger, settings: Optional[AnalyticsSettings] = None
) -> AnalysisTable[DepreciationRow]:
    """
    CCA schedules for every asset through ``settings.depreciation_through_year``,
    ordered by asset id then year.

    A schedule that cannot be computed is never emitted partially. With
    ``settings.fail_on_error`` the error propagates; otherwise the asset is
    logged and left out of the table.
    """
    settings = settings or AnalyticsSettings()
    through_year = settings.depreciation_through_year

    rows: List[DepreciationRow] = []
    for asset in sorted(ledger.assets, key=lambda a: a.id):
        try:
            rows.extend(schedule_for(asset, through_year, settings))
        except DepreciationError as e:
            logger.error(f"CCA schedule for asset {asset.id} aborted: {e}")
            if settings.fail_on_error:
                raise

    logger.debug(f"Depreciation: {len(rows)} schedule rows through {through_year}")
    return AnalysisTable(name="depreciation", row_type=DepreciationRow, rows=tuple(rows))
