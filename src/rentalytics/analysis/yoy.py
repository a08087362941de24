# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Year-over-year revenue comparison.

Portfolio-level summary with one row per complete calendar year: income,
expenses split into opex and capex, net profit, and the change in income
against the preceding year in the set.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import AbstractSet, Optional

from ..core.buckets import aggregate, bucket_key, merge_with_default
from ..core.calculations import LedgerCalculations
from ..core.ledger import Ledger
from ..core.primitives import AnalyticsSettings, BucketGranularity, Model
from .expenses import ClassSplit, split_by_class
from .results import AnalysisTable

logger = logging.getLogger(__name__)


class YoYRow(Model):
    year: int
    total_income: Decimal
    total_expenses: Decimal
    total_opex: Decimal
    total_capex: Decimal
    net_profit: Decimal
    income_yoy_pct: Optional[Decimal]


def _in_years(year: int, years: AbstractSet[int]) -> bool:
    return not years or year in years


def yoy(
    ledger: Ledger, settings: Optional[AnalyticsSettings] = None
) -> AnalysisTable[YoYRow]:
    """
    Yearly totals for ``settings.yoy_years``, ordered by year ascending.

    The caller chooses the years and should leave out partial ones; with an
    empty set every year in the data is reported. Income and expense years
    are merged with a zero default, so a year with income but no expenses
    (or the reverse) is still reported. ``income_yoy_pct`` compares against
    the preceding row and is None for the first row, or when the preceding
    year had no income.
    """
    settings = settings or AnalyticsSettings()
    years = settings.yoy_years

    income = aggregate(
        (
            (payment.payment_timestamp, payment.amount)
            for payment in ledger.payments
            if payment.is_received and _in_years(payment.payment_timestamp.year, years)
        ),
        BucketGranularity.YEAR,
    )
    expenses = split_by_class(
        (e for e in ledger.expenses if _in_years(e.expense_date.year, years)),
        key=lambda e: bucket_key(e.expense_date, BucketGranularity.YEAR),
    )

    rows = []
    prior_income = None
    for period, (year_income, split) in merge_with_default(
        income, expenses, default=None
    ).items():
        year_income = year_income if year_income is not None else Decimal("0.00")
        split = split if split is not None else ClassSplit()
        rows.append(
            YoYRow(
                year=period.year,
                total_income=year_income,
                total_expenses=split.total,
                total_opex=split.opex,
                total_capex=split.capex,
                net_profit=year_income - split.total,
                income_yoy_pct=LedgerCalculations.percent_change(
                    year_income, prior_income, settings.percentage_places
                ),
            )
        )
        prior_income = year_income

    logger.debug(f"YoY: {len(rows)} years")
    return AnalysisTable(name="yoy", row_type=YoYRow, rows=tuple(rows))
