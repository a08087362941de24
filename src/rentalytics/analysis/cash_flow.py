# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monthly cash flow: rent received against money spent.

Income and expenses live in separate collections with no shared key other
than time. Each side is aggregated to calendar buckets independently and
the two sparse maps are merged with a zero default, so a month with
expenses but no rent (vacancy) or rent but no expenses is kept. Cash basis:
missed payments contribute nothing, and every expense counts in the month
it was paid, opex and capex alike.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

import pandas as pd

from ..core.buckets import aggregate, merge_with_default
from ..core.ledger import Ledger
from ..core.primitives import AnalyticsSettings, BucketGranularity, Model
from .results import AnalysisTable

logger = logging.getLogger(__name__)


class CashFlowRow(Model):
    """One bucket of the cash flow series (a month unless configured otherwise)."""

    month: pd.Period
    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal


def income_buckets(ledger: Ledger, granularity=BucketGranularity.MONTH):
    """Rent actually received per bucket, keyed by payment timestamp."""
    return aggregate(
        (
            (payment.payment_timestamp, payment.amount)
            for payment in ledger.payments
            if payment.is_received
        ),
        granularity,
    )


def expense_buckets(ledger: Ledger, granularity=BucketGranularity.MONTH):
    """All expenses per bucket, keyed by expense date."""
    return aggregate(
        ((expense.expense_date, expense.amount) for expense in ledger.expenses),
        granularity,
    )


def cash_flow(
    ledger: Ledger, settings: Optional[AnalyticsSettings] = None
) -> AnalysisTable[CashFlowRow]:
    """
    Income, expenses and net profit per bucket, ordered by bucket ascending.

    Only buckets with at least one received payment or one expense appear;
    the series is not zero-filled between them.
    """
    settings = settings or AnalyticsSettings()
    granularity = settings.cash_flow_granularity

    merged = merge_with_default(
        income_buckets(ledger, granularity), expense_buckets(ledger, granularity)
    )
    rows = tuple(
        CashFlowRow(
            month=period,
            total_income=income,
            total_expenses=expenses,
            net_profit=income - expenses,
        )
        for period, (income, expenses) in merged.items()
    )

    logger.debug(f"Cash flow: {len(rows)} {granularity.value} buckets")
    return AnalysisTable(name="cash_flow", row_type=CashFlowRow, rows=rows)
