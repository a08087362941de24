# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Expense breakdown by category, split into operating and capital spend.

Opex is deducted in full in the year incurred; capex is depreciated through
CCA. Lumping them together overstates expenses in any year with a major
capital purchase, so each category reports both halves.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, Optional

from ..core.calculations import LedgerCalculations
from ..core.ledger import Expense, Ledger
from ..core.primitives import (
    AnalyticsSettings,
    ExpenseCategoryEnum,
    ExpenseClassEnum,
    Model,
)
from .results import AnalysisTable

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


class ExpenseBreakdownRow(Model):
    category: ExpenseCategoryEnum
    total_spent: Decimal
    total_opex: Decimal
    total_capex: Decimal
    opex_pct: Decimal


class ClassSplit(Model):
    """Total spend with its opex/capex halves."""

    total: Decimal = ZERO
    opex: Decimal = ZERO
    capex: Decimal = ZERO

    def add(self, expense: Expense) -> "ClassSplit":
        if expense.expense_class == ExpenseClassEnum.OPEX:
            return ClassSplit(
                total=self.total + expense.amount,
                opex=self.opex + expense.amount,
                capex=self.capex,
            )
        return ClassSplit(
            total=self.total + expense.amount,
            opex=self.opex,
            capex=self.capex + expense.amount,
        )


def split_by_class(expenses: Iterable[Expense], key) -> Dict:
    """Opex/capex split of expenses grouped by ``key(expense)``."""
    splits: Dict = {}
    for expense in expenses:
        group = key(expense)
        splits[group] = splits.get(group, ClassSplit()).add(expense)
    return splits


def expense_breakdown(
    ledger: Ledger, settings: Optional[AnalyticsSettings] = None
) -> AnalysisTable[ExpenseBreakdownRow]:
    """
    Spend per category with opex/capex totals, highest spend first.

    Categories with no spend are absent, which also keeps ``opex_pct`` away
    from a zero denominator.
    """
    settings = settings or AnalyticsSettings()

    splits = split_by_class(ledger.expenses, key=lambda e: e.category)
    rows = [
        ExpenseBreakdownRow(
            category=category,
            total_spent=split.total,
            total_opex=split.opex,
            total_capex=split.capex,
            opex_pct=LedgerCalculations.percentage(
                split.opex, split.total, settings.percentage_places
            ),
        )
        for category, split in splits.items()
        if split.total > 0
    ]
    rows.sort(key=lambda r: (-r.total_spent, r.category.value))

    logger.debug(f"Expense breakdown: {len(rows)} categories")
    return AnalysisTable(
        name="expense_breakdown", row_type=ExpenseBreakdownRow, rows=tuple(rows)
    )
