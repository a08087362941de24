# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Analytics engines over a ledger snapshot.

Each engine is a pure function ``engine(ledger, settings=None)`` returning an
ordered AnalysisTable; ``run`` executes all of them into a PortfolioReport.
"""

from .api import run
from .cash_flow import CashFlowRow, cash_flow, expense_buckets, income_buckets
from .delinquency import DelinquencyRow, delinquency
from .deposits import DepositRow, deposit_liability, deposits, outstanding_deposit
from .depreciation import (
    CapitalCostAllowance,
    DepreciationError,
    DepreciationRow,
    depreciation,
    schedule_for,
)
from .expenses import ClassSplit, ExpenseBreakdownRow, expense_breakdown, split_by_class
from .rent_roll import RentRollRow, rent_roll
from .results import AnalysisTable, PortfolioReport
from .vacancy import VacancyRow, successor_pairs, vacancy
from .yoy import YoYRow, yoy

__all__ = [
    "run",
    # Results
    "AnalysisTable",
    "PortfolioReport",
    # Engines
    "cash_flow",
    "delinquency",
    "vacancy",
    "expense_breakdown",
    "rent_roll",
    "yoy",
    "depreciation",
    "deposits",
    # Rows
    "CashFlowRow",
    "DelinquencyRow",
    "VacancyRow",
    "ExpenseBreakdownRow",
    "RentRollRow",
    "YoYRow",
    "DepreciationRow",
    "DepositRow",
    # Building blocks
    "income_buckets",
    "expense_buckets",
    "successor_pairs",
    "ClassSplit",
    "split_by_class",
    "CapitalCostAllowance",
    "DepreciationError",
    "schedule_for",
    "outstanding_deposit",
    "deposit_liability",
]
