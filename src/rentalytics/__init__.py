# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rentalytics - Rental Ledger Analytics

Derived financial and operational metrics from a landlord's rental ledger:
monthly cash flow, tenant delinquency, vacancy cost, opex/capex expense
breakdown, rent roll, year-over-year comparison, security deposit
reconciliation and Capital Cost Allowance schedules.

Key Entry Points:
- rentalytics.core.Ledger - Immutable snapshot of ledger entities
- rentalytics.analysis.run() - Every engine over one snapshot
- rentalytics.analysis.* - Individual engines

Example Usage:
    ```python
    from datetime import date

    from rentalytics import AnalyticsSettings, Ledger, run

    ledger = Ledger.from_store(store)
    report = run(
        ledger,
        AnalyticsSettings(yoy_years={2024, 2025}, as_of=date(2026, 2, 28)),
    )
    report.cash_flow.to_dataframe()
    ```
"""

from . import analysis, core
from .analysis import AnalysisTable, PortfolioReport, run
from .core import AnalyticsSettings, InMemoryLedgerStore, Ledger, LedgerStore

__all__ = [
    "analysis",
    "core",
    "run",
    "AnalysisTable",
    "PortfolioReport",
    "AnalyticsSettings",
    "Ledger",
    "LedgerStore",
    "InMemoryLedgerStore",
]
