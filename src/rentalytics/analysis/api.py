# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio Analysis API

Public entry point that runs every engine over one ledger snapshot. Each
engine is also importable on its own from ``rentalytics.analysis``.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.ledger import Ledger
from ..core.primitives import AnalyticsSettings
from .cash_flow import cash_flow
from .delinquency import delinquency
from .deposits import deposits
from .depreciation import depreciation
from .expenses import expense_breakdown
from .rent_roll import rent_roll
from .results import PortfolioReport
from .vacancy import vacancy
from .yoy import yoy

logger = logging.getLogger(__name__)


def run(ledger: Ledger, settings: Optional[AnalyticsSettings] = None) -> PortfolioReport:
    """
    Run every analytics engine over a ledger snapshot.

    The engines are independent pure functions of the snapshot, so the
    combined report is deterministic and re-running it is idempotent.

    Args:
        ledger: Snapshot to analyze
        settings: Caller-supplied parameters; defaults when omitted

    Returns:
        PortfolioReport with one table per engine
    """
    settings = settings or AnalyticsSettings()

    report = PortfolioReport(
        cash_flow=cash_flow(ledger, settings),
        delinquency=delinquency(ledger, settings),
        vacancy=vacancy(ledger, settings),
        expense_breakdown=expense_breakdown(ledger, settings),
        rent_roll=rent_roll(ledger, settings),
        yoy=yoy(ledger, settings),
        depreciation=depreciation(ledger, settings),
        deposits=deposits(ledger, settings),
    )

    logger.info(
        f"Portfolio report as of {settings.as_of}: "
        + ", ".join(f"{name}={len(table)}" for name, table in report.tables().items())
    )
    return report
