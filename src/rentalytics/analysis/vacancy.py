# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Vacancy analysis: how long each unit sat empty between leases and the rent
lost during the gap.

Vacancy never shows up as an expense; it is revenue that did not happen.
Leases are partitioned by unit and sorted by start date, and each lease is
paired with its chronological successor in that unit. A lease with no
successor (the unit's current or most recent lease) has no gap to measure
and is left out.
"""

from __future__ import annotations

import datetime
import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core.calculations import LedgerCalculations
from ..core.ledger import Lease, Ledger
from ..core.primitives import AnalyticsSettings, Model
from .results import AnalysisTable

logger = logging.getLogger(__name__)


class VacancyRow(Model):
    unit_label: str
    lease_id: int
    lease_end: datetime.date
    next_lease_start: datetime.date
    vacancy_days: int
    est_lost_rent: Decimal


def successor_pairs(leases: Sequence[Lease]) -> Iterator[Tuple[Lease, Optional[Lease]]]:
    """
    Pair each lease with the next lease of the same unit by start date.

    Within a unit, "next" is chronological by start_date, not by id or
    creation order. The last lease of each unit is paired with None. No
    ordering across units is implied.
    """
    by_unit: Dict[int, List[Lease]] = defaultdict(list)
    for lease in leases:
        by_unit[lease.unit_id].append(lease)

    for unit_leases in by_unit.values():
        ordered = sorted(unit_leases, key=lambda lease: lease.start_date)
        for current, following in zip(ordered, ordered[1:] + [None]):
            yield current, following


def vacancy(
    ledger: Ledger, settings: Optional[AnalyticsSettings] = None
) -> AnalysisTable[VacancyRow]:
    """
    Vacancy gaps with estimated lost rent, longest vacancies first.

    ``vacancy_days`` is the next lease's start minus this lease's end (0 when
    the next tenant moved in the day the lease ended).
    ``est_lost_rent`` prices each vacant day at the ending lease's agreed
    rent over a flat month (30 days by default), rounded to cents.

    Raises:
        ValueError: If a lease's successor starts before it ends (overlapping
            leases in one unit)
    """
    settings = settings or AnalyticsSettings()
    days_per_month = Decimal(settings.vacancy_days_per_month)

    rows = []
    for lease, following in successor_pairs(ledger.leases):
        if following is None:
            continue
        if lease.end_date is None:
            logger.warning(
                f"Lease {lease.id} has no end date but lease {following.id} follows it "
                f"in unit {lease.unit_id}; skipping vacancy gap"
            )
            continue

        vacancy_days = (following.start_date - lease.end_date).days
        if vacancy_days < 0:
            raise ValueError(
                f"Lease {following.id} starts {following.start_date} before lease "
                f"{lease.id} ends {lease.end_date} in unit {lease.unit_id}"
            )

        daily_rate = lease.monthly_rent / days_per_month
        rows.append(
            VacancyRow(
                unit_label=ledger.unit_for(lease).label,
                lease_id=lease.id,
                lease_end=lease.end_date,
                next_lease_start=following.start_date,
                vacancy_days=vacancy_days,
                est_lost_rent=LedgerCalculations.round_half_up(
                    vacancy_days * daily_rate, settings.currency_places
                ),
            )
        )

    rows.sort(key=lambda r: (-r.vacancy_days, r.unit_label, r.lease_end))

    logger.debug(f"Vacancy: {len(rows)} gaps")
    return AnalysisTable(name="vacancy", row_type=VacancyRow, rows=tuple(rows))
