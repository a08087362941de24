# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the rent roll engine.
"""

from datetime import date
from decimal import Decimal

from rentalytics.analysis import rent_roll
from rentalytics.core.primitives import AnalyticsSettings, UnitTypeEnum

D = Decimal


class TestRentRoll:
    def test_active_leases_by_unit_label(self, hamilton_ledger, year_end_settings):
        table = rent_roll(hamilton_ledger, year_end_settings)
        assert [(r.unit_label, r.tenant, r.months_tenanted) for r in table] == [
            ("R1", "James Wilson", 24),
            ("R3", "Lucas Nguyen", 14),
            ("R5", "Olivia Tremblay", 16),
        ]

    def test_uses_lease_rent_not_listed_rent(self, hamilton_ledger, year_end_settings):
        """R1 is listed at 780 but its lease agreed 750."""
        rows = {r.unit_label: r for r in rent_roll(hamilton_ledger, year_end_settings)}
        assert rows["R1"].monthly_rent == D("750.00")
        assert rows["R1"].unit_type == UnitTypeEnum.ROOM
        assert rows["R1"].lease_end is None
        assert rows["R3"].security_deposit == D("875.00")
        assert rows["R3"].lease_start == date(2024, 11, 1)

    def test_months_tenanted_is_whole_thirty_day_periods(self, hamilton_ledger):
        settings = AnalyticsSettings(as_of=date(2024, 1, 30))
        r1 = rent_roll(hamilton_ledger, settings)[0]
        assert r1.months_tenanted == 0
        settings = AnalyticsSettings(as_of=date(2024, 1, 31))
        assert rent_roll(hamilton_ledger, settings)[0].months_tenanted == 1

    def test_empty_ledger(self, empty_ledger):
        assert len(rent_roll(empty_ledger)) == 0
