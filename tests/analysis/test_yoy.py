# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the year-over-year engine.
"""

from datetime import date, datetime
from decimal import Decimal

from rentalytics.analysis import yoy
from rentalytics.core.ledger import Expense, Ledger, Payment
from rentalytics.core.primitives import AnalyticsSettings, PaymentMethodEnum

D = Decimal


def _payment(payment_id: int, year: int, amount: str) -> Payment:
    return Payment(
        id=payment_id, lease_id=1, amount=D(amount),
        payment_timestamp=datetime(year, 3, 1, 9, 0), due_date=date(year, 3, 1),
        payment_method=PaymentMethodEnum.AUTO_DEBIT,
    )


def _expense(expense_id: int, year: int, amount: str, expense_class: str = "opex") -> Expense:
    return Expense(
        id=expense_id, property_id=1, category="maintenance", expense_class=expense_class,
        amount=D(amount), expense_date=date(year, 6, 1),
    )


class TestYoY:
    def test_two_complete_years(self, hamilton_ledger, year_end_settings):
        table = yoy(hamilton_ledger, year_end_settings)
        assert [
            (r.year, r.total_income, r.total_expenses, r.total_opex, r.total_capex,
             r.net_profit, r.income_yoy_pct)
            for r in table
        ] == [
            (2024, D("3100.00"), D("1180.00"), D("500.00"), D("680.00"), D("1920.00"), None),
            (2025, D("2375.00"), D("100.00"), D("100.00"), D("0.00"), D("2275.00"), D("-23.4")),
        ]

    def test_first_year_in_filtered_set_has_no_delta(self, hamilton_ledger):
        table = yoy(hamilton_ledger, AnalyticsSettings(yoy_years={2025}))
        assert [(r.year, r.income_yoy_pct) for r in table] == [(2025, None)]

    def test_years_outside_set_excluded(self, hamilton_ledger):
        table = yoy(hamilton_ledger, AnalyticsSettings(yoy_years={2023, 2024}))
        assert [r.year for r in table] == [2024]

    def test_income_year_without_expenses(self):
        ledger = Ledger(
            payments=(_payment(1, 2023, "1000.00"), _payment(2, 2024, "1100.00")),
            expenses=(_expense(1, 2024, "200.00", "capex"),),
        )
        first, second = yoy(ledger)
        assert (first.year, first.total_expenses, first.net_profit) == (2023, D("0.00"), D("1000.00"))
        assert second.total_capex == D("200.00")
        assert second.income_yoy_pct == D("10.0")

    def test_prior_year_without_income_is_undefined(self):
        ledger = Ledger(
            payments=(_payment(1, 2024, "1100.00"),),
            expenses=(_expense(1, 2023, "50.00"),),
        )
        first, second = yoy(ledger)
        assert first.total_income == D("0.00")
        assert second.income_yoy_pct is None

    def test_delta_matches_formula(self, hamilton_ledger):
        rows = list(yoy(hamilton_ledger))
        for prior, row in zip(rows, rows[1:]):
            expected = (row.total_income - prior.total_income) * 100 / prior.total_income
            assert abs(row.income_yoy_pct - expected) <= D("0.05")

    def test_empty_ledger(self, empty_ledger):
        assert len(yoy(empty_ledger)) == 0
