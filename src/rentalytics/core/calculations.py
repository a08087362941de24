# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for the rounding and ratio arithmetic shared by the
engines. These functions are pure (math-only) and independent of data
access; engines delegate to them so every percentage and currency amount is
rounded the same way.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, Decimal]


class LedgerCalculations:
    """
    Pure decimal arithmetic with explicit rounding and guarded division.

    Rounding is half away from zero, matching how SQL NUMERIC rounding and
    CRA worksheets round, and is applied at the point each figure is
    produced rather than deferred.
    """

    @staticmethod
    def round_half_up(value: Number, places: int = 2) -> Decimal:
        """
        Round to a fixed number of decimal places, halves away from zero.

        Example:
            ```python
            LedgerCalculations.round_half_up(Decimal("34.615"), 1)  # Decimal('34.6')
            LedgerCalculations.round_half_up(Decimal("0.125"), 2)   # Decimal('0.13')
            ```
        """
        return Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

    @staticmethod
    def percentage(
        numerator: Number, denominator: Number, places: int = 1
    ) -> Optional[Decimal]:
        """
        Calculate ``numerator * 100 / denominator`` rounded to ``places``.

        Returns:
            The rounded percentage, or None when the denominator is zero.
            A zero denominator is a valid state (no fee ever charged, no
            spend in a category) and resolves to undefined, never to 0 and
            never to an exception.

        Edge Cases Handled:
            - Zero denominator → None
            - None denominator → None
        """
        if denominator is None or denominator == 0:
            return None
        raw = Decimal(numerator) * 100 / Decimal(denominator)
        return LedgerCalculations.round_half_up(raw, places)

    @staticmethod
    def percent_change(
        current: Number, prior: Optional[Number], places: int = 1
    ) -> Optional[Decimal]:
        """
        Calculate ``(current - prior) * 100 / prior`` rounded to ``places``.

        Returns None when there is no prior value or the prior value is zero.
        """
        if prior is None:
            return None
        return LedgerCalculations.percentage(
            Decimal(current) - Decimal(prior), prior, places
        )
