# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation utilities for ledger entity invariants.

This module provides standardized checks for:
- Date ordering (end after start)
- Conditional presence (field only allowed when another field has a value)
- Uniqueness of a key across a collection of records
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Hashable, Iterable, List, Optional, Union


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    Inherited alongside Model by ledger entities; the checks are called from
    ``model_validator(mode="after")`` hooks so they see coerced field values.
    """

    @classmethod
    def validate_date_ordering(
        cls,
        data: Any,
        start_field: str,
        end_field: str,
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that the end date is strictly after the start date.

        Args:
            data: Model instance
            start_field: Name of start date field
            end_field: Name of end date field (may be unset)
            error_message: Custom error message

        Raises:
            ValueError: If end is not after start
        """
        start_date = getattr(data, start_field)
        end_date = getattr(data, end_field)

        if start_date is not None and end_date is not None:
            if end_date <= start_date:
                msg = error_message or f"{end_field} must be after {start_field}"
                raise ValueError(msg)

        return data

    @classmethod
    def validate_only_when(
        cls,
        data: Any,
        guarded_field: str,
        condition_field: str,
        condition_values: Union[Any, List[Any]],
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that a field is only set when a condition field has one of the given values.

        Args:
            data: Model instance
            guarded_field: Field that must stay unset outside the condition
            condition_field: Field name to check condition on
            condition_values: Value(s) under which guarded_field may be set
            error_message: Custom error message

        Raises:
            ValueError: If guarded_field is set while the condition does not hold
        """
        if not isinstance(condition_values, list):
            condition_values = [condition_values]

        condition_value = getattr(data, condition_field)
        if getattr(data, guarded_field) is not None and condition_value not in condition_values:
            msg = error_message or (
                f"{guarded_field} may only be set when {condition_field} is one of "
                f"{[getattr(v, 'value', v) for v in condition_values]}"
            )
            raise ValueError(msg)

        return data


def validate_unique(
    records: Iterable[Any],
    key: Callable[[Any], Optional[Hashable]],
    label: str,
) -> None:
    """
    Validate that no two records share a key. Records whose key is None are ignored.

    Raises:
        ValueError: Naming the first duplicated key values
    """
    counts = Counter(k for k in map(key, records) if k is not None)
    duplicates = sorted(str(k) for k, n in counts.items() if n > 1)
    if duplicates:
        raise ValueError(f"Duplicate {label}: {', '.join(duplicates)}")
