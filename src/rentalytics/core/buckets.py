# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar bucketing of dated amounts.

Groups (date, amount) pairs into month or year buckets keyed by pandas
Periods and sums the amounts. The result is sparse: a bucket with no input
rows has no entry. Two such maps are combined with ``merge_with_default``,
which treats a missing key as zero instead of dropping the bucket.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Dict, Iterable, Tuple, TypeVar, Union

import pandas as pd

from .primitives import BucketGranularity

ZERO = Decimal("0.00")

V = TypeVar("V")

DateLike = Union[datetime.date, datetime.datetime]


def bucket_key(value: DateLike, granularity: Union[BucketGranularity, str]) -> pd.Period:
    """
    Calendar bucket containing a date or timestamp.

    Example:
        >>> bucket_key(date(2024, 1, 17), "month")
        Period('2024-01', 'M')
        >>> bucket_key(datetime(2024, 1, 17, 9, 30), "year").year
        2024
    """
    granularity = BucketGranularity(granularity)
    if isinstance(value, datetime.datetime):
        value = value.date()
    return pd.Period(pd.Timestamp(value), freq=granularity.pandas_freq)


def aggregate(
    pairs: Iterable[Tuple[DateLike, Decimal]],
    granularity: Union[BucketGranularity, str] = BucketGranularity.MONTH,
) -> Dict[pd.Period, Decimal]:
    """
    Sum amounts per calendar bucket.

    Args:
        pairs: (date, amount) pairs, in any order
        granularity: Month or year buckets

    Returns:
        Mapping of bucket Period to summed amount, ordered by bucket, with one
        entry per bucket present in the input. Empty input gives an empty map.
    """
    granularity = BucketGranularity(granularity)
    totals: Dict[pd.Period, Decimal] = {}
    for when, amount in pairs:
        key = bucket_key(when, granularity)
        totals[key] = totals.get(key, ZERO) + amount
    return dict(sorted(totals.items()))


def merge_with_default(
    left: Dict[pd.Period, V],
    right: Dict[pd.Period, V],
    default: V = ZERO,
) -> Dict[pd.Period, Tuple[V, V]]:
    """
    Union of two sparse bucket maps.

    Every key present in either map appears once, paired as
    ``(left value, right value)`` with ``default`` standing in for the side
    that has no entry. Keys are returned in ascending order.
    """
    keys = sorted(set(left) | set(right))
    return {key: (left.get(key, default), right.get(key, default)) for key in keys}
