# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from decimal import Decimal
from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, gt=0)]

# NUMERIC(10,2) money columns
PositiveMoney = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
NonNegativeMoney = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]

# NUMERIC(5,4) rate columns, stored as a fraction (0.2000 = 20%)
PositiveRate = Annotated[Decimal, Field(gt=0, max_digits=5, decimal_places=4)]
DecimalBetween0And1 = Annotated[Decimal, Field(ge=0, le=1)]
