# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(ge=0)]
PositiveFloat = Annotated[float, Field(ge=0)]
StrictlyPositiveFloat = Annotated[float, Field(gt=0)]
Percentage = Annotated[float, Field(ge=0, le=100)]
# Annual rates may be negative (depreciating market) but never wipe out the value
AnnualRatePercent = Annotated[float, Field(gt=-100)]
MonthOfYear = Annotated[int, Field(ge=1, le=12)]
QuarterOfYear = Annotated[int, Field(ge=1, le=4)]
