"""Field types shared by the request and record models."""

import math
from typing import Annotated

from pydantic import AfterValidator

Scalar = str | int | float | bool


def _require_truthy(value: Scalar) -> Scalar:
    if not value or (isinstance(value, float) and math.isnan(value)):
        raise ValueError("value must be present and non-empty")
    return value


# Any JSON scalar except "", 0, 0.0, NaN and false; null is rejected by the type itself.
TruthyScalar = Annotated[Scalar, AfterValidator(_require_truthy)]
