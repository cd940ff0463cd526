"""Shared pydantic configuration and field types for exchange payloads."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

# The exchange stamps times with nanosecond precision; datetime holds microseconds.
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _truncate_fraction(value: Any) -> Any:
    if isinstance(value, str):
        return _EXCESS_FRACTION.sub(r"\1", value, count=1)
    return value


Timestamp = Annotated[datetime, BeforeValidator(_truncate_fraction)]


class ExchangeModel(BaseModel):
    """Base for every decoded payload.

    Fields are snake_case in Python and camelCase on the wire. Unknown wire
    fields are ignored and missing ones take their defaults.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )
