"""Base model and enum for pyflota records.

Every generated record inherits from :class:`FlotaBaseModel` which
provides:

* ``frozen=True`` so a record cannot be mutated after composition;
  an "update" is always a fresh call with the same inputs.
* ``alias_generator=to_camel`` so ``model_dump(by_alias=True)`` emits
  the camelCase keys UI layers consume (``startLocation``,
  ``routeAlignment``, ``startsOnRoute``...).

Label enums inherit from :class:`FlotaEnum`, a ``StrEnum`` whose
``_missing_`` hook matches values case-insensitively.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _coerce_position(value: Any) -> Any:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (float(value[0]), float(value[1]))
    return value


Position = Annotated[tuple[float, float], BeforeValidator(_coerce_position)]
"""``(lat, lng)`` pair; lists from JSON are coerced to tuples."""


class FlotaEnum(enum.StrEnum):
    """Base for pyflota label enums."""

    @classmethod
    def _missing_(cls, value: object) -> FlotaEnum | None:
        if isinstance(value, str):
            folded = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        return None


class FlotaBaseModel(BaseModel):
    """Base for generated records."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )
