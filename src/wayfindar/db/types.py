"""Structured column types.

A building position is a 3D coordinate used by the AR presentation layer to
place a model relative to the campus origin. It is persisted as the text
``"x,y,z"`` so existing rows stay readable, but the rest of the code only
ever sees a :class:`Position`.
"""
from __future__ import annotations

import math
from typing import NamedTuple, Optional

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class Position(NamedTuple):
    x: float
    y: float
    z: float

    @classmethod
    def of(cls, values) -> "Position":
        """Build a Position from three finite numbers, raising ValueError otherwise."""
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(f"position must have 3 components, got {len(values)}: {values!r}")
        try:
            coords = [float(v) for v in values]
        except (TypeError, ValueError):
            raise ValueError(f"position components must be numeric: {values!r}") from None
        if not all(math.isfinite(v) for v in coords):
            raise ValueError(f"position components must be finite: {values!r}")
        return cls(*coords)

    @classmethod
    def parse(cls, raw: str) -> "Position":
        """Parse ``"x,y,z"`` into a Position.

        Raises ValueError for anything other than exactly three finite numbers.
        """
        if not isinstance(raw, str):
            raise ValueError(f"position must be a string, got {type(raw).__name__}")
        return cls.of(p.strip() for p in raw.split(","))

    def format(self) -> str:
        coords = Position.of(self)
        # whole numbers render as "2,0,1", not "2.0,0.0,1.0"
        return ",".join(str(int(v)) if v.is_integer() else repr(v) for v in coords)


class PositionType(TypeDecorator):
    """Stores a Position as its ``"x,y,z"`` text form.

    Values are checked on the way in as well as on the way out, so a row that
    could not be read back is never written.
    """

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            value = Position.parse(value)
        return Position.of(value).format()

    def process_result_value(self, value, dialect) -> Optional[Position]:
        if value is None:
            return None
        return Position.parse(value)
