"""Plain value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with an area accessor. Inputs are not validated."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
