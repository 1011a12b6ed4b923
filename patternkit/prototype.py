"""Prototype pattern: new objects are copies of an existing one."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class Example:
    """A cloneable object with a description."""

    description: str

    def clone(self) -> Example:
        """Return an independent copy of this object."""
        return copy.copy(self)