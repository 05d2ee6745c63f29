"""
Songbird Server - Field Update Model

Tagged variant describing what applying one config field does to the store.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class UpdateKind(Enum):
    UNSET = "unset"   # Field absent: leave stored state untouched
    CLEAR = "clear"   # Empty list: remove every stored row
    SET = "set"       # Value present: replace stored state with it


@dataclass(frozen=True)
class FieldUpdate:
    kind: UpdateKind
    value: Any = None

    @classmethod
    def FromValue(cls, value: Any) -> "FieldUpdate":
        if value is None:
            return cls(UpdateKind.UNSET)
        if isinstance(value, list) and not value:
            return cls(UpdateKind.CLEAR, [])
        return cls(UpdateKind.SET, value)

    def IsUnset(self) -> bool:
        return self.kind is UpdateKind.UNSET
