# events.py
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class EventKind(Enum):
    SALE = "sale"
    REFILL = "refill"
    LOW_STOCK_WARNING = "lowStockWarning"
    STOCK_LEVEL_OK = "stockLevelOk"


@dataclass(frozen=True, eq=False)
class Event:
    """Something that happened on a machine. Compared by identity."""
    kind: ClassVar[EventKind]
    machine_id: str

    def __post_init__(self):
        if not isinstance(self.machine_id, str) or not self.machine_id.strip():
            raise ValueError("machine_id must be a non-empty string.")


@dataclass(frozen=True, eq=False)
class _QuantityEvent(Event):
    quantity: int

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.quantity, int) or self.quantity <= 0:
            raise ValueError("quantity must be a positive integer.")


@dataclass(frozen=True, eq=False)
class MachineSaleEvent(_QuantityEvent):
    kind: ClassVar[EventKind] = EventKind.SALE


@dataclass(frozen=True, eq=False)
class MachineRefillEvent(_QuantityEvent):
    kind: ClassVar[EventKind] = EventKind.REFILL


@dataclass(frozen=True, eq=False)
class LowStockWarningEvent(Event):
    kind: ClassVar[EventKind] = EventKind.LOW_STOCK_WARNING


@dataclass(frozen=True, eq=False)
class StockLevelOkEvent(Event):
    kind: ClassVar[EventKind] = EventKind.STOCK_LEVEL_OK
