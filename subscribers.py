# subscribers.py
from events import EventKind, LowStockWarningEvent, StockLevelOkEvent
from ontology import stock_of
from rules import LOW_STOCK_THRESHOLD, is_low


class _MachineSubscriber:
    def __init__(self, bus, machines, threshold=LOW_STOCK_THRESHOLD):
        self.bus = bus
        self.machines = machines
        self.threshold = threshold
        self.reports = []

    def _find(self, machine_id):
        for m in self.machines:
            if m.machineId == machine_id:
                return m
        return None

    def _report(self, message):
        self.reports.append(message)
        print(message)


class MachineSaleSubscriber(_MachineSubscriber):
    def handle(self, event):
        machine = self._find(event.machine_id)
        if machine is None:
            return

        machine.stockLevel = stock_of(machine) - event.quantity
        qty = machine.stockLevel
        self._report(f"Machine {machine.machineId} sold an item. New stock: {qty}")

        if is_low(qty, self.threshold):
            self._report(f"Machine {machine.machineId} is low on stock. Stock: {qty}")
            self.bus.publish(LowStockWarningEvent(machine.machineId))


class MachineRefillSubscriber(_MachineSubscriber):
    def handle(self, event):
        machine = self._find(event.machine_id)
        if machine is None:
            return

        machine.stockLevel = stock_of(machine) + event.quantity
        qty = machine.stockLevel
        self._report(f"Machine {machine.machineId} refilled. New stock: {qty}")

        if not is_low(qty, self.threshold):
            self._report(f"Machine {machine.machineId} stock is ok. Stock: {qty}")
            self.bus.publish(StockLevelOkEvent(machine.machineId))


class StockWarningSubscriber:
    """Tracks a warned flag per machine and reports only on transitions."""

    def __init__(self):
        self.warning_states = {}
        self.reports = []

    def is_warned(self, machine_id):
        return self.warning_states.get(machine_id, False)

    def handle(self, event):
        warned = self.is_warned(event.machine_id)
        if event.kind is EventKind.LOW_STOCK_WARNING and not warned:
            self._report(f"Low stock warning for machine {event.machine_id}")
            self.warning_states[event.machine_id] = True
        elif event.kind is EventKind.STOCK_LEVEL_OK and warned:
            self._report(f"Stock level OK for machine {event.machine_id}")
            self.warning_states[event.machine_id] = False

    def _report(self, message):
        self.reports.append(message)
        print(message)
