# main.py

import logging
import time

from events import EventKind
from model import VendingModel
from ontology import seed_machines, stock_of
from rules import check_low_stock, LOW_STOCK_THRESHOLD


class TerminalLogger:
    """Prints every delivered event with the step it happened in."""

    ICONS = {
        EventKind.SALE: "🛒",
        EventKind.REFILL: "📦",
        EventKind.LOW_STOCK_WARNING: "⚠️",
        EventKind.STOCK_LEVEL_OK: "✅",
    }

    def __init__(self, simulation):
        self.simulation = simulation

    def handle(self, event):
        icon = self.ICONS.get(event.kind, "•")
        qty = getattr(event, "quantity", None)
        detail = f" x{qty}" if qty is not None else ""
        print(f"[Step {self.simulation.current_step:2d}] {icon} {event.kind.value}{detail} on machine {event.machine_id}")


def setup_terminal_logging(simulation):
    """Subscribe a terminal logger to every event kind on the simulation bus."""
    logger = TerminalLogger(simulation)
    for kind in EventKind:
        simulation.bus.subscribe(kind, logger)
    return logger


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "="*80)
    print("🏪 VENDING SIMULATION STARTING")
    print("="*80)

    machines = seed_machines()
    sim = VendingModel(machines, low_threshold=LOW_STOCK_THRESHOLD, max_steps=5, seed=42)
    setup_terminal_logging(sim)

    print("\n🤖 INITIAL MACHINES:")
    for m in machines:
        print(f"  Machine {m.machineId} (Stock: {stock_of(m)})")

    print("\n" + "="*80)
    print(f"🚀 SIMULATION RUNNING ({sim.max_steps} steps)...")
    print("="*80)

    start_time = time.time()
    sim.run()
    end_time = time.time()

    print("\n" + "="*80)
    print("📊 SIMULATION SUMMARY")
    print("="*80)
    print(f"⏱️  Simulation Time: {end_time - start_time:.2f} seconds")
    print(f"🔄 Steps Completed: {sim.current_step}")
    print(f"📨 Events Published: {sim.events_published}")

    print("\nFinal Machines:")
    for m in machines:
        qty = stock_of(m)
        status = "🔴 LOW STOCK" if qty < LOW_STOCK_THRESHOLD else "🟢 OK"
        print(f"  Machine {m.machineId} | Stock: {qty:2d} | {status}")

    low = check_low_stock()
    if low:
        print("\n⚠️ LOW STOCK ALERTS:")
        for stock_alert in low:
            print(f"  🔴 {stock_alert.name}")
    else:
        print("\n✅ NO LOW STOCK ALERTS")
