# model.py
from mesa import Model, Agent
from bus import MessageBus
from events import EventKind, MachineSaleEvent, MachineRefillEvent
from rules import LOW_STOCK_THRESHOLD
from subscribers import MachineSaleSubscriber, MachineRefillSubscriber, StockWarningSubscriber


class MarketAgent(Agent):
    """Generates one random sale or refill per step for a random machine."""

    def random_event(self):
        machine = self.random.choice(self.model.machines)
        if self.random.random() < 0.5:
            sale_qty = 1 if self.random.random() < 0.5 else 2
            return MachineSaleEvent(machine.machineId, sale_qty)
        refill_qty = 3 if self.random.random() < 0.5 else 5
        return MachineRefillEvent(machine.machineId, refill_qty)

    def step(self):
        self.model.publish(self.random_event())


class VendingModel(Model):
    def __init__(self, machines, low_threshold=LOW_STOCK_THRESHOLD, max_steps=5, seed=None):
        super().__init__(seed=seed)
        self.bus = MessageBus()
        self.machines = machines
        self.low_threshold = low_threshold
        self.max_steps = max_steps
        self.current_step = 0
        self.events_published = 0

        self.sale_subscriber = MachineSaleSubscriber(self.bus, machines, low_threshold)
        self.refill_subscriber = MachineRefillSubscriber(self.bus, machines, low_threshold)
        self.stock_warning_subscriber = StockWarningSubscriber()

        # subscribe model handlers
        self.bus.subscribe(EventKind.SALE, self.sale_subscriber)
        self.bus.subscribe(EventKind.REFILL, self.refill_subscriber)
        self.bus.subscribe(EventKind.LOW_STOCK_WARNING, self.stock_warning_subscriber)
        self.bus.subscribe(EventKind.STOCK_LEVEL_OK, self.stock_warning_subscriber)

        # create agents (auto-registered in Mesa 3.x)
        MarketAgent(self)

    def publish(self, event):
        self.events_published += 1
        self.bus.publish(event)

    def step(self):
        self.current_step += 1
        self.agents.shuffle_do("step")

    def run(self):
        for _ in range(self.max_steps):
            self.step()
