# ontology.py
from owlready2 import get_ontology, Thing, DataProperty, FunctionalProperty, destroy_entity

DEFAULT_MACHINE_IDS = ("001", "002", "003")
INITIAL_STOCK = 10

onto = get_ontology("http://example.org/vending.owl")

with onto:
    # Classes
    class Machine(Thing): pass
    class LowStock(Thing): pass

    # Data properties
    class machineId(DataProperty, FunctionalProperty):  range = [str]
    class stockLevel(DataProperty, FunctionalProperty): range = [int]


def seed_machines(ids=DEFAULT_MACHINE_IDS, stock=INITIAL_STOCK):
    with onto:
        # Clear previous instances to avoid IRI/name collisions on repeated runs/reset
        for cls in (Machine, LowStock):
            for inst in list(cls.instances()):
                destroy_entity(inst)

        machines = []
        for machine_id in ids:
            m = Machine(f"Machine_{machine_id}")
            m.machineId = machine_id
            m.stockLevel = stock
            machines.append(m)
    return machines


def find_machine(machine_id):
    for m in Machine.instances():
        if m.machineId == machine_id:
            return m
    return None


def stock_of(machine):
    return machine.stockLevel if machine.stockLevel is not None else 0
