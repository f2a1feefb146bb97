# rules.py
from owlready2 import destroy_entity
from ontology import onto, Machine, LowStock, stock_of

LOW_STOCK_THRESHOLD = 3


def is_low(quantity, threshold=LOW_STOCK_THRESHOLD):
    return quantity < threshold


def check_low_stock(threshold=LOW_STOCK_THRESHOLD):
    """Rebuild the LowStock markers from the current machine stock levels."""
    with onto:
        # Clear existing LowStock instances
        for ls in list(LowStock.instances()):
            destroy_entity(ls)

        markers = []
        for machine in Machine.instances():
            if is_low(stock_of(machine), threshold):
                markers.append(LowStock(f"LowStock_{machine.name}"))
    return markers
