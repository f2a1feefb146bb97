import pytest

from bus import MessageBus
from ontology import seed_machines


class Recorder:
    def __init__(self):
        self.received = []

    def handle(self, event):
        self.received.append(event)


@pytest.fixture
def bus():
    return MessageBus()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def machines():
    return seed_machines()
