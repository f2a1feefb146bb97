# bus.py
import logging
from collections import deque

log = logging.getLogger(__name__)


class MessageBus:
    """Synchronous pub/sub bus with a FIFO queue.

    publish() drains the queue unless a drain is already running, in which
    case the event is only appended and picked up by the active drain.
    """

    def __init__(self):
        self.subs = {}
        self._queue = deque()
        self._draining = False

    def subscribe(self, kind, subscriber):
        self.subs.setdefault(kind, set()).add(subscriber)

    def unsubscribe(self, kind, subscriber):
        self.subs.get(kind, set()).discard(subscriber)

    def subscribers(self, kind):
        return frozenset(self.subs.get(kind, ()))

    @property
    def pending(self):
        return len(self._queue)

    @property
    def draining(self):
        return self._draining

    def publish(self, event):
        self._queue.append(event)
        if not self._draining:
            self._drain()

    def _drain(self):
        self._draining = True
        log.debug("drain started (%d pending)", len(self._queue))
        try:
            while self._queue:
                event = self._queue.popleft()
                # snapshot: handlers may (un)subscribe while we deliver
                for s in list(self.subs.get(event.kind, ())):
                    try:
                        s.handle(event)
                    except Exception:
                        log.debug("handler %r failed on %r, %d events left queued",
                                  s, event, len(self._queue))
                        raise
        finally:
            self._draining = False
        log.debug("drain finished")
