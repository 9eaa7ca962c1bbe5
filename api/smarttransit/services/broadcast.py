import asyncio
import json
import logging
from typing import Callable, Dict, Optional, Set

from ..metrics import STREAM_SUBSCRIBERS, record_snapshot
from .simulation import RouteSimulator

log = logging.getLogger(__name__)

QUEUE_SIZE = 10


def encode_event(data: Dict) -> str:
    return f"data: {json.dumps(data)}\n\n"


class SnapshotBroadcaster:
    """Fans simulator snapshots out to per-client queues for server-sent events.

    The simulator may notify from a worker thread (manual controls run in the
    threadpool), so delivery hops onto the event loop before touching queues.
    """

    def __init__(self, simulator: RouteSimulator):
        self.simulator = simulator
        self.queues: Set[asyncio.Queue] = set()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    def start(self, loop: asyncio.AbstractEventLoop):
        self._loop = loop
        self._unsubscribe = self.simulator.subscribe(self.publish)

    def stop(self):
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        self._loop = None

    def publish(self, data: Dict):
        record_snapshot(data)
        if self._loop is None or not self.queues:
            return
        encoded = encode_event(data)
        self._loop.call_soon_threadsafe(self._fanout, encoded)

    def _fanout(self, encoded: str):
        for q in list(self.queues):
            try:
                q.put_nowait(encoded)
            except asyncio.QueueFull:
                pass  # slow client, drop

    def open(self) -> asyncio.Queue:
        q: asyncio.Queue = asyncio.Queue(maxsize=QUEUE_SIZE)
        self.queues.add(q)
        STREAM_SUBSCRIBERS.set(len(self.queues))
        return q

    def close(self, q: asyncio.Queue):
        self.queues.discard(q)
        STREAM_SUBSCRIBERS.set(len(self.queues))

    async def events(self):
        q = self.open()
        try:
            yield encode_event(self.simulator.snapshot())
            while True:
                yield await q.get()
        finally:
            self.close(q)
