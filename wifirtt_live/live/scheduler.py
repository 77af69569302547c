"""Shared measurement timer fanned out to every live viewer."""
from __future__ import annotations
import asyncio, logging
from enum import Enum
from typing import Awaitable, Callable, Optional

from ..models import TopologySnapshot, ViewerConnection
from ..utils.serial import dumps

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"        # no viewers, no timer
    ACTIVE = "active"    # >= 1 viewer, timer running


class LiveScheduler:
    """Owns the viewer set and the single shared timer.

    Not thread-safe: every method must run on the event loop thread.
    Ticks that fire while the previous tick's build is still running are
    skipped, so at most one tick build is in flight.
    """

    def __init__(self, build: Callable[[], Awaitable[TopologySnapshot]], interval: float = 3.0):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._build = build
        self.interval = interval
        self.state = SessionState.IDLE
        self._viewers: set[ViewerConnection] = set()
        self._timer: Optional[asyncio.Task] = None
        self._tick_task: Optional[asyncio.Task] = None
        self._on_demand: set[asyncio.Task] = set()
        self.builds = 0

    @property
    def viewer_count(self) -> int:
        return len(self._viewers)

    @property
    def timer_running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    @property
    def building(self) -> bool:
        return self._tick_task is not None and not self._tick_task.done()

    def connect(self, viewer: ViewerConnection) -> None:
        self._viewers.add(viewer)
        logger.info("Viewer connected (%d total)", len(self._viewers))
        if self.state is SessionState.IDLE:
            self._start_timer()
        # served right away, independent of the shared tick
        task = asyncio.ensure_future(self._send_initial(viewer))
        self._on_demand.add(task)
        task.add_done_callback(self._on_demand.discard)

    def disconnect(self, viewer: ViewerConnection) -> None:
        if viewer not in self._viewers:
            return
        self._viewers.discard(viewer)
        logger.info("Viewer disconnected (%d total)", len(self._viewers))
        if not self._viewers and self.state is SessionState.ACTIVE:
            self._stop_timer()

    def close(self) -> None:
        self._viewers.clear()
        if self.state is SessionState.ACTIVE:
            self._stop_timer()
        for task in list(self._on_demand):
            task.cancel()

    def stats(self) -> dict:
        return {
            "state": self.state.value,
            "viewers": len(self._viewers),
            "timer": self.timer_running,
            "building": self.building,
            "interval": self.interval,
            "builds": self.builds,
        }

    def _start_timer(self) -> None:
        self._timer = asyncio.ensure_future(self._run_timer())
        self.state = SessionState.ACTIVE
        logger.info("Shared timer started: interval=%.1fs", self.interval)

    def _stop_timer(self) -> None:
        # an in-flight tick build is left to finish; it just has no audience
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self.state = SessionState.IDLE
        logger.info("Shared timer stopped")

    async def _run_timer(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            if self.building:
                logger.debug("Tick skipped: previous build still running")
                continue
            self._tick_task = asyncio.ensure_future(self.tick())

    async def tick(self) -> None:
        if not self._viewers:
            return
        message = await self._build_message()
        self._broadcast(message)

    async def _build_message(self) -> str:
        self.builds += 1
        try:
            snap = await self._build()
        except Exception as e:
            logger.warning("Snapshot build failed: %s", e)
            return dumps({"error": str(e)})
        return dumps(snap.to_dict())

    async def _send_initial(self, viewer: ViewerConnection) -> None:
        message = await self._build_message()
        if viewer in self._viewers:
            self._send(viewer, message)

    def _broadcast(self, message: str) -> None:
        for viewer in list(self._viewers):
            self._send(viewer, message)

    def _send(self, viewer: ViewerConnection, message: str) -> None:
        if not viewer.writable:
            logger.debug("Viewer %r not writable, skipped", viewer)
            return
        try:
            viewer.send(message)
        except Exception:
            logger.warning("Send to viewer %r failed", viewer, exc_info=True)
