"""
driver.py: Headless fixed-rate driver for a GameSession.
"""

import logging
import threading
import time
from typing import Callable, Optional

from .constants import TICK_TIME
from .data_models import Playfield
from .session import GameSession

logger = logging.getLogger(__name__)


class FixedTickDriver:
    """
    Ticks a session at a fixed interval. Jump requests may arrive from any
    thread; they are buffered and applied at the next tick boundary, so the
    session itself is only ever touched from the loop.
    """

    def __init__(self, session: GameSession, playfield: Playfield,
                 tick_time: float = TICK_TIME,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.session = session
        self.playfield = playfield
        self.tick_time = tick_time
        self.clock = clock
        self.sleep = sleep

        self.tick_count = 0
        self._pending_jumps = 0
        self._input_lock = threading.Lock()
        self.running = threading.Event()

    def request_jump(self):
        with self._input_lock:
            self._pending_jumps += 1

    def _take_jumps(self) -> int:
        with self._input_lock:
            jumps, self._pending_jumps = self._pending_jumps, 0
        return jumps

    def apply_inputs(self):
        """Delivers buffered jumps to the session. Several jumps act like one."""
        if self._take_jumps():
            self.session.jump(self.playfield)

    def resize(self, width: float, height: float):
        self.playfield = Playfield(width, height)

    def step(self) -> bool:
        """Applies pending input, then runs one tick. Returns True while running."""
        self.apply_inputs()
        if not self.session.is_running:
            return False
        self.tick_count += 1
        return self.session.tick(self.playfield)

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Runs the fixed-rate loop until the session is over, `stop` is called
        or the driver has run `max_ticks` ticks in total. Returns the driver's
        tick count.
        """
        self.running.set()
        self.apply_inputs()
        logger.info("Driver started. Tick interval: %.3fs", self.tick_time)
        while self.running.is_set() and self.session.is_running:
            if max_ticks is not None and self.tick_count >= max_ticks:
                break
            start_time = self.clock()

            self.step()

            elapsed_time = self.clock() - start_time
            sleep_time = self.tick_time - elapsed_time
            if sleep_time > 0:
                self.sleep(sleep_time)

        self.running.clear()
        logger.info("Driver stopped after %d ticks (state: %s)", self.tick_count, self.session.state.value)
        return self.tick_count

    def stop(self):
        self.running.clear()
