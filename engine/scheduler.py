"""
Delayed callbacks for a single-threaded game loop.

The engine never sleeps or spawns threads. It hands a callback and a
delay to a scheduler; whoever owns the loop (Tk mainloop, the console
loop, a test) decides when time passes.
"""

import heapq
from typing import Callable, List, Tuple
from dataclasses import dataclass, field


@dataclass(order=True)
class _Pending:
    due_ms: int
    seq: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler:
    """
    Scheduler driven by a virtual clock.

    schedule() queues a callback; advance() moves the clock forward and
    runs every callback that became due, in due-time then FIFO order.
    Callbacks may schedule further callbacks.
    """

    def __init__(self):
        self.now_ms = 0
        self._queue: List[_Pending] = []
        self._seq = 0

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Run callback once, delay_ms after the current clock."""
        self._seq += 1
        heapq.heappush(self._queue, _Pending(self.now_ms + max(0, int(delay_ms)), self._seq, callback))

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting."""
        return len(self._queue)

    def next_due(self) -> Tuple[bool, int]:
        """(has_pending, ms until the earliest callback)."""
        if not self._queue:
            return False, 0
        return True, max(0, self._queue[0].due_ms - self.now_ms)

    def advance(self, ms: int) -> int:
        """
        Move the clock forward and run what became due.

        Args:
            ms: Milliseconds to advance.

        Returns:
            Number of callbacks run.
        """
        target = self.now_ms + ms
        ran = 0
        while self._queue and self._queue[0].due_ms <= target:
            item = heapq.heappop(self._queue)
            self.now_ms = item.due_ms
            item.callback()
            ran += 1
        self.now_ms = target
        return ran

    def run_pending(self) -> int:
        """Advance until the queue is empty. Returns callbacks run."""
        ran = 0
        while self._queue:
            ran += self.advance(self._queue[0].due_ms - self.now_ms)
        return ran
