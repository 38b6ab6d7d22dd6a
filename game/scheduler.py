"""
Tick scheduler - delayed actions drained by the game loop
"""

import heapq


class Scheduler:
    """
    Queue of (fire_tick, seq, action) entries

    Time only moves when advance() is called, so delayed effects replay
    the same way in tests as in the real 60 FPS loop.
    """
    def __init__(self):
        self.now = 0
        self._queue = []
        self._seq = 0

    def schedule(self, delay_ticks, action):
        """
        Run action after delay_ticks calls to advance()

        Args:
            delay_ticks: 0 fires on the next run_due()
            action: Callable with no arguments
        """
        heapq.heappush(self._queue, (self.now + delay_ticks, self._seq, action))
        self._seq += 1

    def run_due(self):
        """Run every action whose tick has come, in scheduling order"""
        fired = 0
        while self._queue and self._queue[0][0] <= self.now:
            _, _, action = heapq.heappop(self._queue)
            action()
            fired += 1
        return fired

    def advance(self, ticks=1):
        """Move time forward and run whatever became due"""
        self.now += ticks
        return self.run_due()

    def clear(self):
        """Drop pending actions and reset the clock"""
        self._queue = []
        self.now = 0

    def __len__(self):
        return len(self._queue)

    def __repr__(self):
        return f"Scheduler(now={self.now}, pending={len(self._queue)})"
