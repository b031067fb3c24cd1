"""Game-time clock fed by clamped frame deltas.

Timers (spawns, slide windows) and motion both read this clock, so a stalled
frame delays the whole simulation instead of letting timers run ahead of the
obstacles they schedule.
"""

from __future__ import annotations

from typing import Tuple

from config import MAX_FRAME_DT_MS


class SimulationClock:
    def __init__(self, max_dt: float = MAX_FRAME_DT_MS) -> None:
        self.max_dt = max_dt
        self.now = 0.0

    def tick(self, raw_dt: float) -> Tuple[float, float]:
        """Advance by one frame; returns (now, dt) in milliseconds."""
        dt = max(0.0, min(float(raw_dt), self.max_dt))
        self.now += dt
        return self.now, dt


__all__ = ["SimulationClock"]
