from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class FrameTimer:
    """Fixed-rate schedule fed by the window's per-update ``dt``.

    ``advance`` reports at most one due frame per call. Leftover time carries
    over unless it already covers a whole interval, in which case it is dropped.
    """

    interval: float = 0.2

    _elapsed: float = field(init=False, default=0.0, repr=False)

    def __post_init__(self) -> None:
        if self.interval <= 0.0:
            raise ValueError(f"frame interval must be positive, got {self.interval}")

    @classmethod
    def for_rate(cls, frame_rate: float) -> FrameTimer:
        if frame_rate <= 0:
            raise ValueError(f"frame rate must be positive, got {frame_rate}")
        return cls(interval=1.0 / float(frame_rate))

    def advance(self, dt: float) -> bool:
        self._elapsed += max(0.0, float(dt))
        if self._elapsed < self.interval:
            return False
        self._elapsed -= self.interval
        if self._elapsed >= self.interval:
            self._elapsed = 0.0
        return True

    def reset(self) -> None:
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        return self._elapsed
