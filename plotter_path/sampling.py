"""Parameter sampling for curve flattening."""

import math
from collections.abc import Iterator

from plotter_path.config import settings


def _ticks(step: float) -> Iterator[float]:
    index = 0
    t = 0.0
    while t <= 1.0:
        yield t
        index += 1
        t = index * step


def sample_times(step: float | None = None) -> Iterator[float]:
    """Return a fresh iterator over t = 0, step, 2*step, ... for every value <= 1.0.

    Values are computed as index * step so rounding never accumulates; with
    the default step of 0.001 the last value is exactly 1.0. The step is
    fixed, so long and short curves get the same number of samples.
    """
    if step is None:
        step = settings.tick_step
    if not math.isfinite(step) or step <= 0:
        raise ValueError(f"Sampling step must be a positive finite number, got {step}")
    return _ticks(step)
