"""A chain of second order sections realising a layout."""

from __future__ import annotations

import cmath
import math

from iirdesign.biquad import Biquad, BiquadPoleState
from iirdesign.layout import Layout


class Cascade:
    """Up to ``max_stages`` biquads applied one after another."""

    def __init__(self, max_stages: int) -> None:
        self.max_stages = max_stages
        self._stages = [Biquad() for _ in range(max_stages)]
        self._num_stages = 0

    @property
    def _active(self) -> list[Biquad]:
        return self._stages[: self._num_stages]

    def response(self, normalized_frequency: float) -> complex:
        """Complex response at a frequency given as a fraction of the sample rate."""
        w = 2 * math.pi * normalized_frequency
        czn1 = cmath.rect(1.0, -w)
        czn2 = cmath.rect(1.0, -2 * w)
        top = 1 + 0j
        bottom = 1 + 0j
        for stage in self._active:
            a0 = stage.a0
            top *= stage.b0 / a0 + (stage.b1 / a0) * czn1 + (stage.b2 / a0) * czn2
            bottom *= 1 + (stage.a1 / a0) * czn1 + (stage.a2 / a0) * czn2
        return top / bottom

    def pole_zeros(self) -> list[BiquadPoleState]:
        """Poles, zeros and gain of every active stage."""
        return [BiquadPoleState.from_biquad(stage) for stage in self._active]

    def apply_scale(self, scale: float) -> None:
        """Scale the overall gain through the first stage."""
        if not self._num_stages:
            raise ValueError("cascade has no stages")
        self._stages[0].apply_scale(scale)

    def set_layout(self, layout: Layout) -> None:
        """Build the stages from a digital layout and normalise its gain."""
        num_stages = (layout.num_poles + 1) // 2
        if num_stages > self.max_stages:
            raise ValueError("layout needs more stages than the cascade holds")
        self._num_stages = num_stages
        for stage, pair in zip(self._active, layout):
            stage.set_pole_zero_pair(pair)
        self.apply_scale(
            layout.normal_gain
            / abs(self.response(layout.normal_w / (2 * math.pi)))
        )

    def __getitem__(self, index: int) -> Biquad:
        return self._active[index]

    def __len__(self) -> int:
        return self._num_stages