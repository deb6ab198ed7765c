"""Descriptions of filter parameters and their mapping to control values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum

_LOG_BASE = 1.5


class ParamId(IntEnum):
    """What a filter parameter means."""

    SAMPLE_RATE = 0
    FREQUENCY = 1
    Q = 2
    BANDWIDTH = 3
    BANDWIDTH_HZ = 4
    GAIN = 5
    SLOPE = 6
    ORDER = 7
    RIPPLE_DB = 8
    STOP_DB = 9
    ROLLOFF = 10
    POLE_RHO = 11
    POLE_THETA = 12
    ZERO_RHO = 13
    ZERO_THETA = 14
    POLE_REAL = 15
    ZERO_REAL = 16


class Scale(Enum):
    """How a control value in 0..1 maps to a native value."""

    INT = "int"
    REAL = "real"
    LOG = "log"
    POW2 = "pow2"


class Style(Enum):
    """How a native value is written as text."""

    INT = "int"
    HZ = "hz"
    REAL = "real"
    DB = "db"


@dataclass(frozen=True)
class ParamInfo:
    """A parameter's identity, range, default and scaling.

    For the POW2 scale ``minimum`` and ``maximum`` are exponents of two.
    """

    id: ParamId
    name: str
    label: str
    minimum: float
    maximum: float
    default_value: float
    scale: Scale = Scale.REAL
    style: Style = Style.REAL

    def to_control_value(self, native_value: float) -> float:
        """Map a native value to the range 0..1."""
        lo, hi = self.minimum, self.maximum
        if self.scale is Scale.LOG:
            l0 = math.log(lo) / math.log(_LOG_BASE)
            l1 = math.log(hi) / math.log(_LOG_BASE)
            return (math.log(native_value) / math.log(_LOG_BASE) - l0) / (l1 - l0)
        if self.scale is Scale.POW2:
            return (math.log(native_value) / math.log(2.0) - lo) / (hi - lo)
        return (native_value - lo) / (hi - lo)

    def to_native_value(self, control_value: float) -> float:
        """Map a value in the range 0..1 to a native value."""
        lo, hi = self.minimum, self.maximum
        if self.scale is Scale.INT:
            return float(math.floor(lo + control_value * (hi - lo) + 0.5))
        if self.scale is Scale.LOG:
            l0 = math.log(lo) / math.log(_LOG_BASE)
            l1 = math.log(hi) / math.log(_LOG_BASE)
            return _LOG_BASE ** (l0 + control_value * (l1 - l0))
        if self.scale is Scale.POW2:
            return 2.0 ** (control_value * (hi - lo) + lo)
        return lo + control_value * (hi - lo)

    def clamp(self, native_value: float) -> float:
        """Limit a native value to the parameter's range."""
        low = self.to_native_value(0)
        high = self.to_native_value(1)
        if native_value < low:
            return low
        if native_value > high:
            return high
        return native_value

    def format(self, native_value: float) -> str:
        """Write a native value as text for display."""
        if self.style is Style.INT:
            return str(int(native_value))
        if self.style is Style.HZ:
            return f"{int(native_value)} Hz"
        if self.style is Style.DB:
            magnitude = abs(native_value)
            precision = 3 if magnitude < 1 else 2 if magnitude < 10 else 1
            return f"{native_value:.{precision}f} dB"
        return f"{native_value:.3f}"


def sample_rate_param() -> ParamInfo:
    """Sample rate in Hz."""
    return ParamInfo(ParamId.SAMPLE_RATE, "Fs", "Sample Rate", 11025, 192000, 44100,
                     Scale.REAL, Style.HZ)


def cutoff_frequency_param() -> ParamInfo:
    """Cutoff frequency in Hz."""
    return ParamInfo(ParamId.FREQUENCY, "Fc", "Cutoff Frequency", 10, 22040, 2000,
                     Scale.LOG, Style.HZ)


def center_frequency_param() -> ParamInfo:
    """Centre frequency in Hz."""
    return ParamInfo(ParamId.FREQUENCY, "Fc", "Center Frequency", 10, 22040, 2000,
                     Scale.LOG, Style.HZ)


def q_param() -> ParamInfo:
    """Resonance."""
    return ParamInfo(ParamId.Q, "Q", "Resonance", -4, 4, 1, Scale.POW2, Style.REAL)


def bandwidth_param() -> ParamInfo:
    """Bandwidth in octaves."""
    return ParamInfo(ParamId.BANDWIDTH, "BW", "Bandwidth (Octaves)", -4, 4, 1,
                     Scale.POW2, Style.REAL)


def bandwidth_hz_param() -> ParamInfo:
    """Bandwidth in Hz."""
    return ParamInfo(ParamId.BANDWIDTH_HZ, "BW", "Bandwidth (Hz)", 10, 22040, 1720,
                     Scale.LOG, Style.HZ)


def gain_param() -> ParamInfo:
    """Gain in dB."""
    return ParamInfo(ParamId.GAIN, "Gain", "Gain", -24, 24, -6, Scale.REAL, Style.DB)


def slope_param() -> ParamInfo:
    """Shelf slope."""
    return ParamInfo(ParamId.SLOPE, "Slope", "Slope", -2, 2, 1, Scale.POW2, Style.REAL)


def ripple_db_param() -> ParamInfo:
    """Pass band ripple in dB."""
    return ParamInfo(ParamId.RIPPLE_DB, "Ripple", "Ripple dB", 0.001, 12, 0.01,
                     Scale.REAL, Style.DB)


def stop_db_param() -> ParamInfo:
    """Stop band attenuation in dB."""
    return ParamInfo(ParamId.STOP_DB, "Stop", "Stopband dB", 3, 60, 48,
                     Scale.REAL, Style.DB)


def rolloff_param() -> ParamInfo:
    """Transition width."""
    return ParamInfo(ParamId.ROLLOFF, "W", "Transition Width", -16, 4, 0,
                     Scale.REAL, Style.REAL)


def pole_rho_param() -> ParamInfo:
    """Distance of a pole from the origin."""
    return ParamInfo(ParamId.POLE_RHO, "Pd", "Pole Distance", 0, 1, 0.5)


def pole_theta_param() -> ParamInfo:
    """Angle of a pole."""
    return ParamInfo(ParamId.POLE_THETA, "Pa", "Pole Angle", 0, math.pi, math.pi / 2)


def zero_rho_param() -> ParamInfo:
    """Distance of a zero from the origin."""
    return ParamInfo(ParamId.ZERO_RHO, "Pd", "Zero Distance", 0, 1, 0.5)


def zero_theta_param() -> ParamInfo:
    """Angle of a zero."""
    return ParamInfo(ParamId.ZERO_THETA, "Pa", "Zero Angle", 0, math.pi, math.pi / 2)


def pole_real_param() -> ParamInfo:
    """Position of a real pole."""
    return ParamInfo(ParamId.POLE_REAL, "A1", "Pole Real", -1, 1, 0.25)


def zero_real_param() -> ParamInfo:
    """Position of a real zero."""
    return ParamInfo(ParamId.ZERO_REAL, "B1", "Zero Real", -1, 1, -0.25)