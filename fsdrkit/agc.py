"""Automatic gain control for a stream of real samples."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class MessageResult(Enum):
    """Outcome of a control message sent to a block."""

    OK = "ok"
    INVALID_VALUE = "invalid_value"


def _log10(value):
    if value > 0:
        return math.log10(value)
    if value == 0:
        return -math.inf
    return math.nan


def _pow(base, exponent):
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError):
        return math.nan


_BOOL_PORTS = {"auto_lock", "gain_lock"}
_FLOAT_PORTS = {"max_gain", "adjustment_rate", "reference_power"}


@dataclass
class Agc:
    """Scale samples so that their power approaches ``reference_power``."""

    squelch: float
    max_gain: float
    gain: float
    adjustment_rate: float
    reference_power: float
    gain_lock: bool
    auto_lock: bool

    def __post_init__(self):
        if not self.max_gain >= 0.0:
            raise ValueError("max_gain must be non-negative")
        if not self.squelch >= 0.0:
            raise ValueError("squelch must be non-negative")

    def handle_message(self, port, value):
        """Update a parameter by port name; a value of the wrong kind is refused."""
        if port in _BOOL_PORTS:
            if not isinstance(value, bool):
                return MessageResult.INVALID_VALUE
        elif port in _FLOAT_PORTS:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return MessageResult.INVALID_VALUE
            value = float(value)
        else:
            raise KeyError(f"unknown message port: {port}")
        setattr(self, port, value)
        return MessageResult.OK

    def scale(self, sample):
        """Apply the current gain to one sample, then adapt the gain."""
        output = sample * self.gain
        # Strong gains (far from 1) adapt more slowly than gains near 1.
        dynamic_rate = _pow(self.adjustment_rate, abs(_log10(self.gain)))
        output_power = output * output

        if self.auto_lock and not self.gain_lock:
            input_power = sample * sample
            if input_power > self.reference_power:
                if output_power < self.reference_power:
                    self.gain_lock = True
            elif output_power > self.reference_power:
                self.gain_lock = True

        if not self.gain_lock:
            ratio = self.reference_power / output_power if output_power else math.inf
            self.gain *= 1.0 + _log10(ratio) * dynamic_rate
        return output

    def process(self, samples):
        """Level a sequence of samples; those at or below the squelch become 0."""
        return [
            self.scale(sample) if sample * sample > self.squelch else 0.0
            for sample in samples
        ]


class AgcBuilder:
    """Configure an :class:`Agc`, starting from the usual defaults."""

    def __init__(self):
        self._squelch = 0.0
        self._max_gain = 65536.0
        self._gain = 1.0
        self._reference_power = 1.0
        self._adjustment_rate = 0.0001
        self._gain_lock = False
        self._auto_lock = False

    def squelch(self, squelch):
        self._squelch = squelch
        return self

    def max_gain(self, max_gain):
        self._max_gain = max_gain
        return self

    def adjustment_rate(self, adjustment_rate):
        self._adjustment_rate = adjustment_rate
        return self

    def reference_power(self, reference_power):
        self._reference_power = reference_power
        return self

    def gain_lock(self, gain_lock):
        self._gain_lock = gain_lock
        return self

    def auto_lock(self, auto_lock):
        self._auto_lock = auto_lock
        return self

    def build(self):
        return Agc(
            squelch=self._squelch,
            max_gain=self._max_gain,
            gain=self._gain,
            adjustment_rate=self._adjustment_rate,
            reference_power=self._reference_power,
            gain_lock=self._gain_lock,
            auto_lock=self._auto_lock,
        )