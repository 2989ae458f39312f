"""Numeric kinds used by layout rectangles, with their conversions to and from 32-bit floats."""

from __future__ import annotations

import math
import struct
from enum import Enum

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float (overflow gives infinity)."""
    value = float(value)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _trunc_i64(value: float) -> int:
    """Truncate toward zero into the signed 64-bit range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I64_MAX if value > 0 else _I64_MIN
    return max(_I64_MIN, min(_I64_MAX, int(value)))


class NumKind(Enum):
    """A primitive number type that rectangle coordinates may be expressed in."""

    U8 = ("u8", 8, False, False)
    U16 = ("u16", 16, False, False)
    U32 = ("u32", 32, False, False)
    U64 = ("u64", 64, False, False)
    USIZE = ("usize", 64, False, False)
    I8 = ("i8", 8, True, False)
    I16 = ("i16", 16, True, False)
    I32 = ("i32", 32, True, False)
    I64 = ("i64", 64, True, False)
    ISIZE = ("isize", 64, True, False)
    F32 = ("f32", 32, True, True)
    F64 = ("f64", 64, True, True)

    def __init__(self, label: str, bits: int, signed: bool, is_float: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed
        self.is_float = is_float

    @property
    def min_value(self) -> float | int:
        if self.is_float:
            return -math.inf
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> float | int:
        if self.is_float:
            return math.inf
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def _wrap(self, value: int) -> int:
        """Reduce an integer to this type's range with two's-complement wrapping."""
        value &= (1 << self.bits) - 1
        if self.signed and value >= 1 << (self.bits - 1):
            value -= 1 << self.bits
        return value

    def _saturate(self, value: int) -> int:
        return max(self.min_value, min(self.max_value, value))

    def from_f32(self, value: float) -> float | int:
        """Convert a single-precision value to this kind, rounding halves to even."""
        value = to_float32(value)
        if self.is_float:
            return value
        if self.signed:
            return self._from_f32_signed(value)
        return self._from_f32_unsigned(value)

    def _from_f32_unsigned(self, value: float) -> int:
        if value < 0.0:
            return 0
        truncated = _trunc_i64(value)
        frac = to_float32(value - to_float32(float(truncated)))
        if frac > 0.5:
            result = truncated + 1
        elif frac < 0.5:
            result = truncated
        elif truncated % 2 == 0:
            result = truncated
        else:
            result = truncated + 1
        return self._wrap(result)

    def _from_f32_signed(self, value: float) -> int:
        truncated = _trunc_i64(value)
        as_float = to_float32(float(truncated))
        non_negative = value >= 0.0
        frac = to_float32(value - as_float if non_negative else as_float - value)
        away = truncated + 1 if non_negative else truncated - 1
        if frac > 0.5:
            result = away
        elif frac < 0.5:
            result = truncated
        elif truncated % 2 == 0:
            result = truncated
        else:
            result = away
        return self._wrap(result)

    def to_f32(self, value: float | int) -> float:
        """Convert a value of this kind to single precision."""
        return to_float32(float(value))

    def saturating_sub(self, a: float | int, b: float | int) -> float | int:
        """Subtract ``b`` from ``a``, clamping to the kind's range (floats floor at zero)."""
        if self.is_float:
            if b > a:
                return 0.0
            return self._float_result(a - b)
        return self._saturate(a - b)

    def saturating_add(self, a: float | int, b: float | int) -> float | int:
        """Add ``a`` and ``b``, clamping integers to the kind's range."""
        if self.is_float:
            return self._float_result(a + b)
        return self._saturate(a + b)

    def _float_result(self, value: float) -> float:
        return to_float32(value) if self is NumKind.F32 else float(value)