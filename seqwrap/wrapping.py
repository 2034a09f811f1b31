"""32-bit wrapping sequence numbers and conversion to 64-bit absolute indices."""

from __future__ import annotations

from dataclasses import dataclass

HEAD_MASK = 0xFFFFFFFF00000000
TAIL_MASK = 0xFFFFFFFF
HEAD_ONE = 0x0000000100000000
FLAG = 0x0000000080000000

_U32 = 1 << 32
_U64 = 1 << 64


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around, relative to some initial sequence number."""

    raw_value: int

    def __post_init__(self) -> None:
        if isinstance(self.raw_value, bool) or not isinstance(self.raw_value, int):
            raise TypeError(f"raw value must be an int, not {type(self.raw_value).__name__}")
        object.__setattr__(self, "raw_value", self.raw_value % _U32)

    def __add__(self, other: int) -> WrappingInt32:
        """The point ``other`` steps past this one."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: WrappingInt32 | int) -> WrappingInt32 | int:
        """Signed offset to another WrappingInt32, or the point ``other`` steps before this one."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) % _U32
            return diff - _U32 if diff >= FLAG else diff
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value - other)

    def __str__(self) -> str:
        return str(self.raw_value)


def _check_u64(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value < _U64:
        raise ValueError(f"{name} must be an unsigned 64-bit value, got {value}")
    return value


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute zero-based sequence number into a WrappingInt32."""
    _check_u64("n", n)
    return isn + (n & TAIL_MASK)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` and lies closest to ``checkpoint``."""
    _check_u64("checkpoint", checkpoint)
    offset = (n.raw_value - isn.raw_value) % _U32
    result = (checkpoint & HEAD_MASK) | offset
    low_checkpoint = checkpoint & TAIL_MASK

    if low_checkpoint < FLAG:
        if offset > low_checkpoint + FLAG and result >= HEAD_ONE:
            result -= HEAD_ONE
    elif low_checkpoint > FLAG:
        if offset < low_checkpoint - FLAG:
            result += HEAD_ONE

    return result % _U64