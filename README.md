# seqwrap

`seqwrap` converts between TCP-style 32-bit sequence numbers, which wrap around and are
counted from an initial sequence number (ISN), and 64-bit absolute sequence numbers that
start at zero.

Everything lives in the `seqwrap.wrapping` module.

## Installation

```
pip install seqwrap
```

## Usage

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(0xFFFFFFF0)

# Absolute sequence number -> 32-bit relative sequence number
seqno = wrap(20, isn)
print(seqno)            # 4

# 32-bit relative sequence number -> absolute sequence number.
# The checkpoint is a recent absolute sequence number; the result
# is the absolute value that wraps to `seqno` and lies closest to it.
print(unwrap(seqno, isn, 0))   # 20
```

### `WrappingInt32`

A frozen dataclass holding one field, `raw_value`. Any integer passed in is reduced
modulo 2**32; anything that is not an `int` (including `bool`) raises `TypeError`.
Arithmetic is modulo 2**32:

- `a + n` and `a - n` step forwards or backwards by an integer `n` and give a new
  `WrappingInt32`;
- `a - b` for two `WrappingInt32` values gives the signed offset from `b` to `a`, in the
  range -2**31 to 2**31 - 1;
- values compare equal when their raw 32-bit values match, and can be hashed;
- `str(a)` gives the raw value in decimal.

### `wrap(n, isn)`

Returns the `WrappingInt32` for the absolute sequence number `n`: `isn` advanced by the
low 32 bits of `n`.

### `unwrap(n, isn, checkpoint)`

Returns the absolute sequence number that wraps to `n` and lies closest to `checkpoint`.
Results are never negative: when the closest candidate would fall below zero, the one in
the checkpoint's own 2**32 block is returned instead.

`wrap` and `unwrap` raise `TypeError` when `n` or `checkpoint` is not an `int`, and
`ValueError` when it is outside the unsigned 64-bit range.

Each direction of a TCP connection has its own ISN, so keep one per stream when
wrapping and unwrapping.

The module also exports the bit-mask constants it works with: `HEAD_MASK`, `TAIL_MASK`,
`HEAD_ONE` and `FLAG`.

## What it does not do

`seqwrap` only handles sequence-number arithmetic. It has no TCP sender, receiver,
stream reassembler or network interface, and it does not parse or build segments.

## Running the tests

```
pip install "seqwrap[test]"
pytest
```