"""
Bit layout of a packed Steam ID.

A Steam ID is a 64-bit unsigned integer made of five fields, from least to
most significant bit:

  AuthServer     1 bit   offset 0
  AccountNumber  31 bits offset 1
  Instance       20 bits offset 32
  AccountType    4 bits  offset 52
  Universe       8 bits  offset 56

For chat accounts the top 8 bits of the Instance field hold the chat type:

  Instance: ZZZZZZZZXXXXXXXXXXXX  (Z = chat type, X = instance)
"""
from __future__ import annotations

ID_BITS = 64
ID_MAX = (1 << ID_BITS) - 1

AUTH_SERVER_MASK = 0x0000_0000_0000_0001
ACCOUNT_NUMBER_MASK = 0x0000_0000_FFFF_FFFE
INSTANCE_MASK = 0x000F_FFFF_0000_0000
ACCOUNT_TYPE_MASK = 0x00F0_0000_0000_0000
UNIVERSE_MASK = 0xFF00_0000_0000_0000
CHAT_TYPE_MASK = 0x000F_F000_0000_0000


def trailing_zeros(mask: int) -> int:
    return (mask & -mask).bit_length() - 1


AUTH_SERVER_SHIFT = trailing_zeros(AUTH_SERVER_MASK)
ACCOUNT_NUMBER_SHIFT = trailing_zeros(ACCOUNT_NUMBER_MASK)
INSTANCE_SHIFT = trailing_zeros(INSTANCE_MASK)
ACCOUNT_TYPE_SHIFT = trailing_zeros(ACCOUNT_TYPE_MASK)
UNIVERSE_SHIFT = trailing_zeros(UNIVERSE_MASK)
CHAT_TYPE_SHIFT = trailing_zeros(CHAT_TYPE_MASK)

# Offset of the chat type relative to the start of the Instance field.
CHAT_TYPE_INSTANCE_SHIFT = CHAT_TYPE_SHIFT - INSTANCE_SHIFT

FIELD_MASKS = (
    AUTH_SERVER_MASK,
    ACCOUNT_NUMBER_MASK,
    INSTANCE_MASK,
    ACCOUNT_TYPE_MASK,
    UNIVERSE_MASK,
)


def replace_bits(value: int, mask: int, new: int) -> int:
    """Replace the bits of ``value`` selected by ``mask`` with those of ``new``."""
    return (value & ~mask & ID_MAX) | (new & mask)


def extract(value: int, mask: int, shift: int) -> int:
    return (value & mask) >> shift
