"""
Parse SteamId64, SteamId2 and SteamId3 strings.

The format is picked from the first character:
  digit  SteamId64  76561197990953833
  S      SteamId2   STEAM_1:1:15344052
  [      SteamId3   [U:1:30688105]
"""
from __future__ import annotations

import re
from typing import Iterator, List

from steamid_codec.core.errors import Field, SteamIdParseError
from steamid_codec.core.layout import ACCOUNT_NUMBER_SHIFT, AUTH_SERVER_MASK, ID_MAX
from steamid_codec.core.steam_id import SteamId, SteamIdBuilder


# No valid rendering is longer than this many bytes.
MAX_INPUT_LENGTH = 32

STEAMID2_PREFIX = "STEAM_"

_DECIMAL_RE = re.compile(r"[0-9]+")

_UNIVERSE_MAX = 0xFF
_AUTH_SERVER_LIMIT = 2
_ACCOUNT_NUMBER_LIMIT = 1 << 31
_STEAMID3_PACKED_MAX = (1 << 32) - 1


def _parse_decimal(text: str, field: Field, maximum: int = ID_MAX) -> int:
    if not _DECIMAL_RE.fullmatch(text):
        raise SteamIdParseError.invalid(field)
    value = int(text)
    if value > maximum:
        raise SteamIdParseError.invalid(field)
    return value


def _split_fields(text: str) -> List[str]:
    fields = text.split(":")
    if len(fields) < 3:
        raise SteamIdParseError.too_short()
    if len(fields) > 3:
        raise SteamIdParseError.unknown_format()
    return fields


def _next_field(fields: Iterator[str]) -> str:
    field = next(fields, None)
    if field is None:
        raise SteamIdParseError.too_short()
    return field


def _parse_steamid64(text: str) -> SteamIdBuilder:
    return SteamIdBuilder(_parse_decimal(text, Field.STEAMID64))


def _parse_steamid2(text: str) -> SteamIdBuilder:
    if not text.startswith(STEAMID2_PREFIX):
        raise SteamIdParseError.unknown_format()
    fields = iter(text[len(STEAMID2_PREFIX):].split(":"))

    # Legacy Source/GoldSrc games write universe 0 for public accounts.
    universe_value = max(_parse_decimal(_next_field(fields), Field.UNIVERSE, _UNIVERSE_MAX), 1)
    # Stricter than the builder, which would clamp these.
    auth_value = _parse_decimal(_next_field(fields), Field.AUTH_SERVER, _AUTH_SERVER_LIMIT - 1)
    account_value = _parse_decimal(_next_field(fields), Field.ACCOUNT_NUMBER, _ACCOUNT_NUMBER_LIMIT - 1)
    if next(fields, None) is not None:
        raise SteamIdParseError.unknown_format()

    # SteamId2 only ever describes individual users.
    return (
        SteamIdBuilder.new()
        .universe(universe_value)
        .authentication_server(auth_value)
        .account_number(account_value)
        .account_type("U")
    )


def _parse_steamid3(text: str) -> SteamIdBuilder:
    if not text.endswith("]"):
        raise SteamIdParseError.unknown_format()
    account_type, universe, packed = _split_fields(text[1:-1])

    universe_value = _parse_decimal(universe, Field.UNIVERSE, _UNIVERSE_MAX)
    packed_value = _parse_decimal(packed, Field.AUTH_SERVER)
    if packed_value > _STEAMID3_PACKED_MAX:
        raise SteamIdParseError.invalid(Field.ACCOUNT_NUMBER)
    if len(account_type) != 1 or not (account_type.isascii() and account_type.isalpha()):
        raise SteamIdParseError.invalid(Field.ACCOUNT_TYPE)

    return (
        SteamIdBuilder.new()
        .universe(universe_value)
        .authentication_server(packed_value & AUTH_SERVER_MASK)
        .account_number(packed_value >> ACCOUNT_NUMBER_SHIFT)
        .account_type(account_type)
    )


def parse_builder(text: str) -> SteamIdBuilder:
    """
    Parse ``text`` into a builder so callers can adjust fields afterwards.

    Raises SteamIdParseError describing the first problem found.
    """
    s = text.strip()
    if not s:
        raise SteamIdParseError.empty()
    if len(s.encode("utf-8")) > MAX_INPUT_LENGTH:
        raise SteamIdParseError.unknown_format()

    first = s[0]
    if "0" <= first <= "9":
        return _parse_steamid64(s)
    if first == "S":
        return _parse_steamid2(s)
    if first == "[":
        return _parse_steamid3(s)
    raise SteamIdParseError.unknown_format()


def parse(text: str) -> SteamId:
    return parse_builder(text).finish()
