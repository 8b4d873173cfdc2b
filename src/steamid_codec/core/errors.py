from __future__ import annotations

from enum import Enum
from typing import Optional


class Field(Enum):
    """Component of a Steam ID that failed to parse."""

    AUTH_SERVER = "authentication server"  # STEAM_X:*Y*:Z, bit 0 of [X:Y:*Z*]
    ACCOUNT_NUMBER = "account number"  # must stay below 2**31
    INSTANCE = "instance"
    ACCOUNT_TYPE = "account type"  # only in SteamId3
    UNIVERSE = "universe"
    STEAMID64 = "steamid64"

    def __str__(self) -> str:
        return self.value


class ParseErrorKind(Enum):
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    UNKNOWN_FORMAT = "unknown_format"
    INVALID = "invalid"
    OTHER = "other"


class SteamIdParseError(ValueError):
    """
    Raised when text cannot be read as a Steam ID.

    ``field`` is set for ``INVALID`` errors, ``detail`` for ``OTHER``.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        field: Optional[Field] = None,
        detail: Optional[str] = None,
    ) -> None:
        if kind == ParseErrorKind.INVALID and field is None:
            raise ValueError("INVALID parse errors need a field")
        self.kind = kind
        self.field = field
        self.detail = detail
        super().__init__(self.message)

    @classmethod
    def empty(cls) -> "SteamIdParseError":
        return cls(ParseErrorKind.EMPTY)

    @classmethod
    def too_short(cls) -> "SteamIdParseError":
        return cls(ParseErrorKind.TOO_SHORT)

    @classmethod
    def unknown_format(cls) -> "SteamIdParseError":
        return cls(ParseErrorKind.UNKNOWN_FORMAT)

    @classmethod
    def invalid(cls, field: Field) -> "SteamIdParseError":
        return cls(ParseErrorKind.INVALID, field=field)

    @classmethod
    def other(cls, detail: str) -> "SteamIdParseError":
        return cls(ParseErrorKind.OTHER, detail=detail)

    @property
    def message(self) -> str:
        if self.kind == ParseErrorKind.EMPTY:
            return "input empty"
        if self.kind == ParseErrorKind.TOO_SHORT:
            return "unexpected end of string"
        if self.kind == ParseErrorKind.UNKNOWN_FORMAT:
            return "unable to identify SteamId format"
        if self.kind == ParseErrorKind.INVALID:
            return f"invalid value in {self.field}"
        return self.detail or "parse error"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SteamIdParseError):
            return NotImplemented
        return (self.kind, self.field, self.detail) == (other.kind, other.field, other.detail)

    def __hash__(self) -> int:
        return hash((self.kind, self.field, self.detail))

    def __repr__(self) -> str:
        if self.kind == ParseErrorKind.INVALID:
            return f"SteamIdParseError(INVALID, field={self.field.name})"
        if self.kind == ParseErrorKind.OTHER:
            return f"SteamIdParseError(OTHER, detail={self.detail!r})"
        return f"SteamIdParseError({self.kind.name})"
