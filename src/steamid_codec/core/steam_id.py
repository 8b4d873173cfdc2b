from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from steamid_codec.core.fields import AccountKind, AccountType, ChatType, Instance, InstanceKind, Universe
from steamid_codec.core.formatter import IdFormat, format_id
from steamid_codec.core.layout import (
    ACCOUNT_NUMBER_MASK,
    ACCOUNT_NUMBER_SHIFT,
    ACCOUNT_TYPE_MASK,
    ACCOUNT_TYPE_SHIFT,
    AUTH_SERVER_MASK,
    AUTH_SERVER_SHIFT,
    ID_MAX,
    INSTANCE_MASK,
    INSTANCE_SHIFT,
    UNIVERSE_MASK,
    UNIVERSE_SHIFT,
    extract,
    replace_bits,
)


def _check_id(value: int) -> int:
    if not 0 <= value <= ID_MAX:
        raise ValueError(f"Steam ID must be in 0..{ID_MAX}, got {value}")
    return value


def _check_unsigned(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return value


@dataclass(frozen=True)
class SteamId:
    """
    Read-only packed Steam ID.

    Formats:
      SteamId64  76561197990953833   raw value
      SteamId2   STEAM_1:1:15344052  STEAM_<universe>:<auth server>:<account number>
      SteamId3   [U:1:30688105]      [<account type>:<universe>:<account number << 1 | auth server>]

    Use ``SteamIdBuilder.from_steam_id`` to derive a modified ID.
    """

    id: int

    def __post_init__(self) -> None:
        _check_id(self.id)

    @classmethod
    def parse(cls, text: str) -> "SteamId":
        from steamid_codec.core.parser import parse

        return parse(text)

    def authentication_server(self) -> int:
        return extract(self.id, AUTH_SERVER_MASK, AUTH_SERVER_SHIFT)

    def account_number(self) -> int:
        return extract(self.id, ACCOUNT_NUMBER_MASK, ACCOUNT_NUMBER_SHIFT)

    def account_type(self) -> AccountType:
        return AccountType.from_steam_id(self)

    def instance(self) -> Instance:
        """Chat accounts have instance values above 4096."""
        return Instance.from_steam_id(self)

    def chat_type(self) -> ChatType:
        return ChatType.from_steam_id(self)

    def universe(self) -> Universe:
        return Universe.from_steam_id(self)

    def format(self, fmt: IdFormat) -> str:
        return format_id(self, fmt)

    def steam_id64(self) -> str:
        return format_id(self, IdFormat.STEAMID64)

    def steam_id2(self) -> str:
        return format_id(self, IdFormat.STEAMID2)

    def steam_id2_legacy(self) -> str:
        return format_id(self, IdFormat.STEAMID2_LEGACY)

    def steam_id3(self) -> str:
        return format_id(self, IdFormat.STEAMID3)

    def url(self) -> str:
        return format_id(self, IdFormat.URL)

    def __int__(self) -> int:
        return self.id

    def __str__(self) -> str:
        return self.steam_id64()


@dataclass(frozen=True)
class SteamIdBuilder:
    """
    Builds a Steam ID one field at a time.

    Each setter returns a new builder, so calls chain:

        SteamIdBuilder.new().account_number(15344052).authentication_server(1).finish()

    Setters only ever touch their own field's bits.
    """

    id: int = 0

    def __post_init__(self) -> None:
        _check_id(self.id)

    @classmethod
    def new(cls) -> "SteamIdBuilder":
        """
        Builder for an individual desktop account in the public universe.

        Instance has to start at 1 (desktop) to match the SteamId64 values
        seen everywhere else.
        """
        return (
            cls(0)
            .account_type(AccountType(AccountKind.INDIVIDUAL))
            .universe(Universe.PUBLIC)
            .instance(1)
        )

    @classmethod
    def from_steam_id(cls, steam_id: SteamId) -> "SteamIdBuilder":
        return cls(steam_id.id)

    def _with_bits(self, mask: int, new: int) -> "SteamIdBuilder":
        return replace(self, id=replace_bits(self.id, mask, new))

    def finish(self) -> SteamId:
        return SteamId(self.id)

    def authentication_server(self, value: int) -> "SteamIdBuilder":
        """Only 0 and 1 are meaningful; anything above 1 is stored as 1."""
        bit = 1 if _check_unsigned("authentication_server", value) >= 1 else 0
        return self._with_bits(AUTH_SERVER_MASK, bit << AUTH_SERVER_SHIFT)

    def account_number(self, value: int) -> "SteamIdBuilder":
        """Store the 31-bit account number. Higher bits are dropped, not rejected."""
        _check_unsigned("account_number", value)
        return self._with_bits(ACCOUNT_NUMBER_MASK, value << ACCOUNT_NUMBER_SHIFT)

    def account_type(self, value: Union[AccountType, int, str]) -> "SteamIdBuilder":
        """
        Set the account type and reset the instance to match.

        Chat types put their chat type in an otherwise empty instance; every
        type except Invalid and Individual clears the instance. Valve IDs
        behave this way. Use ``account_type_preserve_bits`` to leave the
        instance alone.
        """
        atype = AccountType.coerce(value)
        builder = self
        if atype.is_chat:
            builder = builder.instance(Instance(InstanceKind.NONE, atype.chat_type))
        elif atype.kind not in (AccountKind.INVALID, AccountKind.INDIVIDUAL):
            builder = builder.instance(Instance(InstanceKind.NONE, ChatType.default()))
        return builder.account_type_preserve_bits(atype)

    def account_type_preserve_bits(self, value: Union[AccountType, int, str]) -> "SteamIdBuilder":
        atype = AccountType.coerce(value)
        return self._with_bits(ACCOUNT_TYPE_MASK, atype.to_numeric() << ACCOUNT_TYPE_SHIFT)

    def instance(self, value: Union[Instance, int]) -> "SteamIdBuilder":
        """Usually best left at the default set by ``new()``."""
        instance = Instance.coerce(value)
        return self._with_bits(INSTANCE_MASK, instance.to_numeric() << INSTANCE_SHIFT)

    def universe(self, value: Union[Universe, int]) -> "SteamIdBuilder":
        universe = Universe.coerce(value)
        return self._with_bits(UNIVERSE_MASK, universe.to_numeric() << UNIVERSE_SHIFT)
