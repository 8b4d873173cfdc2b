"""
Value types stored inside a packed Steam ID.

Every conversion here is total: unknown numbers or characters fall back to
the type's default variant instead of raising. The parser relies on that to
accept unknown account type letters as ``Invalid``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Dict, Union

from steamid_codec.core.layout import (
    ACCOUNT_TYPE_MASK,
    ACCOUNT_TYPE_SHIFT,
    CHAT_TYPE_INSTANCE_SHIFT,
    CHAT_TYPE_MASK,
    CHAT_TYPE_SHIFT,
    INSTANCE_MASK,
    INSTANCE_SHIFT,
    UNIVERSE_MASK,
    UNIVERSE_SHIFT,
    extract,
)

if TYPE_CHECKING:
    from steamid_codec.core.steam_id import SteamId


_INSTANCE_FIELD_MASK = INSTANCE_MASK >> INSTANCE_SHIFT
_CHAT_TYPE_FIELD_MASK = CHAT_TYPE_MASK >> CHAT_TYPE_SHIFT
_INSTANCE_VALUE_MASK = (1 << CHAT_TYPE_INSTANCE_SHIFT) - 1


class ChatType(IntEnum):
    """Kind of chat room, only meaningful for ``Chat`` accounts."""

    NONE = 0  # default for every non-chat account
    MATCHMAKING_LOBBY = 1
    LOBBY = 2
    CLAN_CHAT = 4  # default for chat accounts

    @classmethod
    def default(cls) -> "ChatType":
        return cls.NONE

    @classmethod
    def from_numeric(cls, value: int) -> "ChatType":
        # Lossy: only four of the 256 possible values have a variant.
        try:
            return cls(value)
        except ValueError:
            return cls.NONE

    def to_numeric(self) -> int:
        return int(self)

    @classmethod
    def from_steam_id(cls, steam_id: "SteamId") -> "ChatType":
        return cls.from_numeric(extract(steam_id.id, CHAT_TYPE_MASK, CHAT_TYPE_SHIFT))

    @classmethod
    def coerce(cls, value: Union["ChatType", int]) -> "ChatType":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.from_numeric(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to ChatType")


_UNIVERSE_LABELS = {
    0: "Unspecified",
    1: "Public",
    2: "Beta",
    3: "Internal",
    4: "Dev",
    5: "RC",
}


class Universe(IntEnum):
    """
    Self-contained Steam instance an account lives in.

    Virtually every account is ``PUBLIC``. ``UNSPECIFIED`` is read as
    ``PUBLIC`` when parsing a SteamId2, the way legacy Source engine games do.
    """

    UNSPECIFIED = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4
    RC = 5

    @classmethod
    def default(cls) -> "Universe":
        return cls.UNSPECIFIED

    @classmethod
    def from_numeric(cls, value: int) -> "Universe":
        try:
            return cls(value)
        except ValueError:
            return cls.UNSPECIFIED

    def to_numeric(self) -> int:
        return int(self)

    @classmethod
    def from_steam_id(cls, steam_id: "SteamId") -> "Universe":
        return cls.from_numeric(extract(steam_id.id, UNIVERSE_MASK, UNIVERSE_SHIFT))

    @classmethod
    def coerce(cls, value: Union["Universe", int]) -> "Universe":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.from_numeric(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Universe")

    @property
    def label(self) -> str:
        return _UNIVERSE_LABELS[int(self)]

    def __str__(self) -> str:
        return self.label


class InstanceKind(IntEnum):
    NONE = 0
    DESKTOP = 1
    CONSOLE = 2
    WEB = 4


@dataclass(frozen=True)
class Instance:
    """
    Where the account exists, plus the chat type stored above it.

    Numeric form is ``kind | chat_type << 12`` within the 20-bit field.
    """

    kind: InstanceKind = InstanceKind.DESKTOP
    chat_type: ChatType = ChatType.NONE

    @classmethod
    def default(cls) -> "Instance":
        return cls(InstanceKind.DESKTOP, ChatType.default())

    @classmethod
    def from_numeric(cls, value: int) -> "Instance":
        field = value & _INSTANCE_FIELD_MASK
        chat_type = ChatType.from_numeric((field >> CHAT_TYPE_INSTANCE_SHIFT) & _CHAT_TYPE_FIELD_MASK)
        try:
            kind = InstanceKind(field & _INSTANCE_VALUE_MASK)
        except ValueError:
            # Lossy: values without a variant are read as desktop.
            kind = InstanceKind.DESKTOP
        return cls(kind, chat_type)

    def to_numeric(self) -> int:
        return int(self.kind) | (int(self.chat_type) << CHAT_TYPE_INSTANCE_SHIFT)

    @classmethod
    def from_steam_id(cls, steam_id: "SteamId") -> "Instance":
        return cls.from_numeric(extract(steam_id.id, INSTANCE_MASK, INSTANCE_SHIFT))

    @classmethod
    def coerce(cls, value: Union["Instance", int]) -> "Instance":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.from_numeric(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Instance")

    def __str__(self) -> str:
        return self.kind.name.title()


class AccountKind(IntEnum):
    INVALID = 0
    INDIVIDUAL = 1
    MULTISEAT = 2
    GAME_SERVER = 3  # registered with a game server login token
    ANON_GAME_SERVER = 4
    PENDING = 5
    CONTENT_SERVER = 6
    CLAN = 7  # Steam groups
    CHAT = 8
    CONSOLE_USER = 9  # aka P2P super seeder
    ANON_USER = 10


_KIND_LABELS = {
    AccountKind.INVALID: "Invalid",
    AccountKind.INDIVIDUAL: "Individual",
    AccountKind.MULTISEAT: "Multiseat",
    AccountKind.GAME_SERVER: "GameServer",
    AccountKind.ANON_GAME_SERVER: "AnonGameServer",
    AccountKind.PENDING: "Pending",
    AccountKind.CONTENT_SERVER: "ContentServer",
    AccountKind.CLAN: "Clan",
    AccountKind.CHAT: "Chat",
    AccountKind.CONSOLE_USER: "ConsoleUser",
    AccountKind.ANON_USER: "AnonUser",
}

# Console users have no letter of their own and share Invalid's.
_KIND_CHARS = {
    AccountKind.INVALID: "I",
    AccountKind.INDIVIDUAL: "U",
    AccountKind.MULTISEAT: "M",
    AccountKind.GAME_SERVER: "G",
    AccountKind.ANON_GAME_SERVER: "A",
    AccountKind.PENDING: "P",
    AccountKind.CONTENT_SERVER: "C",
    AccountKind.CLAN: "g",
    AccountKind.CONSOLE_USER: "I",
    AccountKind.ANON_USER: "a",
}

_CHAT_CHARS = {
    ChatType.MATCHMAKING_LOBBY: "T",
    ChatType.LOBBY: "L",
    ChatType.CLAN_CHAT: "c",
}


@dataclass(frozen=True)
class AccountType:
    """
    Role of the identified entity.

    Only ``Chat`` accounts carry a payload: the chat type found in the top
    bits of the Instance field. Build chat types with ``AccountType.chat()``.
    """

    kind: AccountKind = AccountKind.INVALID
    chat_type: ChatType = ChatType.NONE

    def __post_init__(self) -> None:
        if self.kind != AccountKind.CHAT and self.chat_type != ChatType.NONE:
            raise ValueError(f"{_KIND_LABELS[self.kind]} accounts do not carry a chat type")

    @classmethod
    def chat(cls, chat_type: ChatType = ChatType.CLAN_CHAT) -> "AccountType":
        return cls(AccountKind.CHAT, chat_type)

    @property
    def is_chat(self) -> bool:
        return self.kind == AccountKind.CHAT

    @classmethod
    def default(cls) -> "AccountType":
        return cls(AccountKind.INVALID)

    @classmethod
    def from_numeric(cls, value: int) -> "AccountType":
        if value == AccountKind.CHAT:
            return cls.chat(ChatType.CLAN_CHAT)
        try:
            return cls(AccountKind(value))
        except ValueError:
            return cls.default()

    def to_numeric(self) -> int:
        return int(self.kind)

    @classmethod
    def from_char(cls, char: str) -> "AccountType":
        return _ACCOUNT_TYPES_BY_CHAR.get(char, cls.default())

    def to_char(self) -> str:
        if self.is_chat:
            return _CHAT_CHARS.get(self.chat_type, "c")
        return _KIND_CHARS[self.kind]

    @classmethod
    def from_steam_id(cls, steam_id: "SteamId") -> "AccountType":
        value = extract(steam_id.id, ACCOUNT_TYPE_MASK, ACCOUNT_TYPE_SHIFT)
        if value == AccountKind.CHAT:
            return cls.chat(ChatType.from_steam_id(steam_id))
        return cls.from_numeric(value)

    @classmethod
    def coerce(cls, value: Union["AccountType", int, str]) -> "AccountType":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.from_numeric(value)
        if isinstance(value, str):
            return cls.from_char(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to AccountType")

    @property
    def label(self) -> str:
        return _KIND_LABELS[self.kind]

    def __str__(self) -> str:
        return self.label


_ACCOUNT_TYPES_BY_CHAR: Dict[str, AccountType] = {
    "I": AccountType(AccountKind.INVALID),
    "U": AccountType(AccountKind.INDIVIDUAL),
    "M": AccountType(AccountKind.MULTISEAT),
    "G": AccountType(AccountKind.GAME_SERVER),
    "A": AccountType(AccountKind.ANON_GAME_SERVER),
    "P": AccountType(AccountKind.PENDING),
    "C": AccountType(AccountKind.CONTENT_SERVER),
    "g": AccountType(AccountKind.CLAN),
    "L": AccountType.chat(ChatType.LOBBY),
    "T": AccountType.chat(ChatType.MATCHMAKING_LOBBY),
    "c": AccountType.chat(ChatType.CLAN_CHAT),
    "a": AccountType(AccountKind.ANON_USER),
}
