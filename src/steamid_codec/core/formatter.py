from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from steamid_codec.core.fields import AccountKind
from steamid_codec.core.layout import ACCOUNT_NUMBER_MASK, AUTH_SERVER_MASK

if TYPE_CHECKING:
    from steamid_codec.core.steam_id import SteamId


PROFILE_URL = "http://steamcommunity.com/profiles/"
GROUP_URL = "http://steamcommunity.com/gid/"


class IdFormat(Enum):
    """Textual renderings of a Steam ID."""

    STEAMID64 = "steamid64"  # 76561197990953833
    STEAMID2 = "steamid2"  # STEAM_1:1:15344052
    STEAMID2_LEGACY = "steamid2_legacy"  # STEAM_0:1:15344052, universe always 0
    STEAMID3 = "steamid3"  # [U:1:30688105]
    URL = "url"  # profile or group page

    @classmethod
    def from_name(cls, name: str) -> "IdFormat":
        key = name.strip().lower().replace("-", "_")
        for fmt in cls:
            if fmt.value == key:
                return fmt
        raise ValueError(f"Unknown id format: {name!r}")

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    IdFormat.STEAMID64: "steamID64",
    IdFormat.STEAMID2: "steamID",
    IdFormat.STEAMID2_LEGACY: "steamID (legacy)",
    IdFormat.STEAMID3: "steamID3",
    IdFormat.URL: "profile",
}


def _steam_id2(steam_id: "SteamId", universe: int) -> str:
    return f"STEAM_{universe}:{steam_id.authentication_server()}:{steam_id.account_number()}"


def _steam_id3(steam_id: "SteamId") -> str:
    packed = steam_id.id & (AUTH_SERVER_MASK | ACCOUNT_NUMBER_MASK)
    return f"[{steam_id.account_type().to_char()}:{steam_id.universe().to_numeric()}:{packed}]"


def format_id(steam_id: "SteamId", fmt: IdFormat) -> str:
    if fmt == IdFormat.STEAMID64:
        return str(steam_id.id)
    if fmt == IdFormat.STEAMID2:
        return _steam_id2(steam_id, steam_id.universe().to_numeric())
    if fmt == IdFormat.STEAMID2_LEGACY:
        return _steam_id2(steam_id, 0)
    if fmt == IdFormat.STEAMID3:
        return _steam_id3(steam_id)
    if fmt == IdFormat.URL:
        if steam_id.account_type().kind == AccountKind.CLAN:
            return f"{GROUP_URL}{_steam_id3(steam_id)}"
        return f"{PROFILE_URL}{steam_id.id}"
    raise ValueError(f"Unknown id format: {fmt!r}")
