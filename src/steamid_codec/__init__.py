"""Parse, inspect, build and format packed Steam IDs."""
from steamid_codec.core.errors import Field, ParseErrorKind, SteamIdParseError
from steamid_codec.core.fields import AccountKind, AccountType, ChatType, Instance, InstanceKind, Universe
from steamid_codec.core.formatter import IdFormat, format_id
from steamid_codec.core.parser import parse, parse_builder
from steamid_codec.core.steam_id import SteamId, SteamIdBuilder

__version__ = "0.1.0"

__all__ = [
    "AccountKind",
    "AccountType",
    "ChatType",
    "Field",
    "IdFormat",
    "Instance",
    "InstanceKind",
    "ParseErrorKind",
    "SteamId",
    "SteamIdBuilder",
    "SteamIdParseError",
    "Universe",
    "format_id",
    "parse",
    "parse_builder",
]
