import pytest

from steamid_codec.core.fields import AccountKind, AccountType, ChatType, Instance, InstanceKind, Universe
from steamid_codec.core.steam_id import SteamId, SteamIdBuilder


def test_chat_type_value_conversion() -> None:
    assert ChatType.from_numeric(0) == ChatType.NONE
    assert ChatType.from_numeric(1) == ChatType.MATCHMAKING_LOBBY
    assert ChatType.from_numeric(2) == ChatType.LOBBY
    assert ChatType.from_numeric(3) == ChatType.NONE
    assert ChatType.from_numeric(4) == ChatType.CLAN_CHAT
    assert ChatType.from_numeric(255) == ChatType.NONE
    assert ChatType.CLAN_CHAT.to_numeric() == 4
    assert ChatType.default() == ChatType.NONE


def test_chat_type_from_steam_id() -> None:
    assert ChatType.from_steam_id(SteamIdBuilder.new().account_type("L").finish()) == ChatType.LOBBY
    assert ChatType.from_steam_id(SteamIdBuilder.new().account_type("T").finish()) == ChatType.MATCHMAKING_LOBBY
    assert ChatType.from_steam_id(SteamIdBuilder.new().account_type("c").finish()) == ChatType.CLAN_CHAT
    assert ChatType.from_steam_id(SteamIdBuilder.new().account_type("I").finish()) == ChatType.NONE


def test_universe_value_conversion() -> None:
    assert Universe.from_numeric(0) == Universe.UNSPECIFIED
    assert Universe.from_numeric(1) == Universe.PUBLIC
    assert Universe.from_numeric(4) == Universe.DEV
    assert Universe.from_numeric(100) == Universe.UNSPECIFIED
    assert Universe.RC.to_numeric() == 5
    assert str(Universe.PUBLIC) == "Public"
    assert Universe.RC.label == "RC"


def test_instance_defaults() -> None:
    assert Instance() == Instance(InstanceKind.DESKTOP, ChatType.NONE)
    assert Instance.default() == Instance()


def test_instance_value_conversion() -> None:
    assert Instance.from_numeric(0) == Instance(InstanceKind.NONE)
    assert Instance.from_numeric(1) == Instance(InstanceKind.DESKTOP)
    assert Instance.from_numeric(2) == Instance(InstanceKind.CONSOLE)
    assert Instance.from_numeric(4) == Instance(InstanceKind.WEB)
    # Lossy: no variant for 3, chat type is kept.
    assert Instance.from_numeric(3) == Instance(InstanceKind.DESKTOP)
    assert Instance.from_numeric(3 | (2 << 12)) == Instance(InstanceKind.DESKTOP, ChatType.LOBBY)
    assert Instance.from_numeric(16384) == Instance(InstanceKind.NONE, ChatType.CLAN_CHAT)


def test_instance_to_numeric_packs_chat_type() -> None:
    assert Instance(InstanceKind.WEB).to_numeric() == 4
    assert Instance(InstanceKind.NONE, ChatType.CLAN_CHAT).to_numeric() == 16384
    assert Instance(InstanceKind.WEB, ChatType.LOBBY).to_numeric() == 4 | 8192


def test_instance_from_steam_id() -> None:
    assert SteamId(76561193729995004).instance() == Instance(InstanceKind.NONE)
    assert SteamId(76561198024962300).instance() == Instance(InstanceKind.DESKTOP)
    assert SteamId(76561202319929596).instance() == Instance(InstanceKind.CONSOLE)
    assert SteamId(76561210909864188).instance() == Instance(InstanceKind.WEB)
    assert SteamId(108156759836037195).instance() == Instance(InstanceKind.NONE, ChatType.CLAN_CHAT)


def test_account_type_value_conversion() -> None:
    assert AccountType.from_numeric(0) == AccountType(AccountKind.INVALID)
    assert AccountType.from_numeric(1) == AccountType(AccountKind.INDIVIDUAL)
    assert AccountType.from_numeric(8) == AccountType.chat(ChatType.CLAN_CHAT)
    assert AccountType.from_numeric(100) == AccountType(AccountKind.INVALID)
    assert AccountType.chat(ChatType.LOBBY).to_numeric() == 8
    assert AccountType(AccountKind.ANON_USER).to_numeric() == 10


def test_account_type_chars() -> None:
    for ch in "IUMGAPCgLTca":
        assert AccountType.from_char(ch).to_char() == ch
    assert AccountType.from_char("L") == AccountType.chat(ChatType.LOBBY)
    assert AccountType.from_char("x") == AccountType(AccountKind.INVALID)
    assert AccountType.from_char("UU") == AccountType(AccountKind.INVALID)


def test_account_type_shared_chars() -> None:
    assert AccountType(AccountKind.CONSOLE_USER).to_char() == "I"
    assert AccountType(AccountKind.INVALID).to_char() == "I"
    assert AccountType.chat(ChatType.NONE).to_char() == "c"
    assert AccountType.chat(ChatType.CLAN_CHAT).to_char() == "c"


def test_account_type_from_steam_id_reads_chat_type() -> None:
    assert SteamId(108121575428980736).account_type() == AccountType.chat(ChatType.LOBBY)
    assert SteamId(108103983242936320).account_type() == AccountType.chat(ChatType.MATCHMAKING_LOBBY)
    assert SteamId(103582791464489035).account_type() == AccountType(AccountKind.CLAN)


def test_account_type_only_chat_has_payload() -> None:
    with pytest.raises(ValueError):
        AccountType(AccountKind.CLAN, ChatType.LOBBY)


def test_account_type_labels() -> None:
    assert str(AccountType.chat(ChatType.LOBBY)) == "Chat"
    assert str(AccountType(AccountKind.GAME_SERVER)) == "GameServer"


def test_coerce_rejects_other_types() -> None:
    assert AccountType.coerce("g") == AccountType(AccountKind.CLAN)
    assert AccountType.coerce(7) == AccountType(AccountKind.CLAN)
    assert Universe.coerce(2) == Universe.BETA
    assert Instance.coerce(4) == Instance(InstanceKind.WEB)
    with pytest.raises(TypeError):
        AccountType.coerce(1.5)
    with pytest.raises(TypeError):
        Universe.coerce("1")
    with pytest.raises(TypeError):
        Instance.coerce(None)
