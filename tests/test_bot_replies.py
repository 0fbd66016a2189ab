from __future__ import annotations

import pytest

from flagmoji import international, subdivision
from flagmoji.bot import app
from flagmoji.registry import FlagKind


def test_flag_reply_found():
    embed, found = app.build_flag_reply("  gb-wls ")
    assert found
    assert embed.title == f"{subdivision('GB-WLS')}  GB-WLS"
    assert embed.fields[0].value == "subdivision"


def test_cultural_reply_keeps_token_case():
    embed, found = app.build_flag_reply("pride")
    assert found
    assert embed.title.endswith("  pride")


def test_flag_reply_not_found():
    embed, found = app.build_flag_reply("atlantis")
    assert not found
    assert embed.title == "No flag found"
    assert "atlantis" in embed.description


def test_list_reply_for_international():
    embed = app.build_list_reply(FlagKind.INTERNATIONAL)
    assert embed.title == "International flags (2)"
    assert f"{international('EU')} `EU`" in embed.description


def test_list_reply_for_countries_fits_embed():
    embed = app.build_list_reply(FlagKind.COUNTRY)
    assert len(embed.description) <= app.MAX_DESCRIPTION


def test_slash_commands_registered():
    names = {c.name for c in app.client.tree.get_commands()}
    assert names == {"flag", "cultural", "flags"}


def test_get_token(monkeypatch):
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)
    with pytest.raises(RuntimeError):
        app.get_token()
    monkeypatch.setenv("DISCORD_TOKEN", "abc")
    assert app.get_token() == "abc"
