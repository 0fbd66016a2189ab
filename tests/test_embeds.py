from __future__ import annotations

import discord

import flagmoji
from flagmoji import country, cultural, settings
from flagmoji.registry import FlagKind
from flagmoji.utils import embeds
from flagmoji.utils.embeds import create_flag_embed, create_flagmoji_embed, format_scalars


def test_default_embed_colour_and_footer(monkeypatch):
    monkeypatch.setitem(settings.SETTINGS, "bot_name", "flagmoji")
    embed = create_flagmoji_embed("Title", "Body")
    assert embed.colour == embeds.FLAGMOJI_COLOR
    assert embed.footer.text == f"flagmoji v{flagmoji.__version__} - flags from codes"
    assert embed.footer.icon_url is None


def test_footer_name_from_settings(monkeypatch):
    monkeypatch.setitem(settings.SETTINGS, "bot_name", "Flagbot")
    embed = create_flagmoji_embed("t")
    assert embed.footer.text.startswith(f"Flagbot v{flagmoji.__version__} ")


def test_footer_has_no_runtime_settings_cache():
    assert not hasattr(embeds, "set_bot_settings")
    assert not hasattr(embeds, "BOT_SETTINGS")


def test_explicit_colour():
    embed = create_flagmoji_embed("t", color=discord.Color.red())
    assert embed.colour == discord.Color.red()


def test_format_scalars():
    assert format_scalars(country("US")) == "U+1F1FA U+1F1F8"
    assert format_scalars("") == ""


def test_country_flag_embed_has_thumbnail():
    emoji = country("FR")
    embed = create_flag_embed("FR", FlagKind.COUNTRY, emoji)
    assert embed.title == f"{emoji}  FR"
    assert embed.fields[0].value == "country"
    assert embed.fields[1].value == "`U+1F1EB U+1F1F7`"
    assert embed.thumbnail.url == "https://flagcdn.com/h20/fr.png"


def test_cultural_flag_embed_has_no_thumbnail():
    embed = create_flag_embed("racing", FlagKind.CULTURAL, cultural("racing"))
    assert embed.thumbnail.url is None
