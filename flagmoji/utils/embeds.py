"""Embed factory and shared footer logic.

Every embed the bot sends goes through create_flagmoji_embed() so that
colour, footer text and thumbnail rules stay the same across commands.
"""

from __future__ import annotations

from typing import Optional

import discord

from .. import __version__
from ..composer import scalars_of
from ..registry import FlagKind
from ..settings import SETTINGS
from .flags import get_flag_url

# Light flag-pole grey.
FLAGMOJI_COLOR = discord.Color.from_rgb(96, 125, 139)


def footer_label() -> str:
    """'<bot name> v<version> - flags from codes'."""
    return f"{SETTINGS.get('bot_name') or 'flagmoji'} v{__version__} - flags from codes"


def format_scalars(text: str) -> str:
    """'U+1F1FA U+1F1F8' for 🇺🇸."""
    return " ".join(f"U+{value:04X}" for value in scalars_of(text))


def apply_flagmoji_footer(
    embed: discord.Embed,
    *,
    bot: Optional[discord.Client],
) -> None:
    """Apply the standard footer with the bot avatar as icon, if any."""
    footer_text = footer_label()

    icon_url = None
    if bot and getattr(bot, "user", None):
        icon_url = bot.user.display_avatar.url

    if icon_url:
        embed.set_footer(text=footer_text, icon_url=icon_url)
    else:
        embed.set_footer(text=footer_text)


def create_flagmoji_embed(
    title: str,
    description: str = "",
    *,
    color: Optional[discord.Color] = None,
    bot: Optional[discord.Client] = None,
) -> discord.Embed:
    """Create an embed with flagmoji defaults and footer applied."""
    if color is None:
        color = FLAGMOJI_COLOR

    embed = discord.Embed(title=title, description=description, color=color)
    apply_flagmoji_footer(embed, bot=bot)
    return embed


def create_flag_embed(
    identifier: str,
    kind: FlagKind,
    emoji: str,
    *,
    bot: Optional[discord.Client] = None,
) -> discord.Embed:
    """Embed for one resolved flag: big emoji, kind, code points, image thumbnail."""
    embed = create_flagmoji_embed(
        title=f"{emoji}  {identifier}",
        description=emoji,
        bot=bot,
    )
    embed.add_field(name="Kind", value=kind.value, inline=True)
    embed.add_field(name="Scalars", value=f"`{format_scalars(emoji)}`", inline=False)

    if kind is not FlagKind.CULTURAL:
        image_url = get_flag_url(identifier)
        if image_url:
            embed.set_thumbnail(url=image_url)
    return embed
