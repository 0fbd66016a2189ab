# ==========================================================
# flagmoji – Discord Bot (app.py)
#
# Slash commands:
#   - /flag      any identifier (country, subdivision, international, cultural)
#   - /cultural  pick a cultural flag from a fixed list
#   - /flags     list every identifier of one kind
# ==========================================================

import logging
import os

import discord
from discord import app_commands
from discord.ext import commands

from ..composer import compose, list_codes, resolve
from ..logging_utils import ServerLoggerAdapter, new_error_id
from ..registry import CulturalTerm, FlagKind
from ..settings import SETTINGS
from ..utils.embeds import create_flag_embed, create_flagmoji_embed

logger = logging.getLogger("bot")

# ---------------- Configuration ----------------

# Discord caps embed descriptions at 4096 characters.
MAX_DESCRIPTION = 4000

intents = discord.Intents.default()

client = commands.Bot(command_prefix="!", intents=intents)


def _guild_logger(interaction: discord.Interaction) -> ServerLoggerAdapter:
    guild = interaction.guild
    return ServerLoggerAdapter.for_guild(
        "bot",
        guild.id if guild else None,
        guild.name if guild else None,
    )


# ==========================================================
# Reply builders (no Discord I/O; shared by the commands)
# ==========================================================


def build_flag_reply(identifier: str) -> tuple[discord.Embed, bool]:
    """Return (embed, found) for a free-form identifier."""
    query = (identifier or "").strip()
    found = resolve(query)
    if found is None:
        embed = create_flagmoji_embed(
            title="No flag found",
            description=(
                f"`{query or ' '}` is not a country, subdivision or international code, "
                "nor a cultural flag. Try `/flags` to see what is supported."
            ),
            color=discord.Color.red(),
            bot=client,
        )
        return embed, False

    kind, emoji = found
    shown = query if kind is FlagKind.CULTURAL else query.upper()
    return create_flag_embed(shown, kind, emoji, bot=client), True


def build_list_reply(kind: FlagKind) -> discord.Embed:
    """Embed listing every identifier of ``kind`` next to its flag."""
    entries = []
    for code in list_codes(kind):
        emoji = compose(kind, code)
        entries.append(f"{emoji} `{code}`" if emoji else f"`{code}`")

    description = "  ".join(entries)
    if len(description) > MAX_DESCRIPTION:
        description = description[: MAX_DESCRIPTION - 1].rsplit("  ", 1)[0] + " …"

    return create_flagmoji_embed(
        title=f"{kind.value.title()} flags ({len(entries)})",
        description=description,
        bot=client,
    )


# ==========================================================
# Slash commands
# ==========================================================


@client.tree.command(name="flag", description="Show the emoji flag for a code or cultural term.")
@app_commands.describe(identifier="e.g. US, gb-sct, EU, pirate")
async def flag_command(interaction: discord.Interaction, identifier: str):
    log = _guild_logger(interaction)
    embed, found = build_flag_reply(identifier)
    log.info("/flag %r -> %s", identifier, "found" if found else "none")
    await interaction.response.send_message(embed=embed, ephemeral=not found)


@client.tree.command(name="cultural", description="Show a cultural flag (pride, pirate, racing, ...).")
@app_commands.describe(term="Which flag")
@app_commands.choices(term=[app_commands.Choice(name=t.value, value=t.value) for t in CulturalTerm])
async def cultural_command(interaction: discord.Interaction, term: app_commands.Choice[str]):
    embed, _ = build_flag_reply(term.value)
    await interaction.response.send_message(embed=embed)


@client.tree.command(name="flags", description="List the supported identifiers of one kind.")
@app_commands.describe(kind="Flag kind")
@app_commands.choices(kind=[app_commands.Choice(name=k.value, value=k.value) for k in FlagKind])
async def flags_command(interaction: discord.Interaction, kind: app_commands.Choice[str]):
    embed = build_list_reply(FlagKind(kind.value))
    await interaction.response.send_message(embed=embed, ephemeral=True)


@client.tree.error
async def on_app_command_error(interaction: discord.Interaction, error: app_commands.AppCommandError):
    error_id = new_error_id()
    _guild_logger(interaction).error(
        "Command failed (error_id=%s, command=%s)",
        error_id,
        interaction.command.name if interaction.command else "?",
        exc_info=error,
    )
    message = f"Something went wrong (error id `{error_id}`)."
    if interaction.response.is_done():
        await interaction.followup.send(message, ephemeral=True)
    else:
        await interaction.response.send_message(message, ephemeral=True)


# ==========================================================
# Events / runner
# ==========================================================


@client.event
async def on_ready():
    logger.info("Discord ready (user=%s)", client.user)

    force_sync = SETTINGS.get("force_command_sync", False)
    if not force_sync and getattr(client, "_commands_synced", False):
        logger.info("on_ready fired again; commands already synced.")
        return

    try:
        for guild in client.guilds:
            client.tree.copy_global_to(guild=guild)
            synced = await client.tree.sync(guild=guild)
            logger.info("Commands synced (guild=%s/%s, count=%s)", guild.name, guild.id, len(synced))
        client._commands_synced = True
    except discord.HTTPException:
        logger.exception("Command sync failed")


def create_bot() -> commands.Bot:
    return client


def get_token() -> str:
    token = os.getenv("DISCORD_TOKEN")
    if not token:
        raise RuntimeError("DISCORD_TOKEN environment variable is not set")
    return token


if __name__ == "__main__":
    client.run(get_token())
