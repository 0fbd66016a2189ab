# ==========================================================
# flagmoji – Settings
#
# All configuration comes from environment variables:
#   - FLAGMOJI_LOG_LEVEL            logging level name (INFO)
#   - FLAGMOJI_EXTRA_COUNTRY_CODES  comma-separated codes added to pycountry's list
#   - FLAGMOJI_FLAG_CDN_SIZE        FlagCDN size segment (h20)
#   - FLAGMOJI_BOT_NAME             name shown in bot embed footers (flagmoji)
#   - FLAGMOJI_FORCE_COMMAND_SYNC   "1" to resync slash commands on every ready
#   - DISCORD_TOKEN                 bot token (read by bot.app.get_token)
# ==========================================================

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional


def _split_codes(raw: str) -> tuple:
    return tuple(part.strip().upper() for part in raw.split(",") if part.strip())


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Build the settings dict from ``environ`` (defaults to os.environ)."""
    env = os.environ if environ is None else environ
    return {
        "log_level": env.get("FLAGMOJI_LOG_LEVEL", "INFO").upper(),
        "extra_country_codes": _split_codes(env.get("FLAGMOJI_EXTRA_COUNTRY_CODES", "")),
        "flag_cdn_size": env.get("FLAGMOJI_FLAG_CDN_SIZE", "h20"),
        "bot_name": env.get("FLAGMOJI_BOT_NAME", "flagmoji"),
        "force_command_sync": env.get("FLAGMOJI_FORCE_COMMAND_SYNC", "0") == "1",
    }


SETTINGS: Dict[str, Any] = load_settings()
