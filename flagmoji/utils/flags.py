"""Flag code → flag image URL helpers.

Notes:
  - Accepts the common synonym UK→GB.
  - Covers country, subdivision and international codes; cultural flags
    have no image and give None, as do unknown/blank codes.
  - Uses FlagCDN. FlagCDN URLs use lowercase codes ("gb-eng", "eu").
"""

from __future__ import annotations

from typing import Optional

from ..composer import validate_country, validate_international, validate_subdivision

_SYNONYMS = {
    "UK": "GB",
}

FLAG_CDN_BASE = "https://flagcdn.com"


def get_flag_url(code: Optional[str], size: Optional[str] = None) -> Optional[str]:
    """Return a FlagCDN PNG URL for a flag code, or None if unknown."""
    if not code:
        return None

    code = code.strip().upper()
    if not code:
        return None

    code = _SYNONYMS.get(code, code)

    if not (validate_country(code) or validate_subdivision(code) or validate_international(code)):
        return None

    if size is None:
        from ..settings import SETTINGS

        size = SETTINGS.get("flag_cdn_size") or "h20"

    return f"{FLAG_CDN_BASE}/{size}/{code.lower()}.png"
