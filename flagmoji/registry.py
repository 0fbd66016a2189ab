"""flagmoji.registry

Static lookup data for every flag kind.

Country flags are computed from the two letters of the code, so the only
country data kept here is the list of valid codes, which comes from a
pluggable ``CountryCodeSource`` (pycountry by default). Every other kind
is a closed set mapped to an explicit sequence of Unicode scalar values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

import pycountry

from .errors import RegistryError

ScalarSequence = Tuple[int, ...]


class FlagKind(Enum):
    COUNTRY = "country"
    SUBDIVISION = "subdivision"
    INTERNATIONAL = "international"
    CULTURAL = "cultural"


class CulturalTerm(str, Enum):
    """Flags that belong to no ISO entity: movements, ideologies, signals."""

    PRIDE = "pride"
    TRANS = "trans"
    PIRATE = "pirate"
    WHITE = "white"
    BLACK = "black"
    CROSSED = "crossed"
    TRIANGULAR = "triangular"
    RACING = "racing"


class SubdivisionCode(str, Enum):
    """ISO 3166-2 codes that have an emoji tag sequence."""

    ENGLAND = "GB-ENG"
    WALES = "GB-WLS"
    SCOTLAND = "GB-SCT"


class InternationalCode(str, Enum):
    """ISO 3166-1 exceptional reservations."""

    EU = "EU"
    UN = "UN"


# Waving black flag, tag letters, cancel tag.
_SUBDIVISION_SCALARS: Dict[str, ScalarSequence] = {
    SubdivisionCode.ENGLAND.value: (127988, 917607, 917602, 917605, 917614, 917607, 917631),
    SubdivisionCode.WALES.value: (127988, 917607, 917602, 917623, 917612, 917619, 917631),
    SubdivisionCode.SCOTLAND.value: (127988, 917607, 917602, 917619, 917603, 917620, 917631),
}

_INTERNATIONAL_SCALARS: Dict[str, ScalarSequence] = {
    InternationalCode.EU.value: (127466, 127482),
    InternationalCode.UN.value: (127482, 127475),
}

_CULTURAL_SCALARS: Dict[str, ScalarSequence] = {
    CulturalTerm.PRIDE.value: (127987, 65039, 8205, 127752),
    CulturalTerm.TRANS.value: (127987, 65039, 8205, 9895, 65039),
    CulturalTerm.PIRATE.value: (127988, 8205, 9760, 65039),
    CulturalTerm.WHITE.value: (127987, 65039),
    CulturalTerm.BLACK.value: (127988,),
    CulturalTerm.CROSSED.value: (127884,),
    CulturalTerm.TRIANGULAR.value: (128681,),
    CulturalTerm.RACING.value: (127937,),
}

_TABLES: Dict[FlagKind, Dict[str, ScalarSequence]] = {
    FlagKind.SUBDIVISION: _SUBDIVISION_SCALARS,
    FlagKind.INTERNATIONAL: _INTERNATIONAL_SCALARS,
    FlagKind.CULTURAL: _CULTURAL_SCALARS,
}

_CLOSED_SETS = {
    FlagKind.SUBDIVISION: SubdivisionCode,
    FlagKind.INTERNATIONAL: InternationalCode,
    FlagKind.CULTURAL: CulturalTerm,
}


# ---------------- Country code sources ----------------


class CountryCodeSource(ABC):
    """Read-only collection of ISO 3166-1 alpha-2 codes (uppercase)."""

    @abstractmethod
    def list_all(self) -> List[str]:
        ...

    def contains(self, code: str) -> bool:
        return code in self.list_all()


class StaticCodeSource(CountryCodeSource):
    """A fixed list of codes, e.g. for tests or trimmed deployments."""

    def __init__(self, codes: Iterable[str]):
        seen = []
        for c in codes:
            c = c.upper()
            if c not in seen:
                seen.append(c)
        self._codes = tuple(seen)
        self._members = frozenset(self._codes)

    def list_all(self) -> List[str]:
        return list(self._codes)

    def contains(self, code: str) -> bool:
        return code in self._members


class PycountryCodeSource(StaticCodeSource):
    """Codes from pycountry's bundled ISO 3166-1 database.

    pycountry ships its own copy of the standard, so the list only changes
    when the package is upgraded. ``extra_codes`` appends user-assigned codes
    (such as "XK") that the standard itself does not list.
    """

    def __init__(self, extra_codes: Iterable[str] = ()):
        codes = [c.alpha_2 for c in pycountry.countries]
        codes.extend(extra_codes)
        super().__init__(codes)


_country_source: Optional[CountryCodeSource] = None


def get_country_source() -> CountryCodeSource:
    """Return the active country source, building the default on first use."""
    global _country_source
    if _country_source is None:
        from .settings import SETTINGS

        _country_source = PycountryCodeSource(SETTINGS.get("extra_country_codes", ()))
    return _country_source


def set_country_source(source: Optional[CountryCodeSource]) -> None:
    """Install a country source. ``None`` restores the pycountry default."""
    global _country_source
    _country_source = source


# ---------------- Lookups ----------------


def list_identifiers(kind: FlagKind) -> List[str]:
    """All identifiers of a kind, in declaration order."""
    if kind is FlagKind.COUNTRY:
        return get_country_source().list_all()
    return [member.value for member in _CLOSED_SETS[kind]]


def lookup_scalars(kind: FlagKind, identifier: str) -> Optional[ScalarSequence]:
    """Stored scalars for ``identifier``, or None when it is not in the table.

    The identifier must already be in canonical form (uppercase codes,
    lowercase cultural tokens). Country flags are never stored.
    """
    table = _TABLES.get(kind)
    if table is None:
        return None
    return table.get(identifier)


def cultural_scalars() -> Dict[CulturalTerm, ScalarSequence]:
    return {CulturalTerm(term): scalars for term, scalars in _CULTURAL_SCALARS.items()}


def is_scalar(value: int) -> bool:
    """True if ``value`` is a Unicode scalar value (a code point, not a surrogate)."""
    return 0 <= value <= 0x10FFFF and not 0xD800 <= value <= 0xDFFF


def check_tables() -> None:
    """Raise RegistryError unless every closed-set member resolves to valid scalars."""
    for kind, members in _CLOSED_SETS.items():
        for member in members:
            scalars = lookup_scalars(kind, member.value)
            if not scalars:
                raise RegistryError(f"{kind.value} {member.value!r} has no scalar sequence")
            bad = [v for v in scalars if not is_scalar(v)]
            if bad:
                raise RegistryError(f"{kind.value} {member.value!r} has invalid scalars {bad}")
        extra = set(_TABLES[kind]) - {m.value for m in members}
        if extra:
            raise RegistryError(f"{kind.value} table has entries outside the closed set: {sorted(extra)}")
