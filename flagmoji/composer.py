"""flagmoji.composer

Validate an identifier for a flag kind, then build the emoji string.

Country flags are two Regional Indicator Symbols, one per letter.
All other kinds concatenate the scalars stored in the registry.
Unknown, malformed or missing input gives None, never an exception.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from .errors import UnknownKindError
from .logging_utils import warn_ratelimited
from .registry import (
    CulturalTerm,
    FlagKind,
    ScalarSequence,
    get_country_source,
    is_scalar,
    list_identifiers,
    lookup_scalars,
)

logger = logging.getLogger("flagmoji.composer")

# 'A' (65) + REGIONAL_INDICATOR_OFFSET == U+1F1E6 REGIONAL INDICATOR SYMBOL LETTER A
REGIONAL_INDICATOR_OFFSET = 127397
REGIONAL_INDICATOR_FIRST = 127462
REGIONAL_INDICATOR_LAST = 127487

# Fixed order used by flag() and resolve().
PRIORITY = (FlagKind.COUNTRY, FlagKind.SUBDIVISION, FlagKind.INTERNATIONAL, FlagKind.CULTURAL)

TermLike = Union[CulturalTerm, str]


def parse_kind(name: Union[str, FlagKind]) -> FlagKind:
    """Accept a FlagKind or its name ("country", "Subdivision", ...)."""
    if isinstance(name, FlagKind):
        return name
    try:
        return FlagKind(str(name).strip().lower())
    except ValueError:
        raise UnknownKindError(str(name)) from None


# ---------------- Validation ----------------


def _is_two_letter_code(code: str) -> bool:
    return len(code) == 2 and all("A" <= ch <= "Z" for ch in code)


def validate_country(code: Optional[str]) -> bool:
    if not isinstance(code, str):
        return False
    # Checked before upper(): "ß" -> "SS", "ı" -> "I", "ſ" -> "S".
    if len(code) != 2 or not code.isascii():
        return False
    upper = code.upper()
    return _is_two_letter_code(upper) and get_country_source().contains(upper)


def validate_subdivision(code: Optional[str]) -> bool:
    if not isinstance(code, str):
        return False
    return code.upper() in list_identifiers(FlagKind.SUBDIVISION)


def validate_international(code: Optional[str]) -> bool:
    if not isinstance(code, str):
        return False
    return code.upper() in list_identifiers(FlagKind.INTERNATIONAL)


def validate_cultural(term: Optional[TermLike]) -> bool:
    """Exact token match; "Pride" is not "pride"."""
    return _term_token(term) is not None


def _term_token(term: Optional[TermLike]) -> Optional[str]:
    if isinstance(term, CulturalTerm):
        return term.value
    if isinstance(term, str) and term in list_identifiers(FlagKind.CULTURAL):
        return term
    return None


# ---------------- Composition ----------------


def _country_string(code: str) -> Optional[str]:
    chars = []
    for ch in code:
        value = REGIONAL_INDICATOR_OFFSET + ord(ch)
        if not is_scalar(value):
            warn_ratelimited(
                logger,
                key=f"country-scalar:{code}",
                message=f"Country code {code!r}: {value} is not a Unicode scalar; skipped",
            )
            continue
        chars.append(chr(value))
    return "".join(chars) or None


def _table_string(kind: FlagKind, key: str) -> Optional[str]:
    scalars: Optional[ScalarSequence] = lookup_scalars(kind, key)
    if not scalars:
        logger.debug("No %s scalars stored for %r", kind.value, key)
        return None
    if not all(is_scalar(v) for v in scalars):
        warn_ratelimited(
            logger,
            key=f"table-scalar:{kind.value}:{key}",
            message=f"{kind.value} entry {key!r} holds an invalid scalar: {list(scalars)}",
        )
        return None
    return "".join(chr(v) for v in scalars)


def compose(kind: Union[str, FlagKind], query) -> Optional[str]:
    """Validate ``query`` for ``kind`` and return its emoji flag, or None."""
    kind = parse_kind(kind)
    if query is None:
        return None

    if kind is FlagKind.COUNTRY:
        if not validate_country(query):
            return None
        return _country_string(query.upper())

    if kind is FlagKind.CULTURAL:
        token = _term_token(query)
        if token is None:
            return None
        return _table_string(kind, token)

    if kind is FlagKind.SUBDIVISION:
        valid = validate_subdivision(query)
    else:
        valid = validate_international(query)
    if not valid:
        return None
    return _table_string(kind, query.upper())


def country(code: Optional[str]) -> Optional[str]:
    """Flag for an ISO 3166-1 alpha-2 code, any case: ``country("do")`` -> 🇩🇴."""
    return compose(FlagKind.COUNTRY, code)


def subdivision(code: Optional[str]) -> Optional[str]:
    """Flag for a supported ISO 3166-2 code such as "GB-WLS"."""
    return compose(FlagKind.SUBDIVISION, code)


def international(code: Optional[str]) -> Optional[str]:
    """Flag for an exceptional reservation ("EU", "UN")."""
    return compose(FlagKind.INTERNATIONAL, code)


def cultural(term: Optional[TermLike]) -> Optional[str]:
    """Flag for a CulturalTerm, or its exact lowercase token."""
    return compose(FlagKind.CULTURAL, term)


def resolve(identifier: Optional[str]) -> Optional[Tuple[FlagKind, str]]:
    """Try each kind in PRIORITY order; return the first (kind, flag) found."""
    if identifier is None:
        return None
    for kind in PRIORITY:
        result = compose(kind, identifier)
        if result is not None:
            return kind, result
    return None


def flag(identifier: Optional[str]) -> Optional[str]:
    """Flag for any identifier: country, then subdivision, international, cultural."""
    found = resolve(identifier)
    return found[1] if found else None


# ---------------- Listing ----------------


def list_codes(kind: Union[str, FlagKind]) -> List[str]:
    return list_identifiers(parse_kind(kind))


def list_country_codes() -> List[str]:
    return list_identifiers(FlagKind.COUNTRY)


def list_subdivision_codes() -> List[str]:
    return list_identifiers(FlagKind.SUBDIVISION)


def list_international_codes() -> List[str]:
    return list_identifiers(FlagKind.INTERNATIONAL)


def list_cultural_terms() -> List[str]:
    return list_identifiers(FlagKind.CULTURAL)


def scalars_of(text: Optional[str]) -> List[int]:
    """Code points of a composed flag, in order."""
    return [ord(ch) for ch in text or ""]
