"""flagmoji: emoji flags from country, subdivision and international codes or cultural terms."""

from .composer import (
    compose,
    country,
    cultural,
    flag,
    international,
    list_codes,
    list_country_codes,
    list_cultural_terms,
    list_international_codes,
    list_subdivision_codes,
    resolve,
    subdivision,
    validate_country,
    validate_cultural,
    validate_international,
    validate_subdivision,
)
from .errors import FlagmojiError, RegistryError, UnknownKindError
from .registry import CulturalTerm, FlagKind, InternationalCode, SubdivisionCode

__version__ = "1.0.0"
