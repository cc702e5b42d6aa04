"""Creature metadata client for pokefetch."""

from .client import PokeApiClient, PokeApiError, extract_types, pick_random
from .models import Pokemon, Selection
from .names import NAME_OVERRIDES, artwork_name, strip_form

__all__ = [
    "NAME_OVERRIDES",
    "PokeApiClient",
    "PokeApiError",
    "Pokemon",
    "Selection",
    "artwork_name",
    "extract_types",
    "pick_random",
    "strip_form",
]
