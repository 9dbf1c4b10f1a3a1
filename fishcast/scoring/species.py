"""Species thermal-band classification and curated species lists."""

import re

from fishcast.models.common import ThermalBand, is_river_like

# Evaluated in order; the first match wins and anything unmatched is warm water.
BAND_RULES: list[tuple[re.Pattern[str], ThermalBand]] = [
    (
        re.compile(r"trout|salmon|grayling|whitefish|steelhead|kokanee", re.IGNORECASE),
        ThermalBand.COLD,
    ),
    (
        re.compile(r"walleye|sauger|pike|musk(y|ie|ellunge)|pickerel", re.IGNORECASE),
        ThermalBand.COOL,
    ),
]
DEFAULT_BAND = ThermalBand.WARM

ALL_GAME_FISH: list[str] = [
    "Largemouth Bass",
    "Smallmouth Bass",
    "Walleye",
    "Northern Pike",
    "Muskellunge",
    "Rainbow Trout",
    "Brown Trout",
    "Brook Trout",
    "Channel Catfish",
    "Blue Catfish",
    "Flathead Catfish",
    "Crappie",
    "Bluegill",
    "Yellow Perch",
    "Striped Bass",
    "White Bass",
    "Sauger",
    "Carp",
    "Hybrid Striper",
    "Lake Trout",
]

SPECIES_BY_TYPE: dict[str, list[str]] = {
    "Lake": [
        "Largemouth Bass", "Crappie", "Bluegill", "Walleye", "Northern Pike",
        "Yellow Perch", "Muskellunge", "Channel Catfish", "Hybrid Striper", "Lake Trout",
    ],
    "River": [
        "Smallmouth Bass", "Walleye", "Sauger", "Channel Catfish", "Flathead Catfish",
        "Carp", "Striped Bass", "White Bass", "Brown Trout", "Rainbow Trout",
    ],
    "Stream": [
        "Brook Trout", "Brown Trout", "Rainbow Trout", "Smallmouth Bass", "Carp",
        "Bluegill", "Crappie", "Yellow Perch", "Channel Catfish", "Walleye",
    ],
    "Reservoir": [
        "Largemouth Bass", "Hybrid Striper", "White Bass", "Crappie", "Bluegill",
        "Walleye", "Channel Catfish", "Sauger", "Northern Pike", "Muskellunge",
    ],
}

WARM_WATER_SET = frozenset({
    "Largemouth Bass", "Smallmouth Bass", "Striped Bass", "White Bass", "Walleye",
    "Crappie", "Bluegill", "Yellow Perch", "Channel Catfish", "Blue Catfish",
    "Flathead Catfish", "Carp", "Hybrid Striper", "Northern Pike", "Muskellunge",
})

COLD_WATER_SET = frozenset({
    "Rainbow Trout", "Brown Trout", "Brook Trout", "Lake Trout", "Walleye",
    "Yellow Perch", "Northern Pike", "Muskellunge", "Smallmouth Bass",
})

MAX_SUGGESTIONS = 20


def classify(species_name: str | None) -> ThermalBand:
    """Map a free-text species name to its thermal preference band.

    Never fails: empty, unknown or nonsense names fall through to warm water.
    """
    name = species_name or ""
    for pattern, band in BAND_RULES:
        if pattern.search(name):
            return band
    return DEFAULT_BAND


def normalize_species_name(name: str | None) -> str:
    return " ".join((name or "").split()).lower()


_KNOWN = frozenset(normalize_species_name(s) for s in ALL_GAME_FISH)


def is_known_species(name: str | None) -> bool:
    return normalize_species_name(name) in _KNOWN


def top20_for_type(water_type: str | None) -> list[str]:
    """Species common to the water type first, then the rest of the game fish."""
    base = SPECIES_BY_TYPE.get(water_type or "", [])
    extras = [s for s in ALL_GAME_FISH if s not in base]
    return (base + extras)[:MAX_SUGGESTIONS]


def is_cold_water(water_type: str | None, water_temp_f: float | None) -> bool | None:
    """Moving water counts as cold below 60F, still water below 55F.

    Returns None when the temperature is unknown.
    """
    if water_temp_f is None:
        return None
    if is_river_like(water_type):
        return water_temp_f < 60
    return water_temp_f < 55


def suggest_species(water_type: str | None, water_temp_f: float | None) -> list[str]:
    """Order the species list so fish suited to the current water temperature lead."""
    base = top20_for_type(water_type or "Water")
    cold = is_cold_water(water_type or "Water", water_temp_f)
    if cold is None:
        return base
    allow = COLD_WATER_SET if cold else WARM_WATER_SET
    primary = [s for s in base if s in allow]
    remainder = [s for s in base if s not in allow]
    return (primary + remainder)[:MAX_SUGGESTIONS]
