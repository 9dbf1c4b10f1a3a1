"""Tackle, fly and location recommendations.

Everything is derived from three facts: the species' thermal band, whether
the water is river-like, and whether the water is stained. Stained water
swaps specific catalog entries for a brighter, louder variant in both the
conventional and the fly lists.
"""

import re

from fishcast.models.common import ThermalBand, is_river_like
from fishcast.models.conditions import ConditionSet
from fishcast.models.recommendation import GearRecommendation
from fishcast.scoring.species import classify

STAINED_THRESHOLD_FNU = 15.0

ESOX_PATTERN = re.compile(r"pike|musk(y|ie|ellunge)", re.IGNORECASE)

ESOX_ROD = "Heavy casting 7'6\"+, 30–60 lb braid + wire or 80 lb fluoro leader"
ESOX_FLY_SETUP = "9–10 wt rod, intermediate line, 30 lb wire bite tippet"

ROD_BY_BAND: dict[ThermalBand, str] = {
    ThermalBand.COLD: "Light spinning 6–7 ft, 4–6 lb fluoro (or 4–5 wt fly rod)",
    ThermalBand.COOL: "Medium-light spinning 6'6\"–7', 8–10 lb braid + fluoro leader",
    ThermalBand.WARM: "Medium spin/cast 7 ft, 10–15 lb braid + fluoro",
}

# (natural, bright) pairs; plain strings do not change with water clarity.
LURES_BY_BAND: dict[ThermalBand, list[str | tuple[str, str]]] = {
    ThermalBand.COLD: [
        ("Inline spinner, silver blade", "Inline spinner, gold/chartreuse blade"),
        ("Small spoon, natural trout finish", "Small spoon, fire-tiger"),
        ("Minnow jerkbait, ghost shad", "Minnow jerkbait, orange belly"),
        "Marabou jig 1/16–1/8 oz",
    ],
    ThermalBand.COOL: [
        ("Jig + minnow, natural", "Jig + minnow, chartreuse head"),
        ("Blade bait, silver", "Blade bait, gold with rattle"),
        ("Deep crankbait, perch pattern", "Deep crankbait, fire-tiger rattler"),
        "Live-bait rig",
    ],
    ThermalBand.WARM: [
        ("Texas-rig worm, green pumpkin", "Texas-rig worm, black/blue"),
        ("Spinnerbait, white willow blades", "Spinnerbait, chartreuse Colorado blades"),
        ("Squarebill, shad", "Squarebill, chartreuse rattler"),
        "Topwater walker (low light)",
    ],
}

FLIES_BY_BAND: dict[ThermalBand, list[str | tuple[str, str]]] = {
    ThermalBand.COLD: [
        ("Pheasant Tail nymph #14–18", "Hot-spot Pheasant Tail #14–16"),
        ("Woolly Bugger, olive", "Woolly Bugger, black/chartreuse"),
        ("Elk Hair Caddis #14–16", "Egg pattern, orange"),
        "Zebra Midge #18–20",
    ],
    ThermalBand.COOL: [
        ("Clouser Minnow, grey/white", "Clouser Minnow, chartreuse/white"),
        ("Baitfish streamer, natural", "Baitfish streamer, flash-heavy"),
        "Sculpin pattern",
    ],
    ThermalBand.WARM: [
        ("Popper, frog", "Popper, chartreuse"),
        ("Clouser Minnow, olive/white", "Clouser Minnow, chartreuse/white"),
        ("Crayfish pattern, brown", "Crayfish pattern, rattle, black/red"),
        "Woolly Bugger, black",
    ],
}

FLY_SETUP_BY_BAND: dict[ThermalBand, str] = {
    ThermalBand.COLD: "4–5 wt rod, floating line, 9 ft 4X–5X leader",
    ThermalBand.COOL: "7–8 wt rod, sink-tip line, 3 ft 12 lb fluoro leader",
    ThermalBand.WARM: "6–7 wt rod, floating or intermediate line, 0X–2X leader",
}

FLY_PRESENTATION: dict[tuple[ThermalBand, bool], str] = {
    (ThermalBand.COLD, True): "Dead-drift nymphs under an indicator through seams; swing streamers at dawn and dusk.",
    (ThermalBand.COLD, False): "Slow-strip leeches or hang chironomids along drop-offs; cover cruising lanes at low light.",
    (ThermalBand.COOL, True): "Swing and strip baitfish streamers through eddies and deep runs.",
    (ThermalBand.COOL, False): "Count down streamers on a sink-tip along weed edges and points.",
    (ThermalBand.WARM, True): "Strip streamers and crayfish along current breaks; poppers in slack water at low light.",
    (ThermalBand.WARM, False): "Work poppers over weedlines early and late; slow-strip baitfish on drop-offs midday.",
}

RIVER_LOCATIONS = (
    "Current breaks",
    "Eddy seams",
    "Deep pools",
    "Riffle tails at low light",
)
LAKE_LOCATIONS = (
    "Points and windblown banks",
    "Weedlines",
    "Drop-offs",
    "Shallow flats at low light",
)


def is_stained(conditions: ConditionSet | None) -> bool:
    """Turbidity above 15 FNU; unknown turbidity counts as 0."""
    turbidity = conditions.turbidity_fnu if conditions is not None else None
    if turbidity is None:
        turbidity = 0.0
    return turbidity > STAINED_THRESHOLD_FNU


def _pick(catalog: list[str | tuple[str, str]], stained: bool) -> tuple[str, ...]:
    out = []
    for entry in catalog:
        if isinstance(entry, tuple):
            natural, bright = entry
            out.append(bright if stained else natural)
        else:
            out.append(entry)
    return tuple(out)


def recommend_gear(
    species: str | None,
    water_type: str | None,
    conditions: ConditionSet | None,
) -> GearRecommendation:
    """Build a complete gear recommendation; never returns partial output."""
    band = classify(species)
    river = is_river_like(water_type)
    stained = is_stained(conditions)
    esox = bool(ESOX_PATTERN.search(species or ""))

    return GearRecommendation(
        rod_and_line=ESOX_ROD if esox else ROD_BY_BAND[band],
        lures=_pick(LURES_BY_BAND[band], stained),
        flies=_pick(FLIES_BY_BAND[band], stained),
        fly_setup=ESOX_FLY_SETUP if esox else FLY_SETUP_BY_BAND[band],
        fly_presentation=FLY_PRESENTATION[(band, river)],
        locations=RIVER_LOCATIONS if river else LAKE_LOCATIONS,
    )
