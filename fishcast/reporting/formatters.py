"""Output formatters for advisories."""

import json
from dataclasses import asdict
from datetime import datetime

from fishcast.models.recommendation import Advisory, GearRecommendation, TimeWindow
from fishcast.models.site import WaterSite

GOOGLE_MAPS_URL = "https://www.google.com/maps/search/?api=1&query={lat},{lon}"
APPLE_MAPS_URL = "maps://?q={lat},{lon}"


def _fmt(value: float | None, unit: str = "", digits: int = 0) -> str:
    if value is None:
        return "?"
    return f"{value:.{digits}f}{unit}"


def maps_links(site: WaterSite | None) -> dict[str, str] | None:
    """Google and Apple Maps links to a site, or None without a site."""
    if site is None:
        return None
    return {
        "google": GOOGLE_MAPS_URL.format(lat=site.lat, lon=site.lon),
        "apple": APPLE_MAPS_URL.format(lat=site.lat, lon=site.lon),
    }


def format_gear_text(gear: GearRecommendation) -> list[str]:
    return [
        f"Rod & line: {gear.rod_and_line}",
        f"Lures: {', '.join(gear.lures)}",
        f"Flies: {', '.join(gear.flies)}",
        f"Fly setup: {gear.fly_setup}",
        f"Fly presentation: {gear.fly_presentation}",
        f"Where: {', '.join(gear.locations)}",
    ]


def format_windows_text(windows: list[TimeWindow]) -> str:
    if not windows:
        return "Best times: none stand out"
    return "Best times: " + ", ".join(
        f"{w.time.strftime('%H:%M')} ({w.score})" for w in windows
    )


def format_sites_text(sites: list[WaterSite], limit: int = 20) -> str:
    if not sites:
        return "No water sites found"
    lines = [f"{len(sites)} sites (nearest first):"]
    for s in sites[:limit]:
        lines.append(f"  [{s.source}] {s.id}  {s.name} · {s.type}")
    return "\n".join(lines)


def format_advisory_text(a: Advisory) -> str:
    """Plain text advisory for the terminal."""
    site = a.site.name if a.site else "unknown site"
    water_type = a.site.type if a.site else "Water"
    lines = [f"=== {a.species} @ {site} ({water_type}) | {a.date} ==="]
    links = maps_links(a.site)
    if links is not None:
        lines.append(f"Map: {links['google']} | {links['apple']}")

    if a.score is None:
        lines.append("Success: n/a (not enough data)")
    else:
        lines.append(f"Success: {a.score}% ({a.label}) | band: {a.thermal_band}")
    if not a.known_species:
        lines.append("Note: unrecognised species, scored with warm-water defaults")

    c = a.conditions
    if c is not None:
        est = " (estimated)" if c.estimated else ""
        lines.append(
            f"Water {_fmt(c.water_temp_f, 'F')}{est} | Wind {_fmt(c.wind_mph, ' mph')} | "
            f"Cloud {_fmt(c.cloud_pct, '%')} | Pressure {_fmt(c.barometer_inhg, ' inHg', 2)}"
        )
        if c.turbidity_fnu is not None:
            lines.append(f"Turbidity {_fmt(c.turbidity_fnu, ' FNU', 1)}")
    if a.hydro is not None and a.hydro.flow_cfs is not None:
        lines.append(
            f"Flow {_fmt(a.hydro.flow_cfs, ' cfs')} | Stage {_fmt(a.hydro.stage_ft, ' ft', 2)}"
        )

    lines.append(format_windows_text(a.windows))
    if a.gear is not None:
        lines.extend(format_gear_text(a.gear))
    if a.suggested_species:
        lines.append(f"Also try: {', '.join(a.suggested_species[:5])}")
    if a.pois:
        lines.append(f"Nearby: {', '.join(f'{p.name} ({p.type})' for p in a.pois[:5])}")
    if a.errors:
        lines.append(f"Errors: {'; '.join(a.errors)}")
    return "\n".join(lines)


def _json_default(obj):
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Not JSON serialisable: {type(obj).__name__}")


def format_advisory_json(a: Advisory) -> str:
    """JSON advisory for programmatic consumption."""
    data = asdict(a)
    if a.breakdown is not None:
        data["breakdown"]["total"] = a.breakdown.total
    data["maps_links"] = maps_links(a.site)
    return json.dumps(data, indent=2, default=_json_default)
