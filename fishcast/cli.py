"""CLI entry point for the fishing conditions advisor."""

import argparse
import logging
from datetime import date

import httpx

from fishcast.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from fishcast.models.conditions import ConditionSet
from fishcast.models.site import GeoPoint
from fishcast.pipeline.advisory_pipeline import AdvisoryPipeline, AdvisoryRequest
from fishcast.reporting.formatters import (
    format_advisory_json,
    format_advisory_text,
    format_gear_text,
    format_sites_text,
)
from fishcast.scoring.gear import recommend_gear
from fishcast.scoring.species import classify
from fishcast.scoring.success import score_breakdown, success_label
from fishcast.storage import cache_repo
from fishcast.storage.database import open_database

DEFAULT_CONFIG = "ops/configs/default.yaml"
DEFAULT_DB = "data/cache.db"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fishcast",
        description="Fishing conditions advisor",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=DEFAULT_DB, help="SQLite cache path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # advise
    advise_p = sub.add_parser("advise", help="Full advisory for a location and date")
    advise_p.add_argument("--species", help="Target species (default from config)")
    _add_location_args(advise_p)
    advise_p.add_argument("--date", default=None, help="YYYY-MM-DD (default today)")
    advise_p.add_argument("--site", default=None, help="Site id from 'sites'")
    advise_p.add_argument("--hour", type=int, default=None, help="Local hour 0-23")
    advise_p.add_argument("--json", action="store_true", help="JSON output")

    # sites
    sites_p = sub.add_parser("sites", help="List nearby water sites")
    _add_location_args(sites_p)

    # score (offline)
    score_p = sub.add_parser("score", help="Score conditions without any network calls")
    score_p.add_argument("--species", required=True)
    score_p.add_argument("--water-type", default="Water")
    score_p.add_argument("--water-temp", type=float, default=None, help="Water temp F")
    score_p.add_argument("--wind", type=float, default=None, help="Wind mph")
    score_p.add_argument("--cloud", type=float, default=None, help="Cloud cover %%")
    score_p.add_argument("--pressure", type=float, default=None, help="Barometer inHg")
    score_p.add_argument("--turbidity", type=float, default=None, help="Turbidity FNU")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")
    set_p.add_argument("--save", action="store_true", help="Write back to the config file")

    # cache clear / purge
    cache_p = sub.add_parser("cache", help="Cache operations")
    cache_sub = cache_p.add_subparsers(dest="cache_command")
    cache_sub.add_parser("clear", help="Delete all cached responses")
    cache_sub.add_parser("purge", help="Delete expired cached responses")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "score":
        return _cmd_score(args)
    if args.command == "cache":
        return _cmd_cache(args)

    config = load_config(args.config)

    if args.command == "advise":
        return _cmd_advise(config, args)
    elif args.command == "sites":
        return _cmd_sites(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _add_location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, default=None)
    p.add_argument("--lon", type=float, default=None)
    p.add_argument("--place", default=None, help="City/state or landmark to geocode")
    p.add_argument("--radius", type=float, default=None, help="Search radius in miles")


def _center_from_args(args) -> GeoPoint | None:
    if args.lat is not None and args.lon is not None:
        return GeoPoint(args.lat, args.lon)
    return None


def _cmd_advise(config, args) -> int:
    center = _center_from_args(args)
    if center is None and not args.place:
        print("Error: pass --lat/--lon or --place")
        return 1
    request = AdvisoryRequest(
        species=args.species or config.defaults.species,
        date=args.date or date.today().isoformat(),
        center=center,
        place=args.place,
        site_id=args.site,
        radius_miles=args.radius,
        hour=args.hour,
    )
    pipeline = AdvisoryPipeline(config, args.db)
    advisory = pipeline.run(request)
    if args.json:
        print(format_advisory_json(advisory))
    else:
        print(format_advisory_text(advisory))
    return 0 if advisory.score is not None else 1


def _cmd_sites(config, args) -> int:
    pipeline = AdvisoryPipeline(config, args.db)
    center = _center_from_args(args)
    if center is None and args.place:
        try:
            center = pipeline.clients.nominatim.geocode(args.place)
        except httpx.HTTPError as e:
            print(f"Error: geocoding failed: {e}")
            return 1
    if center is None:
        print("Error: location not found; pass --lat/--lon or --place")
        return 1
    sites = pipeline.find_sites(center, args.radius)
    print(format_sites_text(sites))
    return 0


def _cmd_score(args) -> int:
    conditions = ConditionSet(
        water_temp_f=args.water_temp,
        wind_mph=args.wind,
        cloud_pct=args.cloud,
        barometer_inhg=args.pressure,
        turbidity_fnu=args.turbidity,
    )
    b = score_breakdown(args.species, args.water_type, conditions)
    if b is None:
        print("Error: nothing to score")
        return 1
    print(
        f"{args.species} ({classify(args.species)}) on {args.water_type}: "
        f"{b.score}% ({success_label(b.score)})"
    )
    print(
        f"  temp {b.temperature:.1f} + wind {b.wind:.1f} + cloud {b.cloud:.1f} + "
        f"pressure {b.pressure:.1f} + turbidity {b.turbidity:.1f} = {b.total:.1f}"
    )
    for line in format_gear_text(recommend_gear(args.species, args.water_type, conditions)):
        print(f"  {line}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except Exception as e:
            print(f"Error: {e}")
            return 1
        if args.save:
            save_config(new_config, args.config)
        print(f"Set {key} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_cache(args) -> int:
    conn = open_database(args.db)
    try:
        if args.cache_command == "clear":
            removed = cache_repo.clear_cache(conn)
            print(f"Cache cleared ({removed} entries)")
            return 0
        elif args.cache_command == "purge":
            removed = cache_repo.purge_expired(conn)
            print(f"Purged {removed} expired entries")
            return 0
        print("Use: cache clear | cache purge")
        return 1
    finally:
        conn.close()
