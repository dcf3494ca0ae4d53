"""Command-line interface for weather advisories."""

import argparse
import json
import logging
import sys

from weather_advisories import __version__
from weather_advisories.config import get_settings
from weather_advisories.errors import AdvisoryError
from weather_advisories.models.card import CardCategory, CardType, ConditionCard
from weather_advisories.models.location import Coordinates
from weather_advisories.models.preferences import CardTypePreferences
from weather_advisories.models.weather import WeatherSnapshot
from weather_advisories.providers.fallback import FallbackSnapshotProvider
from weather_advisories.providers.file import FileSnapshotProvider
from weather_advisories.providers.mock import MockSnapshotProvider
from weather_advisories.rules.engine import ConditionRuleEngine
from weather_advisories.validation import SnapshotValidator

logger = logging.getLogger(__name__)

CATEGORY_CHOICES = [category.value for category in CardCategory]


def _coordinates(value: str) -> Coordinates:
    try:
        return Coordinates.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"invalid coordinates '{value}', expected LAT,LON"
        ) from e


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-advisories",
        description="Weather Advisories - Turn current weather into advisory cards",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging from the rule engine",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Shared card output options
    output_parser = argparse.ArgumentParser(add_help=False)
    output_parser.add_argument(
        "--disable",
        action="append",
        default=[],
        choices=CATEGORY_CHOICES,
        metavar="CATEGORY",
        help="Hide a card category (repeatable)",
    )
    output_parser.add_argument(
        "--json",
        action="store_true",
        help="Print cards as JSON",
    )

    # Evaluate command
    evaluate_parser = subparsers.add_parser(
        "evaluate",
        parents=[output_parser],
        help="Evaluate a snapshot stored in a JSON file",
    )
    evaluate_parser.add_argument(
        "file",
        help="JSON file with a snapshot or an OpenWeatherMap response",
    )
    evaluate_parser.add_argument(
        "--fallback-to-mock",
        action="store_true",
        help="Use the mock snapshot if the file cannot be loaded",
    )

    # Mock command
    mock_parser = subparsers.add_parser(
        "mock",
        parents=[output_parser],
        help="Evaluate the mock fallback snapshot",
    )
    mock_parser.add_argument(
        "--coordinates",
        type=_coordinates,
        metavar="LAT,LON",
        help="Location recorded on the mock snapshot (default: Seoul)",
    )

    # Categories command
    subparsers.add_parser("categories", help="List card categories")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    return parser


def _preferences(disabled: list[str]) -> CardTypePreferences:
    preferences = get_settings().default_preferences()
    for key in disabled:
        preferences = preferences.with_category(key, False)
    return preferences


def _print_cards(snapshot: WeatherSnapshot, cards: list[ConditionCard], as_json: bool) -> None:
    if as_json:
        print(json.dumps([card.model_dump(mode="json") for card in cards], indent=2, ensure_ascii=False))
        return

    place = snapshot.city_name
    if snapshot.coordinates is not None:
        place += f" ({snapshot.coordinates})"
    header = f"{place}: {snapshot.temperature_c:.1f}°C"
    if snapshot.description:
        header += f", {snapshot.capitalized_description}"
    print(header)
    if not cards:
        print("No advisories.")
        return
    for card in cards:
        print(f"[{card.severity.value.upper():7}] {card.icon_code} {card.title}")
        print(f"          {card.message}")


def _print_categories() -> None:
    defaults = get_settings().default_preferences()
    for category in CardCategory:
        state = "on" if defaults.is_enabled(category) else "off"
        types = ", ".join(t.value for t in CardType if t.category == category)
        print(f"{category.value:20} {state:4} {category.display_name} ({types})")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "categories":
        _print_categories()
        return 0

    if args.command == "serve":
        import uvicorn

        from weather_advisories.api import create_app

        uvicorn.run(
            create_app(),
            host=args.host or settings.host,
            port=args.port or settings.port,
            log_level=settings.log_level.lower(),
        )
        return 0

    try:
        if args.command == "evaluate":
            provider = FileSnapshotProvider(args.file)
            if args.fallback_to_mock:
                provider = FallbackSnapshotProvider(provider)
            snapshot = SnapshotValidator().validate(provider.get_current_snapshot())
        else:
            snapshot = MockSnapshotProvider().get_current_snapshot(args.coordinates)

        cards = ConditionRuleEngine().evaluate(snapshot, _preferences(args.disable))
    except AdvisoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_cards(snapshot, cards, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
