"""
Command-line interface for HevySpotter.

Usage:
    hevy-spotter configure --hevy-key KEY --openai-key KEY --coach scientist
    hevy-spotter sync
    hevy-spotter workouts
    hevy-spotter heatmap
    hevy-spotter volume
    hevy-spotter analyze --sessions 10
    hevy-spotter generate
    hevy-spotter clear-analysis
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from application.exceptions import AuthError, HevySpotterError, ValidationError
from backend.container import Container
from backend.settings import get_settings
from core.constants import ALLOWED_SESSION_COUNTS, DEFAULT_SESSION_COUNT
from domain.models import SimplifiedWorkout
from services.analytics import build_heatmap, build_volume_series
from services.coach_templates import COACH_TEMPLATES

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def _load_workouts(container: Container) -> List[SimplifiedWorkout]:
    """Cache-or-fetch; a failed refresh with cached data still returns the cache."""
    coordinator = container.coordinator()
    if not coordinator.credential:
        raise AuthError("No Hevy API key configured. Run 'hevy-spotter configure --hevy-key KEY'.")
    state = await coordinator.load()
    if state.workouts is None and state.error is not None:
        raise state.error
    return list(state.workouts or [])


# =============================================================================
# Commands
# =============================================================================


async def cmd_sync(container: Container, args: argparse.Namespace) -> None:
    state = await container.coordinator().sync()
    print(f"Synced {len(state.workouts or [])} workouts")


async def cmd_workouts(container: Container, args: argparse.Namespace) -> None:
    workouts = await _load_workouts(container)
    _print_json([w.model_dump(mode="json", by_alias=True) for w in workouts])


async def cmd_heatmap(container: Container, args: argparse.Namespace) -> None:
    workouts = await _load_workouts(container)
    _print_json(build_heatmap(workouts).model_dump(mode="json"))


async def cmd_volume(container: Container, args: argparse.Namespace) -> None:
    workouts = await _load_workouts(container)
    for point in build_volume_series(workouts):
        print(f"{point.label:>4}  {point.volume:>12,.0f} kg")


async def cmd_analyze(container: Container, args: argparse.Namespace) -> None:
    workouts = await _load_workouts(container)
    analysis = await container.analyze_workouts().execute(workouts, session_count=args.sessions)
    _print_json(analysis.model_dump(mode="json"))


async def cmd_clear_analysis(container: Container, args: argparse.Namespace) -> None:
    container.analyze_workouts().clear()
    print("Analysis deleted")


async def cmd_generate(container: Container, args: argparse.Namespace) -> None:
    analysis = container.analyze_workouts().latest()
    if analysis is None:
        raise ValidationError("No analysis stored. Run 'hevy-spotter analyze' first.")
    result = await container.generate_routine().execute(analysis)
    print(f"Saved routine '{result.title}' with {result.exercise_count} exercises")
    if result.skipped_template_ids:
        print(f"Skipped unknown exercise ids: {', '.join(result.skipped_template_ids)}")


async def cmd_configure(container: Container, args: argparse.Namespace) -> None:
    update = {}
    if args.hevy_key is not None:
        update["hevy_api_key"] = args.hevy_key.strip() or None
    if args.openai_key is not None:
        update["openai_api_key"] = args.openai_key.strip() or None
    if args.philosophy is not None:
        update["training_philosophy"] = args.philosophy
    if args.coach is not None:
        update["selected_template_id"] = args.coach

    stored = container.settings_store.load()
    container.settings_store.save(stored.model_copy(update=update))
    print("Settings saved")


COMMANDS = {
    "sync": cmd_sync,
    "workouts": cmd_workouts,
    "heatmap": cmd_heatmap,
    "volume": cmd_volume,
    "analyze": cmd_analyze,
    "clear-analysis": cmd_clear_analysis,
    "generate": cmd_generate,
    "configure": cmd_configure,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hevy-spotter",
        description="Sync Hevy workouts, view analytics and get AI coaching",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("sync", help="Fetch all workouts now")
    subparsers.add_parser("workouts", help="Print workouts (cached when fresh)")
    subparsers.add_parser("heatmap", help="Print the 53-week activity heatmap")
    subparsers.add_parser("volume", help="Print monthly volume for the last 12 months")

    analyze = subparsers.add_parser("analyze", help="Run a coaching analysis")
    analyze.add_argument(
        "--sessions",
        type=int,
        choices=ALLOWED_SESSION_COUNTS,
        default=DEFAULT_SESSION_COUNT,
        help="Number of recent sessions to analyze",
    )

    subparsers.add_parser("clear-analysis", help="Delete the stored analysis")
    subparsers.add_parser("generate", help="Generate a routine from the stored analysis")

    configure = subparsers.add_parser("configure", help="Store credentials and preferences")
    configure.add_argument("--hevy-key", help="Hevy API key (empty string clears)")
    configure.add_argument("--openai-key", help="OpenAI API key (empty string clears)")
    configure.add_argument("--philosophy", help="Training philosophy for the coach")
    configure.add_argument(
        "--coach",
        choices=[template.id for template in COACH_TEMPLATES],
        help="Coach persona",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    container = Container(get_settings())
    try:
        asyncio.run(COMMANDS[args.command](container, args))
    except HevySpotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
