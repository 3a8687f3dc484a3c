"""
Lifepath CLI - Command-line interface for the engine.

Usage:
    lifepath simulate [--runs N] [--seed S] [--strategy random|safe|greedy] [--character ID]
    lifepath characters            List character presets
    lifepath validate              Validate the bundled content
    lifepath serve [--host H] [--port P]   Run the HTTP API (needs uvicorn)
"""

import argparse
import sys

from .config import configure_logging, get_settings


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Lifepath - Turn-based life simulation engine",
        prog="lifepath",
    )
    parser.add_argument("--log-level", help="Logging level (default from LIFEPATH_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Run the balance simulator")
    simulate_parser.add_argument("--runs", type=int, default=500, help="Number of runs")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Base seed")
    simulate_parser.add_argument(
        "--strategy",
        choices=["random", "safe", "greedy"],
        default="random",
        help="Choice strategy",
    )
    simulate_parser.add_argument("--character", default=None, help="Character preset id")

    # Characters command
    subparsers.add_parser("characters", help="List character presets")

    # Validate command
    subparsers.add_parser("validate", help="Validate the bundled content")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "simulate":
        return cmd_simulate(args)
    elif args.command == "characters":
        return cmd_characters(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_simulate(args):
    """Run the balance simulator and print the summary."""
    from .session import UnknownCharacterError
    from .simulation import run_simulation

    try:
        report = run_simulation(
            runs=args.runs,
            seed=args.seed,
            strategy=args.strategy,
            character_id=args.character,
        )
    except (UnknownCharacterError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    for line in report.format_lines():
        print(line)
    return 0


def cmd_characters(args):
    """List character presets."""
    from .content import CHARACTERS

    for character in CHARACTERS:
        stats = character.stats
        print(f"{character.id}: {character.name}")
        print(f"  {character.description}")
        print(
            f"  money {stats.money:g}, reputation {stats.reputation:g}, "
            f"skill {stats.skill:g}, health {stats.health:g}, age {stats.age:g}"
        )
    return 0


def cmd_validate(args):
    """Validate the bundled content."""
    from .content import CHARACTERS, EVENTS, MAJOR_EVENTS, SCENES
    from .engine_core.validation import validate_content

    result = validate_content(SCENES, EVENTS, MAJOR_EVENTS, CHARACTERS)
    print(f"Scenes: {len(SCENES)}, events: {len(EVENTS)}, major events: {len(MAJOR_EVENTS)}")

    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  - {w}")

    if result.errors:
        print("\nErrors:")
        for e in result.errors:
            print(f"  - {e}")
        sys.exit(1)

    print("Content is valid")
    return 0


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Install with: pip install 'lifepath[server]'",
              file=sys.stderr)
        sys.exit(1)

    from .api.app import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    main()
