"""
Main entry point for SPINWHEEL.

    spinwheel client    Open the wheel window (default)
    spinwheel server    Serve /api/items from Notion
"""

import argparse
import asyncio
import logging
import sys


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spinwheel", description="Spin-the-wheel picker")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["client", "server"],
        help="What to run (default: SPINWHEEL_MODE or client)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--endpoint", help="Items endpoint URL for the client")
    parser.add_argument("--category", help="Category to load first")
    parser.add_argument("--port", type=int, help="Port for the server")
    return parser


async def run_client(settings) -> None:
    """Run the wheel window."""
    from spinwheel.simulator.window import WheelWindow

    window = WheelWindow(settings)
    await window.run()


async def run_server(settings) -> None:
    """Run the items endpoint."""
    from spinwheel.server import run_server as serve

    await serve(settings)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables before settings are read
    load_dotenv()

    from spinwheel.config.settings import get_settings

    args = build_parser().parse_args(argv)
    settings = get_settings()

    if args.mode:
        settings.mode = args.mode
    if args.debug:
        settings.debug = True
    if args.endpoint:
        settings.source.api_endpoint = args.endpoint
    if args.category:
        settings.source.default_category = args.category
    if args.port:
        settings.server.port = args.port

    setup_logging(settings.debug)
    logger = logging.getLogger(__name__)
    logger.info(f"SPINWHEEL starting ({settings.mode})...")

    try:
        if settings.mode == "server":
            asyncio.run(run_server(settings))
        else:
            asyncio.run(run_client(settings))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("SPINWHEEL stopped")


if __name__ == "__main__":
    main()
