import sys
import asyncio
import argparse
from typing import List, Optional

from therapy_directory.logging.setup import setup_logging

setup_logging()

from loguru import logger

from therapy_directory.loading.state import load_directory
from therapy_directory.models.enums import LoadState
from therapy_directory.models.view import ALL, FilterState
from therapy_directory.rendering.console import render_state

from rich.console import Console


def parse_args(argv: Optional[List[str]] = None) -> FilterState:
    parser = argparse.ArgumentParser(description="Print the therapy directory.")
    parser.add_argument("--search", default="", help="Case-insensitive name search.")
    parser.add_argument("--specialty", default=ALL, help="Exact specialty to show.")
    parser.add_argument("--location", default=ALL, help="Exact clinic to show.")
    args = parser.parse_args(argv)
    return FilterState(search=args.search, specialty=args.specialty, location=args.location)


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point: load once, render once."""
    filters = parse_args(argv)
    logger.info("Starting Therapy Directory - Fetch, Normalize, and Render")

    directory = await load_directory()
    Console().print(render_state(directory, filters))

    if directory.state == LoadState.ERROR:
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
