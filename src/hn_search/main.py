#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys

from .app import SearchApp
from .config import load_config, setup_logging

logger = logging.getLogger("hn_search")


# --- Entrypoint ---
def main() -> None:
    parser = argparse.ArgumentParser(description="Hacker News search TUI")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--theme", type=str, help="Set theme for this run")
    parser.add_argument("--query", type=str, help="Initial search term")
    parser.add_argument("--endpoint", type=str, help="Search endpoint base URL")
    parser.add_argument(
        "--live",
        action="store_true",
        help="Search on every keystroke instead of on Enter",
    )
    args = parser.parse_args()

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    config = load_config()
    if args.query is not None:
        config["initial_query"] = args.query
    if args.endpoint:
        config["endpoint"] = args.endpoint
    if args.live:
        config["search_mode"] = "live"

    theme_name = args.theme or config.get("theme") or "dracula"
    logger.info("Using theme: %s", theme_name)

    try:
        app = SearchApp(theme=theme_name, config=config)
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)


if __name__ == "__main__":
    main()
