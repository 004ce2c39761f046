#!/usr/bin/env python3
"""Term Stack Editor - interactive builder for combinator terms.

Type a term in insert mode and press Enter to push it onto the stack.
Press ESC for normal mode, where ``a`` applies the top term to the one
below it, ``i`` returns to insert mode and ``q`` quits.

Usage:
    python main.py [--config-dir DIR] [--debug]

Configuration:
    config.json in the config directory, with optional environment
    overrides:
    - TSE_POLL_MS: Input poll interval in milliseconds (default: 50)
    - TSE_INITIAL_MODE: "insert" or "normal" (default: insert)
    - TSE_LOG_PATH: Log file path relative to the config directory
"""

import argparse
import curses
from pathlib import Path

from logging_config import setup_logging, get_logger
from editor import TermStackEditor
from models.config import AppConfig
from ui.debug_panel import DebugPanelHandler
from ui.screen import Screen


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Term Stack Editor - build combinator terms on a stack",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=Path(__file__).parent,
        help="Directory containing config.json and logs/",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug panel with scrolling log output",
    )
    return parser.parse_args(argv)


def main(
    stdscr: "curses.window",
    args: argparse.Namespace,
    config: AppConfig,
) -> None:
    """Run the editor inside an acquired curses screen.

    Args:
        stdscr: Main curses screen.
        args: Command line arguments.
        config: Loaded configuration.
    """
    logger = get_logger()
    screen = Screen(stdscr, show_footer=config.show_footer, debug=args.debug)

    handler = None
    if screen.debug_panel is not None:
        handler = DebugPanelHandler(screen.debug_panel)
        logger.addHandler(handler)

    try:
        TermStackEditor(screen, config).run()
    finally:
        if handler is not None:
            logger.removeHandler(handler)


def run(argv=None) -> None:
    """Entry point wrapper."""
    args = parse_args(argv)
    config = AppConfig.load(args.config_dir / "config.json")

    setup_logging(args.config_dir / config.log_path)
    logger = get_logger("main")
    logger.info("Starting Term Stack Editor")

    try:
        curses.wrapper(lambda stdscr: main(stdscr, args, config))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        raise
    finally:
        logger.info("Term Stack Editor shutdown")


if __name__ == "__main__":
    run()
