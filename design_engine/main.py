#!/usr/bin/env python3
"""
Design Engine command line.

Converts an HTML file, standard input or a URL into a design tree and prints
it as JSON.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from design_engine.converter import DesignTreeConverter
from design_engine.exceptions import DesignEngineError
from design_engine.palette import extract_color_palette
from design_engine.utils.config import Config
from design_engine.utils.logging import ROOT_LOGGER_NAME, log_exception, setup_logging


def configure_logging(config: Config, debug: bool = False) -> logging.Logger:
    """Set up logging from configuration, replacing the import-time handlers."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console_level = "DEBUG" if debug else config.get("logging.console_level", "WARNING")
    setup_logging(log_file=config.get("logging.file"), console_level=console_level)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at level {console_level}")
    return logger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Convert HTML and CSS into a design tree")
    parser.add_argument('source', nargs='?', default=None,
                        help='HTML file to convert (standard input if omitted)')
    parser.add_argument('--url', type=str, default=None, help='Fetch and convert a URL instead')
    parser.add_argument('--width', type=int, default=None, help='Viewport width in pixels')
    parser.add_argument('--height', type=int, default=None, help='Viewport height in pixels')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Write the JSON to a file instead of standard output')
    parser.add_argument('--palette', action='store_true', help='Include the color palette')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--config', type=str, default=None, help='Path to a JSON config file')
    return parser.parse_args(argv)


def read_source(path: Optional[str]) -> str:
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = parse_arguments(argv)

    config = Config(args.config)
    logger = configure_logging(config, args.debug)

    viewport = config.get_viewport()
    if args.width:
        viewport['width'] = args.width
    if args.height:
        viewport['height'] = args.height

    try:
        with DesignTreeConverter(config) as converter:
            if args.url:
                tree = converter.url_to_design_tree(args.url, viewport)
            else:
                tree = converter.html_to_design_tree(read_source(args.source), viewport)
    except (DesignEngineError, OSError) as e:
        log_exception(logger, e, "Conversion failed")
        print(f"error: {e}", file=sys.stderr)
        return 1

    result = {'designTree': tree, 'colors': extract_color_palette(tree)} if args.palette else tree
    output = json.dumps(result, indent=2)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output + '\n')
        logger.info(f"Design tree written to {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
