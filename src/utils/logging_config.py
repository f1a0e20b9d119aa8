"""Simple logging setup - all logs go to stderr so stdout stays free for command output."""

import logging
import sys


def setup_logging(verbose: bool = False):
    """Setup logging to stderr. INFO when verbose, otherwise ERROR only."""
    level = logging.INFO if verbose else logging.ERROR
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
