"""
Console output for the Knit bundler.

Everything goes to stderr so the bundle itself can be piped if needed.
"""
import sys
from datetime import datetime

# Global verbose flag
_VERBOSE = False

GREEN = "\033[92m"
RED = "\033[91m"
BLUE = "\033[94m"
BOLD = "\033[1m"
RESET = "\033[0m"


def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value


def log(message):
    """Log informational messages to stderr."""
    print(f"{GREEN}{BOLD}INFO:{RESET} {message}", file=sys.stderr)


def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"{BLUE}DEBUG:{RESET} {message}", file=sys.stderr)


def format_timestamp(now=None):
    now = now or datetime.now()
    return now.strftime("%x %X")
