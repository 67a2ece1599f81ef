import argparse
import os
import sys

from pydantic import ValidationError

from core.console import set_verbose
from core.models import BundleConfig
from knitter import build, watch

ENTRY_FILE = os.path.join("src", "index.js")
OUTPUT_FILE = os.path.join("dist", "bundle.js")


def make_config(args):
    return BundleConfig(
        entry=ENTRY_FILE,
        output=OUTPUT_FILE,
        watch=args.watch,
        diff=args.diff,
        refresh_watches=not args.no_refresh,
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description=f"Knit: inline the relative imports of {ENTRY_FILE} into {OUTPUT_FILE}"
    )
    parser.add_argument("--watch", action="store_true", help="Rebuild whenever a bundled file changes")
    parser.add_argument("--diff", action="store_true", help="Show which output lines changed on every build")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    parser.add_argument("--no-refresh", action="store_true",
                        help="In watch mode, keep the frozen watch set from startup: files imported "
                             "later are not watched until knit is restarted")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    set_verbose(args.verbose)

    try:
        config = make_config(args)
    except ValidationError as e:
        print(f"Error: Invalid configuration:\n{e}", file=sys.stderr)
        sys.exit(1)

    try:
        if config.watch:
            watch(config)
        else:
            build(config)
    except Exception as e:
        print(f"Error: Bundling failed:\n{e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
