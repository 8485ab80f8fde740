"""
pwgen — constrained password generator and strength checker.
Features:
    generate, check, interactive
Usage examples:
    python -m pwgen generate --length 20 --exclude-similar
    python -m pwgen generate -n 5 --max-consecutive 2 --show-strength
    python -m pwgen check 'Tr0ub4dor&3'
    python -m pwgen interactive --no-symbols
"""

import sys
from .cli import build_parser, configure_logging


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nAborted by user.")
        sys.exit(1)

if __name__ == "__main__":
    main()
