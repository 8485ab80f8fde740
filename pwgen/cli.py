import argparse
import json
import logging
import random

from . import password as pw
from . import shell
from . import utils
from .errors import GenerationError
from .strength import assess


def options_from_args(args) -> pw.GenerationOptions:
    try:
        return pw.GenerationOptions(
            length=utils.resolve_length(args.length),
            include_lowercase=not args.no_lowercase,
            include_uppercase=not args.no_uppercase,
            include_numbers=not args.no_numbers,
            include_symbols=not args.no_symbols,
            exclude_similar=args.exclude_similar,
            exclude_ambiguous=args.exclude_ambiguous,
            require_all_categories=not args.allow_incomplete,
            max_consecutive=args.max_consecutive,
        )
    except ValueError as e:
        raise SystemExit(f"Error: {e}")


def _rng(args):
    return random.Random(args.seed) if args.seed is not None else None


def cmd_generate(args):
    options = options_from_args(args)
    try:
        passwords = pw.generate_passwords(options, args.count, rng=_rng(args),
                                          max_attempts=utils.resolve_max_attempts(args.max_attempts))
    except GenerationError as e:
        raise SystemExit(utils.describe_error(e))
    except ValueError as e:
        raise SystemExit(f"Error: {e}")
    for generated in passwords:
        if args.show_strength:
            result = assess(generated)
            print(f"{generated}  Strength: {result.label.value} (score {result.score})")
        else:
            print(generated)


def cmd_check(args):
    if args.json:
        print(json.dumps(assess(args.password).to_dict(), indent=2))
    else:
        print(shell.check(args.password))


def cmd_interactive(args):
    session = shell.Session(options_from_args(args), count=max(1, args.count), rng=_rng(args),
                            max_attempts=utils.resolve_max_attempts(args.max_attempts))
    shell.run_interactive(session)


def _add_generation_args(s):
    s.add_argument("-l", "--length", type=int, help="Password length (default 12, or PWGEN_LENGTH)")
    s.add_argument("-L", "--no-lowercase", action="store_true", help="Exclude lowercase letters")
    s.add_argument("-U", "--no-uppercase", action="store_true", help="Exclude uppercase letters")
    s.add_argument("-N", "--no-numbers", action="store_true", help="Exclude numbers")
    s.add_argument("-S", "--no-symbols", action="store_true", help="Exclude symbols")
    s.add_argument("--exclude-similar", action="store_true",
                   help="Exclude similar characters (i, I, l, L, 1, o, O, 0)")
    s.add_argument("--exclude-ambiguous", action="store_true",
                   help="Exclude ambiguous characters ({}, [], (), etc.)")
    s.add_argument("--allow-incomplete", action="store_true", help="Don't require all character types")
    s.add_argument("--max-consecutive", type=int, default=0,
                   help="Maximum consecutive identical characters (0 = no limit)")
    s.add_argument("-n", "--count", type=int, default=1, help="Number of passwords to generate")
    s.add_argument("--seed", type=int, help="Seed for a reproducible (non-secure) random source")
    s.add_argument("--max-attempts", type=int,
                   help=f"Attempts before giving up (default {pw.MAX_ATTEMPTS}, or PWGEN_MAX_ATTEMPTS)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Password Generator CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    # generate
    s = sub.add_parser("generate", help="Generate passwords")
    _add_generation_args(s)
    s.add_argument("--show-strength", action="store_true", help="Print strength next to each password")
    s.set_defaults(func=cmd_generate)

    # check
    s = sub.add_parser("check", help="Check password strength")
    s.add_argument("password")
    s.add_argument("--json", action="store_true", help="Print the assessment as JSON")
    s.set_defaults(func=cmd_check)

    # interactive
    s = sub.add_parser("interactive", help="Start interactive mode")
    _add_generation_args(s)
    s.set_defaults(func=cmd_interactive)

    return parser


def configure_logging(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
