import logging
import string

from .errors import EmptyAlphabetError

logger = logging.getLogger(__name__)

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Characters easily confused when read or typed
SIMILAR = "iIlL1oO0"
# Brackets, quotes and separators that break shells or config files
AMBIGUOUS = "{}[]()/\\'\"`~,;:.<>"

CATEGORIES = (
    ("lowercase", LOWERCASE),
    ("uppercase", UPPERCASE),
    ("numbers", NUMBERS),
    ("symbols", SYMBOLS),
)


def included_categories(options):
    """Return the (name, charset) pairs switched on in ``options``."""
    flags = {
        "lowercase": options.include_lowercase,
        "uppercase": options.include_uppercase,
        "numbers": options.include_numbers,
        "symbols": options.include_symbols,
    }
    return [(name, charset) for name, charset in CATEGORIES if flags[name]]


def build_alphabet(options) -> str:
    """Build the pool of characters a password may be drawn from.

    Included categories are concatenated in a fixed order, then the
    exclusion sets are removed from the whole pool.  Raises
    EmptyAlphabetError when nothing is left.
    """
    pool = "".join(charset for _, charset in included_categories(options))

    removed = ""
    if options.exclude_similar:
        removed += SIMILAR
    if options.exclude_ambiguous:
        removed += AMBIGUOUS
    if removed:
        pool = "".join(c for c in pool if c not in removed)

    if not pool:
        raise EmptyAlphabetError("no characters available with current settings")
    logger.debug("alphabet built with %d characters", len(pool))
    return pool
