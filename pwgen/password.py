import logging, secrets
from dataclasses import dataclass
from typing import List

from .charsets import build_alphabet, included_categories
from .errors import AttemptsExhaustedError

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100


@dataclass(frozen=True)
class GenerationOptions:
    length: int = 12
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    require_all_categories: bool = True
    max_consecutive: int = 0  # 0 means unbounded

    def __post_init__(self):
        if self.length < 1:
            raise ValueError("Password length must be at least 1.")
        if self.max_consecutive < 0:
            raise ValueError("max_consecutive cannot be negative.")


def longest_run(text: str) -> int:
    """Length of the longest run of identical adjacent characters."""
    best = run = 0
    prev = None
    for ch in text:
        run = run + 1 if ch == prev else 1
        best = max(best, run)
        prev = ch
    return best


def covers_categories(candidate: str, options: GenerationOptions) -> bool:
    # checked against the full category sets, not the post-exclusion pool
    return all(any(c in charset for c in candidate)
               for _, charset in included_categories(options))


def is_acceptable(candidate: str, options: GenerationOptions) -> bool:
    if options.require_all_categories and not covers_categories(candidate, options):
        return False
    if options.max_consecutive > 0 and longest_run(candidate) > options.max_consecutive:
        return False
    return True


def generate_password(options: GenerationOptions, rng=None, max_attempts: int = MAX_ATTEMPTS) -> str:
    """Draw passwords from the alphabet until one meets every constraint.

    ``rng`` may be any ``random.Random``-like object; a seeded
    ``random.Random`` gives reproducible output.  Defaults to
    ``secrets.SystemRandom()``.

    Raises EmptyAlphabetError before sampling if the options leave no
    characters, and AttemptsExhaustedError once ``max_attempts`` candidates
    have been rejected.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1.")
    alphabet = build_alphabet(options)
    rng = rng or secrets.SystemRandom()

    for attempt in range(1, max_attempts + 1):
        candidate = "".join(rng.choice(alphabet) for _ in range(options.length))
        if is_acceptable(candidate, options):
            logger.debug("accepted candidate on attempt %d", attempt)
            return candidate
        logger.debug("rejected candidate on attempt %d", attempt)

    logger.debug("gave up after %d attempts (length=%d)", max_attempts, options.length)
    raise AttemptsExhaustedError(max_attempts)


def generate_passwords(options: GenerationOptions, count: int, rng=None,
                       max_attempts: int = MAX_ATTEMPTS) -> List[str]:
    if count < 1:
        raise ValueError("count must be at least 1.")
    return [generate_password(options, rng=rng, max_attempts=max_attempts)
            for _ in range(count)]
