from .charsets import build_alphabet
from .errors import AttemptsExhaustedError, EmptyAlphabetError, GenerationError
from .password import MAX_ATTEMPTS, GenerationOptions, generate_password, generate_passwords
from .strength import Strength, StrengthAssessment, assess

__all__ = [
    "MAX_ATTEMPTS",
    "AttemptsExhaustedError",
    "EmptyAlphabetError",
    "GenerationError",
    "GenerationOptions",
    "Strength",
    "StrengthAssessment",
    "assess",
    "build_alphabet",
    "generate_password",
    "generate_passwords",
]
