import re
from dataclasses import dataclass
from enum import Enum

from .charsets import LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE

_TRIPLE = re.compile(r"(.)\1\1", re.DOTALL)


class Strength(Enum):
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


@dataclass(frozen=True)
class StrengthAssessment:
    score: int
    label: Strength
    length: int
    has_lowercase: bool
    has_uppercase: bool
    has_numbers: bool
    has_symbols: bool
    category_count: int

    def to_dict(self) -> dict:
        return {
            "strength": self.label.value,
            "score": self.score,
            "details": {
                "length": self.length,
                "hasLowercase": self.has_lowercase,
                "hasUppercase": self.has_uppercase,
                "hasNumbers": self.has_numbers,
                "hasSymbols": self.has_symbols,
                "charTypes": self.category_count,
            },
        }


def _label(score: int) -> Strength:
    if score >= 6: return Strength.VERY_STRONG
    elif score >= 4: return Strength.STRONG
    elif score >= 2: return Strength.MODERATE
    return Strength.WEAK


def assess(pw: str) -> StrengthAssessment:
    length = len(pw)
    has_lower = any(c in LOWERCASE for c in pw)
    has_upper = any(c in UPPERCASE for c in pw)
    has_number = any(c in NUMBERS for c in pw)
    has_symbol = any(c in SYMBOLS for c in pw)
    categories = has_lower + has_upper + has_number + has_symbol

    score = 0
    if length >= 8: score += 1
    if length >= 12: score += 1
    if length >= 16: score += 1
    score += categories

    if _TRIPLE.search(pw): score -= 1
    if pw and all(c in LOWERCASE or c in UPPERCASE for c in pw): score -= 1
    if pw and all(c in NUMBERS for c in pw): score -= 1

    return StrengthAssessment(
        score=score,
        label=_label(score),
        length=length,
        has_lowercase=has_lower,
        has_uppercase=has_upper,
        has_numbers=has_number,
        has_symbols=has_symbol,
        category_count=categories,
    )
