import re
from enum import Enum
from typing import AbstractSet, NamedTuple, Optional, Tuple

# ---------------------------
# Strength tiers
# ---------------------------

class Strength(str, Enum):
    WEAK = "WEAK"
    MODERATE = "MODERATE"
    STRONG = "STRONG"


STRONG_THRESHOLD = 80
MODERATE_THRESHOLD = 50

COMMON_PASSWORD_CAP = 20
REPEAT_PENALTY = 10

REPEATED_CHARS = re.compile(r"(.)\1{2,}", re.DOTALL)

SUGGEST_LONGER = "Use 12+ characters for better strength."
SUGGEST_MIN_LENGTH = "Increase length to at least 8 characters."
SUGGEST_START = "Enter a password to get started."
SUGGEST_LOWER = "Add lowercase letters."
SUGGEST_UPPER = "Add uppercase letters."
SUGGEST_DIGIT = "Include at least one number."
SUGGEST_SYMBOL = "Include punctuation or symbols."
SUGGEST_NO_REPEATS = "Avoid repeating the same character several times."
SUGGEST_NOT_COMMON = "This password is in a common-password list."


class StrengthReport(NamedTuple):
    score: int
    strength: Strength
    suggestions: Tuple[str, ...]
    is_common_password: bool


def strength_for_score(score: int) -> Strength:
    if score >= STRONG_THRESHOLD:
        return Strength.STRONG
    if score >= MODERATE_THRESHOLD:
        return Strength.MODERATE
    return Strength.WEAK


def is_symbol(ch: str) -> bool:
    return not (ch.isalpha() or ch.isdecimal())


def has_repeated_chars(pw: str) -> bool:
    return REPEATED_CHARS.search(pw) is not None


# ---------------------------
# Scoring
# ---------------------------

def score_password(pw: Optional[str], dictionary: AbstractSet[str] = frozenset()) -> StrengthReport:
    """
    Heuristic 0..100 score. Each rule adds (or subtracts) independently; the
    order suggestions are appended in is fixed and callers rely on it.
    """
    pw = pw or ""
    common = bool(pw) and pw.lower() in dictionary

    score = 0
    suggestions = []

    length = len(pw)
    if length >= 12:
        score += 40
    elif length >= 8:
        score += 20
        suggestions.append(SUGGEST_LONGER)
    elif length > 0:
        score += 10
        suggestions.append(SUGGEST_MIN_LENGTH)
    else:
        suggestions.append(SUGGEST_START)

    checks = [
        (any(c.islower() for c in pw), SUGGEST_LOWER),
        (any(c.isupper() for c in pw), SUGGEST_UPPER),
        (any(c.isdecimal() for c in pw), SUGGEST_DIGIT),
        (any(is_symbol(c) for c in pw), SUGGEST_SYMBOL),
    ]
    for present, tip in checks:
        if present:
            score += 15
        else:
            suggestions.append(tip)

    if has_repeated_chars(pw):
        score -= REPEAT_PENALTY
        suggestions.append(SUGGEST_NO_REPEATS)

    if common:
        score = min(score, COMMON_PASSWORD_CAP)
        suggestions.append(SUGGEST_NOT_COMMON)

    score = max(0, min(100, score))
    return StrengthReport(score, strength_for_score(score), tuple(suggestions), common)
