import logging
from dataclasses import dataclass
from typing import AbstractSet, Optional, Tuple

from .dictionary import default_dictionary, fold_dictionary
from .patterns import detect_sequential_digits
from .personal import UserProfile, match_personal_info
from .scoring import Strength, score_password

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    strength: Strength
    score: int
    is_common_password: bool
    suggestions: Tuple[str, ...] = ()
    personal_info_warnings: Tuple[str, ...] = ()
    pattern_warnings: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "strength": self.strength.value,
            "score": self.score,
            "is_common_password": self.is_common_password,
            "suggestions": list(self.suggestions),
            "personal_info_warnings": list(self.personal_info_warnings),
            "pattern_warnings": list(self.pattern_warnings),
        }


def analyze_password(pw: Optional[str], profile: Optional[UserProfile] = None,
                     dictionary: Optional[AbstractSet[str]] = None) -> AnalysisResult:
    """
    Run every detector over ``pw`` and merge their findings.

    Personal-info and pattern warnings are advisory only: they never change
    the score or the strength tier. A caller-supplied ``dictionary`` is
    trimmed and lowercased before lookup.
    """
    if dictionary is None:
        dictionary = default_dictionary()
    else:
        dictionary = fold_dictionary(dictionary)
    return _merge(pw or "", profile, dictionary)


def _merge(pw: str, profile: Optional[UserProfile], dictionary: AbstractSet[str]) -> AnalysisResult:
    report = score_password(pw, dictionary)
    personal = match_personal_info(pw, profile) if profile is not None else ()
    patterns = detect_sequential_digits(pw)

    logger.debug("Analysed password of length %d: score=%d, %d personal, %d pattern warnings",
                 len(pw), report.score, len(personal), len(patterns))

    return AnalysisResult(
        strength=report.strength,
        score=report.score,
        is_common_password=report.is_common_password,
        suggestions=report.suggestions,
        personal_info_warnings=personal,
        pattern_warnings=patterns,
    )


class PasswordAnalyzer:
    """Binds one dictionary for callers that analyse repeatedly (e.g. the GUI)."""

    def __init__(self, dictionary: Optional[AbstractSet[str]] = None):
        if dictionary is None:
            self.dictionary = default_dictionary()
        else:
            self.dictionary = fold_dictionary(dictionary)

    def analyze(self, pw: Optional[str], profile: Optional[UserProfile] = None) -> AnalysisResult:
        return _merge(pw or "", profile, self.dictionary)
