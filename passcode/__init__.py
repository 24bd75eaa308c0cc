from .analysis import AnalysisResult, PasswordAnalyzer, analyze_password
from .dictionary import (
    DictionaryUnavailableError,
    build_dictionary,
    default_dictionary,
    fold_dictionary,
    load_dictionary,
    load_dictionary_or_empty,
)
from .patterns import detect_sequential_digits, has_sequential_digits
from .personal import UserProfile, match_personal_info
from .scoring import Strength, StrengthReport, score_password, strength_for_score

__all__ = [
    "AnalysisResult",
    "PasswordAnalyzer",
    "analyze_password",
    "DictionaryUnavailableError",
    "build_dictionary",
    "default_dictionary",
    "fold_dictionary",
    "load_dictionary",
    "load_dictionary_or_empty",
    "detect_sequential_digits",
    "has_sequential_digits",
    "UserProfile",
    "match_personal_info",
    "Strength",
    "StrengthReport",
    "score_password",
    "strength_for_score",
]
