from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

MAX_DIGIT_FRAGMENT = 6
MIN_DIGIT_FRAGMENT = 2
MIN_NAME_TOKEN = 2
MIN_EMAIL_LOCAL = 3


@dataclass(frozen=True)
class UserProfile:
    # Kept out of repr so a profile never lands in a log line or traceback.
    name: str = field(default="", repr=False)
    email: str = field(default="", repr=False)
    birth_date: Optional[date] = field(default=None, repr=False)


def digits_of(text: str) -> str:
    return "".join(c for c in text if c.isdecimal())


def longest_digit_fragment(digits: str, pw: str) -> Optional[str]:
    """
    Longest run of ``digits`` (at most six, at least two) found verbatim in
    ``pw``. Longer fragments win over shorter ones, then the leftmost.
    """
    for size in range(min(MAX_DIGIT_FRAGMENT, len(digits)), MIN_DIGIT_FRAGMENT - 1, -1):
        for start in range(len(digits) - size + 1):
            fragment = digits[start:start + size]
            if fragment in pw:
                return fragment
    return None


def _add(warnings: List[str], message: str) -> None:
    if message not in warnings:
        warnings.append(message)


def _name_warnings(name: str, low: str, pw: str, warnings: List[str]) -> None:
    for token in name.lower().split():
        if len(token) >= MIN_NAME_TOKEN and token in low:
            _add(warnings, "Password resembles your name.")
            break

    digits = digits_of(name)
    if len(digits) >= MIN_DIGIT_FRAGMENT:
        fragment = longest_digit_fragment(digits, pw)
        if fragment:
            _add(warnings, f"Password contains digits from your name ({fragment}).")


def _email_warnings(email: str, low: str, pw: str, warnings: List[str]) -> None:
    folded = email.strip().lower()
    if not folded:
        return
    if folded in low:
        _add(warnings, "Password contains your full email.")

    local, _, domain = folded.partition("@")
    if len(local) >= MIN_EMAIL_LOCAL and local in low:
        _add(warnings, "Password contains your email username.")
    if domain and domain in low:
        _add(warnings, "Password contains your email domain.")

    digits = digits_of(email)
    if len(digits) >= MIN_DIGIT_FRAGMENT:
        fragment = longest_digit_fragment(digits, pw)
        if fragment:
            _add(warnings, f"Password contains digits from your email ({fragment}).")


def _birth_date_warnings(born: date, pw: str, warnings: List[str]) -> None:
    year = f"{born.year:04d}"
    month_day = f"{born.month:02d}{born.day:02d}"
    compact = year + month_day

    if compact in pw:
        _add(warnings, f"Password contains your birth date ({compact}).")
    if year in pw:
        _add(warnings, f"Password contains your birth year ({year}).")
    short_year = year[-2:]
    if short_year != year and short_year in pw:
        _add(warnings, f"Password contains the last two digits of your birth year ({short_year}).")
    if month_day in pw:
        _add(warnings, f"Password contains your birth month and day ({month_day}).")


def match_personal_info(pw: Optional[str], profile: Optional[UserProfile]) -> Tuple[str, ...]:
    if profile is None or not pw or not pw.strip():
        return ()

    low = pw.lower()
    warnings: List[str] = []
    if profile.name:
        _name_warnings(profile.name, low, pw, warnings)
    if profile.email:
        _email_warnings(profile.email, low, pw, warnings)
    if profile.birth_date is not None:
        _birth_date_warnings(profile.birth_date, pw, warnings)
    return tuple(warnings)
