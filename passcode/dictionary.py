import os
import logging
from functools import lru_cache
from typing import FrozenSet, Iterable, Optional

logger = logging.getLogger(__name__)

COMMON_PASSWORDS_RESOURCE = os.path.join(os.path.dirname(__file__), "common_passwords.txt")

EMPTY_DICTIONARY: FrozenSet[str] = frozenset()


class DictionaryUnavailableError(OSError):
    """Raised when the common-password word list cannot be located or read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Word list unavailable: {path} ({reason})")


def build_dictionary(lines: Iterable[str]) -> FrozenSet[str]:
    entries = set()
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        entries.add(word.lower())
    return frozenset(entries)


def fold_dictionary(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(w.strip().lower() for w in words if w and w.strip())


def load_dictionary(path: Optional[str] = None) -> FrozenSet[str]:
    """
    Read a newline-delimited UTF-8 word list into a case-folded frozenset.
    Falls back to the bundled list when no path is given.
    """
    path = path or COMMON_PASSWORDS_RESOURCE
    try:
        with open(path, "r", encoding="utf-8") as fh:
            words = build_dictionary(fh)
    except FileNotFoundError as exc:
        raise DictionaryUnavailableError(path, "not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryUnavailableError(path, str(exc)) from exc
    logger.debug("Loaded %d common passwords from %s", len(words), path)
    return words


def load_dictionary_or_empty(path: Optional[str] = None) -> FrozenSet[str]:
    try:
        return load_dictionary(path)
    except DictionaryUnavailableError as exc:
        logger.warning("%s; common-password check disabled.", exc)
        return EMPTY_DICTIONARY


@lru_cache(maxsize=None)
def default_dictionary() -> FrozenSet[str]:
    return load_dictionary_or_empty()
