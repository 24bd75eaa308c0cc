from typing import Tuple

SEQUENTIAL_DIGITS_WARNING = "Sequential digits detected (e.g. 123 or 987)."

MIN_RUN = 3


def has_sequential_digits(pw: str, threshold: int = MIN_RUN) -> bool:
    # Ascending or descending by exactly one; any non-digit breaks the run.
    last = None
    direction = None
    run = 0
    for ch in pw:
        if not ch.isdecimal():
            last, direction, run = None, None, 0
            continue
        value = int(ch)
        step = value - last if last is not None else None
        if step in (1, -1) and direction in (None, step):
            direction = step
            run += 1
        else:
            direction = None
            run = 1
        last = value
        if run >= threshold:
            return True
    return False


def detect_sequential_digits(pw: str, threshold: int = MIN_RUN) -> Tuple[str, ...]:
    if has_sequential_digits(pw or "", threshold):
        return (SEQUENTIAL_DIGITS_WARNING,)
    return ()
