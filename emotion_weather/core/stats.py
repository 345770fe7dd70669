import math


def rounded_percent(part: int, whole: int) -> int:
    """Share of ``whole`` as a whole-number percentage, halves rounded up.

    Returns 0 when ``whole`` is zero.
    """
    if whole <= 0:
        return 0
    return math.floor(part / whole * 100 + 0.5)
