"""Match an arbitrary aspect ratio against a catalog of standard aspect ratios."""

from collections.abc import Sequence
from fractions import Fraction

from abrladder.ladder.arithmetic import change
from abrladder.models.aspect_ratio import StandardAspectRatio


def deviation(comparison_ar: float, standard: StandardAspectRatio) -> float:
    """Proportional deviation of a value from a standard aspect ratio."""
    return change(standard.ratio, comparison_ar)


def closest(
    standards: Sequence[StandardAspectRatio], ar_value: float
) -> tuple[StandardAspectRatio, float]:
    """Return the standard closest to ``ar_value`` and its absolute deviation.

    Ties on deviation go to the smaller aspect ratio, so the result does not
    depend on catalog order.
    """
    if not standards:
        raise ValueError("standards must not be empty")
    scored = [(abs(deviation(ar_value, s)), s.ratio, s) for s in standards]
    abs_dev, _, best = min(scored, key=lambda item: (item[0], item[1]))
    return best, abs_dev


def target(
    standards: Sequence[StandardAspectRatio],
    snap_ar: bool,
    max_ar_snap: float,
    landscape_ingest_ar: Fraction,
) -> Fraction:
    """Aspect ratio to use for the second dimension of each rung.

    Returns the closest standard when snapping is enabled and the ingest ratio
    is within ``max_ar_snap`` of it, otherwise the ingest ratio unchanged.
    """
    if not snap_ar:
        return landscape_ingest_ar
    best, abs_dev = closest(standards, float(landscape_ingest_ar))
    if abs_dev <= max_ar_snap:
        return best.fraction
    return landscape_ingest_ar
