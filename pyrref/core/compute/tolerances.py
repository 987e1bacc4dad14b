"""
Tolerance tiers for Gauss-Jordan elimination.

Defines how small an entry must be before it is treated as zero:
- pivot_atol: a pivot candidate must exceed this magnitude
- clamp_atol: entries at or below this magnitude are clamped to exact 0.0
- rtol / atol: defaults for approximate matrix comparison

Used by the reduction backends, Matrix.allclose() and the test suite.
"""

from dataclasses import dataclass

from pyrref.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for pivot detection and comparison."""
    pivot_atol: float
    clamp_atol: float
    rtol: float
    atol: float
    name: str
    description: str


# Double precision with roundoff cleanup
DEFAULT = ToleranceTier(
    pivot_atol=1e-12,
    clamp_atol=1e-12,
    rtol=1e-10,
    atol=1e-12,
    name='default',
    description='Double precision, cancellation residue clamped to zero',
)

# Any nonzero entry is a pivot, nothing is clamped
STRICT = ToleranceTier(
    pivot_atol=0.0,
    clamp_atol=0.0,
    rtol=0.0,
    atol=0.0,
    name='strict',
    description='Exact comparisons, no clamping',
)

# Data carrying measurement noise
LOOSE = ToleranceTier(
    pivot_atol=1e-8,
    clamp_atol=1e-8,
    rtol=1e-6,
    atol=1e-8,
    name='loose',
    description='Relaxed thresholds for noisy input',
)

TIERS = {tier.name: tier for tier in (DEFAULT, STRICT, LOOSE)}

# With first-nonzero pivoting, a chosen pivot this much smaller than the
# largest candidate in its column triggers a RuntimeWarning.
SMALL_PIVOT_RATIO = 1e-8


def select_tolerance(tolerance: 'str | float | ToleranceTier' = 'default') -> ToleranceTier:
    """
    Resolve a tolerance specification to a ToleranceTier.

    Args:
        tolerance: Tier name ('default', 'strict', 'loose'), an existing
            ToleranceTier, or a non-negative float used for both the pivot
            and clamp thresholds.

    Raises:
        ValidationError: If the name is unknown or the float is negative
    """
    if isinstance(tolerance, ToleranceTier):
        return tolerance

    if isinstance(tolerance, str):
        try:
            return TIERS[tolerance]
        except KeyError:
            raise ValidationError(
                f"Unknown tolerance tier: {tolerance!r}, expected one of {sorted(TIERS)}"
            ) from None

    if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)):
        raise ValidationError(
            f"tolerance: expected tier name, ToleranceTier or float, got {type(tolerance).__name__}"
        )

    eps = float(tolerance)
    if not eps >= 0.0:
        raise ValidationError(f"tolerance: must be a non-negative number, got {tolerance}")

    return ToleranceTier(
        pivot_atol=eps,
        clamp_atol=eps,
        rtol=DEFAULT.rtol,
        atol=eps,
        name=f'custom({eps:g})',
        description='User-supplied absolute threshold',
    )
