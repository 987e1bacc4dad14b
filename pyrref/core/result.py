"""
Result envelope returned by every reduction backend.

A backend hands back its ReductionParams together with the metadata
that describes the run: which backend did the work, the options it ran
with, how long each phase took and any non-fatal numerical issues.
The public solvers unwrap it into a ReductionSolution.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen pairing of a backend payload with its run metadata.

    Attributes:
        params: Backend payload, a ReductionParams for the CPU backends
        info: Run options and counters ('method', 'pivoting', 'tolerance',
            'rank', 'n_swaps', 'n_clamped')
        timing: Seconds per Timer section, or None when not measured
        backend_name: 'cpu_gauss_jordan' or 'cpu_reference'
        warnings: Messages re-emitted as RuntimeWarning by the solvers

    Example:
        >>> Result(
        ...     params=ReductionParams(...),
        ...     info={'method': 'gauss_jordan', 'pivoting': 'first_nonzero'},
        ...     timing={'total_seconds': 0.001, 'elimination': 0.0008},
        ...     backend_name='cpu_gauss_jordan',
        ...     warnings=('Column 0: pivot 1e-10 is small ...',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if any warning message contains substring."""
        return any(substring in message for message in self.warnings)
