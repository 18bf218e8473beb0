"""
Core protocols for gaussolve.

Backends are matched structurally (Protocol) rather than by inheritance,
so a CPU NumPy backend and a PyTorch backend share no base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

from gaussolve.core.result import Result

D = TypeVar('D', contravariant=True)  # Input (design) type
P = TypeVar('P', covariant=True)      # Payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated input and produces a Result envelope.
    Backends are stateless between calls: all configuration is passed
    at construction time.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}[_{variant}]'
        Examples: 'cpu_gauss_partial', 'cpu_gauss_none', 'gpu_gauss_partial_fp64'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Numerical failures are reported inside the returned Result, not
        raised; only programming errors raise.
        """
        ...
