"""
Tests for the Result[P] envelope.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from gaussolve.core.protocols import Backend
from gaussolve.core.result import Result
from gaussolve.elimination.backends import CPUGaussBackend
from gaussolve.substitution.backends import CPUBackSubstitutionBackend


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "gauss"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_gauss_partial",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "gauss"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gauss_partial"

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert result.timing is None

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("ill-conditioned: pivot ratio 1e-10",),
        )
        assert result.has_warning("ill-conditioned")
        assert not result.has_warning("singular")


class TestBackendProtocol:

    @pytest.mark.parametrize("backend", [
        CPUGaussBackend(),
        CPUGaussBackend(pivoting='none'),
        CPUBackSubstitutionBackend(),
    ])
    def test_cpu_backends_conform(self, backend):
        assert isinstance(backend, Backend)
        assert backend.name.startswith('cpu_')
