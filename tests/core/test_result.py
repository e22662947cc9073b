"""
Tests for the Result[P] envelope.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from alximo.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=0.5),
            info={"kind": "pearson"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_correlation",
        )
        assert result.params.value == 0.5
        assert result.info["kind"] == "pearson"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_correlation"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("data are essentially constant",),
        )
        assert result.has_warning("constant")
        assert not result.has_warning("zero variance")
