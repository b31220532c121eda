"""Tests for solver settings resolution."""
import pytest

from lagrange import runtime
from lagrange.errors import InvalidArgumentError


@pytest.fixture(autouse=True)
def _fresh_env(monkeypatch):
    for name in ("LAGRANGE_DK_ITERATIONS", "LAGRANGE_DK_MODE", "LAGRANGE_DK_TOL"):
        monkeypatch.delenv(name, raising=False)
    runtime._settings_from_env.cache_clear()
    yield
    runtime._settings_from_env.cache_clear()


class TestResolveSettings:
    def test_defaults(self):
        s = runtime.resolve_settings()
        assert (s.iterations, s.mode, s.tol) == (20, "sequential", None)

    def test_environment_overrides_defaults(self, monkeypatch):
        monkeypatch.setenv("LAGRANGE_DK_ITERATIONS", "50")
        monkeypatch.setenv("LAGRANGE_DK_MODE", "simultaneous")
        monkeypatch.setenv("LAGRANGE_DK_TOL", "1e-12")
        s = runtime.resolve_settings()
        assert (s.iterations, s.mode, s.tol) == (50, "simultaneous", 1e-12)

    def test_arguments_override_environment(self, monkeypatch):
        monkeypatch.setenv("LAGRANGE_DK_ITERATIONS", "50")
        s = runtime.resolve_settings(iterations=7, mode="sequential", tol=0.5)
        assert (s.iterations, s.mode, s.tol) == (7, "sequential", 0.5)

    @pytest.mark.parametrize(
        "name,value",
        [
            ("LAGRANGE_DK_ITERATIONS", "many"),
            ("LAGRANGE_DK_ITERATIONS", "0"),
            ("LAGRANGE_DK_MODE", "jacobi"),
            ("LAGRANGE_DK_TOL", "tiny"),
        ],
    )
    def test_bad_environment(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(InvalidArgumentError):
            runtime.resolve_settings()
