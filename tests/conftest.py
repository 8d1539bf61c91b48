"""Shared pytest fixtures that write Swift reducer samples into a temp workspace."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

COUNTER_FEATURE = """\
import ComposableArchitecture

@Reducer
struct CounterFeature {
  @ObservableState
  struct State: Equatable {
    var count = 0
    var isLoading = false
  }

  enum Action {
    case incrementTapped
    case decrementTapped
  }

  @Dependency(\\.continuousClock) var clock

  var body: some ReducerOf<Self> {
    Reduce { state, action in
      switch action {
      case .incrementTapped:
        state.count += 1
        return .none
      case .decrementTapped:
        state.count -= 1
        return .none
      }
    }
  }
}
"""


def state_source(property_count: int) -> str:
    """Return a reducer whose State declares ``property_count`` vars."""
    props = "\n".join(f"    var field{index} = {index}" for index in range(property_count))
    return f"@ObservableState\nstruct State {{\n{props}\n}}\n"


def closure_source(closure_count: int) -> str:
    """Return a reducer injecting ``closure_count`` Effect-returning closures."""
    props = "\n".join(f"  var onEvent{index}: (String) -> Effect<Action>" for index in range(closure_count))
    return f"struct ClosureFeature {{\n{props}\n}}\n"


def private_funcs_source(count: int, name: str = "update") -> str:
    """Return a reducer with ``count`` single-line private method declarations."""
    funcs = "\n".join(f"  private func {name}{index}() {{" for index in range(count))
    return f"struct Methods {{\n{funcs}\n}}\n"


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_app_root(fixtures_root: Path) -> Path:
    """Return the fixture app with clean, problematic and excluded reducers."""
    return fixtures_root / "repos" / "sample_app"


@pytest.fixture
def write_swift(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a writer that places Swift source at a path relative to ``tmp_path``."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def counter_source() -> str:
    return COUNTER_FEATURE


@pytest.fixture
def make_state_source() -> Callable[[int], str]:
    return state_source


@pytest.fixture
def make_closure_source() -> Callable[[int], str]:
    return closure_source


@pytest.fixture
def make_private_funcs_source() -> Callable[..., str]:
    return private_funcs_source
