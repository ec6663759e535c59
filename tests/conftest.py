"""Shared test fixtures for cpptimer tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from cpptimer.core import MetadataStore, TimerController
from tests.fakes import FakeClock, FakeSurface, ManualScheduler


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create an empty workspace root directory."""
    root = tmp_path / "ws"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at t=0."""
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> ManualScheduler:
    """Scheduler that advances the fake clock on every tick."""
    return ManualScheduler(clock)


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def store(workspace: Path) -> MetadataStore:
    """Metadata store rooted in the test workspace."""
    return MetadataStore(workspace)


@pytest.fixture
def controller(
    store: MetadataStore,
    surface: FakeSurface,
    scheduler: ManualScheduler,
    clock: FakeClock,
) -> TimerController:
    return TimerController(store, surface, scheduler, clock=clock)


@pytest.fixture
def notifications() -> list[str]:
    """Collected user notifications."""
    return []
