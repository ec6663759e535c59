"""Tests for host event handling in a timer session."""

from pathlib import Path

import pytest

from cpptimer.config import BuildConfig, CppTimerConfig, TimerConfig
from cpptimer.core import TimerSession, TimerState
from cpptimer.models import (
    ActiveFileChanged,
    BuildCompleted,
    FilesCreated,
    StopRequested,
    TimingRecord,
)
from tests.fakes import FakeClock, FakeSurface, ManualScheduler


@pytest.fixture
def session(
    workspace: Path,
    surface: FakeSurface,
    scheduler: ManualScheduler,
    clock: FakeClock,
    notifications: list[str],
) -> TimerSession:
    return TimerSession(workspace, surface, scheduler, notifications.append, clock=clock)


class TestFilesCreated:
    """Tests for file creation events."""

    def test_records_tracked_files(self, session: TimerSession, workspace: Path) -> None:
        """New .cpp files get a record; other files are ignored."""
        a = str(workspace / "a.cpp")
        session.handle(FilesCreated((a, str(workspace / "notes.txt"))))
        assert session.store.load() == {a: TimingRecord(created_at=0)}

    def test_existing_record_not_reset(
        self, session: TimerSession, workspace: Path, clock: FakeClock
    ) -> None:
        """Re-creating a tracked file keeps its original creation time."""
        a = str(workspace / "a.cpp")
        session.handle(FilesCreated((a,)))
        clock.now = 9000
        session.handle(FilesCreated((a,)))
        assert session.store.get(a).created_at == 0

    def test_uses_configured_extensions(
        self, workspace: Path, surface: FakeSurface, scheduler: ManualScheduler,
        clock: FakeClock,
    ) -> None:
        """Extensions come from configuration."""
        config = CppTimerConfig(timer=TimerConfig(extensions=["cc", ".CXX"]))
        session = TimerSession(workspace, surface, scheduler, print, config=config, clock=clock)
        session.handle(FilesCreated(("/ws/a.cc", "/ws/b.cxx", "/ws/c.cpp")))
        assert sorted(session.store.load()) == ["/ws/a.cc", "/ws/b.cxx"]

    def test_no_workspace_is_noop(
        self, surface: FakeSurface, scheduler: ManualScheduler, clock: FakeClock
    ) -> None:
        """Without a workspace nothing is recorded."""
        session = TimerSession(None, surface, scheduler, print, clock=clock)
        session.handle(FilesCreated(("/ws/a.cpp",)))
        assert session.store.load() == {}


class TestActiveFileChanged:
    """Tests for active file changes."""

    def test_tracked_file_starts_timer(
        self, session: TimerSession, surface: FakeSurface
    ) -> None:
        session.handle(ActiveFileChanged("/ws/a.cpp"))
        assert session.controller.state is TimerState.RUNNING
        assert surface.text == "a.cpp: 0s"

    def test_other_file_clears(self, session: TimerSession, surface: FakeSurface) -> None:
        """Switching to a non-C++ file stops and blanks the timer."""
        session.handle(ActiveFileChanged("/ws/a.cpp"))
        session.handle(ActiveFileChanged("/ws/README.md"))
        assert session.controller.state is TimerState.IDLE
        assert surface.text == ""

    def test_no_active_file_clears(self, session: TimerSession, surface: FakeSurface) -> None:
        session.handle(ActiveFileChanged("/ws/a.cpp"))
        session.handle(ActiveFileChanged(None))
        assert surface.text == ""


class TestBuildCompleted:
    """Tests for build completion events."""

    def test_command_names_source(
        self, session: TimerSession, workspace: Path, clock: FakeClock,
        notifications: list[str],
    ) -> None:
        """The compiled file is found from the compiler command line."""
        a = str(workspace / "a.cpp")
        session.handle(FilesCreated((a,)))
        clock.now = 5000
        session.handle(BuildCompleted(0, "Build", command="g++ a.cpp -o a"))
        assert session.store.get(a).compiled_at == 5000
        assert notifications == ["First successful compilation of a.cpp after 5s"]

    def test_falls_back_to_tracked_file(
        self, session: TimerSession, clock: FakeClock, surface: FakeSurface
    ) -> None:
        """A build that names no source completes the active file."""
        session.handle(ActiveFileChanged("/ws/a.cpp"))
        clock.now = 3000
        session.handle(BuildCompleted(0, "cmake build", command="cmake --build ."))
        assert session.store.get("/ws/a.cpp").compiled_at == 3000
        assert surface.text == "a.cpp: 3s (done)"

    def test_failed_build_ignored(self, session: TimerSession) -> None:
        session.handle(ActiveFileChanged("/ws/a.cpp"))
        session.handle(BuildCompleted(1, "build"))
        assert session.store.get("/ws/a.cpp").compiled_at is None

    def test_non_build_task_ignored(self, session: TimerSession) -> None:
        """Only tasks labelled as builds count."""
        session.handle(ActiveFileChanged("/ws/a.cpp"))
        session.handle(BuildCompleted(0, "run tests"))
        assert session.store.get("/ws/a.cpp").compiled_at is None

    def test_custom_keyword(
        self, workspace: Path, surface: FakeSurface, scheduler: ManualScheduler,
        clock: FakeClock,
    ) -> None:
        config = CppTimerConfig(build=BuildConfig(keyword="compile"))
        session = TimerSession(workspace, surface, scheduler, print, config=config, clock=clock)
        session.handle(ActiveFileChanged("/ws/a.cpp"))
        session.handle(BuildCompleted(0, "Compile project"))
        assert session.store.get("/ws/a.cpp").compiled_at == 0

    def test_no_tracked_file(self, session: TimerSession, notifications: list[str]) -> None:
        """A build with nothing to attribute it to changes nothing."""
        session.handle(BuildCompleted(0, "build"))
        assert session.store.load() == {}
        assert notifications == []


class TestLifecycle:
    """Tests for activation, stop requests and teardown."""

    def test_activate_starts_initial_file(
        self, session: TimerSession, surface: FakeSurface
    ) -> None:
        session.activate("/ws/a.cpp")
        assert session.controller.tracked_path == "/ws/a.cpp"
        assert surface.text == "a.cpp: 0s"

    def test_activate_ignores_untracked_type(self, session: TimerSession) -> None:
        session.activate("/ws/a.py")
        assert session.controller.state is TimerState.IDLE

    def test_stop_requested(
        self, session: TimerSession, surface: FakeSurface, notifications: list[str]
    ) -> None:
        """The stop command stops the timer and tells the user."""
        session.activate("/ws/b.cpp")
        session.handle(StopRequested())
        assert surface.text == "b.cpp: 0s (stopped)"
        assert notifications == ["Timer manually stopped."]
        assert session.store.get("/ws/b.cpp").compiled_at is None

    def test_deactivate_releases_surface(
        self, session: TimerSession, surface: FakeSurface, scheduler: ManualScheduler
    ) -> None:
        session.activate("/ws/a.cpp")
        session.deactivate()
        assert scheduler.active_tasks == []
        assert surface.disposed

    def test_context_manager(
        self, workspace: Path, surface: FakeSurface, scheduler: ManualScheduler,
        clock: FakeClock,
    ) -> None:
        with TimerSession(workspace, surface, scheduler, print, clock=clock) as session:
            session.activate("/ws/a.cpp")
        assert surface.disposed

    def test_unknown_event_rejected(self, session: TimerSession) -> None:
        with pytest.raises(TypeError, match="Unknown host event"):
            session.handle("build")  # type: ignore[arg-type]
