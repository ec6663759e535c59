"""Tests for output formatting."""

import io
import json

from rich.console import Console

from cpptimer.output import OutputContext, get_output_context, set_output_context


def _ctx(json_mode: bool = False) -> tuple[OutputContext, io.StringIO]:
    output = io.StringIO()
    console = Console(file=output, force_terminal=False)
    return OutputContext(console=console, json_mode=json_mode), output


class TestOutputContext:
    """Tests for OutputContext."""

    def test_print_in_normal_mode(self) -> None:
        ctx, output = _ctx()
        ctx.print("Hello world")
        assert "Hello world" in output.getvalue()

    def test_print_suppressed_in_json_mode(self) -> None:
        ctx, output = _ctx(json_mode=True)
        ctx.print("Hello world")
        assert output.getvalue() == ""

    def test_result_json(self, capsys) -> None:
        ctx, _ = _ctx(json_mode=True)
        ctx.result({"status": "ok"}, "Success message")
        assert json.loads(capsys.readouterr().out) == {"status": "ok"}

    def test_result_message(self) -> None:
        ctx, output = _ctx()
        ctx.result({"status": "ok"}, "Success message")
        assert "Success message" in output.getvalue()

    def test_success_json_merges_data(self, capsys) -> None:
        ctx, _ = _ctx(json_mode=True)
        ctx.success("Tracking a.cpp", {"new": True})
        assert json.loads(capsys.readouterr().out) == {"success": "Tracking a.cpp", "new": True}

    def test_success_normal_mode(self) -> None:
        ctx, output = _ctx()
        ctx.success("Tracking a.cpp", {"new": True})
        assert "Tracking a.cpp" in output.getvalue()

    def test_error_normal_mode(self) -> None:
        ctx, output = _ctx()
        ctx.error("Something failed")
        assert "Error: Something failed" in output.getvalue()

    def test_error_json_mode(self, capsys) -> None:
        ctx, _ = _ctx(json_mode=True)
        ctx.error("Something failed")
        assert json.loads(capsys.readouterr().out) == {"error": "Something failed"}

    def test_notify_normal_mode(self) -> None:
        ctx, output = _ctx()
        ctx.notify("First successful compilation of a.cpp after 5s")
        assert "First successful compilation of a.cpp after 5s" in output.getvalue()

    def test_notify_json_mode(self, capsys) -> None:
        ctx, _ = _ctx(json_mode=True)
        ctx.notify("Timer manually stopped.")
        assert json.loads(capsys.readouterr().out) == {"notification": "Timer manually stopped."}


class TestGlobalContext:
    """Tests for the process-wide output context."""

    def test_set_and_get(self) -> None:
        ctx, _ = _ctx()
        set_output_context(ctx)
        try:
            assert get_output_context() is ctx
        finally:
            set_output_context(None)  # type: ignore[arg-type]

    def test_default_context(self) -> None:
        set_output_context(None)  # type: ignore[arg-type]
        assert get_output_context().json_mode is False
