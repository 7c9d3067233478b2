"""Unit tests for top-level error reporting."""

from __future__ import annotations

import io

import pytest
import structlog
from structlog.testing import capture_logs

from errors_with_context.config import configure
from errors_with_context.kernel.errors import DebugStyle, ErrorMessage
from errors_with_context.kernel.types import Err, Ok
from errors_with_context.observability import exit_on_error, report_error


def _chain() -> ErrorMessage:
    return ErrorMessage(
        "Failed to get outputs",
        ErrorMessage("Failed to spawn process", FileNotFoundError(2, "No such file or directory")),
    )


class TestReportError:
    def test_logs_tree_and_depth(self) -> None:
        with capture_logs() as logs:
            report_error(_chain(), logger=structlog.get_logger(), event="startup.failed", attempt=1)
        [entry] = logs
        assert entry["event"] == "startup.failed"
        assert entry["log_level"] == "error"
        assert entry["depth"] == 3
        assert entry["attempt"] == 1
        assert entry["error"]["message"] == "Failed to get outputs"
        assert entry["error"]["cause"]["cause"] == {"message": "No such file or directory", "cause": None}

    def test_logs_flat_text_when_configured(self) -> None:
        configure(log_chain_as_tree=False)
        with capture_logs() as logs:
            report_error(_chain(), logger=structlog.get_logger())
        assert logs[0]["error"] == str(_chain())

    def test_reserved_extra_fields_do_not_collide(self) -> None:
        with capture_logs() as logs:
            report_error(_chain(), logger=structlog.get_logger(), depth=99, error="ignored", job="sync")
        [entry] = logs
        assert entry["depth"] == 3
        assert entry["error"]["message"] == "Failed to get outputs"
        assert entry["job"] == "sync"


class TestExitOnError:
    def test_success_passes_through(self) -> None:
        @exit_on_error
        def main() -> Ok[int]:
            return Ok(7)

        assert main().unwrap() == 7

    def test_plain_return_value(self) -> None:
        assert exit_on_error(lambda: "done")() == "done"

    def test_raised_chain_exits_with_status_one(self) -> None:
        stream = io.StringIO()

        def main() -> None:
            raise _chain()

        with pytest.raises(SystemExit) as info:
            exit_on_error(main, stream=stream)()
        assert info.value.code == 1
        assert stream.getvalue() == (
            "Error: Failed to get outputs\n"
            "  caused by: Failed to spawn process\n"
            "  caused by: FileNotFoundError(2, 'No such file or directory')\n"
        )

    def test_returned_err_exits(self) -> None:
        stream = io.StringIO()
        with pytest.raises(SystemExit):
            exit_on_error(lambda: Err(_chain()), stream=stream)()
        assert stream.getvalue().startswith("Error: Failed to get outputs\n")

    def test_struct_debug_style(self) -> None:
        configure(debug_style=DebugStyle.STRUCT)
        stream = io.StringIO()
        with pytest.raises(SystemExit):
            exit_on_error(lambda: ErrorMessage.err("Failed"), stream=stream)()
        assert stream.getvalue() == "Error: ErrorMessage(message='Failed', cause=None)\n"

    def test_other_exceptions_propagate(self) -> None:
        def main() -> None:
            raise RuntimeError("not a chain")

        with pytest.raises(RuntimeError):
            exit_on_error(main)()
