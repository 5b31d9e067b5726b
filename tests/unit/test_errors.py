"""Test suite for action outcome classification."""

import aiohttp

from todosync.errors import (
    ERROR_PREFIXES,
    ActionResult,
    Outcome,
    classify_failure,
    classify_status,
    describe_failure,
    is_success,
    transport_diagnostic,
)


class TestStatusClassification:
    """Test status classification."""

    def test_success_range(self):
        assert is_success(200)
        assert is_success(201)
        assert is_success(204)
        assert is_success(299)

    def test_outside_success_range(self):
        assert not is_success(199)
        assert not is_success(300)
        assert not is_success(404)
        assert not is_success(500)

    def test_classify_success(self):
        result = classify_status("ping", 200, "HTTP 200\nok")
        assert result.outcome == Outcome.SUCCESS
        assert result.ok is True
        assert result.status == 200
        assert result.diagnostic == "HTTP 200\nok"

    def test_classify_protocol_error(self):
        result = classify_status("load_todos", 503, "HTTP 503\n")
        assert result.outcome == Outcome.PROTOCOL_ERROR
        assert result.ok is False
        assert result.error is None


class TestTransportDiagnostics:
    """Test transport failure diagnostics."""

    def test_prefixes(self):
        assert ERROR_PREFIXES == {
            "ping": "Fetch error: ",
            "load_todos": "Load error: ",
            "create_todo": "Create error: ",
            "toggle_todo": "Update error: ",
            "delete_todo": "Delete error: ",
        }

    def test_diagnostic_uses_message(self):
        error = aiohttp.ClientConnectionError("Connection refused")
        assert transport_diagnostic("delete_todo", error) == "Delete error: Connection refused"

    def test_empty_message_falls_back_to_type(self):
        assert describe_failure(TimeoutError()) == "TimeoutError"

    def test_classify_failure(self):
        error = OSError("unreachable")
        result = classify_failure("create_todo", error)
        assert result.outcome == Outcome.TRANSPORT_ERROR
        assert result.diagnostic == "Create error: unreachable"
        assert result.status is None
        assert result.error is error

    def test_skipped_is_not_ok(self):
        assert ActionResult(action="create_todo", outcome=Outcome.SKIPPED).ok is False
