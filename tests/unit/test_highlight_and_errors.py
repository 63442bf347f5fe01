from hr_datatable.application.highlight import HighlightTracker
from hr_datatable.exceptions import BulkActionError, InvalidPageSizeError
from hr_datatable.infrastructure.errors.error_mapper import ErrorMapper


def test_highlight_expires_after_window(clock) -> None:
    tracker = HighlightTracker(seconds=10, now=clock)
    tracker.mark("e-7")

    clock.advance(9.5)
    assert tracker.is_highlighted("e-7")
    assert not tracker.is_highlighted("e-1")

    clock.advance(0.5)
    assert tracker.current is None


def test_new_mark_restarts_window(clock) -> None:
    tracker = HighlightTracker(seconds=10, now=clock)
    tracker.mark("e-1")
    clock.advance(8)
    tracker.mark("e-2")
    clock.advance(8)

    assert tracker.current == "e-2"
    tracker.mark(None)
    assert tracker.current == "e-2"


def test_error_mapper_known_code() -> None:
    error = InvalidPageSizeError(code="INVALID_PAGE_SIZE", message="bad", details={"page_size": 7})

    payload = ErrorMapper.to_payload(error)

    assert payload["code"] == "INVALID_PAGE_SIZE"
    assert payload["details"] == {"page_size": 7}
    assert "5, 10, 20 or 50" in payload["suggestion"]


def test_error_mapper_unknown_code_keeps_message() -> None:
    error = BulkActionError(code="SOMETHING_ELSE", message="Remote rejected ids")

    assert ErrorMapper.to_payload(error)["message"] == "Remote rejected ids"
    assert str(error) == "SOMETHING_ELSE: Remote rejected ids"


def test_error_mapper_plain_exception() -> None:
    message = ErrorMapper.to_display_message(RuntimeError("boom"))

    assert message.startswith("[INTERNAL_ERROR] boom")
