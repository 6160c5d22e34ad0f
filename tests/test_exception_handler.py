from snippetdoc.exception_handler import ErrorHandler
from snippetdoc.exceptions import MalformedSource, WriteFailed


def test_empty_handler_has_no_report():
    assert ErrorHandler().format_error_report() == ""


def test_report_lists_first_five_failures_then_remainder():
    handler = ErrorHandler()
    for index in range(6):
        handler.collect(MalformedSource(f"broken{index}.codesnippet", "invalid XML"))

    report = handler.format_error_report()
    lines = report.splitlines()

    assert "Error Summary: 6 errors occurred" in report
    assert "  • MalformedSource: 6" in lines
    for index in range(5):
        assert f"  • broken{index}.codesnippet (parse): invalid XML" in lines
    assert "broken5.codesnippet" not in report
    assert lines[-1] == "  ... and 1 more"


def test_summary_groups_by_type_and_keeps_stage():
    handler = ErrorHandler()
    handler.collect(MalformedSource("a.codesnippet", "invalid XML"))
    handler.collect(WriteFailed("README.md", "disk full"))

    summary = handler.get_error_summary()

    assert summary["error_types"] == {"MalformedSource": 1, "WriteFailed": 1}
    assert summary["failed_files"][1] == {"file": "README.md", "error": "disk full", "stage": "write"}

    handler.clear_errors()
    assert handler.get_error_summary()["total_errors"] == 0
