import pytest

from integrity_rules.report_options import (
    DEFAULT_REPORT_FORMAT,
    DEFAULT_REPORT_LEVEL,
    Action,
    ReportFormat,
    ReportLevel,
    get_report_format,
    get_report_format_string,
    get_report_level,
    get_report_level_string,
    get_summary_string,
)


@pytest.mark.parametrize("level", list(ReportLevel))
def test_report_level_round_trip(level):
    assert get_report_level(get_report_level_string(level)) is level


@pytest.mark.parametrize("fmt", list(ReportFormat))
def test_report_format_round_trip(fmt):
    assert get_report_format(get_report_format_string(fmt)) is fmt


def test_report_level_names_from_source():
    assert get_report_level("added_removed_entries") is ReportLevel.ADDED_REMOVED_ENTRIES
    assert get_report_level_string(ReportLevel.LIST_ENTRIES) == "list_entries"


def test_report_format_names_from_source():
    assert get_report_format("json") is ReportFormat.JSON
    assert get_report_format_string(ReportFormat.PLAIN) == "plain"


@pytest.mark.parametrize("name", ["", "MINIMAL", "verbose", "summary "])
def test_unknown_report_level(name):
    assert get_report_level(name) is None


@pytest.mark.parametrize("name", ["", "JSON", "xml"])
def test_unknown_report_format(name):
    assert get_report_format(name) is None


@pytest.mark.parametrize("value", [0, 8, -1])
def test_invalid_report_level_string(value):
    with pytest.raises(ValueError):
        get_report_level_string(value)


@pytest.mark.parametrize("value", [0, 3])
def test_invalid_report_format_string(value):
    with pytest.raises(ValueError):
        get_report_format_string(value)


def test_levels_are_ordered():
    names = [
        "minimal",
        "summary",
        "database_attributes",
        "list_entries",
        "changed_attributes",
        "added_removed_attributes",
        "added_removed_entries",
    ]
    levels = [get_report_level(name) for name in names]
    assert levels == sorted(levels)
    assert levels == list(ReportLevel)
    assert get_report_level("summary") < get_report_level("list_entries")


def test_defaults():
    assert get_report_level_string(DEFAULT_REPORT_LEVEL) == "changed_attributes"
    assert get_report_format_string(DEFAULT_REPORT_FORMAT) == "plain"


def test_summary_init():
    assert get_summary_string(Action.INIT, 0, 0, 0) == "AIDE successfully initialized database."
    assert get_summary_string(Action.INIT, 3, 1, 2) == "AIDE successfully initialized database."


def test_summary_compare_with_differences():
    expected = "AIDE found differences between database and filesystem!!"
    assert get_summary_string(Action.COMPARE, 1, 0, 0) == expected
    assert get_summary_string(Action.COMPARE, 0, 1, 0) == expected
    assert get_summary_string(Action.COMPARE, 0, 0, 1) == expected


def test_summary_compare_without_differences():
    assert (
        get_summary_string(Action.COMPARE, 0, 0, 0)
        == "AIDE found NO differences between database and filesystem. Looks okay!!"
    )


def test_summary_diff():
    assert (
        get_summary_string(Action.DIFF, 0, 2, 0)
        == "AIDE found differences between the two databases!!"
    )
    assert (
        get_summary_string(Action.DIFF, 0, 0, 0)
        == "AIDE found NO differences between the two databases. Looks okay!!"
    )


def test_summary_compare_takes_precedence_over_diff():
    both = Action.COMPARE | Action.DIFF
    assert get_summary_string(both, 1, 0, 0) == get_summary_string(Action.COMPARE, 1, 0, 0)
    assert get_summary_string(int(both), 0, 0, 0) == get_summary_string(Action.COMPARE, 0, 0, 0)


def test_summary_accepts_plain_int_action():
    assert get_summary_string(int(Action.DIFF), 1, 1, 1) == get_summary_string(Action.DIFF, 1, 1, 1)