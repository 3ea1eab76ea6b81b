import pytest

from modegate.maintenance.mode import (
    DEFAULT_MODE,
    DEFAULT_STATUS_PAGE_URL,
    MODES,
    BadConfigError,
    InvalidRequirementError,
    MaintenanceError,
    Mode,
    check_mode,
    mode_bits,
    mode_enabled,
    parse_requirement,
)


def test_modes_are_ordered_by_permissiveness():
    assert MODES == ("--", "r-", "rw")
    assert DEFAULT_MODE is Mode.READ_WRITE


@pytest.mark.parametrize(
    ("requirement", "current", "expected"),
    [
        ("r-", "--", False),
        ("r-", "r-", True),
        ("r-", "rw", True),
        ("rw", "--", False),
        ("rw", "r-", False),
        ("rw", "rw", True),
    ],
)
def test_mode_enabled_decision_table(requirement, current, expected):
    assert mode_enabled(requirement, current) is expected
    assert mode_enabled(Mode(requirement), Mode(current)) is expected


def test_mode_enabled_matches_bitwise_rule():
    for requirement in ("r-", "rw"):
        for current in MODES:
            read_ok = requirement[0] == "-" or current[0] == "r"
            write_ok = requirement[1] == "-" or current[1] == "w"
            assert mode_enabled(requirement, current) is (read_ok and write_ok)


def test_mode_bits_splits_read_and_write():
    assert mode_bits("rw") == ("r", "w")
    assert mode_bits(Mode.READ_ONLY) == ("r", "-")
    assert mode_bits("--") == ("-", "-")


@pytest.mark.parametrize("value", ["xx", "", "RW", "w-", "-w", "rw ", None, 1])
def test_mode_bits_rejects_unknown_values(value):
    with pytest.raises(BadConfigError) as exc_info:
        mode_bits(value)
    assert exc_info.value.status_code == 503
    assert exc_info.value.code == "http/bad-config"
    assert "--,r-,rw" in exc_info.value.message
    assert f'"{value}"' in exc_info.value.message


@pytest.mark.parametrize("requirement", ["r-", "rw"])
def test_invalid_current_mode_is_bad_config_not_maintenance(requirement):
    with pytest.raises(BadConfigError):
        check_mode(requirement, "xx")
    assert not issubclass(BadConfigError, MaintenanceError)
    assert not issubclass(MaintenanceError, BadConfigError)


def test_check_mode_raises_maintenance_with_status_page():
    with pytest.raises(MaintenanceError) as exc_info:
        check_mode(Mode.READ_WRITE, "r-")
    exc = exc_info.value
    assert exc.status_code == 503
    assert exc.code == "maintenance"
    assert exc.message == f"API undergoing maintenance, check {DEFAULT_STATUS_PAGE_URL} for more info"
    assert exc.retry_after_seconds is None


def test_check_mode_uses_configured_status_page_and_retry_after():
    with pytest.raises(MaintenanceError) as exc_info:
        check_mode("r-", "--", status_page_url="https://status.example.test", retry_after_seconds=120)
    assert "https://status.example.test" in str(exc_info.value)
    assert exc_info.value.retry_after_seconds == 120


def test_check_mode_allows_without_raising():
    assert check_mode("r-", "rw") is None
    assert check_mode("rw", "rw") is None


def test_parse_requirement_accepts_strings_and_members():
    assert parse_requirement("r-") is Mode.READ_ONLY
    assert parse_requirement(Mode.READ_WRITE) is Mode.READ_WRITE


@pytest.mark.parametrize("requirement", ["--", Mode.NO_READ_OR_WRITE, "xx", "", None])
def test_parse_requirement_rejects_invalid(requirement):
    with pytest.raises(InvalidRequirementError):
        parse_requirement(requirement)


def test_repeated_evaluations_are_stable():
    outcomes = {mode_enabled("rw", "r-") for _ in range(50)}
    assert outcomes == {False}
    outcomes = {mode_enabled("r-", "r-") for _ in range(50)}
    assert outcomes == {True}


@pytest.mark.parametrize("current", ["--", "r-", "rw"])
def test_no_read_or_write_requirement_is_never_usable(current):
    with pytest.raises(InvalidRequirementError):
        mode_enabled("--", current)
    with pytest.raises(InvalidRequirementError):
        check_mode(Mode.NO_READ_OR_WRITE, current)


def test_unknown_requirement_is_programming_error_not_bad_config():
    with pytest.raises(InvalidRequirementError):
        mode_enabled("xx", "rw")
    with pytest.raises(InvalidRequirementError):
        check_mode("xx", "rw")
    assert not issubclass(InvalidRequirementError, BadConfigError)


def test_invalid_requirement_reported_before_invalid_current_mode():
    with pytest.raises(InvalidRequirementError):
        check_mode("--", "xx")
