import logging

import pytest

from version_constraints.errors import (
    InvalidOperatorError,
    UnsupportedOperatorError,
    VersionParseError,
)
from version_constraints.models.version import Version
from version_constraints.parsers.comparator import (
    VersionComparator,
    parse_operator,
    parse_version_comparator,
)


def _allows(constraint: str, candidate: str) -> bool:
    return parse_version_comparator(constraint).allows(Version.parse(candidate))


@pytest.mark.parametrize("op", ["=", "==", ">", "<", ">=", "<="])
def test_parse_operator_returns_prefix(op: str) -> None:
    assert parse_operator(f"{op}1.2.3") == op


@pytest.mark.parametrize("raw", [">==1.2.3", "<<<1.0", "<=>1.2.3-1", "==="])
def test_parse_operator_rejects_long_runs(raw: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        with pytest.raises(InvalidOperatorError) as excinfo:
            parse_operator(raw)
    assert "cannot contain more than two characters" in str(excinfo.value)
    assert raw in str(excinfo.value)
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_parse_operator_without_operator_logs_debug() -> None:
    logger = logging.getLogger("test.injected")
    records: list[logging.LogRecord] = []

    class _Collect(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    handler = _Collect(level=logging.DEBUG)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        assert parse_operator("1.2.3", logger=logger) == ""
    finally:
        logger.removeHandler(handler)

    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert "no dependency operator" in records[0].getMessage()


def test_parse_operator_stops_at_first_other_character() -> None:
    assert parse_operator(">1.0=") == ">"
    assert parse_operator("!=1.0") == ""


def test_parse_empty_constraint_returns_zero_value() -> None:
    comparator = parse_version_comparator("")
    assert comparator == VersionComparator()
    assert comparator.is_unconstrained


def test_parse_empty_constraint_still_extracts_operator(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("test.empty_constraint")
    with caplog.at_level(logging.DEBUG, logger="test.empty_constraint"):
        assert parse_version_comparator("", logger=logger) == VersionComparator()

    messages = [r.getMessage() for r in caplog.records if r.name == "test.empty_constraint"]
    assert len(messages) == 1
    assert "no dependency operator" in messages[0]


def test_parse_constraint_wraps_operator_error() -> None:
    with pytest.raises(InvalidOperatorError) as excinfo:
        parse_version_comparator("<=>1.2.3-1")
    assert str(excinfo.value).startswith("failed to parse operator:")
    assert isinstance(excinfo.value.__cause__, InvalidOperatorError)


@pytest.mark.parametrize("raw", ["!^1.2.3-1", "=", ">=abc", "1.2.3-1-2"])
def test_parse_constraint_wraps_version_error(raw: str) -> None:
    with pytest.raises(VersionParseError) as excinfo:
        parse_version_comparator(raw)
    assert str(excinfo.value).startswith("failed to parse version:")


def test_parse_constraint_keeps_operator_and_version() -> None:
    comparator = parse_version_comparator(">=4.1.1-2")
    assert comparator.operator == ">="
    assert comparator.version == Version.parse("4.1.1-2")
    assert str(comparator) == ">=4.1.1-2"
    assert not comparator.is_unconstrained


def test_greater_or_equal() -> None:
    assert _allows(">=1.2.3", "1.2.3")
    assert _allows(">=1.2.3", "2.0.0")
    assert not _allows(">=1.2.3", "1.0.0")


def test_greater_than() -> None:
    assert not _allows(">1.2.3-4", "1.2.3-4")
    assert _allows(">1.2.3-4", "2.2.3-4")
    assert not _allows(">1.2.3-4", "0.2.3-4")


def test_less_than() -> None:
    assert not _allows("<1.2.3-4", "1.2.3-4")
    assert not _allows("<1.2.3-4", "2.2.3-4")
    assert _allows("<1.2.3-4", "0.2.3-4")


def test_less_or_equal() -> None:
    assert _allows("<=1.2.3-4", "1.2.3-4")
    assert not _allows("<=1.2.3-4", "2.2.3-4")
    assert _allows("<=1.2.3-4", "0.2.3-4")


@pytest.mark.parametrize("candidate", ["1.0.0", "1.0", "1.0.1", "0.9.9", "1.0.0-1"])
def test_single_and_double_equal_agree(candidate: str) -> None:
    assert _allows("=1.0.0", candidate) == _allows("==1.0.0", candidate)


def test_equal() -> None:
    assert _allows("=1.2.3-4", "1.2.3-4")
    assert not _allows("=1.2.3-4", "2.2.3-4")
    assert not _allows("=1.2.3-4", "0.2.3-4")


def test_no_operator_means_equality() -> None:
    assert _allows("1.2.3.4", "1.2.3.4")
    assert not _allows("1.2.3.4", "1.2.3.5")


@pytest.mark.parametrize("candidate", [Version(), Version.parse("0.0.1"), Version.parse("99.1.2.3-4")])
def test_unconstrained_allows_everything(candidate: Version) -> None:
    assert VersionComparator().allows(candidate)
    assert VersionComparator(version=Version(), operator="").allows(candidate)


@pytest.mark.parametrize("candidate", [Version(), Version.parse("1.0.0"), Version.parse("2.0.0")])
def test_unsupported_operator_raises(candidate: Version) -> None:
    comparator = VersionComparator(version=Version.parse("1.0.0"), operator="!=")
    with pytest.raises(UnsupportedOperatorError) as excinfo:
        comparator.allows(candidate)
    assert "!=" in str(excinfo.value)
    assert excinfo.value.operator == "!="


def test_prohibiting_constraint() -> None:
    assert not _allows("<=0.0.0", "0.0.1")


def test_comparator_is_immutable() -> None:
    comparator = parse_version_comparator("=1.0.0")
    with pytest.raises(AttributeError):
        comparator.operator = ">"  # type: ignore[misc]
