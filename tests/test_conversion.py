from tsmanip.core.conversion import (
    SUPPORTED_DELTAS,
    TIME_INTERVALS,
    TimeUnit,
    parse_input,
    render,
    to_milliseconds,
    to_seconds,
)


def test_parse_input_accepts_canonical_integers():
    assert parse_input("0") == 0
    assert parse_input("1700000000") == 1700000000
    assert parse_input("1700007200000") == 1700007200000


def test_parse_input_rejects_malformed_text():
    for text in ["", "007", " 5", "5 ", "+5", "-5", "1_000", "1.5", "12abc", "abc", "１２"]:
        assert parse_input(text) is None, text


def test_to_seconds_magnitude_heuristic():
    assert to_seconds(10**12) == 10**12  # boundary stays seconds
    assert to_seconds(10**12 + 1) == (10**12 + 1) // 1000
    assert to_seconds(1700007200999) == 1700007200
    assert to_seconds(42) == 42


def test_to_seconds_strict_unit():
    assert to_seconds(1500, unit=TimeUnit.MILLISECONDS) == 1
    assert to_seconds(1700007200000, unit=TimeUnit.SECONDS) == 1700007200000


def test_render_and_milliseconds():
    assert to_milliseconds(1700003600) == 1700003600000
    assert render(1700003600, TimeUnit.SECONDS) == "1700003600"
    assert render(1700003600, TimeUnit.MILLISECONDS) == "1700003600000"


def test_interval_menu():
    assert [s for _, s in TIME_INTERVALS] == [60, 1800, 3600, 86400, 604800]
    assert SUPPORTED_DELTAS == {60, -60, 1800, -1800, 3600, -3600, 86400, -86400, 604800, -604800}


def test_unit_toggled():
    assert TimeUnit.SECONDS.toggled() is TimeUnit.MILLISECONDS
    assert TimeUnit.MILLISECONDS.toggled() is TimeUnit.SECONDS
    assert TimeUnit.MILLISECONDS.label == "ms"
