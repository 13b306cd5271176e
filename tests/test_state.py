from tsmanip.core.conversion import TimeUnit
from tsmanip.core.state import (
    apply_offset,
    commit_or_revert,
    edit_input,
    initial_state,
    refresh_to_now,
    toggle_unit,
    with_copy_feedback,
)


def test_initial_state():
    s = initial_state(1700000000)
    assert s.canonical_seconds == 1700000000
    assert s.unit is TimeUnit.SECONDS
    assert s.raw_input_text == "1700000000"
    assert s.input_is_valid and not s.copy_feedback_active
    assert s.field_state == "VALID"


def test_edit_input_valid_values():
    s = initial_state(5)
    for n in [0, 1, 999, 1700000000, 10**12, 10**12 + 1, 1700007200000]:
        nxt = edit_input(s, str(n))
        assert nxt.input_is_valid
        assert nxt.raw_input_text == str(n)
        expected = n if n <= 10**12 else n // 1000
        assert nxt.canonical_seconds == expected


def test_edit_input_invalid_keeps_value():
    s = initial_state(1700000000)
    for text in ["007", "12a", "-5", "", " 1"]:
        nxt = edit_input(s, text)
        assert not nxt.input_is_valid
        assert nxt.field_state == "INVALID"
        assert nxt.raw_input_text == text
        assert nxt.canonical_seconds == 1700000000


def test_edit_input_unit_strict():
    s = toggle_unit(initial_state(0))
    assert edit_input(s, "5000", unit_strict=True).canonical_seconds == 5
    # default: small numbers are seconds even when ms is selected
    assert edit_input(s, "5000").canonical_seconds == 5000


def test_commit_or_revert():
    s = initial_state(1700000000)
    bad = edit_input(s, "-5")
    reverted = commit_or_revert(bad)
    assert reverted.input_is_valid
    assert reverted.raw_input_text == "1700000000"
    assert commit_or_revert(reverted) is reverted


def test_commit_or_revert_uses_current_unit():
    s = toggle_unit(initial_state(1700000000))
    reverted = commit_or_revert(edit_input(s, "oops"))
    assert reverted.raw_input_text == "1700000000000"


def test_toggle_unit_is_involutive():
    s = initial_state(1700000000)
    once = toggle_unit(s)
    assert once.raw_input_text == "1700000000000"
    assert once.canonical_seconds == s.canonical_seconds
    twice = toggle_unit(once)
    assert twice.raw_input_text == s.raw_input_text
    assert twice.unit is TimeUnit.SECONDS


def test_toggle_unit_keeps_validity_flag():
    bad = edit_input(initial_state(10), "x")
    assert not toggle_unit(bad).input_is_valid


def test_offset_round_trip():
    s = initial_state(1700000000)
    moved = apply_offset(s, 604800)
    assert moved.canonical_seconds == 1700604800
    assert apply_offset(moved, -604800).canonical_seconds == 1700000000


def test_offset_and_refresh_clear_invalid():
    bad = edit_input(initial_state(100), "abc")
    assert apply_offset(bad, 60).input_is_valid
    assert apply_offset(bad, 60).raw_input_text == "160"
    fresh = refresh_to_now(toggle_unit(bad), 200)
    assert fresh.input_is_valid and fresh.raw_input_text == "200000"


def test_offset_may_go_negative():
    s = apply_offset(initial_state(30), -60)
    assert s.canonical_seconds == -30
    assert s.raw_input_text == "-30"


def test_copy_feedback_flag():
    s = initial_state(1)
    on = with_copy_feedback(s, True)
    assert on.copy_feedback_active
    assert with_copy_feedback(on, True) is on
    assert not with_copy_feedback(on, False).copy_feedback_active
