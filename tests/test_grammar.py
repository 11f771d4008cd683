"""Tests for simulator/grammar.py — header, state blocks, transition lines,
whitespace handling, and syntax/count errors."""

import pytest

from simulator.errors import DescriptionSyntaxError, StateCountError
from simulator.grammar import parse_description
from simulator.machine import Direction, Symbol


SINGLE = "STATES: 1\nSTART q0:\na->HALT;-;a\nb->ACCEPT;-;b\n"

BB2 = """STATES: 2
START A:
a->B;R;b
b->B;L;b

B:
a->A;L;b
b->HALT;R;b
"""


# ── Header ──────────────────────────────────────────────────────────────────

class TestHeader:
    def test_count(self):
        assert parse_description(BB2).count == 2

    def test_keyword_is_case_insensitive(self):
        desc = parse_description("sTaTeS: 1\nSTART q0:\na->HALT;-;a\nb->HALT;-;b\n")
        assert desc.count == 1

    def test_zero_states(self):
        desc = parse_description("STATES: 0\n")
        assert desc.count == 0
        assert desc.states == ()

    def test_missing_keyword(self):
        with pytest.raises(DescriptionSyntaxError) as exc:
            parse_description("STATE: 1\n")
        assert exc.value.line == 1
        assert exc.value.column == 1

    def test_leading_zero_rejected(self):
        with pytest.raises(DescriptionSyntaxError):
            parse_description("STATES: 01\n")

    def test_negative_count_rejected(self):
        with pytest.raises(DescriptionSyntaxError):
            parse_description("STATES: -1\n")

    def test_blank_lines_after_header(self):
        desc = parse_description("STATES: 1\n\n\nSTART q0:\na->HALT;-;a\nb->HALT;-;b\n")
        assert desc.states[0].name == "q0"


# ── State blocks ────────────────────────────────────────────────────────────

class TestStateBlocks:
    def test_order_and_names(self):
        desc = parse_description(BB2)
        assert [s.name for s in desc.states] == ["A", "B"]

    def test_start_marker(self):
        desc = parse_description(BB2)
        assert desc.states[0].start is True
        assert desc.states[1].start is False

    def test_start_marker_case_insensitive(self):
        desc = parse_description("STATES: 1\nstart q0:\na->HALT;-;a\nb->HALT;-;b\n")
        assert desc.states[0].start is True

    def test_start_needs_whitespace(self):
        desc = parse_description("STATES: 1\nSTART:\na->HALT;-;a\nb->HALT;-;b\n")
        assert desc.states[0].name == "START"
        assert desc.states[0].start is False

    def test_name_characters(self):
        desc = parse_description("STATES: 1\nSTART q_1.x9:\na->HALT;-;a\nb->HALT;-;b\n")
        assert desc.states[0].name == "q_1.x9"

    def test_missing_second_transition(self):
        with pytest.raises(DescriptionSyntaxError):
            parse_description("STATES: 2\nSTART q0:\na->HALT;-;a\nq1:\na->HALT;-;a\nb->HALT;-;b\n")

    def test_missing_colon(self):
        with pytest.raises(DescriptionSyntaxError) as exc:
            parse_description("STATES: 1\nSTART q0\na->HALT;-;a\nb->HALT;-;b\n")
        assert exc.value.line == 2


# ── Transition lines ────────────────────────────────────────────────────────

class TestTransitions:
    def test_fields(self):
        a_rule = parse_description(BB2).states[0].on_a
        assert a_rule.next == "B"
        assert a_rule.move is Direction.RIGHT
        assert a_rule.write is Symbol.B

    def test_directions(self):
        desc = parse_description(BB2)
        assert desc.states[0].on_b.move is Direction.LEFT
        assert parse_description(SINGLE).states[0].on_a.move is Direction.NONE

    def test_targets_stay_unresolved(self):
        desc = parse_description("STATES: 1\nSTART q0:\na->nowhere;R;a\nb->HALT;-;b\n")
        assert desc.states[0].on_a.next == "nowhere"

    def test_binding_is_positional(self):
        desc = parse_description("STATES: 1\nSTART q0:\nb->HALT;-;b\na->ACCEPT;-;a\n")
        assert desc.states[0].on_a.next == "HALT"
        assert desc.states[0].on_b.next == "ACCEPT"

    def test_spaces_and_tabs_ignored(self):
        text = "STATES:\t1\n  START   q0 :\n a -> HALT ; - ; a \n\tb->ACCEPT;\t-;b\n"
        desc = parse_description(text)
        assert desc.states[0].on_b.next == "ACCEPT"

    def test_final_newline_optional(self):
        desc = parse_description(SINGLE.rstrip("\n"))
        assert desc.states[0].on_b.write is Symbol.B

    @pytest.mark.parametrize("line", [
        "c->HALT;-;a",
        "A->HALT;-;a",
        "a->HALT;X;a",
        "a->HALT;r;a",
        "a->HALT;-;c",
        "a=>HALT;-;a",
        "a->HALT,-;a",
        "a->;-;a",
    ])
    def test_malformed(self, line):
        with pytest.raises(DescriptionSyntaxError) as exc:
            parse_description(f"STATES: 1\nSTART q0:\n{line}\nb->HALT;-;b\n")
        assert exc.value.line == 3

    def test_error_names_what_was_found(self):
        with pytest.raises(DescriptionSyntaxError) as exc:
            parse_description("STATES: 1\nSTART q0:\na->HALT;X;a\nb->HALT;-;b\n")
        assert "'X'" in str(exc.value)
        assert exc.value.column == 9


# ── Declared count ──────────────────────────────────────────────────────────

class TestStateCount:
    def test_fewer_blocks_than_declared(self):
        with pytest.raises(StateCountError):
            parse_description(SINGLE.replace("STATES: 1", "STATES: 2"))

    def test_more_blocks_than_declared(self):
        with pytest.raises(StateCountError):
            parse_description(BB2.replace("STATES: 2", "STATES: 1"))

    def test_trailing_blank_lines_are_fine(self):
        assert parse_description(SINGLE + "\n\n  \n").count == 1
