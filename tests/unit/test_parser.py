"""
Unit tests for src/cht_editor/codec/parser.py

Coverage plan
─────────────
happy path     → 8 tests  (header, fields, decode, ids, names)
header errors  → 4 tests
block errors   → 4 tests  (truncated block, missing separator)
edge cases     → 6 tests  (CRLF, trailing blanks, stray lines, mismatch)
"""

import pytest

from cht_editor.codec.parser import iter_blocks, parse, split_field
from cht_editor.exceptions import (
    FieldFormatError,
    HeaderError,
    ParseError,
    StructuralError,
)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

_ONE_CHEAT = (
    "cheats = 1\n"
    "\n"
    'cheat0_desc = "Infinite HP"\n'
    'cheat0_code = "ABCD1234+EF01"\n'
    "cheat0_enable = true"
)


def _block(index: int, desc: str, code: str, enabled: str = "false") -> str:
    return (
        "\n"
        f'cheat{index}_desc = "{desc}"\n'
        f'cheat{index}_code = "{code}"\n'
        f"cheat{index}_enable = {enabled}"
    )


def _file(count: int, *blocks: str) -> str:
    return f"cheats = {count}\n" + "\n".join(blocks)


# ─────────────────────────────────────────────────────────────────────────────
# 1. Happy path
# ─────────────────────────────────────────────────────────────────────────────

class TestParse:

    def test_single_cheat(self):
        doc = parse(_ONE_CHEAT)
        assert doc.cheats_count == 1
        assert len(doc.cheats) == 1
        cheat = doc.cheats[0]
        assert cheat.description == "Infinite HP"
        assert cheat.code == "ABCD1234 EF01"
        assert cheat.enabled is True

    def test_several_cheats_keep_file_order(self):
        text = _file(
            3,
            _block(0, "A", "11111111+2222"),
            _block(1, "B", "33333333+44444444", "true"),
            _block(2, "C", "55555555"),
        )
        doc = parse(text)
        assert [c.description for c in doc.cheats] == ["A", "B", "C"]
        assert [c.enabled for c in doc.cheats] == [False, True, False]

    def test_action_replay_code_is_decoded(self):
        doc = parse(_file(1, _block(0, "AR", "ABCD1234+EF010203")))
        assert doc.cheats[0].code == "ABCD1234\nEF010203"

    @pytest.mark.parametrize("value", ["false", "True", "TRUE", "1", "yes", ""])
    def test_enabled_only_for_literal_true(self, value):
        doc = parse(_file(1, _block(0, "X", "00", value)))
        assert doc.cheats[0].enabled is False

    def test_enabled_tolerates_surrounding_whitespace(self):
        doc = parse(_file(1, _block(0, "X", "00", " true ")))
        assert doc.cheats[0].enabled is True

    def test_every_entry_gets_a_distinct_id(self):
        doc = parse(_file(2, _block(0, "Same", "00"), _block(1, "Same", "00")))
        assert doc.cheats[0].id != doc.cheats[1].id

    def test_name_is_carried(self):
        assert parse(_ONE_CHEAT, name="sm64.cht").name == "sm64.cht"

    def test_zero_cheats(self):
        doc = parse("cheats = 0")
        assert doc.cheats_count == 0
        assert doc.cheats == []

    def test_value_split_at_first_separator(self):
        doc = parse(_file(1, _block(0, "HP = 999", "00")))
        assert doc.cheats[0].description == "HP = 999"

    def test_only_outer_quotes_stripped(self):
        doc = parse(_file(1, _block(0, 'Say "hi"', "00")))
        assert doc.cheats[0].description == 'Say "hi"'

    def test_keys_are_not_consulted(self):
        text = 'cheats = 1\n\nfoo = "Desc"\nbar = "0000"\nbaz = true'
        doc = parse(text)
        assert doc.cheats[0].description == "Desc"
        assert doc.cheats[0].enabled is True


# ─────────────────────────────────────────────────────────────────────────────
# 2. Header errors
# ─────────────────────────────────────────────────────────────────────────────

class TestHeaderErrors:

    def test_empty_text(self):
        with pytest.raises(HeaderError):
            parse("")

    def test_header_without_equals(self):
        with pytest.raises(HeaderError):
            parse("cheats 3\n")

    @pytest.mark.parametrize("count", ["abc", "", "3.5", "-1", "12abc"])
    def test_non_numeric_count(self, count):
        with pytest.raises(HeaderError):
            parse(f"cheats = {count}")

    @pytest.mark.parametrize("count", ["-1", "+3"])
    def test_signed_count_rejected_as_non_negative(self, count):
        with pytest.raises(HeaderError, match="non-negative integer"):
            parse(f"cheats = {count}")

    def test_header_error_is_a_parse_error_with_line_number(self):
        with pytest.raises(ParseError) as info:
            parse("nonsense")
        assert info.value.line_no == 1
        assert "line 1" in str(info.value)


# ─────────────────────────────────────────────────────────────────────────────
# 3. Block errors
# ─────────────────────────────────────────────────────────────────────────────

class TestBlockErrors:

    def test_truncated_block_raises_structural_error(self):
        text = 'cheats = 1\n\ncheat0_desc = "A"\ncheat0_code = "00"'
        with pytest.raises(StructuralError):
            parse(text)

    def test_truncated_second_block(self):
        text = _ONE_CHEAT + '\n\ncheat1_desc = "B"'
        with pytest.raises(StructuralError) as info:
            parse(text)
        assert info.value.line_no == 7

    def test_missing_separator_raises_field_format_error(self):
        text = 'cheats = 1\n\ncheat0_desc="A"\ncheat0_code = "00"\ncheat0_enable = true'
        with pytest.raises(FieldFormatError) as info:
            parse(text)
        assert info.value.line_no == 3

    @pytest.mark.parametrize("padding", ["\n", "\n\n\n", "\r\n"])
    def test_truncated_block_before_trailing_blank_lines(self, padding):
        text = 'cheats = 1\n\ncheat0_desc = "A"\ncheat0_code = "00"' + padding
        with pytest.raises(StructuralError) as info:
            parse(text)
        assert info.value.line_no == 3

    def test_truncated_second_block_before_trailing_newline(self):
        with pytest.raises(StructuralError):
            parse(_ONE_CHEAT + '\n\ncheat1_desc = "B"\n')

    def test_double_blank_inside_document_is_field_error(self):
        text = "cheats = 2\n\n\n" + _block(0, "A", "00").lstrip("\n")
        with pytest.raises(FieldFormatError):
            parse(text)


# ─────────────────────────────────────────────────────────────────────────────
# 4. Edge cases
# ─────────────────────────────────────────────────────────────────────────────

class TestEdgeCases:

    def test_trailing_newline_accepted(self):
        doc = parse(_ONE_CHEAT + "\n")
        assert len(doc.cheats) == 1

    def test_trailing_blank_lines_accepted(self):
        doc = parse(_ONE_CHEAT + "\n\n\n\n\n")
        assert len(doc.cheats) == 1

    def test_header_count_kept_when_it_disagrees(self):
        doc = parse(_ONE_CHEAT.replace("cheats = 1", "cheats = 74"))
        assert doc.cheats_count == 74
        assert len(doc.cheats) == 1
        assert doc.count_matches is False

    def test_stray_lines_between_blocks_are_ignored(self):
        text = _ONE_CHEAT + "\n# comment" + _block(1, "B", "00")
        doc = parse(text.replace("cheats = 1", "cheats = 2"))
        assert [c.description for c in doc.cheats] == ["Infinite HP", "B"]

    def test_crlf_keeps_carriage_returns_in_fields(self):
        doc = parse(_ONE_CHEAT.replace("\n", "\r\n"))
        assert doc.cheats_count == 1
        cheat = doc.cheats[0]
        assert cheat.description == 'Infinite HP"\r'
        assert cheat.code.endswith("\r")
        assert cheat.enabled is True

    def test_iter_blocks_is_lazy(self):
        lines = _ONE_CHEAT.split("\n")
        blocks = iter_blocks(lines)
        first = next(blocks)
        assert first.line_no == 3
        assert first.code == '"ABCD1234+EF01"'
        with pytest.raises(StopIteration):
            next(blocks)


class TestSplitField:

    def test_returns_key_and_value(self):
        assert split_field('cheat0_desc = "A"', 3) == ("cheat0_desc", '"A"')

    def test_missing_separator(self):
        with pytest.raises(FieldFormatError):
            split_field("cheat0_desc", 3)
