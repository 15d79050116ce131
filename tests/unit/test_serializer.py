"""
Unit tests for src/cht_editor/codec/serializer.py

Coverage plan
─────────────
text shape     → 7 tests  (header, block layout, no trailing newline)
positional ids → 3 tests  (reorder renames cheatN_* keys, ids unchanged)
content round trip → 3 tests
errors         → 1 test
"""

import pytest

from cht_editor.codec.models import CheatEntry, ChtDocument
from cht_editor.codec.parser import parse
from cht_editor.codec.serializer import format_block, serialize
from cht_editor.exceptions import SerializeError


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _make_doc(*cheats: CheatEntry, count=None) -> ChtDocument:
    return ChtDocument(
        name="test.cht",
        cheats_count=len(cheats) if count is None else count,
        cheats=list(cheats),
    )


def _hp() -> CheatEntry:
    return CheatEntry(description="Infinite HP", code="ABCD1234 EF01", enabled=True)


def _jump() -> CheatEntry:
    return CheatEntry(description="Moon Jump", code="ABCD1234\nEF010203", enabled=False)


# ─────────────────────────────────────────────────────────────────────────────
# 1. Text shape
# ─────────────────────────────────────────────────────────────────────────────

class TestSerialize:

    def test_single_cheat_exact_text(self):
        assert serialize(_make_doc(_hp())) == (
            "cheats = 1\n"
            "\n"
            'cheat0_desc = "Infinite HP"\n'
            'cheat0_code = "ABCD1234+EF01"\n'
            "cheat0_enable = true"
        )

    def test_empty_document_is_header_only(self):
        assert serialize(_make_doc()) == "cheats = 0"

    def test_no_trailing_newline(self):
        assert not serialize(_make_doc(_hp(), _jump())).endswith("\n")

    def test_blocks_separated_by_blank_line(self):
        lines = serialize(_make_doc(_hp(), _jump())).split("\n")
        assert lines[1] == ""
        assert lines[5] == ""
        assert lines[6] == 'cheat1_desc = "Moon Jump"'

    def test_enable_is_unquoted_word(self):
        text = serialize(_make_doc(_jump()))
        assert "cheat0_enable = false" in text

    def test_declared_count_written_as_stored(self):
        text = serialize(_make_doc(_hp(), count=74))
        assert text.startswith("cheats = 74\n")

    def test_input_document_not_modified(self):
        doc = _make_doc(_hp(), count=9)
        before = (doc.cheats_count, [(c.id, c.code) for c in doc.cheats])
        serialize(doc)
        assert (doc.cheats_count, [(c.id, c.code) for c in doc.cheats]) == before


# ─────────────────────────────────────────────────────────────────────────────
# 2. Positional key names
# ─────────────────────────────────────────────────────────────────────────────

class TestReorder:

    def test_reorder_renames_keys(self):
        hp, jump = _hp(), _jump()
        doc = _make_doc(hp, jump)
        doc.cheats.reverse()
        text = serialize(doc)
        assert 'cheat0_desc = "Moon Jump"' in text
        assert 'cheat1_desc = "Infinite HP"' in text

    def test_reorder_keeps_ids(self):
        hp, jump = _hp(), _jump()
        ids = (hp.id, jump.id)
        doc = _make_doc(hp, jump)
        doc.cheats.reverse()
        serialize(doc)
        assert (hp.id, jump.id) == ids

    def test_format_block_uses_given_index(self):
        lines = format_block(7, _hp())
        assert lines[0].startswith("cheat7_desc")
        assert lines[2] == "cheat7_enable = true"


# ─────────────────────────────────────────────────────────────────────────────
# 3. Content round trip
# ─────────────────────────────────────────────────────────────────────────────

class TestContentRoundTrip:

    def test_parse_of_serialized_document_has_same_content(self):
        doc = _make_doc(_hp(), _jump(), CheatEntry(description="Raw", code="FFFFFFFF"))
        again = parse(serialize(doc))
        assert again.cheats_count == doc.cheats_count
        assert [(c.description, c.enabled, c.code) for c in again.cheats] == [
            (c.description, c.enabled, c.code) for c in doc.cheats
        ]

    def test_serializer_output_survives_parse_serialize(self):
        text = (
            "cheats = 1\n\n"
            'cheat0_desc = "Infinite HP"\n'
            'cheat0_code = "ABCD1234+EF01"\n'
            "cheat0_enable = true"
        )
        assert serialize(parse(text)) == text

    def test_trailing_whitespace_in_code_does_not_leave_plus(self):
        cheat = CheatEntry(description="X", code="ABCD1234 EF01\n")
        assert 'cheat0_code = "ABCD1234+EF01"' in serialize(_make_doc(cheat))


# ─────────────────────────────────────────────────────────────────────────────
# 4. Errors
# ─────────────────────────────────────────────────────────────────────────────

class TestSerializeErrors:

    def test_multiline_description_rejected(self):
        cheat = CheatEntry(description="two\nlines", code="00")
        with pytest.raises(SerializeError):
            serialize(_make_doc(cheat))
