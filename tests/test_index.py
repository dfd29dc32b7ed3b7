"""Tests for EntryIndex and incremental span edits."""

import pytest

from color_json_editor.codec.scanner import scan
from color_json_editor.core.entry import Entry
from color_json_editor.core.errors import InvalidColorError
from color_json_editor.edit.index import EntryIndex
from color_json_editor.edit.spans import shift_spans


def assert_spans_consistent(index: EntryIndex) -> None:
    """Every span must locate its entry's literal in the current buffer."""
    for entry in index:
        assert index.buffer[entry.start:entry.end] == entry.literal


class TestShiftSpans:
    """Tests for the isolated span-shifting helper."""

    def make_entries(self) -> list[Entry]:
        return [
            Entry("a", "#000000", 0, 9),
            Entry("b", "#000000", 10, 19),
            Entry("c", "#000000", 20, 29),
        ]

    def test_shifts_only_later_entries(self) -> None:
        entries = shift_spans(self.make_entries(), 0, 2)
        assert [(e.start, e.end) for e in entries] == [(0, 9), (12, 21), (22, 31)]

    def test_negative_delta(self) -> None:
        entries = shift_spans(self.make_entries(), 1, -2)
        assert [(e.start, e.end) for e in entries] == [(0, 9), (10, 19), (18, 27)]

    def test_last_entry_shifts_nothing(self) -> None:
        entries = shift_spans(self.make_entries(), 2, 5)
        assert [(e.start, e.end) for e in entries] == [(0, 9), (10, 19), (20, 29)]

    def test_zero_delta(self) -> None:
        entries = self.make_entries()
        assert shift_spans(entries, 0, 0) == self.make_entries()

    def test_bad_index(self) -> None:
        with pytest.raises(IndexError):
            shift_spans(self.make_entries(), 3, 1)
        with pytest.raises(IndexError):
            shift_spans([], 0, 1)


class TestLoad:
    """Tests for loading and reverting."""

    def test_empty_index(self) -> None:
        index = EntryIndex()
        assert len(index) == 0
        assert index.buffer == ""

    def test_load(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        assert len(index) == 4
        assert index.buffer == theme_text
        assert index.entries == scan(theme_text)

    def test_load_without_entries(self) -> None:
        index = EntryIndex('{"size": 14}')
        assert len(index) == 0

    def test_revert_discards_edits(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        index.apply_color(0, "#FFFFFFFF")
        index.apply_color(2, "#000000")
        index.revert(theme_text)
        assert index.buffer == theme_text
        assert index.entries == scan(theme_text)


class TestApplyColor:
    """Tests for single-entry edits."""

    def test_example_document(self) -> None:
        index = EntryIndex('{"a":"#FF0000","b":"#00FF00FF"}')
        buffer = index.apply_color(0, "#000000")

        assert buffer == '{"a":"#000000","b":"#00FF00FF"}'
        assert index[0].color == "#000000"
        assert index[1].color == "#00FF00FF"
        assert (index[1].start, index[1].end) == (19, 30)
        assert_spans_consistent(index)

    def test_shorter_literal_shifts_later_spans_left(self) -> None:
        index = EntryIndex('{"a":"#FF0000FF","b":"#00FF00"}')
        b_start, b_end = index[1].start, index[1].end

        buffer = index.apply_color(0, "#000000")

        assert buffer == '{"a":"#000000","b":"#00FF00"}'
        assert (index[0].start, index[0].end) == (5, 14)
        assert (index[1].start, index[1].end) == (b_start - 2, b_end - 2)
        assert index[1].color == "#00FF00"
        assert_spans_consistent(index)

    def test_lowercase_neighbours_keep_their_spelling(self) -> None:
        index = EntryIndex('{"a":"#ff0000","b":"#00ff00"}')

        buffer = index.apply_color(0, "#000000AA")

        assert buffer == '{"a":"#000000AA","b":"#00ff00"}'
        assert index[1].literal == '"#00ff00"'
        assert index[1].color == "#00FF00"
        assert buffer[index[1].start:index[1].end] == index[1].literal
        assert index[0].literal == '"#000000AA"'
        assert_spans_consistent(index)

    def test_longer_literal_shifts_later_spans_right(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        before = [(e.start, e.end) for e in index]

        index.apply_color(1, "#D4D4D480")

        after = [(e.start, e.end) for e in index]
        assert after[0] == before[0]
        assert after[1] == (before[1][0], before[1][1] + 2)
        assert after[2] == (before[2][0] + 2, before[2][1] + 2)
        assert after[3] == (before[3][0] + 2, before[3][1] + 2)
        assert_spans_consistent(index)

    def test_bytes_outside_span_untouched(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        entry = index[2]
        start, end = entry.start, entry.end

        buffer = index.apply_color(entry, "#123456")

        assert buffer[:start] == theme_text[:start]
        assert buffer[start:start + 9] == '"#123456"'
        assert buffer[start + 9:] == theme_text[end:]

    def test_normalizes_input(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        index.apply_color(0, "  abcdef ")
        assert index[0].color == "#ABCDEF"
        assert '"#ABCDEF"' in index.buffer

    def test_same_color_is_noop(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        spans = [(e.start, e.end) for e in index]

        buffer = index.apply_color(1, "#D4D4D4")

        # Source text stays lowercase: nothing was rewritten
        assert buffer == theme_text
        assert [(e.start, e.end) for e in index] == spans

    def test_invalid_color_leaves_buffer(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        with pytest.raises(InvalidColorError):
            index.apply_color(0, "#12")
        assert index.buffer == theme_text
        assert index.entries == scan(theme_text)

    def test_many_edits_stay_consistent(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        colors = ["#11223344", "#556677", "#8899AABB", "#CCDDEE", "#000000", "#FFFFFFFF"]
        for i, color in enumerate(colors):
            index.apply_color(i % len(index), color)
            assert_spans_consistent(index)
        assert index.entries == scan(index.buffer)

    def test_entry_count_never_changes(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        index.apply_color(3, "#ABCDEF12")
        assert len(index) == 4
        assert [e.name for e in index] == ["background", "foreground", "selection", "comment"]

    def test_bad_reference(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        with pytest.raises(IndexError):
            index.apply_color(10, "#000000")
        with pytest.raises(KeyError):
            index.apply_color(Entry("x", "#000000", 0, 9), "#000000")


class TestMergedEdits:
    """Drop/paste and picker paths."""

    def test_rgb_drop_keeps_entry_alpha(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        index.apply_merged(2, "#FF0000")
        assert index[2].color == "#FF0000CC"
        assert_spans_consistent(index)

    def test_rgba_drop_on_rgb_entry_drops_alpha(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        index.apply_merged(0, "#FF000080")
        assert index[0].color == "#FF0000"

    def test_rgba_drop_on_rgba_entry_replaces(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        index.apply_merged(2, "#FF000080")
        assert index[2].color == "#FF000080"

    def test_invalid_drop(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        with pytest.raises(InvalidColorError):
            index.apply_merged(0, "red")
        assert index.buffer == theme_text

    def test_picked_rgb_keeps_alpha(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        index.apply_picked_rgb(2, 255, 255, 255)
        assert index[2].color == "#FFFFFFCC"


class TestLookup:
    """Tests for find() and filter()."""

    def test_find(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        assert index.find("comment") is index[3]
        assert index.find("missing") is None

    def test_filter_by_name(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        assert [e.name for e in index.filter("GROUND")] == ["background", "foreground"]

    def test_filter_by_hex(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        assert [e.name for e in index.filter("#6a")] == ["comment"]

    def test_entry_display(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        assert index[0].rgb == (0x1E, 0x1E, 0x1E)
        assert str(index[3]) == "comment  #6A9955"

    def test_empty_filter(self, theme_text: str) -> None:
        index = EntryIndex(theme_text)
        assert index.filter("  ") == index.entries
