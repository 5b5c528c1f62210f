import pytest

from markers import CutSection, compute_cut_lines, find_cut_sections, scan


def _cut(lines: list[str]) -> set[int]:
    return compute_cut_lines(lines, scan(lines))


def _survivors(lines: list[str]) -> list[str]:
    doomed = _cut(lines)
    return [text for i, text in enumerate(lines) if i not in doomed]


# ===========================================================
# CutSection
# ===========================================================

class TestCutSection:

    def test_lines_inclusive(self):
        assert list(CutSection(1, 3).lines()) == [1, 2, 3]

    def test_start_must_precede_end(self):
        with pytest.raises(ValueError):
            CutSection(3, 3)


# ===========================================================
# Section pairing
# ===========================================================

class TestFindCutSections:

    def test_pairs_in_order(self):
        lines = "A\n//cut-start\nB\n//cut-end\nC\n//cut-start\nD\n//cut-end\nE".split("\n")
        assert len(lines) == 9
        assert find_cut_sections(scan(lines)) == [CutSection(1, 3), CutSection(5, 7)]
        doomed = compute_cut_lines(lines, scan(lines))
        assert [i for i in range(len(lines)) if i not in doomed] == [0, 4, 8]

    def test_extra_start_uses_next_end(self):
        lines = ["//cut-start", "//cut-start", "x", "//cut-end"]
        assert find_cut_sections(scan(lines)) == [CutSection(0, 3)]

    def test_end_before_start_is_ignored(self):
        lines = ["//cut-end", "//cut-start", "x", "//cut-end"]
        assert find_cut_sections(scan(lines)) == [CutSection(1, 3)]

    def test_unmatched_start_stops_scan(self):
        lines = ["//cut-start", "x", "//cut-end", "//cut-start", "y"]
        assert find_cut_sections(scan(lines)) == [CutSection(0, 2)]


# ===========================================================
# compute_cut_lines
# ===========================================================

class TestComputeCutLines:

    def test_flag_and_query_lines_are_removed(self):
        lines = ["// @strict", "const x = 1", "// ^?", "x.toFixed()"]
        assert _survivors(lines) == ["const x = 1", "x.toFixed()"]

    def test_leading_cut_includes_marker(self):
        lines = ["import x from 'x'", "// ---cut---", "x()"]
        assert _cut(lines) == {0, 1}

    def test_trailing_cut_includes_marker(self):
        lines = ["x()", "// ---cut-after---", "cleanup()", "more()"]
        assert _cut(lines) == {1, 2, 3}

    def test_only_first_leading_cut_counts(self):
        lines = ["a", "// ---cut---", "b", "// ---cut---", "c"]
        assert _cut(lines) == {0, 1}

    def test_sections_removed_including_delimiters(self):
        lines = ["a", "//cut-start", "b", "//cut-end", "c", "//cut-start", "d", "//cut-end"]
        assert _survivors(lines) == ["a", "c"]

    def test_union_of_everything(self):
        lines = [
            "setup()",              # 0 leading
            "// ---cut---",         # 1 leading
            "// @strict",           # 2 flag
            "const a = 1",
            "// ---cut-start---",   # 4 section
            "hidden()",             # 5 section
            "// ---cut-end---",     # 6 section
            "a.toFixed()",
            "// ^?",                # 8 query
            "// ---cut-after---",   # 9 trailing
            "teardown()",           # 10 trailing
        ]
        assert _survivors(lines) == ["const a = 1", "a.toFixed()"]

    def test_no_markers_nothing_cut(self):
        assert _cut(["a", "b"]) == set()
