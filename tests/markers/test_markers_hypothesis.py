"""
Hypothesis property-based tests for marker scanning and cutting.

Blocks are generated from a small alphabet of code lines and marker
lines, so every kind of marker shows up often.
"""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from markers import MarkerKind, compute_cut_lines, find_cut_sections, scan
from markers.scanner import STRIPPED_KINDS


# ------------------------------------------------------------------
# Strategies
# ------------------------------------------------------------------

_code_line = st.sampled_from([
    "const a = 1",
    "a.toFixed()",
    "",
    "// just a comment",
    "function f() {}",
])

_marker_line = st.sampled_from([
    "// @strict",
    "// ^?",
    "// ^|",
    "// ---cut---",
    "// ---cut-after---",
    "// ---cut-start---",
    "// ---cut-end---",
])

_block = st.lists(st.one_of(_code_line, _marker_line), max_size=30)


# ===========================================================
# Properties
# ===========================================================

class TestMarkerProperties:

    @given(_block)
    def test_scan_is_sorted_and_unique(self, lines):
        indices = [m.line_index for m in scan(lines)]
        assert indices == sorted(set(indices))

    @given(_block)
    def test_cut_lines_are_in_range(self, lines):
        assert all(0 <= i < len(lines) for i in compute_cut_lines(lines, scan(lines)))

    @given(_block)
    def test_every_flag_and_query_line_is_cut(self, lines):
        markers = scan(lines)
        doomed = compute_cut_lines(lines, markers)
        assert {m.line_index for m in markers if m.kind in STRIPPED_KINDS} <= doomed

    @given(_block)
    def test_no_marker_survives_inside_a_section(self, lines):
        markers = scan(lines)
        doomed = compute_cut_lines(lines, markers)
        for section in find_cut_sections(markers):
            assert set(section.lines()) <= doomed

    @given(_block)
    def test_sections_do_not_overlap(self, lines):
        sections = find_cut_sections(scan(lines))
        for left, right in zip(sections, sections[1:]):
            assert left.end < right.start

    @given(st.lists(_code_line, max_size=20))
    def test_plain_code_is_never_cut(self, lines):
        markers = scan(lines)
        assert all(m.kind is not MarkerKind.CUT_BEFORE for m in markers)
        assert compute_cut_lines(lines, markers) == set()
