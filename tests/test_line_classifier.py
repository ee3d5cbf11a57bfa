from __future__ import annotations

import pytest

from codescope.parse.lines import LineCounts, classify_lines


def test_classify_lines_basic() -> None:
    source = '\n// This is a comment\nfunction hello() {\n    log("world");\n}\n'

    counts = classify_lines(source)

    assert counts == LineCounts(code=3, comment=1, blank=1)


def test_classify_lines_block_comment() -> None:
    source = "\n/*\n * Multi-line\n * comment\n */\nfunction test() {}\n"

    counts = classify_lines(source)

    assert counts.comment == 4
    assert counts.code == 1
    assert counts.blank == 1


def test_single_line_block_comment_counts_once_and_exits_block() -> None:
    source = "/* header */\nconst x = 1;\n"

    counts = classify_lines(source)

    assert counts == LineCounts(code=1, comment=1, blank=0)


def test_blank_lines_inside_block_comment_are_blank() -> None:
    source = "/**\n\n * doc\n */\nlet y = 2;\n"

    counts = classify_lines(source)

    assert counts == LineCounts(code=1, comment=3, blank=1)


def test_line_comment_marker_inside_block_is_still_comment() -> None:
    source = "/*\n// nested\n*/\n"

    assert classify_lines(source) == LineCounts(code=0, comment=3, blank=0)


def test_empty_source_has_no_lines() -> None:
    assert classify_lines("") == LineCounts()
    assert classify_lines("").total == 0


@pytest.mark.parametrize(
    "source",
    [
        "",
        "\n\n\n",
        "a\nb\n// c\n",
        "/* open\nstill open\n",
        "x = 1; /* trailing */\n\n// done",
        "   \t \n/**/\n*/\n",
        "line without newline",
    ],
)
def test_counts_sum_to_physical_line_count(source: str) -> None:
    counts = classify_lines(source)

    assert counts.total == len(source.splitlines())


@pytest.mark.parametrize(
    "opening",
    [
        "/* a */ const x = 1;",
        "/** @type {number} */ const a = 1;",
        "/**/",
    ],
)
def test_block_opened_and_closed_on_one_line_exits_block(opening: str) -> None:
    source = f"{opening}\nconst y = 2;\nconst z = 3;\n"

    assert classify_lines(source) == LineCounts(code=2, comment=1, blank=0)
