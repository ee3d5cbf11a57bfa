"""Line classification for C-family comment syntax."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
LINE_COMMENT = "//"


@dataclass(frozen=True)
class LineCounts:
    code: int = 0
    comment: int = 0
    blank: int = 0

    @property
    def total(self) -> int:
        return self.code + self.comment + self.blank


def classify_lines(source: str) -> LineCounts:
    """Count code, comment and blank lines in a single forward pass.

    A line opening a block comment enters the block; every line inside the
    block counts as comment until one ends with the closing token. A line
    whose block opens and closes on it counts once as comment and leaves the
    block, even when code follows the closing token.

    Args:
        source: Full source text

    Returns:
        LineCounts whose total equals the number of physical lines.
    """
    code = comment = blank = 0
    in_block_comment = False

    for line in source.splitlines():
        trimmed = line.strip()

        if not trimmed:
            blank += 1
            continue

        if in_block_comment:
            comment += 1
            if trimmed.endswith(BLOCK_COMMENT_CLOSE):
                in_block_comment = False
            continue

        if trimmed.startswith(BLOCK_COMMENT_OPEN):
            comment += 1
            # `/* a */ code` and `/** @type {T} */ x` close on the opening line.
            closed = BLOCK_COMMENT_CLOSE in trimmed[len(BLOCK_COMMENT_OPEN) :]
            in_block_comment = not closed
            continue

        if trimmed.startswith(LINE_COMMENT):
            comment += 1
        else:
            code += 1

    return LineCounts(code=code, comment=comment, blank=blank)


__all__ = ["LineCounts", "classify_lines"]
