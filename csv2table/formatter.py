# csv2table/formatter.py
import re
from typing import List, Optional

INDENT = "  "
STRUCTURAL_TAGS = ("figure", "table", "thead", "tbody", "tr")

_TAG_SPLIT_RE = re.compile(r"(<[^>]+>)")
_OPEN_RE = re.compile(r"^<(%s)[\s>]" % "|".join(STRUCTURAL_TAGS))
_CLOSE_RE = re.compile(r"^</(%s)>" % "|".join(STRUCTURAL_TAGS))


def format_html(markup: str) -> str:
    """
    Indent table markup for display.

    Structural tags (figure, table, thead, tbody, tr) go on their own lines and
    nest by two spaces; a row keeps its cells on one line. Comments stay at
    column 0. Cell text is copied through untouched.
    """
    lines: List[str] = []
    current: Optional[str] = None
    depth = 0

    def flush() -> None:
        nonlocal current
        if current is not None:
            lines.append(current)
            current = None

    for part in _TAG_SPLIT_RE.split(markup):
        if not part.strip():
            continue

        if part.startswith("<!--"):
            flush()
            lines.append(part)
            continue

        opening = _OPEN_RE.match(part)
        if opening:
            flush()
            if opening.group(1) == "tr":
                current = INDENT * depth + part
            else:
                lines.append(INDENT * depth + part)
            depth += 1
            continue

        closing = _CLOSE_RE.match(part)
        if closing:
            depth = max(0, depth - 1)
            if closing.group(1) == "tr" and current is not None:
                current += part
                flush()
            else:
                flush()
                lines.append(INDENT * depth + part)
            continue

        # cells and their text stay inline
        if current is None:
            current = INDENT * depth
        current += part

    flush()
    return "\n".join(lines).strip()


def format_block_markup(markup: str) -> str:
    """Indent WordPress table block markup; the wp:table comments keep their own lines."""
    return format_html(markup)
