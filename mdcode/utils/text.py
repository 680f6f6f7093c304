# mdcode/utils/text.py
import re
from typing import List, Sequence

# Same newline rule the Markdown parser uses when it splits the source into lines.
NEWLINE_RE = re.compile(r"\r\n?|\n")
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n?|\n)|[^\r\n]+")


def normalize_newlines(text: str) -> str:
    """Mirror the parser's input normalization: CR/CRLF -> LF and NUL -> U+FFFD."""
    return NEWLINE_RE.sub("\n", text).replace("\0", "\ufffd")


def split_lines(text: str) -> List[str]:
    """Split text into lines, each keeping its own line terminator."""
    return _LINE_RE.findall(text)


def line_starts(text: str) -> List[int]:
    """
    Offsets of the first char of every line, followed by a final sentinel
    equal to len(text), so line i spans [starts[i], starts[i + 1]).
    """
    starts = [0]
    starts.extend(m.end() for m in NEWLINE_RE.finditer(text))
    if starts[-1] != len(text):
        starts.append(len(text))
    return starts


def line_at(text: str, offset: int) -> int:
    """1-based number of the line containing `offset`."""
    return len(NEWLINE_RE.findall(text, 0, max(0, min(offset, len(text))))) + 1


def apply_prefix(code: str, prefix: str, line_prefixes: Sequence[str] = (), original: str = "") -> str:
    """
    Put container prefixes (indentation, '> ', ...) back on the lines of `code`.

    Line i gets line_prefixes[i], the prefix the original line i carried, so
    unchanged lines come back byte-identical. Lines past the original count,
    and originally blank lines that now hold text, get `prefix`; blank lines
    get it without trailing blanks.
    """
    if not prefix and not line_prefixes:
        return code
    blank_prefix = prefix.rstrip()
    was_blank = [not line.strip() for line in split_lines(original)]
    out = []
    for i, line in enumerate(split_lines(code)):
        if i < len(line_prefixes) and not (line.strip() and i < len(was_blank) and was_blank[i]):
            lead = line_prefixes[i]
        elif line.strip():
            lead = prefix
        else:
            lead = blank_prefix
        out.append(lead + line)
    return "".join(out)
