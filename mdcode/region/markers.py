# mdcode/region/markers.py
import re
from functools import lru_cache
from typing import Pattern, Tuple

# Comment punctuation allowed around a marker: //, #, --, /* */, <!-- -->, ...
_PUNCT = r"""[!"#$%&'()*+,\-./:;<=>?@\[\\\]^_{|}~]"""
_LINE_BEGIN = r"^[ \t]*" + _PUNCT + r"+[ \t]*"
_LINE_END = r"[ \t]*" + _PUNCT + r"*[ \t]*\r?\n"

ANY_BEGIN_RE = re.compile(_LINE_BEGIN + r"#region[ \t]+(?P<name>\w+)" + _LINE_END, re.MULTILINE)
ANONYMOUS_END_RE = re.compile(_LINE_BEGIN + r"#endregion" + _LINE_END, re.MULTILINE)
ANY_END_RE = re.compile(_LINE_BEGIN + r"#endregion(?:[ \t]+\w+)?" + _LINE_END, re.MULTILINE)


@lru_cache(maxsize=128)
def named_markers(name: str) -> Tuple[Pattern, Pattern]:
    """Compiled (begin, end) marker patterns for one region name."""
    quoted = re.escape(name)
    begin = re.compile(_LINE_BEGIN + r"#region[ \t]+" + quoted + _LINE_END, re.MULTILINE)
    end = re.compile(_LINE_BEGIN + r"#endregion[ \t]+" + quoted + _LINE_END, re.MULTILINE)
    return begin, end
