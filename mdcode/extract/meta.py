# mdcode/extract/meta.py
import json
import re
import shlex
from typing import Tuple

from ..errors.extract import MetaParseError
from ..models.blocks import Meta

_JSON_RE = re.compile(r'^\s*{\s*["}]')
_BRACES_RE = re.compile(r"^\s*{(.*)}$")
# Language is the leading word; metadata may follow after whitespace or start at '{'.
_INFO_RE = re.compile(r"^([^\s{]*)\s*(.*)$", re.DOTALL)


def parse_meta(text: str) -> Meta:
    """
    Parse the metadata tail of an info string.

    Two styles are accepted without the caller choosing one:
      - a JSON object:          {"file": "main.go", "line": 3}
      - shell-style key=value:  file=main.go title="Hello world"
        optionally wrapped in a single pair of braces: {file=main.go}

    Words without '=' are ignored and '#' is an ordinary character, so
    `color=#fff` keeps its value. Malformed JSON and unbalanced quotes raise
    MetaParseError.
    """
    text = text.strip()
    if not text:
        return Meta()

    if _JSON_RE.match(text):
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise MetaParseError(f"invalid JSON metadata: {e}", text) from e
        if not isinstance(value, dict):
            raise MetaParseError("JSON metadata must be an object", text)
        return Meta(value)

    m = _BRACES_RE.match(text)
    if m:
        text = m.group(1)

    try:
        words = shlex.split(text)
    except ValueError as e:
        raise MetaParseError(f"cannot tokenize metadata: {e}", text) from e

    meta = Meta()
    for word in words:
        if "=" in word:
            key, value = word.split("=", 1)
            meta[key] = value
    return meta


def parse_info(info: str) -> Tuple[str, Meta]:
    """Split a fence info string into its language and parsed metadata."""
    info = info.strip()
    if not info:
        return "", Meta()
    m = _INFO_RE.match(info)
    lang, rest = m.group(1), m.group(2)
    return lang, parse_meta(rest)
