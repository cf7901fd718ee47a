"""
Parsing of fenced-code info strings such as ```` ```python {1,3-5} showLineNumbers=10 title="app.py" ````.
"""

import re

from pydantic import BaseModel, ConfigDict

from doccorpus.schema import LineRange

__all__ = [
    "InfoString",
    "parse_info_string",
]

_LANGUAGE_RE = re.compile(r"^([^\s{]+)")
_HIGHLIGHT_RE = re.compile(r"\{([^}]*)\}")
_RANGE_RE = re.compile(r"^(\d+)(?:\s*-\s*(\d+))?$")
_LINE_NUMBERS_RE = re.compile(r"\bshowLineNumbers(?:=(\S*))?")
_TITLE_RE = re.compile(r"""\btitle=(?:"([^"]*)"|'([^']*)'|(\S+))""")


class InfoString(BaseModel):
    """
    Parsed fence info string.

    Attributes:
        language (str | None): Language tag, if any.
        highlighted (tuple[LineRange, ...]): Ranges from `{...}` groups.
        malformed (tuple[str, ...]): Annotations that could not be parsed.
        first_line_number (int | None): Starting number from `showLineNumbers`.
        title (str | None): Title attribute.
        meta (str): Everything after the language tag.
    """

    model_config = ConfigDict(frozen=True)

    language: str | None = None
    highlighted: tuple[LineRange, ...] = ()
    malformed: tuple[str, ...] = ()
    first_line_number: int | None = None
    title: str | None = None
    meta: str = ""


def parse_info_string(info: str) -> InfoString:
    info = info.strip()
    language = None
    match = _LANGUAGE_RE.match(info)
    if match:
        language = match.group(1)
        info = info[match.end():]
    meta = info.strip()

    # Titles may contain braces, so they are removed before range parsing
    title = None
    title_match = _TITLE_RE.search(meta)
    rest = meta
    if title_match:
        title = next(group for group in title_match.groups() if group is not None)
        rest = meta[: title_match.start()] + meta[title_match.end():]

    highlighted: list[LineRange] = []
    malformed: list[str] = []
    for group in _HIGHLIGHT_RE.finditer(rest):
        items = [item.strip() for item in group.group(1).split(",")]
        if not any(items):
            malformed.append(group.group(0))
            continue
        for item in items:
            range_match = _RANGE_RE.match(item)
            if range_match is None:
                malformed.append(item)
                continue
            start = int(range_match.group(1))
            end = int(range_match.group(2) or start)
            highlighted.append(LineRange(start=start, end=end))

    first_line_number = None
    numbers_match = _LINE_NUMBERS_RE.search(rest)
    if numbers_match:
        value = numbers_match.group(1)
        if not value:
            first_line_number = 1
        else:
            try:
                first_line_number = int(value)
            except ValueError:
                malformed.append(numbers_match.group(0))

    return InfoString(
        language=language,
        highlighted=tuple(highlighted),
        malformed=tuple(malformed),
        first_line_number=first_line_number,
        title=title,
        meta=meta,
    )
