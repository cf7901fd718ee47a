"""
Turn raw MDX/Markdown content into a Page.

The front-matter is a YAML mapping between two `---` lines at the very start of
the content. The body is split into prose blocks and code samples.
"""

import re
from typing import Any

import yaml
from pydantic import ValidationError

from doccorpus.exceptions import ParseError
from doccorpus.paths import split_path
from doccorpus.schema import (
    Block,
    CodeSample,
    FrontMatter,
    Page,
    ParseErrorReason,
    ProseBlock,
)

from .annotations import parse_info_string

__all__ = [
    "parse_page",
    "parse_front_matter",
    "split_blocks",
]

FRONT_MATTER_DELIMITER = "---"
_FENCE_RE = re.compile(r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_LIST_ITEM_RE = re.compile(r"^[ \t]*(?:[-*+]|\d{1,9}[.)])(?:[ \t]+|$)")
_INDENTED_CODE_RE = re.compile(r"^(?: {4}|\t)")


def parse_page(
    raw_content: str,
    path: str | tuple[str, ...],
    *,
    source_file: str | None = None,
    is_index: bool = False,
) -> Page:
    """
    Parse raw content into a Page.

    Args:
        raw_content (str): Full text of the content file.
        path (str | tuple[str, ...]): Page path, e.g. `/guide/setup`.
        source_file (str | None): File the content came from, kept for reporting.
        is_index (bool): Whether the file is a directory index page.

    Returns:
        Page: The parsed, immutable page.

    Raises:
        ParseError: If the front-matter is missing, unreadable, or fails the schema.
    """
    if raw_content.startswith("\ufeff"):
        raw_content = raw_content[1:]
    # Only \n ends a line, so numbers match what an editor shows
    lines = raw_content.replace("\r\n", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()

    front_matter, body_start = parse_front_matter(lines)
    blocks = split_blocks(lines[body_start:], first_line=body_start + 1)

    return Page(
        segments=split_path(path),
        title=front_matter.title,
        description=front_matter.description,
        blocks=blocks,
        front_matter=front_matter,
        source_file=source_file,
        is_index=is_index,
    )


def parse_front_matter(lines: list[str]) -> tuple[FrontMatter, int]:
    """
    Extract and validate the front-matter block.

    Returns:
        tuple[FrontMatter, int]: The front-matter and the 0-based index of the
            first body line.

    Raises:
        ParseError: On any front-matter problem.
    """
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        raise ParseError(
            ParseErrorReason.MISSING_FRONT_MATTER,
            "content does not start with a '---' front-matter block",
            line=1,
        )

    closing = None
    for idx in range(1, len(lines)):
        if lines[idx].strip() in (FRONT_MATTER_DELIMITER, "..."):
            closing = idx
            break
    if closing is None:
        raise ParseError(
            ParseErrorReason.UNTERMINATED_FRONT_MATTER,
            "front-matter block is never closed with '---'",
            line=1,
        )

    try:
        data: Any = yaml.safe_load("\n".join(lines[1:closing]))
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 2 if mark is not None else 1
        problem = getattr(e, "problem", None) or str(e)
        raise ParseError(
            ParseErrorReason.INVALID_YAML,
            f"front-matter is not valid YAML: {problem}",
            line=line,
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError(
            ParseErrorReason.NOT_A_MAPPING,
            f"front-matter must be a mapping, got {type(data).__name__}",
            line=2,
        )

    try:
        front_matter = FrontMatter.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        missing = [
            ".".join(str(part) for part in err["loc"])
            for err in errors
            if err["type"] == "missing"
        ]
        if missing:
            raise ParseError(
                ParseErrorReason.MISSING_FIELD,
                f"missing required front-matter field(s): {', '.join(missing)}",
                line=1,
            ) from e
        invalid = [
            f"{'.'.join(str(part) for part in err['loc'])} ({err['msg']})"
            for err in errors
        ]
        raise ParseError(
            ParseErrorReason.INVALID_FIELD,
            f"invalid front-matter field(s): {'; '.join(invalid)}",
            line=1,
        ) from e

    return front_matter, closing + 1


def _indent_width(indent: str) -> int:
    return len(indent.expandtabs(4))


def _strip_indent(line: str, width: int) -> str:
    removed = 0
    pos = 0
    while pos < len(line) and removed < width:
        if line[pos] == " ":
            removed += 1
        elif line[pos] == "\t":
            removed += 4 - removed % 4
        else:
            break
        pos += 1
    return line[pos:]


def split_blocks(lines: list[str], first_line: int = 1) -> tuple[Block, ...]:
    """
    Split body lines into prose blocks and code samples, in order.

    Code samples are fenced blocks and, outside lists, indented code (four
    spaces or a tab after a blank line). Inside a list, fences may be indented
    any amount, and indented lines stay prose since they continue the item.

    Args:
        lines (list[str]): Body lines.
        first_line (int): 1-based line number of `lines[0]` in the raw content.

    Returns:
        tuple[Block, ...]: Blocks in document order. Blank-only prose is dropped.
    """
    blocks: list[Block] = []
    prose: list[str] = []
    prose_start = first_line
    in_list = False
    previous_blank = True

    def flush_prose() -> None:
        if any(line.strip() for line in prose):
            blocks.append(ProseBlock(text="\n".join(prose), start_line=prose_start))
        prose.clear()

    i = 0
    while i < len(lines):
        line = lines[i]
        match = _FENCE_RE.match(line)
        indent = _indent_width(match.group("indent")) if match else 0
        # A backtick fence may not carry backticks in its info string
        if (
            match
            and (in_list or indent <= 3)
            and not (match.group("fence")[0] == "`" and "`" in match.group("info"))
        ):
            flush_prose()
            fence = match.group("fence")
            closing = re.compile(
                rf"^[ \t]*{re.escape(fence[0])}{{{len(fence)},}}\s*$"
            )
            body: list[str] = []
            j = i + 1
            while j < len(lines) and not closing.match(lines[j]):
                body.append(_strip_indent(lines[j], indent))
                j += 1

            info = parse_info_string(match.group("info"))
            blocks.append(
                CodeSample(
                    language=info.language,
                    text="\n".join(body),
                    start_line=first_line + i,
                    first_line_number=info.first_line_number,
                    highlighted=info.highlighted,
                    malformed_annotations=info.malformed,
                    title=info.title,
                    meta=info.meta,
                )
            )
            i = j + 1
            previous_blank = False
            continue

        if (
            not in_list
            and previous_blank
            and line.strip()
            and _INDENTED_CODE_RE.match(line)
        ):
            flush_prose()
            j = i
            while j < len(lines) and (
                not lines[j].strip() or _INDENTED_CODE_RE.match(lines[j])
            ):
                j += 1
            body = [_strip_indent(code_line, 4) for code_line in lines[i:j]]
            while body and not body[-1].strip():
                body.pop()
            blocks.append(
                CodeSample(text="\n".join(body), start_line=first_line + i)
            )
            previous_blank = not lines[j - 1].strip()
            i = j
            continue

        if _LIST_ITEM_RE.match(line):
            in_list = True
        elif line.strip() and not line[0].isspace() and previous_blank:
            in_list = False

        if not prose:
            prose_start = first_line + i
        prose.append(line)
        previous_blank = not line.strip()
        i += 1

    flush_prose()
    return tuple(blocks)
