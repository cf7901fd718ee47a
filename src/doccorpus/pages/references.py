"""
Extraction and classification of cross-references in a page's prose.

Recognised link syntax:
    - inline links `[text](target "title")` (images `![alt](src)` are skipped)
    - autolinks `<https://example.com>`
    - link reference definitions `[id]: target`
    - HTML/JSX attributes `<a href="...">`, `<Link to="...">`

Each prose block is scanned as a whole, so link text may wrap across lines
and comments may span several lines. Link text never crosses a blank line.
Code samples, inline code spans and comments are never scanned.
"""

import re

from doccorpus.config import ValidationConfig
from doccorpus.schema import CrossReference, Location, Page, ProseBlock, ReferenceKind

__all__ = [
    "extract_references",
    "classify_target",
]

_INLINE_CODE_RE = re.compile(r"(`+)(?:(?!\1)(?:[^\n]|\n(?![ \t]*\n)))+?\1")
_HTML_COMMENT_RE = re.compile(r"<!--.*?-->|\{/\*.*?\*/\}", re.S)
_INLINE_LINK_RE = re.compile(
    r"(?<![!\\])\[(?P<text>(?:[^\[\]\n]|\n(?![ \t]*\n)|\[[^\[\]\n]*\])*)\]"
    r"\(\s*(?P<target><[^<>\n]*>|[^\s()]*(?:\([^\s()]*\)[^\s()]*)*)"
    r"(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
)
_AUTOLINK_RE = re.compile(r"<(?P<target>[A-Za-z][A-Za-z0-9+.\-]{1,31}:[^\s<>]*)>")
_DEFINITION_RE = re.compile(
    r"^ {0,3}\[(?P<label>[^\]^\n][^\]\n]*)\]:[ \t]*(?P<target><[^<>\n]*>|\S+)",
    re.M,
)
_ATTRIBUTE_RE = re.compile(
    r"<[A-Za-z][\w.:-]*\b[^<>]*?\b(?:href|to)\s*=\s*"
    r"(?:\"(?P<dq>[^\"]*)\"|'(?P<sq>[^']*)'|\{\s*[\"'`](?P<jsx>[^\"'`]*)[\"'`]\s*\})"
)
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


def classify_target(target: str, config: ValidationConfig) -> ReferenceKind:
    target = target.strip()
    if target.startswith("#"):
        return ReferenceKind.ANCHOR
    if target.startswith("//"):
        return ReferenceKind.EXTERNAL
    match = _SCHEME_RE.match(target)
    if match:
        if match.group(1).lower() in config.ignored_schemes:
            return ReferenceKind.IGNORED
        return ReferenceKind.EXTERNAL
    return ReferenceKind.INTERNAL


def _mask(text: str, start: int, end: int) -> str:
    # Newlines survive masking so offsets still map to the same lines
    blanked = re.sub(r"[^\n]", " ", text[start:end])
    return text[:start] + blanked + text[end:]


def _mask_pattern(text: str, pattern: re.Pattern) -> str:
    for match in pattern.finditer(text):
        text = _mask(text, match.start(), match.end())
    return text


def _unwrap(target: str) -> str:
    target = target.strip()
    if target.startswith("<") and target.endswith(">"):
        return target[1:-1].strip()
    return target


def _position(text: str, offset: int) -> tuple[int, int]:
    """0-based (line, column) of `offset` within `text`."""
    line = text.count("\n", 0, offset)
    column = offset - (text.rfind("\n", 0, offset) + 1)
    return line, column


def _scan_block(text: str) -> list[tuple[int, str, str]]:
    """
    Find every link in a prose block.

    Returns:
        list[tuple[int, str, str]]: (offset into `text`, target, link text) triples.
    """
    found: list[tuple[int, str, str]] = []
    text = _mask_pattern(text, _INLINE_CODE_RE)
    text = _mask_pattern(text, _HTML_COMMENT_RE)

    for match in _DEFINITION_RE.finditer(text):
        found.append((match.start("label") - 1, _unwrap(match.group("target")), ""))
    text = _mask_pattern(text, _DEFINITION_RE)

    # Inline links are masked once found so their targets are not seen again
    for match in _INLINE_LINK_RE.finditer(text):
        link_text = " ".join(match.group("text").split())
        found.append((match.start(), _unwrap(match.group("target")), link_text))
    text = _mask_pattern(text, _INLINE_LINK_RE)

    for match in _AUTOLINK_RE.finditer(text):
        found.append((match.start(), match.group("target"), ""))
    text = _mask_pattern(text, _AUTOLINK_RE)

    for match in _ATTRIBUTE_RE.finditer(text):
        group = next(name for name in ("dq", "sq", "jsx") if match.group(name) is not None)
        found.append((match.start(group), match.group(group).strip(), ""))

    return found


def extract_references(
    page: Page, config: ValidationConfig | None = None
) -> list[CrossReference]:
    """
    Collect the cross-references of a page in document order.

    Args:
        page (Page): The page to scan.
        config (ValidationConfig | None): Settings used to classify targets.

    Returns:
        list[CrossReference]: References sorted by line, then column.
    """
    config = config or ValidationConfig()
    references: list[CrossReference] = []

    for block_index, block in enumerate(page.blocks):
        if not isinstance(block, ProseBlock):
            continue
        for offset, target, text in _scan_block(block.text):
            line, column = _position(block.text, offset)
            references.append(
                CrossReference(
                    source_path=page.path,
                    location=Location(
                        line=block.start_line + line,
                        column=column + 1,
                        block_index=block_index,
                    ),
                    target=target,
                    kind=classify_target(target, config),
                    text=text,
                )
            )

    references.sort(key=lambda ref: (ref.location.line, ref.location.column))
    return references
