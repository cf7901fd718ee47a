"""
Helpers for turning file paths and link targets into page paths.

A page path is an ordered tuple of segments, rendered as `/seg1/seg2`.
The root page has no segments and renders as `/`.
"""

from pathlib import PurePosixPath
from typing import Iterable, Sequence

__all__ = [
    "split_path",
    "join_path",
    "normalize_path",
    "page_segments_for_file",
    "strip_page_suffix",
]

INDEX_STEM = "index"


def split_path(path: str | Sequence[str]) -> tuple[str, ...]:
    """
    Split a path into segments, dropping empty and `.` parts and applying `..`.

    `..` above the root is clamped to the root.
    """
    if isinstance(path, str):
        parts = path.split("/")
    else:
        parts = [part for segment in path for part in segment.split("/")]

    segments: list[str] = []
    for part in parts:
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    return tuple(segments)


def join_path(segments: Iterable[str]) -> str:
    return "/" + "/".join(segments)


def normalize_path(path: str | Sequence[str]) -> str:
    """Canonical string form of a path: `"a/b/"` and `("a", "b")` both give `/a/b`."""
    return join_path(split_path(path))


def strip_page_suffix(
    segments: tuple[str, ...], extensions: Sequence[str]
) -> tuple[tuple[str, ...], bool]:
    """
    Remove a page file extension and a trailing `index` segment.

    Returns:
        tuple[tuple[str, ...], bool]: The page segments and whether the last
            segment was an index page.
    """
    if not segments:
        return segments, False

    last = segments[-1]
    lowered = last.lower()
    for ext in extensions:
        if lowered.endswith(ext) and len(last) > len(ext):
            last = last[: -len(ext)]
            break

    if last == INDEX_STEM:
        return segments[:-1], True
    return segments[:-1] + (last,), False


def page_segments_for_file(
    file_path: str, extensions: Sequence[str]
) -> tuple[tuple[str, ...], bool] | None:
    """
    Derive the page path for a content file, relative to the content root.

    Returns None if the file does not carry one of `extensions`.

    Example:
        `guide/index.mdx` -> (("guide",), True)
        `guide/setup.md`  -> (("guide", "setup"), False)
    """
    posix = PurePosixPath(file_path.replace("\\", "/"))
    if posix.suffix.lower() not in extensions:
        return None
    return strip_page_suffix(split_path(posix.as_posix()), extensions)
