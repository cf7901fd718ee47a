"""
Pydantic models for a documentation page and its content blocks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from doccorpus.paths import join_path, split_path

if TYPE_CHECKING:
    from doccorpus.config import ValidationConfig
    from .reference import CrossReference

__all__ = [
    "FrontMatter",
    "LineRange",
    "ProseBlock",
    "CodeSample",
    "Block",
    "Page",
]


class FrontMatter(BaseModel):
    """
    Metadata block at the top of a page.

    Attributes:
        title (str): Page title (required, non-blank).
        description (str): Short summary of the page (required, non-blank).
        sidebar_label (str | None): Label used in navigation.
        sidebar_position (int | float | None): Ordering hint for navigation.
        slug (str | None): Absolute path overriding the path derived from the file name.
        tags (list[str]): Free-form labels.
        draft (bool): Whether the page is unpublished.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    title: str
    description: str
    sidebar_label: str | None = None
    sidebar_position: int | float | None = None
    slug: str | None = None
    tags: list[str] = Field(default_factory=list)
    draft: bool = False

    @field_validator("title", "description")
    @classmethod
    def _check_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith("/"):
            raise ValueError("slug must be an absolute path starting with '/'")
        return v


class LineRange(BaseModel):
    """
    Inclusive range of highlighted lines in a code sample.

    No ordering is enforced here so malformed ranges can be reported.
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    def __str__(self) -> str:
        return str(self.start) if self.start == self.end else f"{self.start}-{self.end}"


class ProseBlock(BaseModel):
    """
    Run of non-code content.

    Attributes:
        text (str): Raw markdown text.
        start_line (int): 1-based line of the block's first line in the raw content.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["prose"] = "prose"
    text: str
    start_line: int = 1


class CodeSample(BaseModel):
    """
    Fenced or indented code block.

    Attributes:
        language (str | None): Language tag from the info string.
        text (str): Literal code between the fences.
        start_line (int): 1-based line of the opening fence (first code line when indented).
        first_line_number (int | None): Number shown for the first line, if line numbers are on.
        highlighted (tuple[LineRange, ...]): Highlighted line ranges.
        malformed_annotations (tuple[str, ...]): Range annotations that could not be parsed.
        title (str | None): Title from `title="..."`.
        meta (str): Info string after the language tag.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["code"] = "code"
    language: str | None = None
    text: str
    start_line: int = 1
    first_line_number: int | None = None
    highlighted: tuple[LineRange, ...] = ()
    malformed_annotations: tuple[str, ...] = ()
    title: str | None = None
    meta: str = ""

    @property
    def line_count(self) -> int:
        # A trailing blank line inside the fence still counts
        return len(self.text.split("\n")) if self.text else 0

    def range_problems(self) -> list[str]:
        """
        Describe every ill-formed line annotation.

        A range is well formed when start <= end and both ends fall within the
        sample's numbered lines.
        """
        problems = [
            f"unparseable line annotation '{raw}'" for raw in self.malformed_annotations
        ]
        first = self.first_line_number if self.first_line_number is not None else 1
        last = first + self.line_count - 1
        if self.first_line_number is not None and self.first_line_number < 0:
            problems.append(
                f"starting line number {self.first_line_number} is negative"
            )
        for line_range in self.highlighted:
            if line_range.start > line_range.end:
                problems.append(
                    f"highlight range {line_range.start}-{line_range.end} "
                    "has start after end"
                )
            elif line_range.start < first or line_range.end > last:
                problems.append(
                    f"highlight range {line_range} outside lines {first}-{last}"
                )
        return problems


Block = Annotated[Union[ProseBlock, CodeSample], Field(discriminator="kind")]


class Page(BaseModel):
    """
    One documentation unit, addressed by a unique path.

    A Page may be built directly with `path="/a/b"` instead of `segments`.

    Attributes:
        segments (tuple[str, ...]): Ordered path segments.
        title (str): Page title.
        description (str): Page summary.
        blocks (tuple[Block, ...]): Prose and code blocks in document order.
        front_matter (FrontMatter | None): Parsed front-matter, if the page was parsed.
        source_file (str | None): Content file the page was ingested from.
        is_index (bool): True for directory index pages.
    """

    model_config = ConfigDict(frozen=True)

    segments: tuple[str, ...]
    title: str
    description: str = ""
    blocks: tuple[Block, ...] = ()
    front_matter: FrontMatter | None = None
    source_file: str | None = None
    is_index: bool = False

    @model_validator(mode="before")
    @classmethod
    def _path_to_segments(cls, data: Any) -> Any:
        if isinstance(data, dict) and "path" in data:
            data = dict(data)
            data.setdefault("segments", split_path(data.pop("path")))
        return data

    @field_validator("segments", mode="before")
    @classmethod
    def _normalize_segments(cls, v: Any) -> tuple[str, ...]:
        return split_path(v)

    @property
    def path(self) -> str:
        return join_path(self.segments)

    @property
    def code_samples(self) -> list[CodeSample]:
        return [block for block in self.blocks if isinstance(block, CodeSample)]

    @classmethod
    def parse(
        cls,
        raw_content: str,
        path: str | tuple[str, ...],
        *,
        source_file: str | None = None,
        is_index: bool = False,
    ) -> "Page":
        """Shortcut for `doccorpus.pages.parse_page`."""
        from doccorpus.pages.parser import parse_page

        return parse_page(
            raw_content, path, source_file=source_file, is_index=is_index
        )

    def extract_references(
        self, config: "ValidationConfig | None" = None
    ) -> list["CrossReference"]:
        """Shortcut for `doccorpus.pages.extract_references`."""
        from doccorpus.pages.references import extract_references

        return extract_references(self, config)
