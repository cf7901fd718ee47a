"""
Pydantic models for cross-references and their positions within a page.
"""

from pydantic import BaseModel, ConfigDict

from .enums import ReferenceKind

__all__ = [
    "Location",
    "CrossReference",
]


class Location(BaseModel):
    """
    Position inside a page's raw content.

    Attributes:
        line (int): 1-based line number.
        column (int): 1-based column number.
        block_index (int | None): Index of the enclosing block in `Page.blocks`.
    """

    model_config = ConfigDict(frozen=True)

    line: int
    column: int = 1
    block_index: int | None = None

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class CrossReference(BaseModel):
    """
    A link from a page to another page or to an external resource.

    Attributes:
        source_path (str): Path of the page containing the link.
        location (Location): Where the link starts in the raw content.
        target (str): The link target exactly as written.
        kind (ReferenceKind): Classification of the target.
        text (str): Link text, empty for bare URLs and definitions.
    """

    model_config = ConfigDict(frozen=True)

    source_path: str
    location: Location
    target: str
    kind: ReferenceKind
    text: str = ""
