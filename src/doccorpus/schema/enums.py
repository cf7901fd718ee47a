"""
Enumerations used for labelling pages, references, and validation issues
"""

from enum import Enum

__all__ = [
    "IssueKind",
    "ReferenceKind",
    "ParseErrorReason",
]


class IssueKind(str, Enum):
    """
    Kinds of problems reported by a validation run.

    Attributes:
        BROKEN_LINK: Internal target does not resolve, or an external URL is malformed.
        MALFORMED_FRONT_MATTER: Front-matter is missing, unreadable, or fails the schema.
        DUPLICATE_PATH: Two content files map to the same page path.
        MALFORMED_RANGE: A code sample carries invalid line-number annotations.
    """

    BROKEN_LINK = "BrokenLink"
    MALFORMED_FRONT_MATTER = "MalformedFrontMatter"
    DUPLICATE_PATH = "DuplicatePath"
    MALFORMED_RANGE = "MalformedRange"


class ReferenceKind(str, Enum):
    """
    Classification of a cross-reference target.

    Attributes:
        INTERNAL: Path to another page of the corpus.
        EXTERNAL: Absolute URL with a scheme or a protocol-relative URL.
        ANCHOR: Fragment within the same page (e.g. `#usage`).
        IGNORED: Scheme excluded from checking (e.g. `mailto:`).
    """

    INTERNAL = "internal"
    EXTERNAL = "external"
    ANCHOR = "anchor"
    IGNORED = "ignored"


class ParseErrorReason(str, Enum):
    """
    Why raw content could not be parsed into a Page.

    Attributes:
        MISSING_FRONT_MATTER: Content does not open with a `---` block.
        UNTERMINATED_FRONT_MATTER: Opening `---` has no closing delimiter.
        INVALID_YAML: Front-matter is not valid YAML.
        NOT_A_MAPPING: Front-matter YAML is not a key/value mapping.
        MISSING_FIELD: A required field (title, description) is absent.
        INVALID_FIELD: A field is present but has the wrong type or is blank.
    """

    MISSING_FRONT_MATTER = "missing_front_matter"
    UNTERMINATED_FRONT_MATTER = "unterminated_front_matter"
    INVALID_YAML = "invalid_yaml"
    NOT_A_MAPPING = "not_a_mapping"
    MISSING_FIELD = "missing_field"
    INVALID_FIELD = "invalid_field"
