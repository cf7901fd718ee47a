"""
Configuration for a single validation run.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

__all__ = [
    "ValidationConfig",
]


class ValidationConfig(BaseModel):
    """
    Options controlling how a corpus is loaded and validated.

    Attributes:
        page_extensions (list[str]): File extensions treated as pages.
        ignored_schemes (list[str]): URL schemes that are never checked (e.g. `mailto`).
        external_schemes (list[str]): URL schemes that must carry a host.
        route_prefix (str): Site prefix stripped from internal link targets (e.g. `/docs`).
        check_code_ranges (bool): Whether code-sample line annotations are checked.
    """

    page_extensions: list[str] = Field(
        default_factory=lambda: [".md", ".mdx"],
        description="File extensions of content pages",
    )
    ignored_schemes: list[str] = Field(
        default_factory=lambda: ["mailto", "tel"],
        description="Schemes skipped by the validator",
    )
    external_schemes: list[str] = Field(
        default_factory=lambda: ["http", "https", "ftp"],
        description="Schemes whose URLs need a host",
    )
    route_prefix: str = Field(
        "", description="Prefix stripped from internal targets before lookup"
    )
    check_code_ranges: bool = Field(
        True, description="Report malformed code-sample line ranges"
    )

    @field_validator("page_extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("page_extensions must not contain empty values")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @field_validator("ignored_schemes", "external_schemes")
    @classmethod
    def _normalize_schemes(cls, v: list[str]) -> list[str]:
        return [scheme.strip().lower().rstrip(":") for scheme in v]

    @field_validator("route_prefix")
    @classmethod
    def _check_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("route_prefix must start with '/'")
        return v

    @classmethod
    def from_yaml(cls, yaml_text: str | bytes | dict[str, Any]) -> "ValidationConfig":
        """
        Build a ValidationConfig from a YAML *string* / *bytes* / *dict*.
        """
        data: dict[str, Any]
        if isinstance(yaml_text, dict):
            data = yaml_text
        else:
            data = yaml.safe_load(yaml_text) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_path(cls, path: str | Path) -> "ValidationConfig":
        """Shortcut for `ValidationConfig.from_yaml(Path.read_text())`."""
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))

    def to_yaml(
        self,
        path: str | Path | None = None,
        *,
        sort_keys: bool = False,
        **yaml_kwargs: Any,
    ) -> str:
        """
        Serialize the current config to YAML.

        Args:
            path (str | Path | None): If provided, the YAML text is also written to this file.
            sort_keys (bool): Pass-through to `yaml.safe_dump`.
            yaml_kwargs (Any): Additional kwargs forwarded to `yaml.safe_dump`.

        Returns:
            str: YAML representation.
        """
        text = yaml.safe_dump(
            self.model_dump(),
            sort_keys=sort_keys,
            **yaml_kwargs,
        )
        if path is not None:
            Path(path).write_text(text, encoding="utf-8")
        return text
