"""Pydantic models for testnorm configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_KEYWORD = "(deftest"
DEFAULT_FILE_PATTERN = "*.clj"
DEFAULT_EXCLUDE = [".git", "target", "node_modules"]


class NormalizerConfig(BaseModel):
    """Settings that control discovery and extraction."""

    model_config = ConfigDict(extra="forbid")

    keyword: str = DEFAULT_KEYWORD
    file_pattern: str = DEFAULT_FILE_PATTERN
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))

    @field_validator("keyword", "file_pattern")
    @classmethod
    def not_blank(cls, value: str) -> str:
        """Reject blank or whitespace-padded values."""
        if not value.strip():
            raise ValueError("must not be blank")
        if value != value.strip():
            raise ValueError("must not have leading or trailing whitespace")
        return value
