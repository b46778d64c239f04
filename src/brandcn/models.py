"""Pydantic models shared by the validator, resolver and CLI."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from brandcn.config.constants import VARIANT_SUFFIXES


class ProcessOptions(BaseModel):
    """Variant filter flags for a batch.

    When no flag is set every discovered variant is copied.
    """

    model_config = ConfigDict(frozen=True)

    dark: bool = False
    light: bool = False
    wordmark: bool = False

    @property
    def requested_suffixes(self) -> list[str]:
        """Variant suffixes requested by the flags, in canonical order."""
        flags = (self.dark, self.light, self.wordmark)
        return [suffix for suffix, on in zip(VARIANT_SUFFIXES, flags) if on]

    @property
    def has_variant_filter(self) -> bool:
        return self.dark or self.light or self.wordmark


class LogoOperationResult(BaseModel):
    """Outcome for one copied identifier, or for one brand name that failed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    logo_name: str = Field(alias="logoName")
    success: bool
    skipped: bool = False
    reason: str | None = None
    error: str | None = None

    @classmethod
    def added(cls, logo_name: str) -> LogoOperationResult:
        return cls(logo_name=logo_name, success=True)

    @classmethod
    def already_exists(cls, logo_name: str) -> LogoOperationResult:
        return cls(
            logo_name=logo_name,
            success=True,
            skipped=True,
            reason="Logo already exists in logos directory",
        )

    @classmethod
    def failed(cls, logo_name: str, error: str) -> LogoOperationResult:
        return cls(logo_name=logo_name, success=False, error=error)


class NameValidationError(BaseModel):
    """A rejected logo name and the rule it broke."""

    model_config = ConfigDict(frozen=True)

    name: str
    error: str


class ValidationResult(BaseModel):
    """Partition of raw names into valid names and per-name errors."""

    valid_names: list[str] = Field(default_factory=list)
    errors: list[NameValidationError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


class BatchStatus(str, Enum):
    """Overall outcome of a batch, used to pick the exit code."""

    SUCCESS = "success"
    PARTIAL = "partial"
    ALL_FAILED = "all_failed"


class BatchSummary(BaseModel):
    """Counts derived from a list of results."""

    added: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def status(self) -> BatchStatus:
        succeeded = self.added + self.skipped
        if self.failed and not succeeded:
            return BatchStatus.ALL_FAILED
        if self.failed:
            return BatchStatus.PARTIAL
        return BatchStatus.SUCCESS
