"""Pydantic models for chunk processing options and results.

ChunkingOptions carries the per-call configuration.
ProcessResult is the tagged result returned in collect mode:
  - ProcessSuccess (has_errors=False) when every unit succeeded
  - ProcessFailure (has_errors=True) with holes, messages and indices
"""

import math
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .verbose import is_verbose

ErrorMode = Literal["fail-fast", "collect"]

FAIL_FAST: ErrorMode = "fail-fast"
COLLECT: ErrorMode = "collect"


# ── Options ──────────────────────────────────────────────────────────────────

class ChunkingOptions(BaseModel):
    """Validated configuration for one processing call."""

    chunk_size: int = Field(default=500, description="Number of items per chunk")
    throttle_seconds: float = Field(
        default=0,
        description="Minimum spacing between the starts of successive chunks",
    )
    error_mode: ErrorMode = Field(
        default=FAIL_FAST,
        description="fail-fast raises the first error, collect returns a partial result",
    )
    verbose: bool = Field(
        default_factory=is_verbose,
        description="Log chunk progress; defaults to the VERBOSE env toggle",
    )

    @field_validator("chunk_size", mode="before")
    @classmethod
    def _clamp_chunk_size(cls, value: Any) -> Any:
        if isinstance(value, float) and math.isfinite(value):
            value = math.floor(value)
        if isinstance(value, int) and value < 1:
            return 1
        return value

    @field_validator("throttle_seconds", mode="before")
    @classmethod
    def _clamp_throttle(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and value < 0:
            return 0
        return value

    @property
    def collect(self) -> bool:
        return self.error_mode == COLLECT


def resolve_options(options: Union[ChunkingOptions, dict, None] = None, **overrides: Any) -> ChunkingOptions:
    """Merge *options* and keyword *overrides* over the defaults."""
    if options is None:
        base: dict = {}
    elif isinstance(options, ChunkingOptions):
        base = options.model_dump(exclude_unset=True)
    else:
        base = dict(options)
    base.update(overrides)
    return ChunkingOptions(**base)


# ── Results ──────────────────────────────────────────────────────────────────

class ProcessSuccess(BaseModel):
    """Every unit succeeded; results holds one value per unit."""
    has_errors: Literal[False] = False
    results: List[Any] = Field(default_factory=list)
    error_messages: None = None
    failed_indices: List[int] = Field(default_factory=list)


class ProcessFailure(BaseModel):
    """At least one unit failed; results holds None at each failed slot."""
    has_errors: Literal[True] = True
    results: List[Any] = Field(default_factory=list)
    error_messages: List[str] = Field(..., min_length=1)
    failed_indices: List[int] = Field(..., min_length=1)


ProcessResult = Union[ProcessSuccess, ProcessFailure]
