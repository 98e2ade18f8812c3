"""Process large collections in fixed-size, optionally throttled chunks."""

from .batch_utils import chunk_list
from .error_utils import get_error_message
from .processor import (
    collect_in_chunks,
    collect_in_chunks_by_chunk,
    process_in_chunks,
    process_in_chunks_by_chunk,
)
from .schemas import (
    COLLECT,
    FAIL_FAST,
    ChunkingOptions,
    ProcessFailure,
    ProcessResult,
    ProcessSuccess,
)
from .wait_utils import wait_seconds

__all__ = [
    "COLLECT",
    "FAIL_FAST",
    "ChunkingOptions",
    "ProcessFailure",
    "ProcessResult",
    "ProcessSuccess",
    "chunk_list",
    "collect_in_chunks",
    "collect_in_chunks_by_chunk",
    "get_error_message",
    "process_in_chunks",
    "process_in_chunks_by_chunk",
    "wait_seconds",
]
