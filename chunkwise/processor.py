"""Public entry points for processing a collection in chunks.

process_in_chunks           runs the callback once per item
process_in_chunks_by_chunk  runs the callback once per chunk
collect_in_chunks*          same, always in collect mode
"""

from typing import Any, Awaitable, Callable, Iterable, List, Sequence, TypeVar, Union

from .batch_utils import chunk_list
from .engine import ErrorRecorder, UnitOutcome, gather_or_cancel, iterate_chunks, run_unit
from .schemas import COLLECT, ChunkingOptions, ProcessResult, resolve_options

T = TypeVar("T")
R = TypeVar("R")

ItemFn = Callable[[T, int], Union[R, Awaitable[R]]]
ChunkFn = Callable[[List[T], int], Union[R, Awaitable[R]]]
OptionsArg = Union[ChunkingOptions, dict, None]


def _materialize(items: Iterable[T]) -> Sequence[T]:
    if isinstance(items, Sequence):
        return items
    return list(items)


async def process_in_chunks(
    items: Iterable[T],
    process_fn: ItemFn,
    options: OptionsArg = None,
    **overrides: Any,
) -> Union[List[R], ProcessResult]:
    """Process *items* in chunks, calling *process_fn(item, index)* per item.

    Items within a chunk run concurrently; chunks run one after another.
    The index passed to the callback is the item's position in *items*.
    Returns the list of results, or a ProcessResult in collect mode.
    """
    opts = resolve_options(options, **overrides)
    chunks = chunk_list(_materialize(items), opts.chunk_size)

    async def _run_items(
        chunk: List[T], chunk_index: int, offset: int, record_error: ErrorRecorder
    ) -> List[UnitOutcome]:
        return await gather_or_cancel(
            [
                run_unit(process_fn, (item, offset + idx), opts.collect, record_error)
                for idx, item in enumerate(chunk)
            ]
        )

    return await iterate_chunks(chunks, _run_items, opts)


async def process_in_chunks_by_chunk(
    items: Iterable[T],
    process_fn: ChunkFn,
    options: OptionsArg = None,
    **overrides: Any,
) -> Union[List[R], ProcessResult]:
    """Same as process_in_chunks, but passing the whole chunk to the callback."""
    opts = resolve_options(options, **overrides)
    chunks = chunk_list(_materialize(items), opts.chunk_size)

    async def _run_chunk(
        chunk: List[T], chunk_index: int, offset: int, record_error: ErrorRecorder
    ) -> List[UnitOutcome]:
        return [await run_unit(process_fn, (chunk, chunk_index), opts.collect, record_error)]

    return await iterate_chunks(chunks, _run_chunk, opts)


async def collect_in_chunks(
    items: Iterable[T],
    process_fn: ItemFn,
    options: OptionsArg = None,
    **overrides: Any,
) -> ProcessResult:
    """process_in_chunks in collect mode; never raises for item failures."""
    overrides["error_mode"] = COLLECT
    return await process_in_chunks(items, process_fn, options, **overrides)


async def collect_in_chunks_by_chunk(
    items: Iterable[T],
    process_fn: ChunkFn,
    options: OptionsArg = None,
    **overrides: Any,
) -> ProcessResult:
    overrides["error_mode"] = COLLECT
    return await process_in_chunks_by_chunk(items, process_fn, options, **overrides)
