"""Shared chunk-iteration loop for item-mode and chunk-mode processing.

Chunks are processed strictly in order. Each chunk is handed to a unit
runner supplied by the calling mode, which reports one UnitOutcome per
unit. When throttling is enabled the delay runs alongside the chunk and
the loop only advances once both have finished.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, List, NamedTuple, Optional, Sequence, Union

from .error_utils import get_error_message
from .schemas import ChunkingOptions, ProcessFailure, ProcessResult, ProcessSuccess
from .verbose import log_if_verbose
from .wait_utils import wait_seconds

logger = logging.getLogger(__name__)


class UnitOutcome(NamedTuple):
    ok: bool
    value: Any = None
    error_message: Optional[str] = None


ErrorRecorder = Callable[[str], None]
ChunkRunner = Callable[[List[Any], int, int, ErrorRecorder], Awaitable[List[UnitOutcome]]]

# Grace period for cancelled siblings before the fail-fast error is re-raised
CANCEL_GRACE_SECONDS = 0.05


async def call_unit(fn: Callable[..., Any], *args: Any) -> Any:
    """Invoke *fn* and await its result when it returns an awaitable."""
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def run_unit(
    fn: Callable[..., Any],
    args: tuple,
    collect: bool,
    record_error: Optional[ErrorRecorder] = None,
) -> UnitOutcome:
    """Run one unit of work.

    In collect mode a failure is caught, passed to *record_error* as soon
    as it happens and reported as an outcome. Otherwise the original
    exception propagates untouched.
    """
    try:
        value = await call_unit(fn, *args)
    except Exception as exc:
        if not collect:
            raise
        message = get_error_message(exc)
        if record_error is not None:
            record_error(message)
        return UnitOutcome(ok=False, error_message=message)
    return UnitOutcome(ok=True, value=value)


def _consume_result(task: "asyncio.Future[Any]") -> None:
    if not task.cancelled():
        task.exception()


async def gather_or_cancel(aws: Sequence[Awaitable[Any]]) -> List[Any]:
    """Run *aws* concurrently and return their results in order.

    The first failure propagates as-is. The remaining tasks are cancelled
    and given CANCEL_GRACE_SECONDS to finish; stragglers are left to finish
    in the background with their outcome consumed.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        if tasks:
            done, pending = await asyncio.wait(tasks, timeout=CANCEL_GRACE_SECONDS)
            for task in done:
                _consume_result(task)
            for task in pending:
                task.add_done_callback(_consume_result)
        raise


async def _settle_chunk(work: Awaitable[List[UnitOutcome]], throttle_seconds: float) -> List[UnitOutcome]:
    if throttle_seconds <= 0:
        return await work

    delay = asyncio.ensure_future(wait_seconds(throttle_seconds))
    try:
        outcomes = await work
    except BaseException:
        delay.cancel()
        await asyncio.gather(delay, return_exceptions=True)
        raise
    await delay
    return outcomes


async def iterate_chunks(
    chunks: List[List[Any]],
    run_chunk: ChunkRunner,
    options: ChunkingOptions,
) -> Union[List[Any], ProcessResult]:
    """Drive *run_chunk* over *chunks* and shape the final result.

    Returns a plain list in fail-fast mode and a ProcessResult in collect
    mode.
    """
    results: List[Any] = []
    failed_indices: List[int] = []
    # dict keeps insertion order, used as an ordered set of messages in the
    # order the failures happened
    error_messages: dict = {}

    def record_error(message: str) -> None:
        error_messages.setdefault(message, None)

    total = len(chunks)
    offset = 0
    for index, chunk in enumerate(chunks):
        log_if_verbose(f"Processing chunk {index + 1}/{total}", options.verbose)

        outcomes = await _settle_chunk(
            run_chunk(chunk, index, offset, record_error),
            options.throttle_seconds,
        )

        for outcome in outcomes:
            if outcome.ok:
                results.append(outcome.value)
                continue
            failed_indices.append(len(results))
            results.append(None)
            record_error(outcome.error_message)

        offset += len(chunk)

    logger.debug(
        f"Processed {len(results)} units in {total} chunks "
        f"({len(failed_indices)} failed)"
    )

    if not options.collect:
        return results

    if not failed_indices:
        return ProcessSuccess(results=results)
    return ProcessFailure(
        results=results,
        error_messages=list(error_messages),
        failed_indices=failed_indices,
    )
