"""
Batch processing of coordinate lines.

Runs one single-item operation over an ordered list of input lines. Each line
is processed in isolation: a bad line is recorded as a ``Failure`` for its
index and processing continues. The result list always has the same length
and order as the input.

The async loop yields to the event loop every ``batch_yield_interval`` items
so long batches do not starve other coroutines sharing the loop. For
callers without an event loop, ``run_batch`` wraps it with ``asyncio.run``;
``batch_process_threaded`` runs the items on a thread pool instead.

Example:
    >>> outcomes = run_batch(["", "40.7,-74.0", "bogus"], BatchOperation.CONVERT)
    >>> [o.success for o in outcomes]
    [False, True, False]
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Sequence, TypeVar, Union

from geocoord.config import EngineConfig, get_default_config
from geocoord.converter import (
    convert_coordinate,
    convert_to_dms,
    convert_to_utm,
    validate_input,
)
from geocoord.outcome import BatchItemOutcome, ErrorKind, Failure, OperationOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

ProgressCallback = Callable[[float], None]

DEFAULT_CHUNK_SIZE = 100


class BatchOperation(Enum):
    """Single-item operation applied to every batch line."""

    VALIDATE = "validate"
    CONVERT = "convert"
    TO_UTM = "utm"
    TO_DMS = "dms"


@dataclass(frozen=True)
class BatchSummary:
    """Success/failure counts of a finished batch."""

    total: int
    succeeded: int
    failed: int


def _parse_operation(operation: Union[BatchOperation, str]) -> BatchOperation:
    if isinstance(operation, BatchOperation):
        return operation
    try:
        return BatchOperation(operation)
    except ValueError:
        valid = [op.value for op in BatchOperation]
        raise ValueError(
            f"Invalid batch operation '{operation}'. "
            f"Must be one of: {', '.join(valid)}"
        ) from None


def process_line(line: str, operation: BatchOperation,
                 config: EngineConfig) -> OperationOutcome[Any]:
    """Route one line to the single-item operation selected for the batch."""
    text = line.strip()
    if not text:
        return Failure("Empty input", ErrorKind.EMPTY_INPUT)

    if operation is BatchOperation.VALIDATE:
        return validate_input(text)
    if operation is BatchOperation.CONVERT:
        return convert_coordinate(text, config)
    if operation is BatchOperation.TO_UTM:
        return convert_to_utm(text, config)
    return convert_to_dms(text, config)


def _process_isolated(index: int, line: str, operation: BatchOperation,
                      config: EngineConfig) -> BatchItemOutcome[Any]:
    try:
        outcome = process_line(line, operation, config)
    except Exception as e:
        # One broken line must not abort the batch
        logger.exception(f"Unexpected error processing batch line {index}")
        outcome = Failure(str(e) or type(e).__name__, ErrorKind.UNRECOGNIZED_FORMAT)

    if not outcome.success:
        logger.warning(f"Batch line {index} rejected: {outcome.message}")
    return BatchItemOutcome(index=index, outcome=outcome)


async def batch_process(
    lines: Sequence[str],
    operation: Union[BatchOperation, str] = BatchOperation.CONVERT,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[EngineConfig] = None,
) -> List[BatchItemOutcome[Any]]:
    """
    Process lines in order, isolating per-item failures.

    Args:
        lines: Raw input lines (blank lines become "Empty input" failures)
        operation: Operation applied to every line
        on_progress: Called after each item with the completed percentage
        config: Engine configuration (precision, yield interval, split strategy)

    Returns:
        One BatchItemOutcome per input line, ``result[i].index == i``

    Raises:
        ValueError: If operation is not a known BatchOperation
    """
    op = _parse_operation(operation)
    config = config or get_default_config()
    total = len(lines)

    logger.info(f"Starting batch '{op.value}' over {total} lines")

    results: List[BatchItemOutcome[Any]] = []
    for i, line in enumerate(lines):
        results.append(_process_isolated(i, line, op, config))

        if on_progress:
            on_progress((i + 1) / total * 100)

        if (i + 1) % config.batch_yield_interval == 0:
            await asyncio.sleep(0)

    summary = summarize(results)
    logger.info(
        f"Finished batch '{op.value}': {summary.succeeded} succeeded, "
        f"{summary.failed} failed"
    )
    return results


def run_batch(
    lines: Sequence[str],
    operation: Union[BatchOperation, str] = BatchOperation.CONVERT,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[EngineConfig] = None,
) -> List[BatchItemOutcome[Any]]:
    """Synchronous entry point for :func:`batch_process`.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(batch_process(lines, operation, on_progress, config))


def batch_process_threaded(
    lines: Sequence[str],
    operation: Union[BatchOperation, str] = BatchOperation.CONVERT,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[EngineConfig] = None,
    max_workers: Optional[int] = None,
) -> List[BatchItemOutcome[Any]]:
    """
    Process lines on a thread pool.

    Results are collected with ``Executor.map`` so they come back in input
    order regardless of completion order.
    """
    op = _parse_operation(operation)
    config = config or get_default_config()
    workers = max_workers or config.max_workers
    total = len(lines)

    logger.info(f"Starting threaded batch '{op.value}' over {total} lines")

    results: List[BatchItemOutcome[Any]] = []
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="geocoord_batch") as pool:
        mapped = pool.map(
            lambda item: _process_isolated(item[0], item[1], op, config),
            enumerate(lines),
        )
        for outcome in mapped:
            results.append(outcome)
            if on_progress:
                on_progress(len(results) / total * 100)

    return results


async def process_in_chunks(
    items: Sequence[T],
    processor: Callable[[Sequence[T]], Awaitable[List[R]]],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_progress: Optional[ProgressCallback] = None,
) -> List[R]:
    """
    Feed items to an async processor one chunk at a time.

    Progress is reported per chunk and the loop yields after every chunk.

    Raises:
        ValueError: If chunk_size is less than 1
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    results: List[R] = []
    total_chunks = -(-len(items) // chunk_size)

    for start in range(0, len(items), chunk_size):
        chunk = items[start:start + chunk_size]
        results.extend(await processor(chunk))

        if on_progress:
            current_chunk = start // chunk_size + 1
            on_progress(current_chunk / total_chunks * 100)

        await asyncio.sleep(0)

    return results


def summarize(outcomes: Sequence[BatchItemOutcome[Any]]) -> BatchSummary:
    """Count successes and failures in a batch result."""
    succeeded = sum(1 for outcome in outcomes if outcome.success)
    return BatchSummary(
        total=len(outcomes),
        succeeded=succeeded,
        failed=len(outcomes) - succeeded,
    )
