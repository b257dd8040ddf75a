import math
import threading
from collections import Counter
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .counter import count_kmers
from ..exceptions import ConfigError, WorkerError
from ..utils.logging_utils import get_logger
from ..utils.progress import ProgressReporter

logger = get_logger(__name__)

EXECUTORS = {
    "process": ProcessPoolExecutor,
    "thread": ThreadPoolExecutor,
}


@dataclass(frozen=True)
class Batch:
    """Contiguous run of sequence indices [start, stop) handled by one task."""
    start: int
    stop: int

    def __len__(self):
        return self.stop - self.start


class KmerTable:
    """Global k-mer counts shared by all workers of a run."""

    def __init__(self):
        self._counts = Counter()
        self._lock = threading.Lock()
        self.folds = 0

    def fold(self, local: Dict[str, int]):
        """Add a worker's local counts in one critical section."""
        with self._lock:
            counts = self._counts
            for kmer, count in local.items():
                counts[kmer] += count
            self.folds += 1

    def snapshot(self) -> Counter:
        with self._lock:
            return Counter(self._counts)


def partition(total: int, threads: int, batch_size: Optional[int] = None) -> List[Batch]:
    """
    Split range(total) into contiguous batches.

    Without an explicit batch_size each worker gets about four batches so a
    slow batch does not leave the others idle at the end of the run.
    """
    if total <= 0:
        return []
    if batch_size is None:
        batch_size = max(1, math.ceil(total / (threads * 4)))
    return [Batch(start, min(start + batch_size, total)) for start in range(0, total, batch_size)]


def count_batch(start: int, sequences: Sequence[str], k: int) -> Counter:
    """Count all sequences of one batch into a fresh local Counter."""
    local = Counter()
    for offset, sequence in enumerate(sequences):
        try:
            local.update(count_kmers(sequence, k))
        except Exception as e:
            raise WorkerError(start + offset, f"{type(e).__name__}: {e}") from e
    return local


def count_and_fold(start: int, sequences: Sequence[str], k: int, table: KmerTable) -> int:
    """Thread worker: count one batch, then fold it into the shared table."""
    local = count_batch(start, sequences, k)
    table.fold(local)
    return len(sequences)


def count_kmers_parallel(
    sequences: Sequence[str],
    k: int,
    threads: int,
    executor: str = "process",
    batch_size: Optional[int] = None,
    show_progress: bool = False
) -> Counter:
    """
    Count k-mers over all sequences with a pool of `threads` workers.

    With executor="process" the batches run in separate processes and their
    local counts are folded here, one batch at a time, as they finish. With
    executor="thread" every worker folds its own batch into the shared table
    under the table lock. Either way the result equals a sequential count and
    is only returned once every batch has been folded.

    Raises:
        WorkerError: counting a sequence failed; no partial table is returned.
    """
    if k < 1:
        raise ConfigError(f"k must be a positive integer, got {k}")
    if threads < 1:
        raise ConfigError(f"threads must be a positive integer, got {threads}")
    if executor not in EXECUTORS:
        raise ConfigError(f"executor must be one of {', '.join(EXECUTORS)}, got {executor!r}")
    if batch_size is not None and batch_size < 1:
        raise ConfigError(f"batch_size must be a positive integer, got {batch_size}")

    table = KmerTable()
    total = len(sequences)
    if total == 0:
        logger.warning("No sequences to count")
        return table.snapshot()

    batches = partition(total, threads, batch_size)
    logger.info(f"Starting k-mer counting with {threads} {executor} workers over {len(batches):,} batches")

    with ProgressReporter(total, desc="Counting k-mers", show_bar=show_progress) as progress:
        with EXECUTORS[executor](max_workers=threads) as pool:
            if executor == "thread":
                futures = {
                    pool.submit(count_and_fold, batch.start, sequences[batch.start:batch.stop], k, table): batch
                    for batch in batches
                }
            else:
                futures = {
                    pool.submit(count_batch, batch.start, sequences[batch.start:batch.stop], k): batch
                    for batch in batches
                }

            for future in as_completed(futures):
                batch = futures[future]
                try:
                    result = future.result()
                except WorkerError as e:
                    logger.error(f"Error in worker: {str(e)}")
                    pool.shutdown(wait=True, cancel_futures=True)
                    raise
                except Exception as e:
                    logger.error(f"Error in batch starting at sequence #{batch.start}: {str(e)}")
                    pool.shutdown(wait=True, cancel_futures=True)
                    raise WorkerError(batch.start, f"{type(e).__name__}: {e}") from e

                if executor == "process":
                    table.fold(result)
                progress.update(len(batch))

    logger.info(f"Merged {table.folds:,} local tables")
    return table.snapshot()
