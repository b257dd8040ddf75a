from collections import Counter
from typing import Dict, Iterable, List


def kmer_windows(sequence: str, k: int) -> List[str]:
    """Return every length-k window of the sequence, left to right."""
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")
    if k > len(sequence):
        return []
    return [sequence[i:i + k] for i in range(len(sequence) - k + 1)]


def count_kmers(sequence: str, k: int) -> Counter:
    """
    Count the k-mers of one sequence.

    Every offset j in [0, len(sequence) - k] contributes one occurrence of
    sequence[j:j + k]. Symbols are not interpreted, so 'acgt' and 'ACGT'
    are different k-mers. A sequence shorter than k contributes nothing.
    """
    return Counter(kmer_windows(sequence, k))


def merge_counts(target: Dict[str, int], local: Dict[str, int]) -> Dict[str, int]:
    """Add every (kmer, count) pair of local into target, in place."""
    for kmer, count in local.items():
        target[kmer] = target.get(kmer, 0) + count
    return target


def count_kmers_sequential(sequences: Iterable[str], k: int) -> Counter:
    """Single-threaded reference count over all sequences."""
    total = Counter()
    for sequence in sequences:
        merge_counts(total, count_kmers(sequence, k))
    return total
