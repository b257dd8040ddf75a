"""K-mer counting and merging functionality."""

from .counter import (
    count_kmers,
    count_kmers_sequential,
    kmer_windows,
    merge_counts
)
from .coordinator import (
    Batch,
    KmerTable,
    count_kmers_parallel,
    partition
)
from .output import (
    read_kmer_counts,
    save_kmer_counts
)

__all__ = [
    'count_kmers',
    'count_kmers_sequential',
    'kmer_windows',
    'merge_counts',
    'Batch',
    'KmerTable',
    'count_kmers_parallel',
    'partition',
    'read_kmer_counts',
    'save_kmer_counts'
]
