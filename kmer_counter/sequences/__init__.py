"""FASTA/FASTQ ingestion."""

from .reader import (
    SequenceFormat,
    detect_format,
    get_sequences,
    read_fasta,
    read_fastq,
    sniff_format
)

__all__ = [
    'SequenceFormat',
    'detect_format',
    'get_sequences',
    'read_fasta',
    'read_fastq',
    'sniff_format'
]
