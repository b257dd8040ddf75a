"""Parallel k-mer counting for FASTA and FASTQ files."""

from .config import Config
from . import sequences
from . import kmer
from . import utils

__version__ = '0.1.0'
