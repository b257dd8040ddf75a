import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigError
from .sequences.reader import SequenceFormat, detect_format

EXECUTORS = ("process", "thread")

@dataclass(frozen=True)
class Config:
    """Configuration for one counting run"""
    input_file: str
    k: int
    threads: int = 1
    output_file: str = "kmer_counts.tsv"
    file_format: Optional[str] = None
    executor: str = "process"
    batch_size: Optional[int] = None
    log_file: Optional[str] = None
    show_progress: bool = True

    def __post_init__(self):
        """Validate inputs and create output directory"""
        if not os.path.exists(self.input_file):
            raise FileNotFoundError(f"Input file not found: {self.input_file}")
        if self.k < 1:
            raise ConfigError(f"k must be a positive integer, got {self.k}")
        if self.threads < 1:
            raise ConfigError(f"threads must be a positive integer, got {self.threads}")
        if self.executor not in EXECUTORS:
            raise ConfigError(f"executor must be one of {', '.join(EXECUTORS)}, got {self.executor!r}")
        if self.batch_size is not None and self.batch_size < 1:
            raise ConfigError(f"batch_size must be a positive integer, got {self.batch_size}")
        output_dir = os.path.dirname(self.output_file)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

    def resolved_format(self) -> SequenceFormat:
        return detect_format(self.input_file, self.file_format)
