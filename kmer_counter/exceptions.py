class KmerCounterError(Exception):
    """Base exception for the package"""
    pass

class ConfigError(KmerCounterError):
    """Raised when run parameters are invalid"""
    pass

class InputError(KmerCounterError):
    """Raised when input files are invalid"""
    pass

class UnsupportedFormatError(InputError):
    """Raised when an input file is neither FASTA nor FASTQ"""
    pass

class OutputError(KmerCounterError):
    """Raised when the k-mer table cannot be written"""
    pass

class WorkerError(KmerCounterError):
    """Raised when counting one sequence fails inside a worker"""

    def __init__(self, index: int, reason: str):
        # args must mirror __init__ so the error survives pickling between processes
        super().__init__(index, reason)
        self.index = index
        self.reason = reason

    def __str__(self):
        return f"Counting failed for sequence #{self.index}: {self.reason}"
