"""Shared fixtures for kmer_counter tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces the root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def fasta_file(tmp_path):
    path = tmp_path / "reads.fasta"
    path.write_text(">r1\nACGT\n>r2\nTTTT\n")
    return path


@pytest.fixture
def fastq_file(tmp_path):
    path = tmp_path / "reads.fastq"
    path.write_text("@r1\nACGT\n+\nIIII\n")
    return path


@pytest.fixture
def random_sequences():
    """Deterministic pseudo-random reads of varying length, some shorter than k."""
    import random

    rng = random.Random(42)
    return [
        "".join(rng.choice("ACGT") for _ in range(rng.randint(0, 60)))
        for _ in range(200)
    ]
