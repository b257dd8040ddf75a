import dataclasses

import pytest

from kmer_counter.config import Config
from kmer_counter.exceptions import ConfigError
from kmer_counter.sequences.reader import SequenceFormat


def test_defaults(fasta_file):
    config = Config(input_file=str(fasta_file), k=3)
    assert config.threads == 1
    assert config.executor == "process"
    assert config.output_file == "kmer_counts.tsv"
    assert config.resolved_format() is SequenceFormat.FASTA


def test_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(input_file=str(tmp_path / "missing.fa"), k=3)


@pytest.mark.parametrize("kwargs", [
    {"k": 0},
    {"k": 3, "threads": 0},
    {"k": 3, "executor": "gpu"},
    {"k": 3, "batch_size": 0},
])
def test_invalid_values(fasta_file, kwargs):
    with pytest.raises(ConfigError):
        Config(input_file=str(fasta_file), **kwargs)


def test_config_is_immutable(fasta_file):
    config = Config(input_file=str(fasta_file), k=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.k = 4


def test_creates_output_directory(fasta_file, tmp_path):
    out = tmp_path / "results" / "counts.tsv"
    Config(input_file=str(fasta_file), k=3, output_file=str(out))
    assert out.parent.is_dir()


def test_declared_format(fastq_file):
    config = Config(input_file=str(fastq_file), k=3, file_format="fasta")
    assert config.resolved_format() is SequenceFormat.FASTA
