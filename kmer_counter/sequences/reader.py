import os
from enum import Enum
from typing import List, Optional, Union

from ..exceptions import UnsupportedFormatError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class SequenceFormat(Enum):
    FASTA = "fasta"
    FASTQ = "fastq"


FASTA_EXTENSIONS = {".fa", ".fasta", ".fna", ".ffn", ".faa", ".frn", ".fas"}
FASTQ_EXTENSIONS = {".fq", ".fastq"}

# undecodable bytes round-trip unchanged, so symbols stay opaque
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def read_fasta(file_path: str) -> List[str]:
    """
    Read every record of a FASTA file as one concatenated sequence.

    >r1
    ACGT
    ACGT
    >r2
    TTTT

    gives ["ACGTACGT", "TTTT"]. Records without sequence lines are dropped and
    lines before the first '>' header are ignored.
    """
    sequences = []
    current_seq = []
    in_record = False

    with open(file_path, 'r', encoding=ENCODING, errors=ENCODING_ERRORS) as f:
        for line in f:
            line = line.strip()
            if line.startswith('>'):
                if current_seq:
                    sequences.append(''.join(current_seq))
                current_seq = []
                in_record = True
            elif in_record and line:
                current_seq.append(line)

    if current_seq:
        sequences.append(''.join(current_seq))

    logger.debug(f"Read {len(sequences)} FASTA records from {file_path}")
    return sequences


def read_fastq(file_path: str) -> List[str]:
    """
    Read the sequence of every FASTQ record.

    Sequence lines are the lines between an '@' header and the following '+'
    separator; they are concatenated so wrapped reads come out as one string.
    Quality lines are skipped until as many quality characters as bases have
    been consumed, so a quality line starting with '@' is never taken for a
    header.
    """
    sequences = []
    current_seq = []
    reading = False
    quality_left = 0

    with open(file_path, 'r', encoding=ENCODING, errors=ENCODING_ERRORS) as f:
        for line in f:
            line = line.strip()
            if quality_left > 0:
                quality_left -= len(line)
                continue
            if line.startswith('@'):
                # a header without '+' abandons the unfinished block
                current_seq = []
                reading = True
            elif line.startswith('+') and reading:
                sequence = ''.join(current_seq)
                if sequence:
                    sequences.append(sequence)
                quality_left = len(sequence)
                current_seq = []
                reading = False
            elif reading and line:
                current_seq.append(line)

    logger.debug(f"Read {len(sequences)} FASTQ records from {file_path}")
    return sequences


def sniff_format(file_path: str) -> Optional[SequenceFormat]:
    """Guess the format from the first non-blank line of the file."""
    with open(file_path, 'r', encoding=ENCODING, errors=ENCODING_ERRORS) as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            if line.startswith('>'):
                return SequenceFormat.FASTA
            if line.startswith('@'):
                return SequenceFormat.FASTQ
            return None
    return None


def detect_format(file_path: str, declared: Union[SequenceFormat, str, None] = None) -> SequenceFormat:
    """
    Decide whether a file is FASTA or FASTQ.

    Order: explicit declaration, known extension, trailing 'a'/'q' of the
    path, then the first non-blank line of the content.
    """
    if declared is not None:
        if isinstance(declared, SequenceFormat):
            return declared
        try:
            return SequenceFormat(declared.lower())
        except ValueError:
            raise UnsupportedFormatError(f"Unknown sequence format: {declared}")

    extension = os.path.splitext(file_path)[1].lower()
    if extension in FASTA_EXTENSIONS:
        return SequenceFormat.FASTA
    if extension in FASTQ_EXTENSIONS:
        return SequenceFormat.FASTQ

    if file_path.endswith('a'):
        return SequenceFormat.FASTA
    if file_path.endswith('q'):
        return SequenceFormat.FASTQ

    sniffed = sniff_format(file_path)
    if sniffed is not None:
        logger.info(f"No recognised extension on {file_path}; detected {sniffed.value.upper()} from its content")
        return sniffed

    raise UnsupportedFormatError(
        f"Cannot tell whether {file_path} is FASTA or FASTQ. "
        f"Use a .fa/.fasta/.fq/.fastq extension or pass --format."
    )


def get_sequences(file_path: str, file_format: Union[SequenceFormat, str, None] = None) -> List[str]:
    """Read all sequences of a FASTA or FASTQ file."""
    fmt = detect_format(file_path, file_format)
    if fmt is SequenceFormat.FASTA:
        return read_fasta(file_path)
    return read_fastq(file_path)
