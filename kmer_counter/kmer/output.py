import csv
import os
from typing import Dict

import pandas as pd

from ..exceptions import OutputError
from ..sequences.reader import ENCODING, ENCODING_ERRORS
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


def save_kmer_counts(kmer_counts: Dict[str, int], output_file: str) -> int:
    """
    Write the k-mer table as raw '<kmer>\\t<count>' lines without a header.

    K-mers are written exactly as counted, with no quoting or escaping, so a
    k-mer containing a tab cannot be represented and raises OutputError.
    Rows are sorted by descending count, then k-mer. Any existing file is
    overwritten. Returns the number of rows written.
    """
    df = pd.DataFrame(list(kmer_counts.items()), columns=['kmer', 'count'])
    if not df.empty:
        df = df.sort_values(['count', 'kmer'], ascending=[False, True], kind='mergesort')
        bad = df['kmer'].str.contains('\t', regex=False)
        if bad.any():
            raise OutputError(f"K-mer {df['kmer'][bad].iloc[0]!r} contains a tab and cannot be written as TSV")

    try:
        output_dir = os.path.dirname(output_file)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output_file, 'w', encoding=ENCODING, errors=ENCODING_ERRORS, newline='\n') as f:
            for kmer, count in zip(df['kmer'], df['count']):
                f.write(f"{kmer}\t{count}\n")
    except OSError as e:
        logger.error(f"Error writing k-mer counts to {output_file}: {str(e)}")
        raise OutputError(f"Could not write k-mer counts to {output_file}: {e}") from e

    logger.info(f"K-mer counts saved to: {output_file}")
    return len(df)


def read_kmer_counts(input_file: str) -> Dict[str, int]:
    """Load a table written by save_kmer_counts."""
    if os.path.getsize(input_file) == 0:
        return {}
    df = pd.read_csv(
        input_file,
        sep='\t',
        header=None,
        names=['kmer', 'count'],
        dtype={'kmer': str, 'count': 'int64'},
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
        encoding=ENCODING,
        encoding_errors=ENCODING_ERRORS,
    )
    return dict(zip(df['kmer'].tolist(), df['count'].tolist()))
