import time
import click
import datetime
from pathlib import Path
from .config import Config
from .exceptions import KmerCounterError
from .sequences.reader import get_sequences
from .kmer.coordinator import count_kmers_parallel
from .kmer.output import save_kmer_counts
from .utils.logging_utils import *


logger = get_logger(__name__)


@click.command()
@click.argument('input_file', metavar='INPUT', type=click.Path(exists=True, dir_okay=False))
@click.argument('k', type=click.IntRange(min=1))
@click.argument('threads', type=click.IntRange(min=1))
@click.option('--format', 'file_format', type=click.Choice(['fasta', 'fastq'], case_sensitive=False), default=None,
              help='Input format. Detected from the extension or content when omitted.')
@click.option('--out', 'output_file', default='kmer_counts.tsv', show_default=True, help='Output TSV file')
@click.option('--executor', type=click.Choice(['process', 'thread']), default='process', show_default=True,
              help='Run workers as processes or threads')
@click.option('--batch-size', type=click.IntRange(min=1), default=None,
              help='Sequences per work batch (default: about four batches per worker)')
@click.option('--log', 'log_file', default=None, help='Also write the log to this file')
@click.option('--progress/--no-progress', default=True, help='Show a progress bar')
def cli(input_file: str, k: int, threads: int, file_format, output_file: str, executor: str,
        batch_size, log_file, progress: bool):
    """Count the k-mers of every sequence in a FASTA or FASTQ file.

    INPUT is the sequence file, K the k-mer length and THREADS the number of
    parallel workers. Counts are written as '<kmer>\\t<count>' lines.
    """
    setup_logging(Path(log_file) if log_file else None)
    try:
        logger.info(f"{'Command:':<5}{get_clean_command()}")
        start_time = time.time()
        logger.info(f"Start time: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

        config = Config(
            input_file=input_file,
            k=k,
            threads=threads,
            output_file=output_file,
            file_format=file_format,
            executor=executor,
            batch_size=batch_size,
            log_file=log_file,
            show_progress=progress,
        )
        fmt = config.resolved_format()

        log_step("Arguments", style="flat")
        logger.info(f"{'File:':<10}{config.input_file}")
        logger.info(f"{'Format:':<10}{fmt.value.upper()}")
        logger.info(f"{'k:':<10}{config.k}")
        logger.info(f"{'Threads:':<10}{config.threads}")
        log_thread_info(config.threads)

        log_step("Step 1 Reading sequences")
        sequences = get_sequences(config.input_file, fmt)
        logger.info(f"Read {len(sequences):,} sequences")
        too_short = sum(1 for s in sequences if len(s) < config.k)
        if too_short:
            logger.warning(f"{too_short:,} sequences are shorter than k={config.k} and contribute no k-mers")

        log_step("Step 2 Counting k-mers")
        kmer_counts = count_kmers_parallel(
            sequences,
            config.k,
            config.threads,
            executor=config.executor,
            batch_size=config.batch_size,
            show_progress=config.show_progress,
        )

        log_step("Step 3 Writing k-mer counts")
        rows = save_kmer_counts(kmer_counts, config.output_file)

        runtime = time.time() - start_time
        logger.info(f"DONE after {runtime:.3f}s")

        stats = {
            "Sequences": f"{len(sequences):,}",
            "k": f"{config.k}",
            "Distinct k-mers": f"{rows:,}",
            "Total k-mers": f"{sum(kmer_counts.values()):,}",
            "Output": config.output_file,
        }
        log_step("Summary")
        log_summary_block(
            cmd=get_clean_command(),
            start=start_time,
            duration=runtime,
            stats=stats)
        log_all_warnings_and_errors()

    except (KmerCounterError, OSError) as e:
        logger.error(f"Error in kmer-count: {str(e)}")
        raise click.Abort()


if __name__ == '__main__':
    cli()
