import logging

import pytest

from kmer_counter.utils.progress import ProgressReporter


@pytest.mark.parametrize("total", [1, 3, 9])
def test_small_totals_report_every_sequence(total):
    with ProgressReporter(total) as progress:
        for _ in range(total):
            progress.update()
    assert progress.step == 1
    assert progress.milestones == list(range(1, total + 1))


def test_milestones_every_tenth():
    with ProgressReporter(100) as progress:
        for _ in range(100):
            progress.update()
    assert progress.milestones == list(range(10, 101, 10))


def test_step_rounds_up():
    with ProgressReporter(25) as progress:
        for _ in range(25):
            progress.update()
    assert progress.step == 3
    assert progress.milestones == [3, 6, 9, 12, 15, 18, 21, 24]


def test_batch_update_crossing_several_milestones():
    with ProgressReporter(30) as progress:
        progress.update(7)
        progress.update(2)
        progress.update(21)
    assert progress.milestones == [3, 6, 9, 12, 15, 18, 21, 24, 27, 30]
    assert progress.completed == 30


def test_zero_total():
    with ProgressReporter(0) as progress:
        pass
    assert progress.milestones == []


def test_milestones_are_logged(caplog):
    with caplog.at_level(logging.INFO, logger="kmer_counter.utils.progress"):
        with ProgressReporter(2) as progress:
            progress.update(2)
    assert "1/2 sequences processed" in caplog.text
    assert "2/2 sequences processed" in caplog.text


def test_progress_bar_summary(caplog):
    with caplog.at_level(logging.INFO, logger="kmer_counter.utils.progress"):
        with ProgressReporter(4, desc="Counting k-mers", show_bar=True) as progress:
            progress.update(4)
    assert "Counting k-mers completed: 4 seq processed" in caplog.text
