import math
import threading

from tqdm import tqdm

from .logging_utils import get_logger, log_tqdm_summary

logger = get_logger(__name__)


class ProgressReporter:
    """
    Report completed sequences as milestones, about every tenth of the total.

    update() only takes a short lock and logs, so workers calling it are never
    held up beyond a log call. The counts being reported are not touched.
    """

    def __init__(self, total: int, desc: str = "Counting k-mers", show_bar: bool = False, unit: str = "seq"):
        self.total = total
        self.step = max(1, math.ceil(total / 10))
        self.completed = 0
        self.milestones = []
        self._lock = threading.Lock()
        self._pbar = tqdm(total=total, desc=desc, unit=unit, disable=not show_bar, leave=False)

    def update(self, n: int = 1):
        with self._lock:
            before = self.completed
            self.completed += n
            self._pbar.update(n)
            # one line per milestone crossed, even if a batch jumps several
            for milestone in range((before // self.step + 1) * self.step, self.completed + 1, self.step):
                self.milestones.append(milestone)
                logger.info(f"{milestone:,}/{self.total:,} sequences processed")

    def close(self):
        with self._lock:
            if not self._pbar.disable:
                log_tqdm_summary(self._pbar, logger)
            self._pbar.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
