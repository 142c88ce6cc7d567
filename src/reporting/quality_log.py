"""
Data quality log for ProviderDQ.

One append-only text file per validation run, named after the run start
time. Every message is written to the file and echoed to the console in
call order.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

LOG_FILE_PREFIX = "data_quality_log_"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
FILE_FORMAT = "%(asctime)s - %(message)s"
CONSOLE_FORMAT = "%(message)s"


def log_file_name(started_at: datetime) -> str:
    """File name for a run that started at the given time."""
    return f"{LOG_FILE_PREFIX}{started_at.strftime(TIMESTAMP_FORMAT)}.txt"


class QualityLog:
    """
    Scoped destination for one validation run.

    Usage::

        with QualityLog("logs", started_at) as qlog:
            qlog.write("Found 2 rows with missing ProviderID in providers.csv")
    """

    def __init__(self, log_folder: Union[str, Path],
                 started_at: Optional[datetime] = None, stream=None):
        """
        Args:
            log_folder: Directory for the log file (created if missing)
            started_at: Run start time used in the file name
            stream: Console stream (defaults to stdout)
        """
        self.started_at = started_at or datetime.now()
        self.path = Path(log_folder) / log_file_name(self.started_at)
        self.stream = stream
        self.messages: List[str] = []
        self._logger: Optional[logging.Logger] = None
        self._handlers: List[logging.Handler] = []

    def __enter__(self) -> "QualityLog":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def open(self):
        """Create the log folder and attach file and console handlers."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        console_handler = logging.StreamHandler(self.stream or sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

        run_logger = logging.getLogger(
            f"dq.findings.{self.started_at.strftime(TIMESTAMP_FORMAT)}"
        )
        run_logger.setLevel(logging.INFO)
        run_logger.propagate = False
        for handler in (file_handler, console_handler):
            run_logger.addHandler(handler)

        self._logger = run_logger
        self._handlers = [file_handler, console_handler]
        logger.info(f"Writing data quality log to {self.path}")

    def close(self):
        """Flush and detach the handlers."""
        if self._logger is None:
            return
        for handler in self._handlers:
            handler.flush()
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers = []
        self._logger = None

    def write(self, message: str):
        """Write one line to the log file and the console."""
        if self._logger is None:
            raise RuntimeError("QualityLog is not open")
        self._logger.info(message)
        self.messages.append(message)
