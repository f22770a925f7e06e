"""
data_model — struktury danych tcrawl.

Użycie:
  from data_model import TaskRecord, TaskList, DownloadError, ...

Moduły:
  tasks  — SegmentedTask, TaskRecord, TaskList
  errors — TaskCrawlError, NetworkError, DownloadError, ExtractionError,
           FilesystemError
"""

from .errors import (
    TaskCrawlError,
    NetworkError,
    DownloadError,
    ExtractionError,
    FilesystemError,
)
from .tasks import (
    SegmentedTask,
    TaskRecord,
    TaskList,
)

__all__ = [
    # errors
    "TaskCrawlError",
    "NetworkError",
    "DownloadError",
    "ExtractionError",
    "FilesystemError",
    # tasks
    "SegmentedTask",
    "TaskRecord",
    "TaskList",
]
