"""Worker package - periodic provider refresh."""

from worker.scheduler import INTERVALS, Scheduler, run_refresh

__all__ = [
    "INTERVALS",
    "Scheduler",
    "run_refresh",
]
