"""Base domain class and supporting types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable

from apscheduler.schedulers.asyncio import AsyncIOScheduler


@dataclass
class ScheduledTask:
    """Cron-style scheduled task."""

    name: str
    handler: Callable
    hour: int | str
    minute: int | str = 0
    day_of_week: str = "*"  # "*" = daily, "mon-fri" = weekdays, etc.
    timezone: str = "UTC"
    args: list = field(default_factory=list)


class Domain(ABC):
    """Base class for all domains."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Domain identifier."""
        pass

    @property
    def schedules(self) -> list[ScheduledTask]:
        """Scheduled tasks (optional, default empty)."""
        return []

    def register_schedules(self, scheduler: AsyncIOScheduler) -> list[str]:
        """Register all scheduled tasks with the scheduler.

        Returns:
            The job ids that were registered
        """
        job_ids = []
        for task in self.schedules:
            job = scheduler.add_job(
                task.handler,
                'cron',
                args=task.args,
                hour=task.hour,
                minute=task.minute,
                day_of_week=task.day_of_week,
                timezone=task.timezone,
                id=f"{self.name}_{task.name}",
                replace_existing=True
            )
            job_ids.append(job.id)
        return job_ids
