"""In-memory store of daily updates, bucketed by day key.

Buckets are created lazily on the first update of a day and entries are
append-only. Nothing is persisted; the store lives as long as the process.
"""

from typing import Optional

from logger import logger
from .errors import RetentionError, ValidationError
from .types import DailyUpdate


class UpdateStore:
    """Day-partitioned, append-only collection of DailyUpdate entries."""

    def __init__(self, retain_days: Optional[int] = None):
        """Initialize the store.

        Args:
            retain_days: Keep only the newest N day buckets. None keeps every
                day for the lifetime of the process.
        """
        if retain_days is not None and retain_days < 1:
            raise ValueError("retain_days must be at least 1")
        self.retain_days = retain_days
        self._buckets: dict[str, list[DailyUpdate]] = {}

    def record_update(
        self,
        day: str,
        author_id: int,
        author_name: str,
        author_handle: Optional[str],
        text: str,
        submitted_at: str
    ) -> DailyUpdate:
        """Append an update to the day's bucket.

        Args:
            day: Day key (YYYY-MM-DD)
            author_id: Platform user ID
            author_name: Display name at submission time
            author_handle: Username, if the platform has one
            text: Update text (stripped before storing)
            submitted_at: Local time of submission (HH:MM:SS)

        Returns:
            The stored DailyUpdate

        Raises:
            ValidationError: If text is empty or whitespace-only
            RetentionError: If day is older than the retained window
        """
        text = (text or "").strip()
        if not text:
            raise ValidationError("Update text must not be empty")

        update = DailyUpdate(
            author_id=author_id,
            author_name=author_name,
            author_handle=author_handle,
            text=text,
            submitted_at=submitted_at,
            day=day
        )

        bucket = self._buckets.get(day)
        if bucket is None:
            if self._is_outside_retention(day):
                raise RetentionError(f"{day} is older than the newest {self.retain_days} day(s) kept")
            bucket = self._buckets[day] = []
        bucket.append(update)
        self._evict_old_days(keep=day)

        logger.info(f"Recorded update from {author_id} for {day} ({len(bucket)} today)")
        return update

    def list_updates(self, day: str) -> list[DailyUpdate]:
        """All updates for a day in submission order (empty if none)."""
        return list(self._buckets.get(day, []))

    def list_updates_for_author(self, day: str, author_id: int) -> list[DailyUpdate]:
        """Updates for a day by one author, in submission order."""
        return [u for u in self._buckets.get(day, []) if u.author_id == author_id]

    def days(self) -> list[str]:
        """Known day keys, oldest first."""
        return sorted(self._buckets)

    def _is_outside_retention(self, day: str) -> bool:
        """True if a new bucket for day would be evicted straight away."""
        if self.retain_days is None or len(self._buckets) < self.retain_days:
            return False
        # Day keys sort chronologically as strings
        return day < sorted(self._buckets)[-self.retain_days]

    def _evict_old_days(self, keep: str):
        if self.retain_days is None:
            return

        stale = [d for d in sorted(self._buckets)[:-self.retain_days] if d != keep]
        for day in stale:
            del self._buckets[day]
        if stale:
            logger.info(f"Evicted {len(stale)} old day bucket(s): {', '.join(stale)}")
