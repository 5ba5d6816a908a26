"""
Recent analyses history.
"""

import threading
from typing import List, Optional

from ..exceptions import NotFoundError
from ..models.triage import DiagnosisSummary


class AnalysisHistory:
    """Completed analyses, most recent first."""

    def __init__(self, limit: Optional[int] = None, summaries: Optional[List[DiagnosisSummary]] = None):
        if limit is not None and limit < 1:
            raise ValueError("History limit must be positive")
        self.limit = limit
        self._lock = threading.Lock()
        self._items: tuple = ()
        # Seed data is given oldest first
        for summary in summaries or []:
            self.record(summary)

    def record(self, summary: DiagnosisSummary) -> DiagnosisSummary:
        """Prepend a summary, evicting the oldest entries past the limit."""
        with self._lock:
            items = (summary,) + self._items
            if self.limit is not None:
                items = items[:self.limit]
            self._items = items
        return summary

    def list(self, limit: Optional[int] = None) -> List[DiagnosisSummary]:
        items = self._items
        if limit is not None:
            items = items[:max(0, limit)]
        return list(items)

    def get(self, summary_id: str) -> DiagnosisSummary:
        for summary in self._items:
            if summary.id == summary_id:
                return summary
        raise NotFoundError(f"Analysis {summary_id} not found")

    def __len__(self) -> int:
        return len(self._items)
