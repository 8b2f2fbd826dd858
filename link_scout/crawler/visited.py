# link_scout/crawler/visited.py
"""
Admission ledger shared by one crawl run.
"""
from __future__ import annotations

import threading
from typing import Dict


class VisitedSet:
    """Canonical URLs already dispatched for a check or a document fetch.

    :meth:`admit` is the only mutator and does the membership test and the
    insert under one lock, so a URL is admitted at most once per run no matter
    how many producers race on it.
    """

    def __init__(self) -> None:
        self._seen: Dict[str, bool] = {}
        self._lock = threading.Lock()

    def admit(self, url: str) -> bool:
        """Record *url*; True on the first call for it, False afterwards."""
        with self._lock:
            if url in self._seen:
                return False
            self._seen[url] = True
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)
