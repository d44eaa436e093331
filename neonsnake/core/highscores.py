from __future__ import annotations
import json, os
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional
from .interfaces import Snapshot

def _valid(e) -> bool:
    if not isinstance(e, dict):
        return False
    score = e.get("score")
    return isinstance(score, int) and not isinstance(score, bool)

class HighScoreTable:
    """Top-N leaderboard persisted as a JSON list, best score first."""
    def __init__(self, path: str, limit: int = 10):
        self.path = path
        self.limit = limit
        self._entries: List[Dict[str, Any]] = []

    def load(self) -> "HighScoreTable":
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError):
            data = []
        if not isinstance(data, list):
            data = []
        self._entries = [e for e in data if _valid(e)]
        self._sort()
        return self

    def save(self) -> None:
        d = os.path.dirname(self.path)
        if d:
            os.makedirs(d, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._entries, f, indent=2)

    def entries(self) -> List[Dict[str, Any]]:
        return [dict(e) for e in self._entries]

    def qualifies(self, score: int) -> bool:
        if len(self._entries) < self.limit:
            return True
        return score > self._entries[-1]["score"]

    def submit(self, name: str, snap: Snapshot, when: Optional[datetime] = None) -> Optional[int]:
        """Insert a finished run. Returns its 1-based rank, or None if it fell off the table."""
        when = when or datetime.now(timezone.utc)
        entry = {
            "name": name,
            "score": snap.score,
            "level": snap.level,
            "date": when.isoformat(),
            "achievements": list(snap.unlocked_names),
        }
        self._entries.append(entry)
        self._sort()
        rank = next((i + 1 for i, e in enumerate(self._entries) if e is entry), None)
        if rank is not None and rank > self.limit:
            rank = None
        return rank

    def _sort(self) -> None:
        # stable: earlier entries win ties
        self._entries.sort(key=lambda e: e["score"], reverse=True)
        del self._entries[self.limit:]

    def __len__(self) -> int:
        return len(self._entries)
