from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable
from .interfaces import Event, GameOverEvent

ALL_KEYS = [
    "game",
    "final_score", "level", "difficulty",
    "lives_lost", "food_eaten", "target_len",
    "elapsed_ms", "achievements",
]

class Logger(Protocol):
    def log(self, game: int, fields: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, game: int, fields: Dict[str, Any]) -> None:
        fields = {"game": game, **fields}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(fields.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(fields)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def make_game_logger(logger: Logger, start_game: int = 1) -> Callable[[Event], None]:
    """
    Returns a function(event) -> None that writes one row per finished game.
    Every other event is ignored, so it can sit in the same dispatch list as
    the renderer and sound hooks.
    """
    counter = {"game": start_game}

    def _on_event(event: Event) -> None:
        if not isinstance(event, GameOverEvent):
            return
        s = event.snapshot
        logger.log(counter["game"], {
            "final_score": event.final_score,
            "level": s.level,
            "difficulty": s.difficulty,
            "lives_lost": s.lives_lost,
            "food_eaten": s.food_eaten,
            "target_len": s.target_len,
            "elapsed_ms": round(s.elapsed_ms),
            "achievements": ";".join(s.unlocked_names),
        })
        logger.flush()
        counter["game"] += 1

    return _on_event
