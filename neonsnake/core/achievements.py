# neonsnake/core/achievements.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional
from .entities import RunState
from .interfaces import AchievementView

Predicate = Callable[[RunState], bool]

@dataclass
class Achievement:
    id: str
    name: str
    description: str
    reward: int
    condition: Predicate
    unlocked: bool = False

    def view(self) -> AchievementView:
        return AchievementView(self.id, self.name, self.description, self.unlocked, self.reward)

def default_achievements() -> List[Achievement]:
    return [
        Achievement("score_100", "Score 100 Points", "Reach 100 points.", 50,
                    lambda s: s.score >= 100),
        Achievement("level_5", "Reach Level 5", "Advance to level 5.", 100,
                    lambda s: s.level >= 5),
        Achievement("eat_50_food", "Eat 50 Food", "Consume 50 food items.", 80,
                    lambda s: s.food_eaten >= 50),
    ]

class AchievementEvaluator:
    """Checks every locked achievement after a tick.

    Unlocking is one-way: the flag flips once and the reward lands on the
    score in the same step, so a predicate that keeps holding never pays twice.
    """

    def __init__(self, achievements: Optional[Iterable[Achievement]] = None):
        self.achievements = list(achievements) if achievements is not None else default_achievements()

    def evaluate(self, state: RunState) -> List[Achievement]:
        # judge every predicate against the same state, then pay out
        newly = [a for a in self.achievements if not a.unlocked and a.condition(state)]
        for ach in newly:
            ach.unlocked = True
            state.score += ach.reward
        return newly

    def reset(self) -> None:
        for ach in self.achievements:
            ach.unlocked = False

    def get(self, ach_id: str) -> Achievement:
        for ach in self.achievements:
            if ach.id == ach_id:
                return ach
        raise KeyError(ach_id)

    def views(self):
        return tuple(a.view() for a in self.achievements)

    def unlocked_names(self) -> List[str]:
        return [a.name for a in self.achievements if a.unlocked]
