"""
Unlocks: which mechanics the player has access to.

These gate the UI, not soundness. Later unlocks include the earlier ones,
so an Unlocks value is compared with >=.
"""

from dataclasses import dataclass, field
from enum import IntEnum


class Unlocks(IntEnum):
    NONE = 0
    CASES = 1                 # case tree: navigate and revert
    LEMMAS = 2                # click a wire to prove it as a lemma
    THEOREM_APPLICATION = 3   # reuse a finished level as a theorem


# (first level, last level inclusive, unlocks); levels past the last range get the final value.
UNLOCK_SCHEDULE = [
    (0, 6, Unlocks.NONE),
    (7, 16, Unlocks.CASES),
    (17, None, Unlocks.LEMMAS),
]


def unlocks_for_level(level: int, schedule=None) -> Unlocks:
    schedule = UNLOCK_SCHEDULE if schedule is None else schedule
    for first, last, unlocks in schedule:
        if level >= first and (last is None or level <= last):
            return unlocks
    return schedule[-1][2]


@dataclass
class Progress:
    """Completed levels and the running maximum of their unlocks."""
    completed: set = field(default_factory=set)
    unlocks: Unlocks = Unlocks.NONE
    schedule: list = None

    def complete_level(self, level: int) -> Unlocks:
        self.completed.add(level)
        self.unlocks = max(self.unlocks, unlocks_for_level(level, self.schedule))
        return self.unlocks

    def unlocks_at(self, level: int) -> Unlocks:
        """What a session for `level` may use: the level's own unlocks or anything earned since."""
        return max(self.unlocks, unlocks_for_level(level, self.schedule))

    def is_complete(self, level: int) -> bool:
        return level in self.completed
