"""Basic type definitions for token race."""

from enum import Enum
from dataclasses import dataclass
from .constants import PlayerId, Position


class Outcome(Enum):
    WON = "WON"
    LOSS = "LOSS"
    INCONCLUSIVE = "INCONCLUSIVE"  # depth cutoff reached before a terminal state


@dataclass(frozen=True)
class MoveStep:
    """A single recorded transition of one token."""
    source: Position
    destination: Position
    player: PlayerId

    def reversed(self) -> 'MoveStep':
        """The step that undoes this one."""
        return MoveStep(source=self.destination, destination=self.source, player=self.player)

    def __str__(self) -> str:
        return f"{self.player.name} {self.source}->{self.destination}"
