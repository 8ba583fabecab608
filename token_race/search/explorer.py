"""Depth-first game tree exploration for the computer player."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import time

from ..game.constants import PlayerId
from ..game.game_state import GameState
from ..game.types import MoveStep, Outcome
from .replay import ReplayLog

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Everything one search produced."""
    outcome: Outcome
    move: Optional[MoveStep]
    searching_player: PlayerId
    history: List[MoveStep] = field(default_factory=list)
    replay: ReplayLog = field(default_factory=ReplayLog)
    nodes_explored: int = 0
    elapsed: float = 0.0
    settled: bool = False  # a winning line for the searching player was fixed

    @property
    def is_proven_win(self) -> bool:
        """True when the history holds a winning line for the searching player."""
        return self.settled and bool(self.history)


class GameTreeExplorer:
    """Exhaustive depth-first search with backtracking.

    Every trial move is applied to a working copy of the game with
    `Board.move_raw`, explored recursively with the opponent to move, and
    undone. The forward and reverse steps go to the replay log; steps on
    the accepted line stay on the undo-history.
    """

    def __init__(self, max_depth: Optional[int] = None):
        """
        Args:
            max_depth: Number of plies to explore before a non-terminal
                position counts as inconclusive. None searches to the end.
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        self.max_depth = max_depth
        self.nodes_explored = 0

    def search(self,
               state: GameState,
               player: PlayerId,
               searching_player: Optional[PlayerId] = None,
               history: Optional[List[MoveStep]] = None,
               replay: Optional[ReplayLog] = None) -> SearchResult:
        """Search for a winning line starting with `player` to move.

        Args:
            state: Live game state; it is copied and never modified.
            player: Player to move at the root.
            searching_player: Side whose win settles the search. Defaults
                to `player`.
            history: Undo-history to push onto; a new list if omitted.
            replay: Replay log to append to; a new log if omitted.
        """
        player = PlayerId(player)
        searching = PlayerId(searching_player) if searching_player is not None else player
        history = history if history is not None else []
        replay = replay if replay is not None else ReplayLog()
        base = len(history)

        self.nodes_explored = 0
        working = state.copy()

        started = time.perf_counter()
        outcome, settled = self._explore(working, player, searching, history, replay, depth=0)
        elapsed = time.perf_counter() - started

        # Bottom of this search's part of the stack is the move to play now
        if len(history) > base:
            move = history[base]
        else:
            legal = state.legal_moves(player)
            move = legal[0] if legal else None

        logger.info(f"Search for {searching.name} ({player.name} to move): {outcome.value}, "
                    f"settled={settled}, move={move}, nodes={self.nodes_explored}, "
                    f"replay={len(replay)} steps, {elapsed:.3f}s")

        return SearchResult(
            outcome=outcome,
            move=move,
            searching_player=searching,
            history=history,
            replay=replay,
            nodes_explored=self.nodes_explored,
            elapsed=elapsed,
            settled=settled,
        )

    def _explore(self,
                 state: GameState,
                 player: PlayerId,
                 searching: PlayerId,
                 history: List[MoveStep],
                 replay: ReplayLog,
                 depth: int) -> Tuple[Outcome, bool]:
        """Evaluate the position with `player` to move.

        Returns the outcome for `player` and whether a winning line for
        the searching player has been settled. A frame returning WON
        leaves its line on the history; any other frame leaves the
        history as it found it.
        """
        self.nodes_explored += 1

        # 1. Terminal checks
        if state.is_winning_state(player):
            return Outcome.WON, player == searching
        if state.is_winning_state(player.opponent):
            return Outcome.LOSS, False

        if self.max_depth is not None and depth >= self.max_depth:
            return Outcome.INCONCLUSIVE, False

        board = state.board
        saw_inconclusive = False

        # 2. Branch on every movable token
        for token in state.get_player(player).tokens:
            if not token.movable:
                continue

            source = token.position
            landing = board.token_move(source, source.step(player.direction))
            if landing is None:
                continue

            step = MoveStep(source=source, destination=landing, player=player)
            if depth == 0:
                logger.debug(f"Trying root move {step}")

            # 3. Apply, recurse, undo
            mark = len(history)
            replay.append(step)
            history.append(step)
            board.move_raw(source, landing)

            result, settled = self._explore(state, player.opponent, searching,
                                            history, replay, depth + 1)

            board.move_raw(landing, source)
            replay.append(step.reversed())

            # 4. Keep the line when the opponent loses or the line is settled
            if result == Outcome.LOSS or settled:
                return Outcome.WON, settled or player == searching

            # Drop this step and whatever the child kept
            del history[mark:]
            if result == Outcome.INCONCLUSIVE:
                saw_inconclusive = True

        # 5. Nothing won from here
        if saw_inconclusive:
            return Outcome.INCONCLUSIVE, False
        return Outcome.LOSS, False


def request_computer_move(state: GameState,
                          player: PlayerId,
                          searching_player: Optional[PlayerId] = None,
                          max_depth: Optional[int] = None) -> Optional[MoveStep]:
    """Compute the move the computer should play for `player`."""
    result = GameTreeExplorer(max_depth=max_depth).search(state, player, searching_player)
    return result.move
