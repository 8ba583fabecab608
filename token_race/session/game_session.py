"""
Game session - drives one game between a human and the computer.

The session owns the live GameState and implements the turn rules:
1. A human selects one of their tokens and confirms its possible move
2. The computer searches a working copy and plays the committed move
3. After every move the win condition is checked
4. The turn passes only if the other player still has a movable token
"""

from typing import Optional, Tuple
import logging

from ..game.constants import PlayerId, Position, DEFAULT_BOARD_SIZE, replay_delay_ms
from ..game.errors import BoardError
from ..game.game_state import GameState
from ..search.explorer import GameTreeExplorer, SearchResult

logger = logging.getLogger(__name__)


class GameSession:
    """Interactive game between a human and (optionally) the computer."""

    def __init__(self,
                 board_size: int = DEFAULT_BOARD_SIZE,
                 player_names: Tuple[str, str] = ("Player 1", "Computer"),
                 bot_player: Optional[PlayerId] = PlayerId.SECOND,
                 max_depth: Optional[int] = None):
        self.state = GameState(board_size)
        self.player_names = player_names
        self.bot_player = PlayerId(bot_player) if bot_player is not None else None
        self.explorer = GameTreeExplorer(max_depth=max_depth)

        self.winner: Optional[PlayerId] = None
        self.last_search: Optional[SearchResult] = None

        self.token_selected = False
        self.selected_position: Optional[Position] = None
        self.possible_move: Optional[Position] = None

    @property
    def current_player(self) -> PlayerId:
        return self.state.current_player

    @property
    def current_name(self) -> str:
        return self.player_names[int(self.state.current_player)]

    @property
    def is_bot_turn(self) -> bool:
        return (self.bot_player is not None
                and self.state.current_player == self.bot_player
                and not self.is_over)

    @property
    def is_stalemate(self) -> bool:
        """Neither side can move and nobody has won."""
        return (self.winner is None
                and all(player.movable_tokens == 0 for player in self.state.players))

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.is_stalemate

    @property
    def replay_delay_ms(self) -> float:
        return replay_delay_ms(self.state.board_size)

    def win_message(self) -> Optional[str]:
        if self.winner is None:
            return None
        return f"{self.player_names[int(self.winner)]} wins!"

    def select(self, position: Position) -> bool:
        """Select a token of the current player and work out its possible move."""
        token = self.state.board.token_at(position)
        if token is not None and token.owner == self.state.current_player:
            self.token_selected = True
            self.selected_position = position
            self._find_possible_move(position)
            return True

        self.reset_selection()
        return False

    def confirm(self, position: Position) -> bool:
        """Move the selected token if `position` is its possible move.

        Any other position is treated as a new selection.
        """
        if self.token_selected and position == self.possible_move:
            return self._move_selected(position)

        self.select(position)
        return False

    def play_bot_turn(self) -> SearchResult:
        """Search for the computer's move and play it on the live state."""
        player = self.state.current_player
        result = self.explorer.search(self.state, player, searching_player=player)
        self.last_search = result

        if result.move is None:
            logger.warning(f"{self.current_name} has no move to play")
            self._check_other_player_moves()
            return result

        logger.info(f"{self.current_name} plays {result.move} "
                    f"({'winning line' if result.is_proven_win else result.outcome.value})")
        self.state.apply_move(result.move.source, result.move.destination)

        self._check_win_condition()
        self._check_other_player_moves()
        return result

    def reset_selection(self):
        self.token_selected = False
        self.selected_position = None
        self.possible_move = None

    def _find_possible_move(self, position: Position):
        direction = self.state.current_player.direction
        self.possible_move = self.state.board.token_move(position, position.step(direction))

    def _move_selected(self, position: Position) -> bool:
        try:
            self.state.apply_move(self.selected_position, position)
        except BoardError as e:
            logger.warning(f"Move error: {e}")
            self.reset_selection()
            return False

        self._check_win_condition()
        self._check_other_player_moves()
        self.reset_selection()
        return True

    def _check_win_condition(self):
        player = self.state.get_current_player()
        if player.score >= self.state.max_tokens_per_player:
            self.winner = player.number
            logger.info(self.win_message())

    def _check_other_player_moves(self):
        """Pass the turn unless the other player is completely blocked."""
        if self.state.get_other_player().movable_tokens == 0:
            logger.info(f"{self.player_names[int(self.state.current_player.opponent)]} "
                        f"has no valid moves")
            return
        self.state.switch_player()
