import random
import unittest

from token_race.game.constants import PlayerId, Position
from token_race.game.game_state import GameState
from token_race.game.types import MoveStep, Outcome
from token_race.search.explorer import GameTreeExplorer, request_computer_move
from token_race.search.replay import ReplayLog


def opened_game() -> GameState:
    """Size-3 game after the first player's only opening move."""
    game = GameState(3)
    game.apply_move(Position(0, 1), Position(1, 1))
    game.switch_player()
    return game


class TestGameTreeExplorer(unittest.TestCase):
    def setUp(self):
        self.explorer = GameTreeExplorer()

    def test_second_player_to_move_from_start_loses(self):
        game = GameState(3)
        result = self.explorer.search(game, PlayerId.SECOND)

        self.assertEqual(result.outcome, Outcome.LOSS)
        self.assertEqual(result.history, [])
        self.assertFalse(result.is_proven_win)
        # No winning line, so the first root trial is played
        self.assertEqual(result.move, MoveStep(Position(1, 0), Position(1, 1), PlayerId.SECOND))
        self.assertEqual(result.nodes_explored, 3)

    def test_first_player_to_move_from_start_loses(self):
        result = self.explorer.search(GameState(3), PlayerId.FIRST)
        self.assertEqual(result.outcome, Outcome.LOSS)
        self.assertEqual(result.move, MoveStep(Position(0, 1), Position(1, 1), PlayerId.FIRST))

    def test_finds_winning_jump(self):
        game = opened_game()
        result = self.explorer.search(game, PlayerId.SECOND)

        winning = MoveStep(Position(1, 0), Position(1, 2), PlayerId.SECOND)
        self.assertEqual(result.outcome, Outcome.WON)
        self.assertTrue(result.is_proven_win)
        self.assertEqual(result.move, winning)
        self.assertEqual(result.history, [winning])
        self.assertEqual(list(result.replay), [winning, winning.reversed()])

    def test_live_state_is_untouched(self):
        game = opened_game()
        tokens_before = game.board.arena.snapshot()
        cells_before = dict(game.board.cells)

        self.explorer.search(game, PlayerId.SECOND)

        self.assertEqual(game.board.arena.snapshot(), tokens_before)
        self.assertEqual(game.board.cells, cells_before)
        self.assertEqual(game.current_player, PlayerId.SECOND)

    def test_replay_returns_to_start(self):
        game = GameState(4)
        result = self.explorer.search(game, PlayerId.FIRST)
        self.assertGreater(len(result.replay), 0)
        self.assertEqual(len(result.replay) % 2, 0)

        final = None
        for _, working in result.replay.boards(game.board):
            final = working
        # Every trial was undone, whatever was kept on the history
        self.assertEqual(final.cells, game.board.cells)

    def test_larger_board_is_decided(self):
        game = GameState(4)
        result = self.explorer.search(game, PlayerId.FIRST)
        self.assertIn(result.outcome, (Outcome.WON, Outcome.LOSS))
        self.assertIsNotNone(result.move)
        self.assertEqual(result.move.player, PlayerId.FIRST)
        self.assertIn(result.move, game.legal_moves(PlayerId.FIRST))

    def test_depth_zero_is_inconclusive(self):
        game = GameState(3)
        result = GameTreeExplorer(max_depth=0).search(game, PlayerId.FIRST)
        self.assertEqual(result.outcome, Outcome.INCONCLUSIVE)
        self.assertEqual(result.history, [])
        self.assertEqual(result.nodes_explored, 1)
        self.assertEqual(len(result.replay), 0)
        # Nothing was tried, so the first legal move is still offered
        self.assertEqual(result.move, game.legal_moves(PlayerId.FIRST)[0])
        self.assertFalse(result.is_proven_win)

    def test_depth_cutoff_keeps_fallback_move(self):
        result = GameTreeExplorer(max_depth=1).search(GameState(3), PlayerId.SECOND)
        self.assertEqual(result.outcome, Outcome.INCONCLUSIVE)
        self.assertEqual(result.move, MoveStep(Position(1, 0), Position(1, 1), PlayerId.SECOND))

    def test_depth_cutoff_still_sees_immediate_win(self):
        result = GameTreeExplorer(max_depth=1).search(opened_game(), PlayerId.SECOND)
        self.assertEqual(result.outcome, Outcome.WON)
        self.assertTrue(result.is_proven_win)

    def test_rejects_negative_depth(self):
        with self.assertRaises(ValueError):
            GameTreeExplorer(max_depth=-1)

    def test_searching_player_is_recorded(self):
        result = self.explorer.search(opened_game(), PlayerId.SECOND,
                                      searching_player=PlayerId.FIRST)
        self.assertEqual(result.searching_player, PlayerId.FIRST)
        self.assertEqual(result.move, MoveStep(Position(1, 0), Position(1, 2), PlayerId.SECOND))
        # The root side wins, but that is no win for the searching player
        self.assertEqual(result.outcome, Outcome.WON)
        self.assertFalse(result.settled)
        self.assertFalse(result.is_proven_win)

    def test_win_for_searching_player_deeper_in_the_tree(self):
        result = self.explorer.search(GameState(3), PlayerId.FIRST,
                                      searching_player=PlayerId.SECOND)
        self.assertTrue(result.settled)
        self.assertTrue(result.is_proven_win)
        self.assertEqual(result.history, [
            MoveStep(Position(0, 1), Position(1, 1), PlayerId.FIRST),
            MoveStep(Position(1, 0), Position(1, 2), PlayerId.SECOND),
        ])

    def test_appends_to_existing_history_and_replay(self):
        earlier = MoveStep(Position(0, 1), Position(1, 1), PlayerId.FIRST)
        history = [earlier]
        replay = ReplayLog([earlier])

        result = self.explorer.search(opened_game(), PlayerId.SECOND,
                                      history=history, replay=replay)

        self.assertIs(result.history, history)
        self.assertEqual(history[0], earlier)
        self.assertEqual(result.move, history[1])
        self.assertEqual(len(replay), 3)

    def test_request_computer_move(self):
        move = request_computer_move(opened_game(), PlayerId.SECOND)
        self.assertEqual(move, MoveStep(Position(1, 0), Position(1, 2), PlayerId.SECOND))

    def test_searches_are_independent(self):
        first = self.explorer.search(GameState(3), PlayerId.SECOND)
        second = self.explorer.search(opened_game(), PlayerId.SECOND)
        self.assertEqual(first.outcome, Outcome.LOSS)
        self.assertEqual(second.outcome, Outcome.WON)
        self.assertEqual(len(second.replay), 2)


def random_game(board_size: int, seed: int, plies: int) -> GameState:
    """Play random legal moves from the start, stopping early if the game ends."""
    rng = random.Random(seed)
    game = GameState(board_size)
    for _ in range(plies):
        if game.is_winning_state(PlayerId.FIRST) or game.is_winning_state(PlayerId.SECOND):
            break
        moves = game.legal_moves(game.current_player)
        if not moves:
            break
        move = rng.choice(moves)
        game.apply_move(move.source, move.destination)
        game.switch_player()
    return game


class TestSearchLines(unittest.TestCase):
    """Shape of the history and replay over many positions."""

    def _positions(self):
        yield opened_game(), None
        for seed in range(12):
            yield random_game(4, seed, seed % 5), None
        for seed in range(8):
            yield random_game(5, seed, seed % 6), 8

    def _assert_replay_pairs(self, replay):
        # Every forward step is closed by its reverse, innermost first
        stack = []
        for step in replay:
            if stack and step == stack[-1].reversed():
                stack.pop()
            else:
                stack.append(step)
        self.assertEqual(stack, [])

    def _assert_playable_line(self, game, result, player):
        history = result.history
        self.assertEqual(history[0], result.move)
        self.assertEqual(history[0].player, player)
        for previous, step in zip(history, history[1:]):
            self.assertNotEqual(previous.player, step.player)

        line = game.copy()
        for step in history:
            line.current_player = step.player
            landing = line.apply_move(step.source, step.destination)
            self.assertEqual(landing, step.destination)
        self.assertTrue(line.is_winning_state(result.searching_player))

    def test_history_is_a_playable_line(self):
        won = 0
        for game, max_depth in self._positions():
            player = game.current_player
            if game.is_winning_state(player) or game.is_winning_state(player.opponent):
                continue
            result = GameTreeExplorer(max_depth=max_depth).search(game, player)

            if result.outcome == Outcome.WON:
                won += 1
                self.assertTrue(result.is_proven_win)
                self._assert_playable_line(game, result, player)
            else:
                self.assertEqual(result.history, [])
                self.assertFalse(result.is_proven_win)
        self.assertGreater(won, 0)

    def test_replay_steps_come_in_pairs(self):
        for game, max_depth in self._positions():
            result = GameTreeExplorer(max_depth=max_depth).search(game, game.current_player)
            self._assert_replay_pairs(result.replay)


class TestReplayLog(unittest.TestCase):
    def setUp(self):
        self.game = GameState(3)
        step = MoveStep(Position(0, 1), Position(1, 1), PlayerId.FIRST)
        self.log = ReplayLog()
        self.log.append(step)
        self.log.append(step.reversed())

    def test_iteration_restarts(self):
        self.assertEqual(list(self.log), list(self.log))
        self.assertEqual(len(self.log), 2)
        self.assertEqual(self.log[1].source, Position(1, 1))

    def test_boards_leave_live_board_alone(self):
        positions = [working.token_at(Position(1, 1)) is not None
                     for _, working in self.log.boards(self.game.board)]
        self.assertEqual(positions, [True, False])
        self.assertIsNone(self.game.board.token_at(Position(1, 1)))

    def test_frames(self):
        frames = list(self.log.frames(self.game.board))
        self.assertEqual(len(frames), 2)
        step, planes = frames[0]
        self.assertEqual(planes.shape, (2, 3, 3))
        self.assertEqual(planes[0, 1, 1], 1)

    def test_to_array(self):
        array = self.log.to_array()
        self.assertEqual(array.shape, (2, 5))
        self.assertEqual(list(array[0]), [0, 1, 1, 1, 0])
        self.assertEqual(ReplayLog().to_array().shape, (0, 5))

    def test_clear(self):
        self.log.clear()
        self.assertEqual(len(self.log), 0)
        self.assertEqual(repr(self.log), "ReplayLog(steps=0)")


if __name__ == '__main__':
    unittest.main()
