"""
Play command for an interactive game in the terminal.
"""

import time
import click
from typing import Optional

from ...game.constants import PlayerId, MIN_BOARD_SIZE, replay_delay_ms
from ...session.game_session import GameSession
from ..config import get_config
from ..utils import (
    parse_position,
    render_board,
    render_planes,
    render_replay,
    verbose_echo,
    quiet_echo,
)


def resolve_board_size(size: Optional[int], interior: Optional[int]) -> int:
    """Board size from either the full size or the interior size (full size minus the edges)."""
    if size is not None and interior is not None:
        raise click.UsageError("Use either --size or --interior, not both")
    if interior is not None:
        if interior < 1:
            raise click.BadParameter("Interior size must be at least 1", param_hint='--interior')
        return interior + 2
    if size is None:
        size = get_config().get('board_size', MIN_BOARD_SIZE)
    if size < MIN_BOARD_SIZE:
        raise click.BadParameter(f"Board size must be at least {MIN_BOARD_SIZE}", param_hint='--size')
    return size


def parse_bot_player(value: Optional[str]) -> Optional[PlayerId]:
    if value is None:
        configured = get_config().get('bot_player', 1)
        return PlayerId(configured) if configured is not None else None
    if value.lower() == 'none':
        return None
    return PlayerId(int(value))


@click.command()
@click.option('--size', '-s', type=int, help='Full board size (at least 3)')
@click.option('--interior', '-i', type=int, help='Interior size; the board adds one edge line per side')
@click.option('--player1', help='Name of player 1 (moves left to right)')
@click.option('--player2', help='Name of player 2 (moves top to bottom)')
@click.option('--bot', type=click.Choice(['0', '1', 'none']),
              help='Which player the computer controls')
@click.option('--max-depth', type=click.IntRange(min=0), help='Limit the computer search to this many plies')
@click.option('--show-replay/--no-show-replay', default=None,
              help='Print every move the computer explored')
@click.option('--animate', is_flag=True, help='Pause between replay steps')
@click.pass_context
def play(ctx, size: Optional[int], interior: Optional[int], player1: Optional[str],
         player2: Optional[str], bot: Optional[str], max_depth: Optional[int],
         show_replay: Optional[bool], animate: bool):
    """
    Play a game against the computer.

    Player 1 owns the tokens on the left edge and races them to the right
    edge. Player 2 owns the tokens on the top edge and races them to the
    bottom edge. A blocked token jumps the blocker when the cell behind it
    is free. The first player to bring every token home wins.

    \b
    Examples:
        token-race play --size 4
        token-race play --interior 2 --player1 Ada --bot 1
        token-race play --bot none
    """
    config = get_config()
    use_color = config.get('color_output', True)
    board_size = resolve_board_size(size, interior)
    if show_replay is None:
        show_replay = config.get('show_replay', False)
    if max_depth is None:
        max_depth = config.get('max_depth')

    names = (player1 or config.get('player1_name', 'Player 1'),
             player2 or config.get('player2_name', 'Computer'))

    session = GameSession(
        board_size=board_size,
        player_names=names,
        bot_player=parse_bot_player(bot),
        max_depth=max_depth,
    )
    verbose_echo(f"Board {board_size}x{board_size}, "
                 f"{session.state.max_tokens_per_player} tokens per player")
    click.echo(render_board(session.state.board, use_color))

    while not session.is_over:
        if session.is_bot_turn:
            quiet_echo(f"\n{session.current_name} is thinking...")
            board_before = session.state.board.copy()
            result = session.play_bot_turn()

            if show_replay and len(result.replay):
                delay = replay_delay_ms(board_size, config.get('replay_delay_ms', 500)) / 1000.0
                click.echo(click.style(f"Explored {len(result.replay)} steps:", fg='cyan'))
                if animate:
                    for index, (step, planes) in enumerate(result.replay.frames(board_before)):
                        click.echo(f"[{index + 1}] {step}\n{render_planes(planes, use_color)}\n")
                        time.sleep(delay)
                else:
                    click.echo(render_replay(result.replay, board_before, use_color))

            if result.move is not None:
                click.echo(f"{session.player_names[int(result.move.player)]} moves "
                           f"{result.move.source} -> {result.move.destination}")
        else:
            text = click.prompt(f"\n{session.current_name}, token to move (x,y or q)")
            if text.strip().lower() in ('q', 'quit', 'exit'):
                click.echo("Game abandoned.")
                return

            try:
                position = parse_position(text)
            except click.BadParameter as e:
                click.echo(click.style(str(e.message), fg='yellow'))
                continue

            if not session.select(position):
                click.echo(click.style("Select one of your own tokens.", fg='yellow'))
                continue
            if session.possible_move is None:
                click.echo(click.style("That token cannot move.", fg='yellow'))
                session.reset_selection()
                continue

            target = click.prompt("Move to", default=str(session.possible_move))
            try:
                destination = parse_position(target)
            except click.BadParameter as e:
                click.echo(click.style(str(e.message), fg='yellow'))
                session.reset_selection()
                continue

            if not session.confirm(destination):
                click.echo(click.style(f"{destination} is not a legal destination.", fg='yellow'))
                session.reset_selection()
                continue

        click.echo(render_board(session.state.board, use_color))
        first, second = session.state.players
        quiet_echo(f"Score - {names[0]}: {first.score}/{first.max_tokens}, "
                   f"{names[1]}: {second.score}/{second.max_tokens}")

    if session.winner is not None:
        click.echo(click.style(f"\n{session.win_message()}", fg='yellow', bold=True))
    else:
        click.echo(click.style("\nNo token can move. The game is blocked.", fg='yellow'))
