"""
Bench command for measuring search cost across board sizes.
"""

import click
from tqdm import tqdm
from typing import Optional

from ...game.constants import MIN_BOARD_SIZE
from ...game.game_state import GameState
from ...search.explorer import GameTreeExplorer
from ..config import get_config


@click.command()
@click.option('--min-size', type=int, default=MIN_BOARD_SIZE, show_default=True,
              help='Smallest board size to search')
@click.option('--max-size', type=int, default=4, show_default=True,
              help='Largest board size to search (cost grows exponentially)')
@click.option('--max-depth', type=click.IntRange(min=0), help='Stop exploring after this many plies')
@click.pass_context
def bench(ctx, min_size: int, max_size: int, max_depth: Optional[int]):
    """
    Search the opening position of several board sizes and report the cost.

    \b
    Examples:
        token-race bench
        token-race bench --max-size 5 --max-depth 8
    """
    config = get_config()
    if min_size < MIN_BOARD_SIZE:
        raise click.BadParameter(f"Board size must be at least {MIN_BOARD_SIZE}",
                                 param_hint='--min-size')
    if max_size < min_size:
        raise click.BadParameter("--max-size must be >= --min-size", param_hint='--max-size')
    if max_depth is None:
        max_depth = config.get('max_depth')

    rows = []
    sizes = range(min_size, max_size + 1)
    for board_size in tqdm(sizes, desc="Searching", unit="board",
                           disable=config.get('quiet', False)):
        state = GameState(board_size)
        result = GameTreeExplorer(max_depth=max_depth).search(state, state.current_player)
        rows.append((board_size, result))

    click.echo(f"{'size':>4}  {'outcome':<12}  {'nodes':>10}  {'replay':>10}  {'seconds':>8}  move")
    for board_size, result in rows:
        click.echo(f"{board_size:>4}  {result.outcome.value:<12}  {result.nodes_explored:>10}  "
                   f"{len(result.replay):>10}  {result.elapsed:>8.3f}  {result.move or '-'}")
