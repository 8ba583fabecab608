"""
Main CLI entry point for token race.

This module provides the main command-line interface for the token-race tool.
"""

import logging
import click
from typing import Optional

from .config import set_config, GameConfig
from .commands import play, solve, bench
from .utils import format_success_message


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Setup logging configuration."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group(name='token-race', invoke_without_command=True)
@click.option('--config', '-c',
              help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True,
              help='Suppress non-essential output')
@click.option('--no-color', is_flag=True,
              help='Disable colored output')
@click.version_option(version='0.1.0', prog_name='token-race')
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool, quiet: bool, no_color: bool):
    """
    Token Race

    A two-player race across a square board. Each player pushes their
    tokens to the opposite edge, jumping single blockers on the way. The
    computer opponent plays by exhaustively searching the game tree.

    \b
    Examples:
        token-race play --size 4
        token-race solve --size 3 --opening 0,1:1,1
        token-race bench --max-size 4
    """
    # If no command is provided, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    setup_logging(verbose, quiet)

    game_config = GameConfig(config_file=config)

    # Override config with command line options
    if verbose:
        game_config.set('verbose', True)
    if quiet:
        game_config.set('quiet', True)
    if no_color:
        game_config.set('color_output', False)

    set_config(game_config)

    ctx.ensure_object(dict)
    ctx.obj['config'] = game_config


# Register commands
cli.add_command(play.play)
cli.add_command(solve.solve)
cli.add_command(bench.bench)


@cli.command()
@click.option('--save-to', type=click.Path(dir_okay=False),
              help='Write the current configuration to this file')
@click.pass_context
def config(ctx, save_to: Optional[str]):
    """Show current configuration."""
    config_obj = ctx.obj['config']

    click.echo("Current configuration:")
    click.echo("=" * 50)

    for key, value in config_obj.to_dict().items():
        click.echo(f"{key:<25}: {value}")

    if config_obj._config_file:
        click.echo(f"\nLoaded from: {config_obj._config_file}")
    else:
        click.echo("\nUsing default configuration (no config file found)")

    if save_to:
        config_obj.save(save_to)
        click.echo(format_success_message("Configuration saved", {"File": save_to}))


if __name__ == '__main__':
    cli()
