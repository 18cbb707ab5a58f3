"""Command-line entry point: lifeboard <width> <height> <percentage-alive>."""

import sys
import logging
from typing import Optional, Sequence
from .config import ConfigError, load_config, parse_command_line
from .core.board import create_board
from .render import TerminalRenderer
from .simulation import Simulation

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(level: str) -> None:
    """Send log records to stderr so they stay out of the rendered frames."""
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation.

    Returns:
        Process exit code (0 on success or interrupt, 1 on invalid arguments)
    """
    args = parse_command_line(sys.argv[1:] if argv is None else argv)
    configure_logging(args.log_level)

    try:
        config = load_config(args)
    except ConfigError as e:
        logger.debug(f"Rejected arguments {args.values!r}: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Board {config.width}x{config.height}, {config.percentage_alive}% alive, "
                f"delay {config.delay}s")

    board = create_board(config.width, config.height, config.percentage_alive, seed=config.seed)
    simulation = Simulation(board, TerminalRenderer(sys.stdout), delay=config.delay)

    try:
        simulation.run(config.generations)
    except KeyboardInterrupt:
        logger.info(f"Interrupted at generation {board.generation}")
    finally:
        print(file=sys.stdout)

    return 0
