"""Command-line configuration for the Game of Life runner.

Positional arguments are validated here, before any board exists. Each
failure maps to one ConfigError subclass whose message names the parameter
that failed.
"""

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.2
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

EXPECTED_ARGUMENTS = 3

# Options taking exactly one value; anything else on the command line is positional
VALUE_OPTIONS = ("--delay", "--generations", "--seed", "--log-level")
HELP_OPTIONS = ("-h", "--help")


class ConfigError(Exception):
    """Invalid command-line input; the simulation must not start."""


class InvalidArgument(ConfigError):
    """A positional argument failed to parse or is out of range.

    Attributes:
        arg: The offending raw argument
    """

    parameter = "argument"

    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(f"invalid {self.parameter}: {arg}")


class InvalidWidth(InvalidArgument):
    parameter = "width"


class InvalidHeight(InvalidArgument):
    parameter = "height"


class InvalidPercentage(InvalidArgument):
    parameter = "percentage"


class TooManyArguments(ConfigError):
    def __init__(self):
        super().__init__("too many arguments")


class NotEnoughArguments(ConfigError):
    def __init__(self):
        super().__init__("not enough arguments")


@dataclass(frozen=True)
class BoardConfig:
    """Validated runner configuration."""
    width: int
    height: int
    percentage_alive: int
    delay: float = DEFAULT_DELAY
    generations: Optional[int] = None
    seed: Optional[int] = None


def parse_unsigned(raw: str) -> Optional[int]:
    """Parse a plain decimal integer with an optional leading '+'.

    Returns:
        The value, or None if raw is not such an integer
    """
    digits = raw[1:] if raw.startswith("+") else raw
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    return int(digits)


def parse_board_args(values: Sequence[str]) -> BoardConfig:
    """Validate <width> <height> <percentage-alive>.

    Args:
        values: Raw positional arguments

    Returns:
        BoardConfig with default runner options

    Raises:
        NotEnoughArguments: Fewer than three values
        TooManyArguments: More than three values
        InvalidWidth: Width is not a positive integer (or exceeds sys.maxsize)
        InvalidHeight: Height is not a positive integer (or width * height exceeds sys.maxsize)
        InvalidPercentage: Percentage is not an integer within 0-100
    """
    if len(values) < EXPECTED_ARGUMENTS:
        raise NotEnoughArguments()
    elif len(values) > EXPECTED_ARGUMENTS:
        raise TooManyArguments()

    raw_width, raw_height, raw_percentage = values

    width = parse_unsigned(raw_width)
    if width is None or width == 0 or width > sys.maxsize:
        raise InvalidWidth(raw_width)

    height = parse_unsigned(raw_height)
    if height is None or height == 0 or width * height > sys.maxsize:
        raise InvalidHeight(raw_height)

    percentage = parse_unsigned(raw_percentage)
    if percentage is None or percentage > 100:
        raise InvalidPercentage(raw_percentage)

    return BoardConfig(width=width, height=height, percentage_alive=percentage)


def non_negative_float(raw: str) -> float:
    """argparse type for --delay."""
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid delay: {raw}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"delay must be >= 0, got {raw}")
    return value


def positive_int(raw: str) -> int:
    """argparse type for --generations."""
    value = parse_unsigned(raw)
    if value is None or value == 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value


def non_negative_int(raw: str) -> int:
    """argparse type for --seed."""
    value = parse_unsigned(raw)
    if value is None:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {raw}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the lifeboard option parser.

    Positional values are not declared here: split_arguments hands them to
    parse_board_args so that every malformed value, option-like or not,
    gets its parameter-specific message.
    """
    parser = argparse.ArgumentParser(
        prog="lifeboard",
        usage="%(prog)s [options] <width> <height> <percentage-alive>",
        description="Conway's Game of Life on a bounded grid, rendered to the terminal",
        allow_abbrev=False,
    )
    parser.add_argument("--delay", type=non_negative_float, default=DEFAULT_DELAY,
                        help=f"Seconds between generations (default {DEFAULT_DELAY})")
    parser.add_argument("--generations", type=positive_int, default=None,
                        help="Stop after N generations (default: run until interrupted)")
    parser.add_argument("--seed", type=non_negative_int, default=None,
                        help="Seed for the random initial state")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=DEFAULT_LOG_LEVEL,
                        type=str.upper, help="Logging level (default WARNING)")
    return parser


def split_arguments(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate known options from positional values, keeping their order.

    Args:
        argv: Command-line arguments without the program name

    Returns:
        (option tokens for argparse, positional values)
    """
    options: List[str] = []
    values: List[str] = []

    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            values.extend(tokens)
            break

        name = token.split("=", 1)[0]
        if name in VALUE_OPTIONS:
            options.append(token)
            if "=" not in token:
                value = next(tokens, None)
                if value is not None:
                    options.append(value)
        elif token in HELP_OPTIONS:
            options.append(token)
        else:
            values.append(token)

    return options, values


def parse_command_line(argv: Sequence[str]) -> argparse.Namespace:
    """Parse options with argparse and attach the raw positional values.

    Option errors (bad --delay etc.) exit through argparse; positional
    values are validated later by load_config.
    """
    options, values = split_arguments(argv)
    args = build_parser().parse_args(options)
    args.values = values
    return args


def load_config(args: argparse.Namespace) -> BoardConfig:
    """Combine parsed argparse options with validated positional values.

    Raises:
        ConfigError: If the positional values are invalid
    """
    board = parse_board_args(args.values)
    config = BoardConfig(
        width=board.width,
        height=board.height,
        percentage_alive=board.percentage_alive,
        delay=args.delay,
        generations=args.generations,
        seed=args.seed,
    )
    logger.debug(f"Loaded config: {config}")
    return config
