"""CLI options for board size, display mode, and config paths."""

import argparse

from ..Board import MIN_SIZE


def board_size_arg(value):
    size = int(value)
    if size < MIN_SIZE:
        raise argparse.ArgumentTypeError(f"board size must be at least {MIN_SIZE}, got {size}")
    return size


def build_parser():
    parser = argparse.ArgumentParser(description="Omok Duel: two-player five-in-a-row")
    parser.add_argument("--board-size", type=board_size_arg, help=f"Board size (minimum {MIN_SIZE}, default from settings)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input)")
    parser.add_argument("--window-size", type=int, help="GUI window size in pixels")
    parser.add_argument("--no-hover", action="store_true", help="Disable the hover stone preview in the GUI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)
