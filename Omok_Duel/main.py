"""Entry point for Omok Duel. Load config, wire the controller and view, run the session."""

from pathlib import Path

import yaml

from .Board import InvalidSize
from .Omokgame import Omokgame
from .Player import GuiHumanPlayer, HumanPlayer
from .gui.text_view import TextView
from .session import Session
from .utils.cli import build_parser
from .utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 15,
    "window_size": 800,
    "show_hover": True,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Omok_Duel/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Defaults overlaid with the YAML file; a missing file means defaults only."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    if not path.exists():
        return settings
    with open(path, "r", encoding="utf-8") as f:
        settings.update(yaml.safe_load(f) or {})
    return settings


def merge_cli(settings, args):
    merged = dict(settings)
    if args.board_size is not None:
        merged["board_size"] = args.board_size
    if args.window_size is not None:
        merged["window_size"] = args.window_size
    if args.no_hover:
        merged["show_hover"] = False
    return merged


def build_session(settings, gui=False):
    game = Omokgame(board_size=settings["board_size"])
    if gui:
        from .gui.pygame_view import PygameView

        view = PygameView(
            board_size=settings["board_size"],
            window_size=settings["window_size"],
            show_hover=settings["show_hover"],
        )
        return Session(game, GuiHumanPlayer(view), logger=log_event, renderer=view.render, closer=view.close)

    view = TextView()
    return Session(game, HumanPlayer(), logger=log_event, renderer=view.render)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    settings = merge_cli(load_settings(args.settings), args)

    try:
        session = build_session(settings, gui=args.gui)
    except InvalidSize as exc:
        # board_size from the settings file bypasses the CLI check
        parser.error(f"{exc} (check --board-size or {args.settings})")
    score = session.run()
    print(f"Final score: Black {score.black} - White {score.white}")


if __name__ == "__main__":
    main()
