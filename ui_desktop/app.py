"""Desktop app bootstrap for the runner game."""

from __future__ import annotations

import argparse
import logging
import sys

from configs.loader import ConfigLoader, GameConfig
from core.game_session import GameSession


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="runner-desktop")
    parser.add_argument("--config", help="YAML or JSON game config; defaults are used when omitted")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_arg_parser().parse_args(argv)
    config = ConfigLoader.load(args.config) if args.config else GameConfig()

    from PySide6.QtWidgets import QApplication

    from ui_desktop.game_window import GameWindow

    app = QApplication.instance() or QApplication(sys.argv)
    session = GameSession(config)
    window = GameWindow(session=session)
    window.show()

    try:
        code = app.exec()
    finally:
        session.close()
    return int(code)


if __name__ == "__main__":
    raise SystemExit(main())
