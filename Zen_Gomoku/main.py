"""Entry point for Zen Gomoku. Load config, wire session and players, start Gomokugame."""

import random

from dotenv import load_dotenv

from Zen_Gomoku.utils.cli import parse_args
from Zen_Gomoku.utils.logger import configure_logging, log_event
from Zen_Gomoku.Board import Cell
from Zen_Gomoku.Gomokugame import Gomokugame
from Zen_Gomoku.Player import HumanPlayer, GuiHumanPlayer
from Zen_Gomoku.Session import GameMode, GameSession
from Zen_Gomoku.ai import heuristic
from Zen_Gomoku.ai.oracle import GeminiOracle
from Zen_Gomoku.ai.tiers import Difficulty
from Zen_Gomoku.settings import load_settings
from Zen_Gomoku.gui.pygame_view import PygameView


def merge_args(settings, args):
    """Command-line flags win over YAML settings."""
    overrides = {
        "board_size": args.board_size,
        "win_count": args.win_count,
        "mode": args.mode,
        "difficulty": args.difficulty,
        "ai_color": args.ai_color,
        "seed": args.seed,
        "oracle_model": args.oracle_model,
        "oracle_timeout_seconds": args.oracle_timeout,
    }
    merged = dict(settings)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    if args.token is not None or args.link is not None:
        merged["mode"] = "remote"
    return merged


def build_session(settings, args):
    difficulty = Difficulty.parse(settings["difficulty"])
    mode = GameMode.parse(settings["mode"])
    oracle = None
    if mode is GameMode.AI and difficulty is Difficulty.HARD:
        oracle = GeminiOracle.from_env(model=settings["oracle_model"], win_count=settings["win_count"])

    kwargs = dict(
        win_count=settings["win_count"],
        mode=mode,
        difficulty=difficulty,
        ai_color=Cell[str(settings["ai_color"]).upper()],
        oracle=oracle,
        rng=random.Random(settings["seed"]),
        oracle_timeout=float(settings["oracle_timeout_seconds"]),
        line_scores=heuristic.load_line_scores(
            settings.get("line_scores"),
            board_size=settings["board_size"],
            jitter=float(settings["jitter"]),
        ),
        jitter=float(settings["jitter"]),
    )
    if args.link is not None:
        return GameSession.from_link(args.link, board_size=settings["board_size"], **kwargs)
    if args.token is not None:
        return GameSession.from_token(args.token, board_size=settings["board_size"], **kwargs)
    return GameSession(board_size=settings["board_size"], **kwargs)


def console_renderer(snapshot):
    print()
    print(snapshot.board)
    if snapshot.winner is None and not snapshot.drawn:
        print(f"{snapshot.current_player.label} to move")


def main():
    load_dotenv()
    args = parse_args()
    configure_logging(args.log_level)
    settings = merge_args(load_settings(args.settings), args)

    session = build_session(settings, args)

    view = None
    if args.gui:
        view = PygameView(board_size=settings["board_size"])

    def make_player(color):
        if view:
            return GuiHumanPlayer(color=color, view=view)
        return HumanPlayer(color=color)

    players = {Cell.BLACK: make_player(Cell.BLACK), Cell.WHITE: make_player(Cell.WHITE)}

    game = Gomokugame(
        session,
        players=players,
        logger=log_event,
        renderer=view.render if view else console_renderer,
        closer=view.close if view else None,
        poller=view.pump if view else None,
        final_pause=3.0 if view else 0.0,
    )
    try:
        result = game.play()
    finally:
        session.close()

    outcome = {Cell.BLACK: "Black wins", Cell.WHITE: "White wins", Cell.EMPTY: "Draw"}
    print(outcome.get(result, "Game paused"))
    if args.base_url:
        print(f"Share link: {session.share_link(args.base_url)}")
    else:
        print(f"Board token: {session.export_token()}")


if __name__ == "__main__":
    main()
