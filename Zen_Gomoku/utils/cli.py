"""CLI options for selecting mode, difficulty, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Zen Gomoku (five in a row)")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings)")
    parser.add_argument("--win-count", type=int, help="Stones in a row needed to win")
    parser.add_argument(
        "--mode",
        choices=["local", "ai", "remote"],
        default=None,
        help="local hot-seat, play against the AI, or continue a shared board",
    )
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], default=None, help="AI strength")
    parser.add_argument("--ai-color", choices=["black", "white"], default=None, help="Side played by the AI")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--token", help="Board token received from the other player (implies remote mode)")
    parser.add_argument("--link", help="Shared link whose #fragment holds the board token (implies remote mode)")
    parser.add_argument("--base-url", default=None, help="Base URL used when printing a share link")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the AI random source")
    parser.add_argument("--oracle-model", default=None, help="Gemini model used by the hard tier")
    parser.add_argument("--oracle-timeout", type=float, default=None, help="Seconds to wait for the move advisor")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for engine messages")
    return parser.parse_args(argv)
