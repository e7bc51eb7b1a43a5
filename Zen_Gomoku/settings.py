"""Board dimensions, defaults, and YAML settings loading."""

from pathlib import Path

import yaml

DEFAULT_BOARD_SIZE = 15
WIN_COUNT = 5

MODES = ("local", "ai", "remote")
DIFFICULTIES = ("easy", "medium", "hard")
COLORS = ("black", "white")

PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": DEFAULT_BOARD_SIZE,
    "win_count": WIN_COUNT,
    "mode": "local",
    "difficulty": "medium",
    "ai_color": "white",
    "oracle_model": "gemini-2.5-flash",
    "oracle_timeout_seconds": 10.0,
    "jitter": 5.0,
    "seed": None,
    "line_scores": None,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Zen_Gomoku/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path="config/settings.yaml"):
    """Load settings from YAML on top of DEFAULT_SETTINGS; a missing file yields the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    settings.update({k: v for k, v in data.items() if v is not None})
    validate_settings(settings)
    return settings


def validate_settings(settings):
    """Raise ValueError when settings cannot describe a playable game."""
    size = settings.get("board_size")
    win_count = settings.get("win_count")
    if not isinstance(size, int) or size <= 0:
        raise ValueError(f"board_size must be a positive integer, got {size!r}")
    if not isinstance(win_count, int) or win_count <= 1:
        raise ValueError(f"win_count must be an integer greater than 1, got {win_count!r}")
    if win_count > size:
        raise ValueError(f"win_count ({win_count}) cannot exceed board_size ({size})")
    if str(settings.get("mode")).lower() not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {settings.get('mode')!r}")
    if str(settings.get("difficulty")).lower() not in DIFFICULTIES:
        raise ValueError(f"difficulty must be one of {DIFFICULTIES}, got {settings.get('difficulty')!r}")
    if str(settings.get("ai_color")).lower() not in COLORS:
        raise ValueError(f"ai_color must be one of {COLORS}, got {settings.get('ai_color')!r}")
    if float(settings.get("oracle_timeout_seconds", 0)) <= 0:
        raise ValueError("oracle_timeout_seconds must be positive")
    if float(settings.get("jitter", 0)) < 0:
        raise ValueError("jitter cannot be negative")
    return settings
