# settings.py
# Engine configuration read from gogrid.env via python-dotenv.
# The process environment wins over the file (override=False).
import os
from typing import Tuple

from dotenv import load_dotenv

ENV_PATH = os.getenv("GOGRID_ENV", os.path.join(os.path.dirname(__file__), "gogrid.env"))
if os.path.exists(ENV_PATH):
    load_dotenv(ENV_PATH, override=False)


# Helpers to read env with defaults
def getf(name: str, default: float) -> float:
    v = os.getenv(name)
    return float(v) if v is not None else float(default)


def geti(name: str, default: int) -> int:
    v = os.getenv(name)
    return int(v) if v is not None else int(default)


def gets(name: str, default: str) -> str:
    v = os.getenv(name)
    return v if v is not None else default


def getb(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


def get_rgb(name: str, default: str) -> Tuple[float, float, float]:
    rgb = gets(name, default)
    rgb = rgb.strip().lstrip('#')
    assert len(rgb) == 6
    return tuple(
        i / 255
        for i in (
            int(rgb[j:j + 2], 16)
            for j in range(0, 6, 2)
        )
    )


FORBIDDEN_SCOPES = ("game", "move")

BOARD_SIZE = geti("BOARD_SIZE", 19)
# "game": captured-from points stay blocked until reset; "move": only the last move's captures
FORBIDDEN_SCOPE = gets("FORBIDDEN_SCOPE", "game").strip().lower()
DEBUG = getb("GOGRID_DEBUG", False)
