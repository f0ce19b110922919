from __future__ import annotations

import argparse
import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from . import __version__
from .errors import SettingsError

logger = logging.getLogger(__name__)

# Size range exposed by the level editor sliders; other sizes still generate.
EDITOR_MIN_SIZE = 5
EDITOR_MAX_SIZE = 100

ENV_PREFIX = "LABYRINTH_"


def parse_seed(raw: Any) -> Optional[Union[int, str]]:
    """Interpret a seed from text: integers stay integers, anything else is a string seed."""
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return text


@dataclass
class MazeSettings:
    """Generation settings. Defaults mirror the shipped game (10x10 maze, 10-unit cells)."""

    width: int = 10
    height: int = 10
    seed: Optional[Union[int, str]] = None
    cell_size: float = 10.0
    wall_height: float = 5.0
    wall_thickness: float = 0.5
    spawn_elevation: float = 1.0
    start: Tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        self.start = (int(self.start[0]), int(self.start[1]))
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, int) and not (EDITOR_MIN_SIZE <= value <= EDITOR_MAX_SIZE):
                logger.warning(
                    "Maze %s %s is outside the editor range [%d, %d]",
                    name,
                    value,
                    EDITOR_MIN_SIZE,
                    EDITOR_MAX_SIZE,
                )

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "MazeSettings":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown settings keys: %s", ", ".join(unknown))
        values = {k: v for k, v in data.items() if k in known}
        # Typed input (YAML) keeps its seed type: "123" and 123 derive different mazes.
        seed = values.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, str))):
            raise SettingsError(f"Seed must be an integer or a string, got {seed!r}")
        try:
            return cls(**values)
        except (TypeError, ValueError, IndexError) as exc:
            raise SettingsError(f"Invalid settings: {exc}") from exc

    @classmethod
    def from_env(cls) -> "MazeSettings":
        data: Dict[str, Any] = {}
        for key, cast in (("width", int), ("height", int)):
            raw = os.getenv(f"{ENV_PREFIX}{key.upper()}")
            if raw:
                try:
                    data[key] = cast(raw)
                except ValueError as exc:
                    raise SettingsError(f"{ENV_PREFIX}{key.upper()} must be an integer, got {raw!r}") from exc
        seed = parse_seed(os.getenv(f"{ENV_PREFIX}SEED"))
        if seed is not None:
            data["seed"] = seed
        settings = cls._from_dict(data)
        logger.debug("Settings from environment: %s", settings)
        return settings

    @classmethod
    def load(cls, path: Path) -> "MazeSettings":
        """Load settings from a YAML file. Missing keys fall back to defaults."""
        path = Path(path)
        if not path.exists():
            raise SettingsError(f"Settings file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Could not parse settings file {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        settings = cls._from_dict(raw)
        logger.info("Loaded settings from %s", path)
        return settings

    def save(self, path: Path) -> None:
        path = Path(path)
        data = dataclasses.asdict(self)
        data["start"] = list(self.start)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        logger.info("Saved settings to %s", path)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="labyrinth",
        description="Generate a perfect maze with player, adversary and goal placements",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--width", type=int, default=None, help="Maze width in cells")
    parser.add_argument("--height", type=int, default=None, help="Maze height in cells")
    parser.add_argument("--seed", type=str, default=None, help="Integer or string seed")
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to a YAML settings file.",
    )
    parser.add_argument("--ascii", action="store_true", help="Print an ASCII drawing instead of JSON")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> MazeSettings:
    """Layer settings: YAML file (or environment) first, then explicit CLI flags."""
    if args.config_path is not None:
        settings = MazeSettings.load(args.config_path)
    else:
        settings = MazeSettings.from_env()
    overrides: Dict[str, Any] = {}
    if args.width is not None:
        overrides["width"] = args.width
    if args.height is not None:
        overrides["height"] = args.height
    if args.seed is not None:
        overrides["seed"] = parse_seed(args.seed)
    if overrides:
        settings = dataclasses.replace(settings, **overrides)
    return settings
