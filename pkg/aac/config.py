# AAC board — configuration
# Override defaults via aac.yaml (or an explicit path passed to BoardConfig.load).

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent / "aac.yaml"

TEXT_MODES = ("line", "token")


@dataclass
class BoardConfig:
    """Runtime configuration for an AAC board."""

    # Board file loaded when AACBoard() is given no filename
    board_file: str = ""

    # Name of the category created by add_item() while on the home screen
    home_page_name: str = "Home Page"

    # Board file format
    text_mode: str = "line"            # "line" = rest of line, "token" = first word only
    write_selector_keys: bool = True   # False reproduces the legacy "<name> <name>" header
    encoding: str = "utf-8"

    # Used by verify_board.py
    log_level: str = "INFO"

    def validate(self) -> "BoardConfig":
        """Raise ValueError for settings the board file codec cannot honor."""
        if self.text_mode not in TEXT_MODES:
            raise ValueError(
                f"text_mode must be one of {TEXT_MODES}, got {self.text_mode!r}"
            )
        if not self.home_page_name:
            raise ValueError("home_page_name must not be empty")
        return self

    def resolve_paths(self):
        """Expand ~ in the board file path."""
        if self.board_file:
            self.board_file = str(Path(self.board_file).expanduser())

    @classmethod
    def load(cls, path: Optional[str] = None) -> "BoardConfig":
        """Load config from YAML file, falling back to defaults."""
        cfg_path = Path(path) if path else CONFIG_PATH
        if cfg_path.exists():
            try:
                with open(cfg_path, "r") as f:
                    data = yaml.safe_load(f) or {}
                cfg = cls(**{k: v for k, v in data.items() if hasattr(cls, k)})
            except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
                logger.error(f"Failed to load config {cfg_path}: {e}; using defaults")
                cfg = cls()
        else:
            cfg = cls()
        cfg.resolve_paths()
        return cfg.validate()
