"""Tests for BoardConfig loading."""
from pathlib import Path

import pytest

from pkg.aac.config import BoardConfig


class TestBoardConfig:

    def test_defaults(self):
        cfg = BoardConfig()
        assert cfg.home_page_name == "Home Page"
        assert cfg.text_mode == "line"
        assert cfg.write_selector_keys is True
        assert cfg.encoding == "utf-8"

    def test_missing_file_gives_defaults(self, tmp_path):
        cfg = BoardConfig.load(str(tmp_path / "absent.yaml"))
        assert cfg == BoardConfig()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "aac.yaml"
        path.write_text(
            "board_file: boards/main.txt\n"
            "home_page_name: Quick Words\n"
            "text_mode: token\n"
            "write_selector_keys: false\n"
        )
        cfg = BoardConfig.load(str(path))
        assert cfg.board_file == "boards/main.txt"
        assert cfg.home_page_name == "Quick Words"
        assert cfg.text_mode == "token"
        assert cfg.write_selector_keys is False

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "aac.yaml"
        path.write_text("volume: 11\nlog_level: DEBUG\n")
        cfg = BoardConfig.load(str(path))
        assert cfg.log_level == "DEBUG"
        assert not hasattr(cfg, "volume")

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "aac.yaml"
        path.write_text("")
        assert BoardConfig.load(str(path)) == BoardConfig()

    def test_broken_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "aac.yaml"
        path.write_text("text_mode: [unclosed\n")
        assert BoardConfig.load(str(path)) == BoardConfig()

    def test_home_dir_expanded(self, tmp_path):
        path = tmp_path / "aac.yaml"
        path.write_text("board_file: ~/board.txt\n")
        cfg = BoardConfig.load(str(path))
        assert cfg.board_file == str(Path.home() / "board.txt")

    def test_invalid_text_mode(self, tmp_path):
        path = tmp_path / "aac.yaml"
        path.write_text("text_mode: words\n")
        with pytest.raises(ValueError):
            BoardConfig.load(str(path))

    def test_bundled_config_loads(self):
        cfg = BoardConfig.load()
        assert cfg.text_mode in ("line", "token")
        assert cfg.home_page_name == "Home Page"
