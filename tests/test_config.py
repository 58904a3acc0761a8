"""Tests for codec configuration loading."""

import logging
import tempfile
from pathlib import Path

from harlog.config import CodecConfig, load_config


def _write(tmpdir: str, text: str) -> Path:
    path = Path(tmpdir) / "harlog.yaml"
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = CodecConfig()
        assert config.pretty is True
        assert config.sort_keys is False
        assert config.trailing_newline is False

    def test_load_codec_section(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write(tmpdir, "codec:\n  pretty: false\n  sort_keys: true\n")
            config = load_config(path)
            assert config.pretty is False
            assert config.sort_keys is True
            assert config.trailing_newline is False

    def test_missing_file_uses_defaults(self, caplog) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with caplog.at_level(logging.WARNING, logger="harlog.config"):
                config = load_config(Path(tmpdir) / "nope.yaml")
            assert config == CodecConfig()
            assert "not found" in caplog.text

    def test_empty_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            assert load_config(_write(tmpdir, "")) == CodecConfig()

    def test_no_codec_section(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            assert load_config(_write(tmpdir, "other: 1\n")) == CodecConfig()

    def test_invalid_yaml(self, caplog) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write(tmpdir, "codec: [unclosed\n")
            with caplog.at_level(logging.WARNING, logger="harlog.config"):
                config = load_config(path)
            assert config == CodecConfig()
            assert "Failed to parse" in caplog.text

    def test_invalid_value(self, caplog) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write(tmpdir, "codec:\n  pretty: sometimes\n")
            with caplog.at_level(logging.WARNING, logger="harlog.config"):
                config = load_config(path)
            assert config == CodecConfig()
            assert "Invalid codec settings" in caplog.text

    def test_top_level_list(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            assert load_config(_write(tmpdir, "- a\n- b\n")) == CodecConfig()
