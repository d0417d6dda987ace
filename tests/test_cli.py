"""Tests for symbol_crawler.cli and symbol_crawler.cli_config modules."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from dotenv import load_dotenv

from symbol_crawler.classifier import SymbolSets
from symbol_crawler.cli import _build_settings, _parse_args, main
from symbol_crawler.cli_config import load_config
from symbol_crawler.config import ROOT_URLS
from symbol_crawler.traversal import CrawlResult

from tests.helpers import SWIFT_PREFIX


def _result() -> CrawlResult:
    return CrawlResult(
        symbols={SWIFT_PREFIX: SymbolSets(functions={"max"})},
        seen_kinds={"func"},
        stats={"visited_pages": 1, "pages_with_data": 1, "failed_pages": 0},
    )


class TestParseArgs:
    def test_defaults(self):
        args = _parse_args([])
        assert args.output is None
        assert args.roots is None
        assert args.cache_dir is None
        assert args.json_cache_dir is None
        assert args.delay is None
        assert args.json_output is False
        assert args.verbose is False

    def test_repeatable_root(self):
        args = _parse_args(["--root", "https://a.com/x", "--root", "https://a.com/y"])
        assert args.roots == ["https://a.com/x", "https://a.com/y"]

    def test_all_flags(self):
        args = _parse_args(
            [
                "-o",
                "out.el",
                "--cache-dir",
                "pages",
                "--json-cache-dir",
                "json",
                "--delay",
                "1.5",
                "--json",
                "-v",
            ]
        )
        assert args.output == "out.el"
        assert args.cache_dir == "pages"
        assert args.json_cache_dir == "json"
        assert args.delay == 1.5
        assert args.json_output is True
        assert args.verbose is True


class TestBuildSettings:
    def test_no_overrides(self, monkeypatch):
        monkeypatch.delenv("SYMBOL_CRAWLER_CACHE_DIR", raising=False)
        settings = _build_settings(_parse_args([]))
        assert settings.root_urls == ROOT_URLS
        assert settings.cache_dir == "cache"

    def test_flags_override_env(self, monkeypatch):
        monkeypatch.setenv("SYMBOL_CRAWLER_CACHE_DIR", "env-pages")
        monkeypatch.setenv("SYMBOL_CRAWLER_DELAY", "3")
        settings = _build_settings(
            _parse_args(["--cache-dir", "flag-pages", "--root", "https://a.com/x"])
        )
        assert settings.cache_dir == "flag-pages"
        assert settings.delay == 3.0
        assert settings.root_urls == ["https://a.com/x"]

    def test_negative_delay_clamped(self):
        settings = _build_settings(_parse_args(["--delay", "-2"]))
        assert settings.delay == 0.0


class TestMain:
    def test_writes_elisp_to_stdout(self, capsys):
        with patch("symbol_crawler.cli._load_config"), patch(
            "symbol_crawler.crawl_symbols_async", new=AsyncMock(return_value=_result())
        ):
            code = main([])
        captured = capsys.readouterr()
        assert code == 0
        assert "(defconst swift-mode:standard-functions\n  '(\"max\")" in captured.out
        assert "kinds:\nfunc\n" in captured.err

    def test_writes_json_to_file(self, tmp_path):
        out = tmp_path / "nested" / "symbols.json"
        with patch("symbol_crawler.cli._load_config"), patch(
            "symbol_crawler.crawl_symbols_async", new=AsyncMock(return_value=_result())
        ):
            code = main(["--json", "-o", str(out)])
        assert code == 0
        payload = json.loads(out.read_text(encoding="utf-8"))
        assert payload[SWIFT_PREFIX]["functions"] == ["max"]

    def test_passes_settings(self, tmp_path):
        crawl = AsyncMock(return_value=_result())
        with patch("symbol_crawler.cli._load_config"), patch(
            "symbol_crawler.crawl_symbols_async", new=crawl
        ):
            main(["--cache-dir", str(tmp_path / "p"), "--delay", "0", "-o", str(tmp_path / "o.el")])
        settings = crawl.call_args.args[0]
        assert settings.cache_dir == str(tmp_path / "p")
        assert settings.delay == 0.0

    def test_unexpected_error_returns_1(self):
        with patch("symbol_crawler.cli._load_config"), patch(
            "symbol_crawler.crawl_symbols_async",
            new=AsyncMock(side_effect=RuntimeError("boom")),
        ):
            assert main([]) == 1

    def test_keyboard_interrupt_returns_130(self):
        with patch("symbol_crawler.cli._load_config"), patch(
            "symbol_crawler.cli.asyncio.run", side_effect=KeyboardInterrupt
        ):
            assert main([]) == 130


class TestLoadConfig:
    def test_prefers_cwd_env(self, tmp_path):
        (tmp_path / ".env").write_text("SYMBOL_CRAWLER_DELAY=1\n")
        user_env = tmp_path / "user.env"
        user_env.write_text("SYMBOL_CRAWLER_DELAY=2\n")
        load_env = MagicMock(return_value=True)

        loaded = load_config(config_env_file=user_env, cwd=tmp_path, load_env=load_env)

        assert loaded == tmp_path / ".env"
        load_env.assert_called_once_with(tmp_path / ".env")

    def test_falls_back_to_user_config(self, tmp_path):
        cwd = tmp_path / "work"
        cwd.mkdir()
        user_env = tmp_path / "user.env"
        user_env.write_text("SYMBOL_CRAWLER_DELAY=2\n")
        load_env = MagicMock(return_value=True)

        loaded = load_config(config_env_file=user_env, cwd=cwd, load_env=load_env)

        assert loaded == user_env
        load_env.assert_called_once_with(user_env)

    def test_nothing_found(self, tmp_path):
        load_env = MagicMock()
        loaded = load_config(
            config_env_file=Path(tmp_path / "missing.env"), cwd=tmp_path, load_env=load_env
        )
        assert loaded is None
        load_env.assert_not_called()

    def test_loads_into_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SYMBOL_CRAWLER_JSON_CACHE_DIR", "placeholder")
        (tmp_path / ".env").write_text("SYMBOL_CRAWLER_JSON_CACHE_DIR=from-dotenv\n")

        load_config(
            config_env_file=tmp_path / "none",
            cwd=tmp_path,
            load_env=lambda path: load_dotenv(path, override=True),
        )

        assert os.environ["SYMBOL_CRAWLER_JSON_CACHE_DIR"] == "from-dotenv"
