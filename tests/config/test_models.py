"""Tests for config models — defaults and sparse overrides."""

import pytest

from utilkit.config.models import StringsConfig, UrlsConfig, UtilkitConfig


class TestUtilkitConfig:
    def test_full_defaults(self) -> None:
        cfg = UtilkitConfig()
        assert cfg.strings.ellipsis == "…"
        assert cfg.urls.schemes == ("ftp", "http", "https")

    def test_sparse_override(self) -> None:
        """Only override fields you care about — rest keeps defaults."""
        cfg = UtilkitConfig.model_validate({"strings": {"ellipsis": "..."}})
        assert cfg.strings.ellipsis == "..."
        assert cfg.urls.schemes == ("ftp", "http", "https")

    def test_frozen(self) -> None:
        cfg = UtilkitConfig()
        with pytest.raises(Exception):
            cfg.strings = StringsConfig(ellipsis="~")  # type: ignore[misc]


class TestUrlsConfig:
    def test_schemes_from_list(self) -> None:
        cfg = UrlsConfig.model_validate({"schemes": ["WS", "wss"]})
        assert cfg.schemes == ("ws", "wss")
