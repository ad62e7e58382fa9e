"""Unit tests for settings, the YAML loader, and the factories in shmcache/main.py."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import pytest
import structlog

from shmcache import main
from shmcache.config.loader import load_config
from shmcache.config.settings import Settings
from shmcache.providers.cache.shared_memory_cache import SharedMemoryCache
from shmcache.providers.store.memory_store import MemoryStore
from shmcache.utils.errors import ConfigurationError
from shmcache.utils.logging import LOGGER_NAMESPACE, ShmCacheHandler


# ======================================================================
# Settings / load_config
# ======================================================================


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SHMCACHE_MAX_ENTRIES", raising=False)
        s = Settings(_env_file=None)
        assert s.shmcache_max_entries == 65536
        assert s.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHMCACHE_MAX_ENTRIES", "128")
        assert Settings(_env_file=None).shmcache_max_entries == 128


class TestLoadConfig:
    def test_missing_file_yields_settings_only(self, tmp_path: Path) -> None:
        config = load_config(str(tmp_path / "absent.yaml"), settings=Settings(_env_file=None))
        assert config["store"]["max_entries"] == 65536
        assert config["logging"]["level"] == "INFO"

    def test_yaml_values_kept_when_env_is_silent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("SHMCACHE_MAX_ENTRIES", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("store:\n  max_entries: 10\nextra:\n  flag: true\n")

        config = load_config(str(path), settings=Settings(_env_file=None))
        assert config["store"]["max_entries"] == 10
        assert config["extra"] == {"flag": True}

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHMCACHE_MAX_ENTRIES", "42")
        path = tmp_path / "config.yaml"
        path.write_text("store:\n  max_entries: 10\n")

        config = load_config(str(path), settings=Settings(_env_file=None))
        assert config["store"]["max_entries"] == 42

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("")
        config = load_config(str(path), settings=Settings(_env_file=None))
        assert config["app"]["env"] == "development"


# ======================================================================
# Factories
# ======================================================================


class TestBuildStore:
    def test_uses_configured_capacity(self) -> None:
        store = main.build_store({"store": {"max_entries": 16}})
        assert isinstance(store, MemoryStore)
        assert store.info()["max_entries"] == 16

    def test_missing_section_uses_default(self) -> None:
        assert main.build_store({}).info()["max_entries"] == 65536

    @pytest.mark.parametrize("value", [0, -5, "many", None])
    def test_invalid_capacity_raises(self, value) -> None:
        with pytest.raises(ConfigurationError):
            main.build_store({"store": {"max_entries": value}})


class TestDefaultStore:
    def test_is_shared_until_reset(self) -> None:
        first = main.get_default_store()
        assert main.get_default_store() is first

        main.reset_default_store()
        assert main.get_default_store() is not first


class TestBuildCache:
    def test_explicit_store(self) -> None:
        store = MemoryStore(max_entries=4)
        cache = main.build_cache(store=store)
        assert isinstance(cache, SharedMemoryCache)
        assert cache.store is store

    def test_from_config_gets_private_store(self) -> None:
        cache = main.build_cache({"store": {"max_entries": 8}})
        assert cache.store is not main.get_default_store()
        assert cache.store.info()["max_entries"] == 8

    def test_default_binds_to_shared_store(self) -> None:
        assert main.build_cache().store is main.get_default_store()


class TestBootstrap:
    def test_returns_cache_on_default_store(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("store:\n  max_entries: 32\nlogging:\n  level: WARNING\n")

        cache = main.bootstrap(str(path))
        assert cache.store is main.get_default_store()
        cache.set("k", "v")
        assert SharedMemoryCache().get("k") == "v"

    def test_host_root_handler_survives(self, tmp_path: Path) -> None:
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        root_level = root.level
        try:
            main.bootstrap(str(tmp_path / "missing.yaml"))
            assert host_handler in root.handlers
            assert root.level == root_level
        finally:
            root.removeHandler(host_handler)
            package_logger = logging.getLogger(LOGGER_NAMESPACE)
            for handler in list(package_logger.handlers):
                if isinstance(handler, ShmCacheHandler):
                    package_logger.removeHandler(handler)
            package_logger.setLevel(logging.NOTSET)
            structlog.reset_defaults()


class TestInvalidEnvironment:
    @pytest.fixture(autouse=True)
    def _bad_capacity(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHMCACHE_MAX_ENTRIES", "abc")

    def test_package_import_does_not_read_settings(self) -> None:
        import shmcache.config

        reloaded = importlib.reload(shmcache.config)
        assert not isinstance(getattr(reloaded, "settings", None), Settings)

    def test_load_config_raises_configuration_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="SHMCACHE_MAX_ENTRIES|shmcache_max_entries"):
            load_config(str(tmp_path / "absent.yaml"))

    def test_default_store_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            main.get_default_store()
