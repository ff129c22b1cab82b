"""Tests for environment helper utilities."""

import importlib
import pytest


class TestIsDevMode:
    """Tests for is_dev_mode function."""

    def test_returns_false_when_no_env_vars(self, monkeypatch):
        """Should return False when no environment variables are set."""
        monkeypatch.delenv("LCG_ENV", raising=False)
        monkeypatch.delenv("LCG_DEV_MODE", raising=False)

        # Reload module to clear lru_cache
        import utils.env
        importlib.reload(utils.env)

        assert utils.env.is_dev_mode() is False

    @pytest.mark.parametrize("value", ["dev", "development", "1", "true", "yes"])
    def test_returns_true_for_dev_values_lcg_env(self, monkeypatch, value):
        """Should return True for various dev values in LCG_ENV."""
        monkeypatch.setenv("LCG_ENV", value)
        monkeypatch.delenv("LCG_DEV_MODE", raising=False)

        import utils.env
        importlib.reload(utils.env)

        assert utils.env.is_dev_mode() is True

    @pytest.mark.parametrize("value", ["dev", "development", "1", "true", "yes"])
    def test_returns_true_for_dev_values_lcg_dev_mode(self, monkeypatch, value):
        """Should return True for various dev values in LCG_DEV_MODE."""
        monkeypatch.delenv("LCG_ENV", raising=False)
        monkeypatch.setenv("LCG_DEV_MODE", value)

        import utils.env
        importlib.reload(utils.env)

        assert utils.env.is_dev_mode() is True

    @pytest.mark.parametrize("value", ["DEV", "Development", "TRUE", "Yes"])
    def test_case_insensitive(self, monkeypatch, value):
        """Should be case-insensitive."""
        monkeypatch.setenv("LCG_ENV", value)
        monkeypatch.delenv("LCG_DEV_MODE", raising=False)

        import utils.env
        importlib.reload(utils.env)

        assert utils.env.is_dev_mode() is True

    @pytest.mark.parametrize("value", ["prod", "production", "0", "false", "no", "staging"])
    def test_returns_false_for_non_dev_values(self, monkeypatch, value):
        """Should return False for non-dev values."""
        monkeypatch.setenv("LCG_ENV", value)
        monkeypatch.delenv("LCG_DEV_MODE", raising=False)

        import utils.env
        importlib.reload(utils.env)

        assert utils.env.is_dev_mode() is False

    def test_lcg_env_takes_precedence(self, monkeypatch):
        """LCG_ENV should be checked first."""
        monkeypatch.setenv("LCG_ENV", "dev")
        monkeypatch.setenv("LCG_DEV_MODE", "false")  # Would return False if checked

        import utils.env
        importlib.reload(utils.env)

        # LCG_ENV is "dev" so should return True
        assert utils.env.is_dev_mode() is True

    def test_handles_whitespace(self, monkeypatch):
        """Should handle values with whitespace."""
        monkeypatch.setenv("LCG_ENV", "  dev  ")
        monkeypatch.delenv("LCG_DEV_MODE", raising=False)

        import utils.env
        importlib.reload(utils.env)

        assert utils.env.is_dev_mode() is True

    def test_empty_string_returns_false(self, monkeypatch):
        """Should return False for empty string."""
        monkeypatch.setenv("LCG_ENV", "")
        monkeypatch.delenv("LCG_DEV_MODE", raising=False)

        import utils.env
        importlib.reload(utils.env)

        assert utils.env.is_dev_mode() is False


class TestPerfDebugEnabled:
    """Tests for perf_debug_enabled function."""

    def test_enabled_with_one(self, monkeypatch):
        """Only the literal '1' turns PERF logs on."""
        from utils.env import perf_debug_enabled

        monkeypatch.setenv("LCG_PERF_DEBUG", "1")
        assert perf_debug_enabled() is True

        monkeypatch.setenv("LCG_PERF_DEBUG", "true")
        assert perf_debug_enabled() is False

    def test_disabled_by_default(self, monkeypatch):
        from utils.env import perf_debug_enabled

        monkeypatch.delenv("LCG_PERF_DEBUG", raising=False)
        assert perf_debug_enabled() is False
