"""
Unit Tests for the raising require_* helpers
"""

import pytest

from safe_env import MissingEnvironmentError, require_env, require_envs


class TestRequireEnv:
    """Test suite for require_env"""

    def test_returns_value(self, clean_env):
        clean_env.setenv("SAFE_ENV_TEST_VALUE", "value")
        assert require_env("SAFE_ENV_TEST_VALUE") == "value"

    def test_missing_raises(self, clean_env):
        with pytest.raises(MissingEnvironmentError) as exc_info:
            require_env("SAFE_ENV_TEST_VALUE")
        assert exc_info.value.missing == ["SAFE_ENV_TEST_VALUE"]
        assert "SAFE_ENV_TEST_VALUE" in str(exc_info.value)

    def test_empty_value_raises(self):
        with pytest.raises(MissingEnvironmentError):
            require_env("A", source={"A": ""})

    def test_is_a_runtime_error(self):
        with pytest.raises(RuntimeError):
            require_env("A", source={})


class TestRequireEnvs:
    """Test suite for require_envs"""

    def test_all_present(self):
        result = require_envs(["A", "B"], source={"A": "a", "B": "b"})
        assert result.success is True

    def test_lists_every_missing_name(self, log_output):
        with pytest.raises(MissingEnvironmentError) as exc_info:
            require_envs(["A", "B", "C"], source={"B": "b"})
        assert exc_info.value.missing == ["A", "C"]
        assert str(exc_info.value) == "Missing required environment variables: A, C"
        assert log_output == []

    def test_prefix(self):
        result = require_envs(["NEXT_A", "OTHER"], prefix="NEXT_", source={"NEXT_A": "a"})
        assert result.missing == []
