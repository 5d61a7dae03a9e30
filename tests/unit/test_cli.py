"""
Unit Tests for the safe-env command line
"""

import json

import pytest

from safe_env.cli import main


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text(
        "DATABASE_URL=custom-db-url\n"
        "API_KEY=custom-api-key\n"
        "SECRET=\n",
        encoding="utf-8",
    )
    return str(path)


class TestCli:
    """Test suite for the CLI entry point"""

    def test_names_present(self, clean_env, capsys):
        clean_env.setenv("API_KEY", "k")
        assert main(["API_KEY"]) == 0
        assert json.loads(capsys.readouterr().out) == {"missing": [], "success": True}

    def test_missing_exits(self, clean_env, capsys, log_output):
        with pytest.raises(SystemExit) as exc_info:
            main(["API_KEY"])
        assert exc_info.value.code == 1
        assert log_output[0]["log_level"] == "error"
        assert capsys.readouterr().out == ""

    def test_safe_reports_and_returns(self, clean_env, capsys, log_output):
        assert main(["API_KEY", "--safe"]) == 0
        assert json.loads(capsys.readouterr().out) == {"missing": ["API_KEY"], "success": False}
        assert log_output[0]["log_level"] == "warning"

    def test_prefix(self, clean_env, capsys):
        clean_env.setenv("NEXT_API_URL", "u")
        assert main(["NEXT_API_URL", "OTHER_VAR", "--prefix", "NEXT_"]) == 0
        assert json.loads(capsys.readouterr().out)["success"] is True

    def test_env_file_checks_every_key(self, env_file, capsys, log_output):
        assert main(["--env-file", env_file, "--safe"]) == 0
        assert json.loads(capsys.readouterr().out) == {"missing": ["SECRET"], "success": False}

    def test_env_file_with_names(self, clean_env, env_file, capsys, log_output):
        clean_env.setenv("SAFE_ENV_TEST_VALUE", "only-in-process-env")
        assert main(["API_KEY", "SAFE_ENV_TEST_VALUE", "--env-file", env_file, "--safe"]) == 0
        assert json.loads(capsys.readouterr().out)["missing"] == ["SAFE_ENV_TEST_VALUE"]

    def test_env_file_missing_value_exits(self, env_file, log_output):
        with pytest.raises(SystemExit) as exc_info:
            main(["--env-file", env_file])
        assert exc_info.value.code == 1

    def test_nonexistent_env_file_is_a_usage_error(self, tmp_path, capsys):
        missing_path = str(tmp_path / "nope.env")
        with pytest.raises(SystemExit) as exc_info:
            main(["--env-file", missing_path])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "env file not found" in captured.err
        assert captured.out == ""

    def test_nonexistent_env_file_with_safe(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["API_KEY", "--safe", "--env-file", str(tmp_path / "nope.env")])
        assert exc_info.value.code == 2

    def test_invalid_log_level_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["API_KEY", "--log-level", "verbose"])
        assert exc_info.value.code == 2
        assert "Invalid log level" in capsys.readouterr().err

    def test_requires_names_or_env_file(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
        assert "NAME or --env-file" in capsys.readouterr().err
