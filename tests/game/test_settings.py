"""Tests for GameSettings."""

import pytest

from checkie.core.enums import Color
from checkie.game.settings import GameSettings


class TestDefaults:
    def test_defaults(self) -> None:
        settings = GameSettings()
        assert settings.first_player == Color.WHITE
        assert settings.lenient_squares
        assert settings.log_level == "WARNING"

    def test_empty_environment(self) -> None:
        assert GameSettings.from_env({}) == GameSettings()


class TestFromEnv:
    def test_first_player(self) -> None:
        settings = GameSettings.from_env({"CHECKIE_FIRST_PLAYER": " black "})
        assert settings.first_player == Color.BLACK

    def test_bad_first_player(self) -> None:
        with pytest.raises(ValueError, match="CHECKIE_FIRST_PLAYER"):
            GameSettings.from_env({"CHECKIE_FIRST_PLAYER": "red"})

    def test_lenient_flag(self) -> None:
        for value, expected in [("0", False), ("off", False), ("YES", True)]:
            env = {"CHECKIE_LENIENT_SQUARES": value}
            assert GameSettings.from_env(env).lenient_squares is expected

    def test_bad_lenient_flag(self) -> None:
        with pytest.raises(ValueError, match="CHECKIE_LENIENT_SQUARES"):
            GameSettings.from_env({"CHECKIE_LENIENT_SQUARES": "maybe"})

    def test_log_level(self) -> None:
        settings = GameSettings.from_env({"CHECKIE_LOG_LEVEL": "debug"})
        assert settings.log_level == "DEBUG"

    def test_bad_log_level(self) -> None:
        for value in ["loud", "5"]:
            with pytest.raises(ValueError, match="CHECKIE_LOG_LEVEL"):
                GameSettings.from_env({"CHECKIE_LOG_LEVEL": value})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHECKIE_FIRST_PLAYER", "BLACK")
        assert GameSettings.from_env().first_player == Color.BLACK
