"""
Unit tests for the battle log manager.
"""
import os

from bandits.game.log_manager import LogCategory, LogLevel, LogManager, LogMessage


class TestLogMessage:
    """Test message formatting."""

    def test_format_with_category(self):
        message = LogMessage("E1 hits G1", LogCategory.BATTLE)
        assert message.format() == "[BTL] E1 hits G1"

    def test_format_plain(self):
        message = LogMessage("Round 1 complete", LogCategory.BATTLE)
        assert message.format(include_category=False) == "Round 1 complete"

    def test_format_with_timestamp(self):
        formatted = LogMessage("hello", LogCategory.SYSTEM).format(include_timestamp=True)
        assert formatted.startswith("[")
        assert formatted.endswith("[SYS] hello")


class TestLogManagerFiltering:
    """Test buffering and category/level filtering."""

    def test_convenience_methods_set_category(self, log_manager):
        log_manager.system("s")
        log_manager.battle("b")
        log_manager.search("p")
        log_manager.warning("w")
        log_manager.error("e")
        categories = [message.category for message in log_manager.get_messages()]
        assert categories == [
            LogCategory.SYSTEM, LogCategory.BATTLE, LogCategory.SEARCH, LogCategory.WARNING, LogCategory.ERROR
        ]

    def test_movement_and_debug_hidden_at_info(self, log_manager):
        log_manager.movement("E1 moves")
        log_manager.debug("details")
        log_manager.battle("E1 hits G1")
        assert [message.text for message in log_manager.get_messages()] == ["E1 hits G1"]
        # Still buffered and reachable by explicit category
        assert len(log_manager.get_messages(categories={LogCategory.MOVEMENT})) == 1

    def test_debug_level_shows_everything(self):
        log = LogManager(default_level=LogLevel.DEBUG)
        log.movement("E1 moves")
        log.debug("details")
        assert len(log.get_messages()) == 2

    def test_disabled_category(self, log_manager):
        log_manager.battle("hidden")
        log_manager.system("shown")
        log_manager.disable_category(LogCategory.BATTLE)
        assert [message.text for message in log_manager.get_messages()] == ["shown"]
        log_manager.enable_category(LogCategory.BATTLE)
        assert len(log_manager.get_messages()) == 2

    def test_count_returns_most_recent(self, log_manager):
        for index in range(5):
            log_manager.battle(f"message {index}")
        assert [message.text for message in log_manager.get_messages(count=2)] == ["message 3", "message 4"]

    def test_buffer_is_bounded(self):
        log = LogManager(max_messages=3)
        for index in range(10):
            log.system(str(index))
        assert [message.text for message in log.get_messages()] == ["7", "8", "9"]

    def test_toggle_debug(self, log_manager):
        assert not log_manager.is_debug_enabled()
        log_manager.toggle_debug()
        assert log_manager.is_debug_enabled()
        log_manager.toggle_debug()
        assert not log_manager.is_debug_enabled()
        assert log_manager.log_level is LogLevel.INFO

    def test_clear(self, log_manager):
        log_manager.system("x")
        log_manager.clear()
        assert log_manager.get_messages() == []


class TestLogFile:
    """Test saving the log to disk."""

    def test_save_writes_every_message(self, log_manager, tmp_path):
        log_manager.battle("E1 hits G1")
        log_manager.movement("E1 moves")
        path = log_manager.save_log_to_file(str(tmp_path / "logs"))

        assert path is not None
        assert os.path.dirname(path) == str(tmp_path / "logs")
        with open(path, encoding="utf-8") as f:
            content = f.read()
        assert "[BATTLE] E1 hits G1" in content
        assert "[MOVEMENT] E1 moves" in content

    def test_save_failure_returns_none(self, log_manager, tmp_path):
        blocker = tmp_path / "not_a_directory"
        blocker.write_text("occupied")
        assert log_manager.save_log_to_file(str(blocker)) is None
        assert log_manager.get_messages(categories={LogCategory.ERROR})
