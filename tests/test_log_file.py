"""Tests for the log file lifecycle"""

import os

import pytest

from logfile_module import (
    InvalidOptionError,
    LogEvent,
    LogFile,
    LogOptions,
    MissingFileError,
    NotOpenError,
    StreamOpenError,
)
from logfile_module.filesystem import MemoryFileSystem


def plain(entry=None, *args):
    """Formatter writing only the message."""
    return f"{(entry or {}).get('message', 'MESSAGE')}\n"


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs" / "latest.log"


@pytest.fixture
def existing(tmp_path):
    path = tmp_path / "existing.log"
    path.write_text("first line\n", encoding="utf-8")
    return path


def record_events(log):
    """Subscribe to every lifecycle event and collect their names."""
    seen = []
    for event in LogEvent:
        log.on(event, lambda n: seen.append(n.event.value))
    return seen


class TestPath:
    """Test path resolution."""

    def test_relative_path_is_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        log = LogFile("app.log")
        assert log.path == os.path.abspath("app.log")
        assert os.path.isabs(log.path)

    def test_path_is_normalized(self, tmp_path):
        log = LogFile(tmp_path / "a" / ".." / "b.log")
        assert log.path == str(tmp_path / "b.log")

    def test_reassign_path(self, tmp_path):
        log = LogFile(tmp_path / "one.log")
        log.path = tmp_path / "two.log"
        assert log.path == str(tmp_path / "two.log")

    def test_reassign_while_open_closes_stream(self, existing, tmp_path):
        log = LogFile(existing).open()
        log.path = tmp_path / "other.log"
        assert not log.online

    def test_reassign_while_open_without_auto_close(self, existing, tmp_path):
        log = LogFile(existing, LogOptions.strict()).open()
        with pytest.raises(StreamOpenError):
            log.path = tmp_path / "other.log"
        assert log.path == str(existing)
        assert log.online
        log.close()


class TestOptions:
    """Test option handling on the log file."""

    def test_mapping_options(self, log_path):
        log = LogFile(log_path, {"auto_open": False})
        assert log.options.auto_open is False
        assert log.options.auto_create is True

    def test_wrong_type_falls_back(self, log_path):
        log = LogFile(log_path, {"auto_close": "sometimes"})
        assert log.options.auto_close is True

    def test_invalid_options(self, log_path):
        with pytest.raises(InvalidOptionError):
            LogFile(log_path, ["auto_open"])
        with pytest.raises(InvalidOptionError):
            LogFile(log_path, {"rotate": True})

    def test_formatter_setter(self, log_path):
        log = LogFile(log_path)
        log.formatter = plain
        assert log.options.formatter is plain
        with pytest.raises(InvalidOptionError):
            log.formatter = "not callable"

    def test_logger_setter(self, log_path):
        log = LogFile(log_path)
        calls = []
        log.logger = lambda log_file, entry, **kwargs: calls.append(entry)
        log.log({"message": "hi"})
        assert calls == [{"message": "hi"}]
        assert not log.exists
        with pytest.raises(InvalidOptionError):
            log.logger = None

    def test_per_call_overrides_are_not_persisted(self, log_path):
        log = LogFile(log_path)
        log.open(truncate=True)
        assert log.options.truncate is False
        log.close()


class TestCreate:
    """Test file creation."""

    def test_create_with_directories(self, log_path):
        log = LogFile(log_path)
        assert not log.exists
        assert log.create() is log
        assert log.exists
        assert log.content == ""

    def test_create_is_idempotent(self, existing):
        log = LogFile(existing)
        seen = record_events(log)
        log.create()
        assert log.content == "first line\n"
        assert seen == []

    def test_create_events(self, log_path):
        log = LogFile(log_path)
        seen = record_events(log)
        log.create()
        assert seen == ["before_create", "create"]

    def test_non_recursive_create(self, tmp_path):
        log = LogFile(tmp_path / "a" / "b" / "c.log", {"recursive": False})
        with pytest.raises(FileNotFoundError):
            log.create()
        LogFile(tmp_path / "d" / "c.log").create(recursive=False)
        assert (tmp_path / "d" / "c.log").exists()

    def test_exists_is_live(self, existing):
        log = LogFile(existing)
        assert log.exists
        existing.unlink()
        assert not log.exists


class TestOpenClose:
    """Test write stream lifecycle."""

    def test_open_and_close(self, existing):
        log = LogFile(existing)
        assert log.open() is log
        assert log.online
        assert log.stream is not None
        assert log.close() is log
        assert not log.online
        assert log.stream is None

    def test_reopen_after_close(self, existing):
        log = LogFile(existing)
        log.open().close()
        log.open()
        assert log.online
        log.close()

    def test_open_preserves_content(self, existing):
        log = LogFile(existing)
        log.open(truncate=False).close()
        assert existing.read_text(encoding="utf-8") == "first line\n"

    def test_open_truncate(self, existing):
        LogFile(existing, LogOptions.fresh()).open().close()
        assert existing.read_text(encoding="utf-8") == ""

    def test_open_twice_keeps_stream(self, existing):
        log = LogFile(existing).open()
        stream = log.stream
        log.open()
        assert log.stream is stream
        log.close()

    def test_open_missing_without_auto_create(self, log_path):
        log = LogFile(log_path, {"auto_create": False})
        with pytest.raises(MissingFileError):
            log.open()
        assert not log.exists
        assert not log.online

    def test_open_creates_missing(self, log_path):
        log = LogFile(log_path).open()
        assert log.exists
        assert log.online
        log.close()

    def test_close_not_open(self, existing):
        log = LogFile(existing)
        with pytest.raises(NotOpenError):
            log.close()
        assert log.close(missing_ok=True) is log

    def test_open_close_events(self, existing):
        log = LogFile(existing)
        seen = record_events(log)
        log.open().close()
        assert seen == ["before_open", "open", "before_close", "close"]

    def test_open_payload_is_stream(self, existing):
        log = LogFile(existing)
        payloads = []
        log.on(LogEvent.OPEN, lambda n: payloads.append(n.payload))
        log.open()
        assert payloads == [log.stream]
        log.close()

    def test_context_manager(self, log_path):
        with LogFile(log_path) as log:
            log.write({"message": "inside"})
            assert log.online
        assert not log.online


class TestDelete:
    """Test file deletion."""

    def test_delete(self, existing):
        log = LogFile(existing)
        assert log.delete() is log
        assert not log.exists

    def test_delete_missing(self, log_path):
        log = LogFile(log_path)
        with pytest.raises(MissingFileError):
            log.delete()
        assert log.delete(missing_ok=True) is log

    def test_delete_while_open_without_auto_close(self, existing):
        log = LogFile(existing, {"auto_close": False}).open()
        with pytest.raises(StreamOpenError):
            log.delete()
        assert log.exists
        assert log.online
        log.close()

    def test_delete_override_without_auto_close(self, existing):
        log = LogFile(existing).open()
        with pytest.raises(StreamOpenError):
            log.delete(auto_close=False)
        assert log.exists
        log.close()

    def test_delete_closes_stream(self, existing):
        log = LogFile(existing).open()
        seen = record_events(log)
        log.delete()
        assert not log.online
        assert not log.exists
        assert seen == ["before_delete", "before_close", "close", "delete"]

    def test_veto_before_delete(self, existing):
        log = LogFile(existing)

        def veto(notification):
            raise PermissionError("keep it")

        log.on(LogEvent.BEFORE_DELETE, veto)
        with pytest.raises(PermissionError):
            log.delete()
        assert log.exists


class TestWrite:
    """Test writing entries."""

    def test_write_creates_and_opens(self, log_path):
        log = LogFile(log_path, {"auto_create": True, "auto_open": True})
        assert log.write({"message": "hi"}) is log
        assert log.exists
        assert log.online
        content = log.content
        assert "hi" in content
        assert content.endswith("\n")
        assert content.count("\n") == 1
        log.close()

    def test_writes_keep_call_order(self, log_path):
        log = LogFile(log_path, {"formatter": plain})
        for message in ("one", "two", "three"):
            log.write({"message": message})
        assert log.content == "one\ntwo\nthree\n"
        log.close()

    def test_write_appends_to_existing(self, existing):
        log = LogFile(existing, {"formatter": plain})
        log.write({"message": "second line"}).close()
        assert log.content == "first line\nsecond line\n"

    def test_raw_entry_has_no_escapes(self, log_path):
        log = LogFile(log_path)
        log.write({"message": "plain", "raw": True}).close()
        assert "\033" not in log.content

    def test_formatter_args(self, log_path):
        def joined(entry, *args):
            return f"{entry['message']}:{'-'.join(args)}\n"

        log = LogFile(log_path, {"formatter": joined})
        log.write({"message": "m"}, "a", "b").close()
        assert log.content == "m:a-b\n"

    def test_write_missing_without_auto_create(self, log_path):
        log = LogFile(log_path, LogOptions.strict())
        with pytest.raises(MissingFileError):
            log.write({"message": "lost"})
        assert not log.exists

    def test_write_closed_without_auto_open(self, existing):
        log = LogFile(existing, {"auto_open": False})
        with pytest.raises(NotOpenError):
            log.write({"message": "lost"})
        assert not log.online
        assert log.content == "first line\n"

    def test_failed_write_leaves_no_file(self, log_path):
        """A write that cannot open never creates the file either."""
        log = LogFile(log_path, {"auto_create": True, "auto_open": False})
        with pytest.raises(NotOpenError):
            log.write({"message": "lost"})
        assert not log.exists

    @pytest.mark.parametrize("entry", [{"colour": "red"}, {"title": 5}])
    def test_invalid_entry_leaves_no_file(self, log_path, entry):
        """An entry that cannot be rendered neither creates nor opens the file."""
        log = LogFile(log_path)
        with pytest.raises(InvalidOptionError):
            log.write(entry)
        assert not log.exists
        assert not log.online

    def test_invalid_entry_on_closed_file(self, existing):
        log = LogFile(existing)
        seen = record_events(log)
        with pytest.raises(InvalidOptionError):
            log.write({"title_min_width": -1})
        assert not log.online
        assert seen == []
        assert log.content == "first line\n"

    def test_write_override(self, existing):
        log = LogFile(existing, LogOptions.strict())
        with pytest.raises(NotOpenError):
            log.write()
        log.write({"message": "ok"}, auto_open=True)
        assert log.online
        log.close()

    def test_write_after_external_delete(self, log_path):
        log = LogFile(log_path, {"formatter": plain})
        log.write({"message": "before"})
        os.remove(log.path)
        log.write({"message": "after"})
        assert log.content == "after\n"
        log.close()

    def test_write_events(self, log_path):
        log = LogFile(log_path, {"formatter": plain})
        seen = record_events(log)
        payloads = []
        log.on(LogEvent.WRITE, lambda n: payloads.append(n.payload))
        log.write({"message": "hello"})
        assert seen == [
            "before_create", "create", "before_open", "open", "before_write", "write",
        ]
        assert payloads == ["hello\n"]
        log.close()

    def test_veto_before_write(self, existing):
        log = LogFile(existing, {"formatter": plain})

        def veto(notification):
            raise RuntimeError("no")

        log.on(LogEvent.BEFORE_WRITE, veto)
        with pytest.raises(RuntimeError):
            log.write({"message": "vetoed"})
        assert log.content == "first line\n"
        log.close()

    def test_format_does_not_write(self, log_path):
        log = LogFile(log_path, {"formatter": plain})
        assert log.format({"message": "x"}) == "x\n"
        assert not log.exists


class TestRead:
    """Test reading the file."""

    def test_read_bytes(self, existing):
        log = LogFile(existing)
        with log.read() as handle:
            assert handle.read() == b"first line\n"
        assert not log.online

    def test_read_text(self, existing):
        with LogFile(existing).read(binary=False) as handle:
            assert handle.read() == "first line\n"

    def test_read_sees_written_entries(self, log_path):
        log = LogFile(log_path, {"formatter": plain}).write({"message": "x"})
        with log.read() as handle:
            assert handle.read() == b"x\n"
        assert log.online
        log.close()

    def test_read_missing(self, log_path):
        with pytest.raises(MissingFileError):
            LogFile(log_path).read()
        with pytest.raises(MissingFileError):
            LogFile(log_path).content


class TestMemoryBackend:
    """Test LogFile on the in-memory filesystem."""

    def test_lifecycle(self):
        fs = MemoryFileSystem()
        log = LogFile("/virtual/logs/app.log", {"formatter": plain}, filesystem=fs)

        log.write({"message": "one"}).write({"message": "two"})
        assert fs.files[log.path] == "one\ntwo\n"
        assert log.content == "one\ntwo\n"

        log.delete()
        assert log.path not in fs.files
        assert not log.online

    def test_preexisting_content(self):
        fs = MemoryFileSystem({"/virtual/app.log": "kept\n"})
        log = LogFile("/virtual/app.log", {"formatter": plain}, filesystem=fs)
        log.open().close()
        assert log.content == "kept\n"
        log.write({"message": "more"}).close()
        assert log.content == "kept\nmore\n"
