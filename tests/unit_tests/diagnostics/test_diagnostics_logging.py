"""
Diagnostics logging unit tests.

Covers the processor chain, level filtering and the stdio/file sinks.
"""

from __future__ import annotations

from unittest.mock import patch

import orjson

from stackdriver_log_wrapper import EntryMetadata, MonitoredResource, Severity, WriteOptions
from stackdriver_log_wrapper.config import LogFormat, LoggingSettings, LogLevel
from stackdriver_log_wrapper.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    shutdown_logging,
)
from stackdriver_log_wrapper.backends.gcloud import GCloudBackend
from stackdriver_log_wrapper.logging import core
from stackdriver_log_wrapper.logging.formatters import ConsoleFormatter
from stackdriver_log_wrapper.logging.sinks import BaseSink, FileSink


class BrokenSink(BaseSink):
    def emit(self, event_dict):
        raise OSError("diagnostics disk full")

    def close(self) -> None:
        pass


class ListSink(BaseSink):
    def __init__(self) -> None:
        self.events: list[dict] = []

    def emit(self, event_dict):
        self.events.append(dict(event_dict))

    def close(self) -> None:
        pass


def test_silent_until_configured(capsys):
    get_logger("quiet").info("nothing_to_see")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_json_stdio_sink_writes_to_stderr(capsys):
    configure_logging(level="DEBUG", sinks="stdio", fmt="json")

    get_logger("diag").info("client_ready", project="p")

    captured = capsys.readouterr()
    assert captured.out == ""
    event = orjson.loads(captured.err.strip())
    assert event["message"] == "client_ready"
    assert event["logger"] == "diag"
    assert event["level"] == "info"
    assert event["project"] == "p"
    assert "timestamp" in event


def test_level_filtering(capsys):
    configure_logging(level="WARNING", sinks="stdio", fmt="json")

    diag = get_logger("diag")
    diag.info("dropped")
    diag.warning("kept")

    lines = capsys.readouterr().err.strip().splitlines()
    assert [orjson.loads(line)["message"] for line in lines] == ["kept"]


def test_logger_created_before_configuration_picks_up_sinks(capsys):
    diag = get_logger("early")
    configure_logging(level="INFO", sinks="stdio", fmt="json")

    diag.info("late_event")

    assert orjson.loads(capsys.readouterr().err)["message"] == "late_event"


def test_console_format(capsys):
    configure_logging(level="INFO", sinks="stdio", fmt="console")

    get_logger("diag").info("hello", key="value")

    line = capsys.readouterr().err.rstrip("\n")
    assert " | " in line
    assert "INFO" in line
    assert line.endswith("hello key=value")


def test_file_sink(tmp_path):
    path = tmp_path / "diag" / "wrapper.log"
    configure_logging(level="INFO", sinks="file", file_path=str(path))

    get_logger("diag").info("to_file")
    shutdown_logging()

    event = orjson.loads(path.read_text(encoding="utf-8").strip())
    assert event["message"] == "to_file"


def test_file_sink_rotation(tmp_path):
    path = tmp_path / "wrapper.log"
    sink = FileSink(path, max_bytes=10, backup_count=2)

    for i in range(3):
        sink.emit({"message": f"event-{i}"})
    sink.close()

    assert path.with_name("wrapper.log.1").exists()
    assert path.with_name("wrapper.log.2").exists()
    assert not path.with_name("wrapper.log.3").exists()


def test_configure_from_settings(capsys):
    configure_logging_from_settings(
        LoggingSettings(level=LogLevel.DEBUG, sinks="stdio", format=LogFormat.JSON)
    )

    get_logger("diag").debug("from_settings")

    assert orjson.loads(capsys.readouterr().err)["level"] == "debug"


def test_console_formatter_truncates_logger_name():
    line = ConsoleFormatter.format(
        {
            "level": "warning",
            "message": "m",
            "logger": "stackdriver_log_wrapper.backends.gcloud.very.long.name",
            "timestamp": "2024-01-02T03:04:05+00:00",
        },
        use_color=False,
    )

    timestamp, level, logger_name, message = line.split(" | ")
    assert level == " WARNING"
    assert logger_name.startswith("...")
    assert len(logger_name) == ConsoleFormatter.LOGGER_WIDTH
    assert message == "m"


def test_broken_sink_does_not_stop_other_sinks():
    configure_logging(level="INFO", sinks="")
    healthy = ListSink()
    core._sinks.extend([BrokenSink(), healthy])

    get_logger("diag").info("still_delivered")

    assert [event["message"] for event in healthy.events] == ["still_delivered"]


def test_broken_sink_does_not_fail_gcloud_write():
    configure_logging(level="DEBUG", sinks="")
    core._sinks.append(BrokenSink())
    metadata = EntryMetadata(resource=MonitoredResource(type="global"), severity=Severity.INFO)

    with patch("stackdriver_log_wrapper.backends.gcloud.gcloud_logging.Client") as MockClient:
        backend = GCloudBackend("diag-log")
        future = backend.write(backend.entry(metadata, "payload"), WriteOptions())
        future.result(timeout=5)
        backend.close()

    MockClient.return_value.logger.return_value.log.assert_called_once()
