import io
import json
import logging

from generic_adapters.common.logging import JsonLogFormatter, init_structured_logging, log_event


def test_json_formatter_emits_core_fields_and_extras(monkeypatch):
    monkeypatch.setenv("GIT_SHA", "deadbeef")
    fmt = JsonLogFormatter(service="unit-test", env="test")
    record = logging.LogRecord(
        name="generic_adapters.registry.manager",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="Invalid external framework configuration: %s",
        args=("Pod",),
        exc_info=None,
    )
    record.event_type = "external_framework.invalid"
    record.config_name = "Pod"

    line = json.loads(fmt.format(record))
    assert line["severity"] == "ERROR"
    assert line["service"] == "unit-test"
    assert line["env"] == "test"
    assert line["sha"] == "deadbeef"
    assert line["event_type"] == "external_framework.invalid"
    assert line["message"] == "Invalid external framework configuration: Pod"
    assert line["logger"] == "generic_adapters.registry.manager"
    assert line["config_name"] == "Pod"


def test_log_event_goes_through_structured_handler(restore_root_logging):
    buf = io.StringIO()
    init_structured_logging(service="unit-test", env="test", level="INFO", stream=buf)

    log_event(logging.getLogger("generic_adapters.test"), "external_framework.loaded", loaded=2, rejected=0)

    lines = [json.loads(s) for s in buf.getvalue().splitlines()]
    assert len(lines) == 1
    assert lines[0]["event_type"] == "external_framework.loaded"
    assert lines[0]["message"] == "external_framework.loaded"
    assert lines[0]["loaded"] == 2
    assert lines[0]["severity"] == "INFO"


def test_debug_records_are_filtered_at_info(restore_root_logging):
    buf = io.StringIO()
    init_structured_logging(level="INFO", stream=buf)

    logging.getLogger("generic_adapters.test").debug("hidden")
    assert buf.getvalue() == ""


def test_unknown_level_falls_back_to_info(restore_root_logging):
    buf = io.StringIO()
    init_structured_logging(level="verbose", stream=buf)

    assert restore_root_logging.level == logging.INFO
    logging.getLogger("generic_adapters.test").info("shown")
    assert json.loads(buf.getvalue())["message"] == "shown"
