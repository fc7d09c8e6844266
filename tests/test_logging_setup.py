import io
import json
import logging

from transit_labels.logging_setup import AgencyFilter, JsonFormatter, setup_logging


def test_json_formatter_includes_route_attributes():
    record = logging.LogRecord("transit_labels", logging.INFO, __file__, 1, "routes normalized", None, None)
    record.agency = "CFV TS"
    record.rows = 5
    record.excluded = 2

    payload = json.loads(JsonFormatter().format(record))

    assert payload == {
        "level": "INFO",
        "logger": "transit_labels",
        "message": "routes normalized",
        "agency": "CFV TS",
        "rows": 5,
        "excluded": 2,
    }


def test_json_formatter_skips_missing_attributes():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello %s", ("world",), None)

    payload = json.loads(JsonFormatter().format(record))

    assert payload == {"level": "WARNING", "logger": "x", "message": "hello world"}


def test_agency_filter_does_not_override_call_site_agency():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    other = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    other.agency = "Other TS"
    agency_filter = AgencyFilter("CFV TS")

    assert agency_filter.filter(record) and agency_filter.filter(other)
    assert record.agency == "CFV TS"
    assert other.agency == "Other TS"


def test_setup_logging_is_idempotent_and_stamps_agency(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    root = logging.getLogger()
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    monkeypatch.setattr(root, "handlers", [handler])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging(agency="CFV TS")
    setup_logging(agency="CFV TS")
    logging.getLogger("transit_labels.test").info("routes normalized", extra={"rows": 3})

    assert len([f for f in handler.filters if isinstance(f, AgencyFilter)]) == 1
    payload = json.loads(stream.getvalue().strip())
    assert payload["agency"] == "CFV TS"
    assert payload["rows"] == 3
