"""Tests for the Pino-compatible loguru sink."""

import json

from stateauditor.utils.logging import get_request_id, logger, pino_compatible_sink


class TestPinoSink:
    def test_record_shape(self, capsys):
        handler = logger.add(pino_compatible_sink, level="DEBUG", colorize=False)
        try:
            logger.bind(file="src/App.jsx").info("analyzed")
        finally:
            logger.remove(handler)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["level"] == 30
        assert record["msg"] == "analyzed"
        assert record["file"] == "src/App.jsx"
        assert record["request_id"] == get_request_id()

    def test_level_mapping(self, capsys):
        handler = logger.add(pino_compatible_sink, level="DEBUG", colorize=False)
        try:
            logger.warning("careful")
        finally:
            logger.remove(handler)

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["level"] == 40
