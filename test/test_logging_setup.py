import io
import logging
import tempfile
import unittest
from pathlib import Path

from line_formatter.config import FormatterConfig, FormatterConfigError
from line_formatter.formatter import LineFormatter
from line_formatter.logging_setup import configure_from_yaml, configure_logging, register_levels


class TestConfigureLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.name = f"line_formatter.test.setup.{self.id()}"
        self.log = logging.getLogger(self.name)
        self.log.propagate = False

        def _cleanup() -> None:
            for handler in list(self.log.handlers):
                self.log.removeHandler(handler)

        self.addCleanup(_cleanup)

    def test_installs_line_formatter(self) -> None:
        stream = io.StringIO()
        handler = configure_logging(
            FormatterConfig(no_colors=True), level="debug", stream=stream, logger_name=self.name
        )
        self.assertIsInstance(handler.formatter, LineFormatter)
        self.assertEqual(self.log.level, logging.DEBUG)

        self.log.debug("hello", extra={"k": "v"})
        self.assertTrue(stream.getvalue().endswith("] [DEBU] [k:v] hello\n"))

    def test_second_call_replaces_handler(self) -> None:
        configure_logging(logger_name=self.name, stream=io.StringIO())
        configure_logging(logger_name=self.name, stream=io.StringIO())
        self.assertEqual(len(self.log.handlers), 1)

    def test_foreign_handlers_are_kept(self) -> None:
        foreign = logging.NullHandler()
        self.log.addHandler(foreign)
        configure_logging(logger_name=self.name, stream=io.StringIO())
        self.assertIn(foreign, self.log.handlers)
        self.assertEqual(len(self.log.handlers), 2)

    def test_trace_level_by_name(self) -> None:
        stream = io.StringIO()
        configure_logging(FormatterConfig(no_colors=True), level="TRACE", stream=stream, logger_name=self.name)
        self.log.log(5, "deep")
        self.assertIn("[TRAC] deep", stream.getvalue())


class TestRegisterLevels(unittest.TestCase):
    def test_names(self) -> None:
        register_levels()
        register_levels()
        self.assertEqual(logging.getLevelName(5), "TRACE")
        self.assertEqual(logging.getLevelName(60), "PANIC")


class TestConfigureFromYaml(unittest.TestCase):
    def _write(self, text: str) -> Path:
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        path = Path(tmpdir.name) / "logging.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_dict_config_builds_line_formatter(self) -> None:
        name = "line_formatter.test.yaml"
        path = self._write(
            "disable_existing_loggers: false\n"
            "formatters:\n"
            "  line:\n"
            "    '()': line_formatter.formatter.LineFormatter\n"
            "    fieldOrder: [request_id]\n"
            "    noColors: true\n"
            "    report_caller: true\n"
            "handlers:\n"
            "  quiet:\n"
            "    class: logging.NullHandler\n"
            "    formatter: line\n"
            "loggers:\n"
            f"  {name}:\n"
            "    level: INFO\n"
            "    handlers: [quiet]\n"
            "    propagate: false\n"
        )
        applied = configure_from_yaml(path)
        self.assertEqual(applied["version"], 1)

        log = logging.getLogger(name)
        self.addCleanup(lambda: [log.removeHandler(h) for h in list(log.handlers)])
        (handler,) = log.handlers
        formatter = handler.formatter
        self.assertIsInstance(formatter, LineFormatter)
        self.assertEqual(formatter.config.field_order, ("request_id",))
        self.assertTrue(formatter.config.no_colors)
        self.assertTrue(formatter.report_caller)

    def test_non_mapping_rejected(self) -> None:
        with self.assertRaises(FormatterConfigError):
            configure_from_yaml(self._write("just a string\n"))

    def test_bad_dict_config_rejected(self) -> None:
        with self.assertRaises(FormatterConfigError):
            configure_from_yaml(
                self._write("disable_existing_loggers: false\nhandlers:\n  h:\n    class: no.such.Handler\n")
            )


if __name__ == "__main__":
    unittest.main()
