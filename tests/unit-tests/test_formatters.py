import unittest
import sys
import os
import io
import json

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from levenshtein_diff.algorithms.utils import DiffResult, make_insert, make_delete, make_substitute
from levenshtein_diff.algorithms.edit import diff
from levenshtein_diff.formatters.base import (
    FormatterConfig, FormatterFactory, ColorScheme, OutputWriter, OutputTarget,
    EditListFormatter, BaseFormatter, describe_value
)
from levenshtein_diff.formatters.matrix import PlainMatrixFormatter, TableMatrixFormatter
from levenshtein_diff.formatters.structured import JSONFormatter
from levenshtein_diff.formatters import create_formatter, get_available_formatters, format_result


NO_COLOR = FormatterConfig(use_color=False)


class TestFormatterConfig(unittest.TestCase):
    def test_config(self):
        c = FormatterConfig()
        self.assertTrue(c.use_color)
        self.assertEqual(c.cell_width, 1)
        self.assertTrue(c.show_headers)
        self.assertTrue(c.highlight_path)
        self.assertFalse(c.with_color(False).use_color)
        self.assertEqual(c.with_cell_width(4).cell_width, 4)
        self.assertFalse(c.with_headers(False).show_headers)
        self.assertTrue(c.use_color)
        copy = c.copy()
        self.assertIsNot(copy, c)
        self.assertEqual(copy.cell_width, c.cell_width)


class TestColorSchemeAndWriter(unittest.TestCase):
    def test_colors(self):
        s = ColorScheme()
        self.assertEqual(s.reset, '\033[0m')
        self.assertEqual(s.for_op(make_delete(1).op), s.red)
        s.disable_colors()
        self.assertEqual(s.reset, '')
        self.assertEqual(ColorScheme.no_color().green, '')

    def test_writer(self):
        w = OutputWriter(OutputTarget.STRING)
        w.write("a")
        w.writeln("b")
        self.assertEqual(w.get_output(), "ab\n")
        stream = io.StringIO()
        w = OutputWriter(OutputTarget.FILE, stream)
        w.writeln("x")
        self.assertEqual(stream.getvalue(), "x\n")
        self.assertEqual(w.get_output(), "")

    def test_describe_value(self):
        self.assertEqual(describe_value('a'), 'a')
        self.assertEqual(describe_value('Hello'), "'Hello'")
        self.assertEqual(describe_value(78), '78')


class TestEditListFormatter(unittest.TestCase):
    def test_saturday_sunday(self):
        out = EditListFormatter(NO_COLOR).format(diff("SATURDAY", "SUNDAY"))
        self.assertEqual(out.splitlines(), [
            "~ 5 'N'",
            "- 3",
            "- 2",
            "3 edits: 0 inserts, 2 deletes, 1 substitutes",
        ])

    def test_inserts(self):
        out = EditListFormatter(NO_COLOR).format(diff("", "AB"))
        self.assertEqual(out.splitlines()[:2], ["+ 0 'B'", "+ 0 'A'"])

    def test_no_edits(self):
        out = EditListFormatter(NO_COLOR).format(diff("same", "same"))
        self.assertEqual(out, "0 edits: 0 inserts, 0 deletes, 0 substitutes\n")

    def test_colored(self):
        out = EditListFormatter(FormatterConfig(use_color=True)).format(diff("a", "b"))
        self.assertIn('\033[33m', out)
        self.assertIn('\033[0m', out)

    def test_format_edit(self):
        f = EditListFormatter(NO_COLOR)
        self.assertEqual(f.format_edit(make_insert(0, 'x')), "+ 0 'x'")
        self.assertEqual(f.format_edit(make_substitute(2, 7)), "~ 2 7")

    def test_write_to_stream(self):
        stream = io.StringIO()
        self.assertEqual(EditListFormatter(NO_COLOR).format(diff("ab", "b"), stream), "")
        self.assertIn("- 1", stream.getvalue())


class TestMatrixFormatters(unittest.TestCase):
    def test_plain(self):
        out = PlainMatrixFormatter(NO_COLOR).format(diff("FLAW", "LAWN"))
        lines = out.splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], "0 1 2 3 4")
        self.assertEqual(lines[-1], "4 3 2 1 2")

    def test_table(self):
        out = TableMatrixFormatter(NO_COLOR).format(diff("FLAW", "LAWN"))
        lines = out.splitlines()
        self.assertEqual(len(lines), 6)
        self.assertTrue(lines[0].endswith("L A W N"))
        self.assertIn("F 1 1 2 3 4", lines)
        self.assertNotIn('\033', out)

    def test_table_without_headers(self):
        config = NO_COLOR.with_headers(False).with_cell_width(2)
        out = TableMatrixFormatter(config).format(diff("ab", "a"))
        self.assertEqual(out.splitlines(), [" 0  1", " 1  0", " 2  1"])

    def test_table_highlights_path(self):
        out = TableMatrixFormatter(FormatterConfig(use_color=True)).format(diff("ab", "b"))
        self.assertIn('\033[36m', out)

    def test_requires_matrix(self):
        result = DiffResult(source="a", target="b", distance=1, matrix=None, edits=[])
        with self.assertRaises(ValueError):
            PlainMatrixFormatter(NO_COLOR).format(result)
        with self.assertRaises(ValueError):
            TableMatrixFormatter(NO_COLOR).format(result)


class TestJSONFormatter(unittest.TestCase):
    def test_payload(self):
        payload = json.loads(JSONFormatter(NO_COLOR).format(diff("SATURDAY", "SUNDAY")))
        self.assertEqual(payload["distance"], 3)
        self.assertEqual(payload["source_length"], 8)
        self.assertEqual(payload["target_length"], 6)
        self.assertEqual(payload["similarity"], 0.625)
        self.assertEqual(payload["edits"][0], {"op": "substitute", "position": 5, "value": "N"})
        self.assertEqual(payload["edits"][1], {"op": "delete", "position": 3})
        self.assertEqual(payload["stats"]["total"], 3)

    def test_bytes_and_words(self):
        payload = json.loads(JSONFormatter(NO_COLOR).format(diff(b"ab", b"ac")))
        self.assertEqual(payload["edits"], [{"op": "substitute", "position": 2, "value": 99}])
        payload = json.loads(JSONFormatter(NO_COLOR).format(diff(["Hello"], ["Hello", "World"])))
        self.assertEqual(payload["edits"], [{"op": "insert", "position": 1, "value": "World"}])


class TestFactory(unittest.TestCase):
    def test_registry(self):
        names = get_available_formatters()
        for name in ("edits", "plain", "table", "json"):
            self.assertIn(name, names)
        self.assertIsInstance(FormatterFactory.create("edits"), EditListFormatter)
        self.assertIsInstance(create_formatter("json", NO_COLOR), JSONFormatter)
        self.assertIsInstance(create_formatter("table"), BaseFormatter)

    def test_unknown(self):
        with self.assertRaises(ValueError):
            create_formatter("unified")

    def test_format_result(self):
        self.assertIn("- 1", format_result(diff("ab", "b"), config=NO_COLOR))
        self.assertEqual(format_result(diff("ab", "b"), "plain"), "0 1\n1 1\n2 1\n")


if __name__ == '__main__':
    unittest.main()
