"""Unit tests for writing the units report to disk."""
import io
import json
import os
import shutil
import tempfile
import unittest

from fakes import COMMON, FakeUnitsHost, default_document
from unitsreport.report import build_report
from unitsreport.writer import to_json, write_report


class WriterTests(unittest.TestCase):

    def setUp(self):
        self.folder = tempfile.mkdtemp()
        self.path = os.path.join(self.folder, "result.json")

    def tearDown(self):
        shutil.rmtree(self.folder)

    def _report(self):
        return build_report(COMMON, default_document(), FakeUnitsHost())

    def test_repeated_runs_are_byte_identical(self):
        write_report(self._report(), self.path)
        with io.open(self.path, "rb") as stream:
            first = stream.read()
        write_report(self._report(), self.path)
        with io.open(self.path, "rb") as stream:
            second = stream.read()
        self.assertEqual(first, second)

    def test_file_is_indented_utf8_json(self):
        text = write_report(self._report(), self.path)
        with io.open(self.path, "r", encoding="utf-8") as stream:
            written = stream.read()

        self.assertEqual(written, text)
        self.assertTrue(written.splitlines()[1].startswith('  "Common"'))
        self.assertIn(u"°", written)
        self.assertEqual(json.loads(written), self._report().to_dict())

    def test_existing_file_is_overwritten(self):
        with io.open(self.path, "w", encoding="utf-8") as stream:
            stream.write(u"stale" * 1000)
        write_report(self._report(), self.path)
        with io.open(self.path, "r", encoding="utf-8") as stream:
            self.assertEqual(stream.read(), to_json(self._report()))


if __name__ == "__main__":
    unittest.main()
