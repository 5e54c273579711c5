import argparse
import unittest

from polynom import opts
from polynom import logging # declares "verbose"
from polynom.common import format_number

count = opts.Option("example-count", int, 3, description="How many examples")
quiet = opts.Option("example-quiet", bool, True)
label = opts.Option("example-label", str, "none", metavar="NAME")

class TestOptions(unittest.TestCase):

    def setUp(self):
        self._opts = opts.snapshot()

    def tearDown(self):
        opts.restore(self._opts)

    def parse(self, argv):
        parser = argparse.ArgumentParser()
        opts.setup(parser)
        opts.read(parser.parse_args(argv))

    def test_defaults(self):
        self.parse([])
        self.assertEqual(count.value, 3)
        self.assertEqual(quiet.value, True)
        self.assertEqual(label.value, "none")

    def test_flags(self):
        self.parse(["--example-count", "5", "--no-example-quiet", "--example-label", "abc"])
        self.assertEqual(count.value, 5)
        self.assertEqual(quiet.value, False)
        self.assertEqual(label.value, "abc")

    def test_every_module_option_is_registered(self):
        self.assertIs(opts.lookup("verbose").type, bool)
        self.assertIs(opts.lookup("decimal-point").type, str)
        self.parse(["--decimal-point", ";"])
        self.assertEqual(format_number(2.5), "2;5")

    def test_snapshot_restore(self):
        snap = opts.snapshot()
        count.value = 10
        opts.restore(snap)
        self.assertEqual(count.value, 3)

    def test_override(self):
        with opts.override(decimal_point="|", example_count=7):
            self.assertEqual(format_number(0.25), "0|25")
            self.assertEqual(count.value, 7)
        self.assertEqual(count.value, 3)
        self.assertNotEqual(opts.lookup("decimal-point").value, "|")

    def test_override_restores_after_error(self):
        class CustomExc(Exception):
            pass
        try:
            with opts.override(example_count=8):
                raise CustomExc()
        except CustomExc:
            pass
        self.assertEqual(count.value, 3)

    def test_no_truth_value(self):
        with self.assertRaises(Exception):
            bool(quiet)

    def test_duplicate_name_rejected(self):
        with self.assertRaises(AssertionError):
            opts.Option("example-count", int, 1)

class TestNumberFormatting(unittest.TestCase):

    def test_integral_values(self):
        with opts.override(decimal_point=","):
            self.assertEqual(format_number(2.0), "2")
            self.assertEqual(format_number(-200), "-200")
            self.assertEqual(format_number(-0.0), "0")
            self.assertEqual(format_number(0.01), "0,01")
            self.assertEqual(format_number(1e-05), "1e-05")
