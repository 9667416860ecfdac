import unittest

from labelconverter.utilities import constants
from labelconverter.utilities import errors
from labelconverter.utilities import my_math
from labelconverter.utilities import utils

from tests.label_converter_test_case import LabelConverterTestCase


class TestUtils(LabelConverterTestCase):
    def test_num_to_str(self):
        self.assertEqual("0", my_math.numToStr(0))
        self.assertEqual("0", my_math.numToStr(-0.0))
        self.assertEqual("3", my_math.numToStr(3.0))
        self.assertEqual("1.5", my_math.numToStr(1.5))
        self.assertEqual("0.1", my_math.numToStr(0.1))
        self.assertEqual("1e-05", my_math.numToStr(0.00001))

    def test_num_to_str_is_exact(self):
        self.assertEqual(2.0000000000001, float(my_math.numToStr(2.0000000000001)))

    def test_escape_quotes(self):
        self.assertEqual('say ""hi""', utils.escapeQuotes('say "hi"'))
        self.assertEqual('say "hi"', utils.unescapeQuotes('say ""hi""'))

    def test_decode_data(self):
        self.assertEqual("abc", utils.decodeData(b"abc"))
        self.assertEqual("abc", utils.decodeData("a\x00bc"))
        self.assertEqual("abc", utils.decodeData(b"a\x00b\x00c\x00"))
        self.assertEqual("abc", utils.decodeData("abc".encode("utf-8-sig")))
        self.assertEqual("əb", utils.decodeData("əb".encode("utf-16")))

    def test_decode_data_raises_format_error_for_invalid_utf8(self):
        with self.assertRaises(errors.FormatError) as _:
            utils.decodeData(b"\xff")
        with self.assertRaises(errors.FormatError) as _:
            utils.decodeData(b"\xc3=x")

    def test_validate_option(self):
        utils.validateOption("mode", "warning", constants.ErrorReportingMode)

        with self.assertRaises(errors.WrongOption) as cm:
            utils.validateOption("mode", "bird", constants.ErrorReportingMode)

        self.assertIn("bird", str(cm.exception))

    def test_error_reporter_raises_in_error_mode(self):
        reporter = utils.getErrorReporter(constants.ErrorReportingMode.ERROR)

        with self.assertRaises(errors.FormatError) as _:
            reporter(errors.FormatError, "broken")

    def test_error_reporter_is_silent_in_silence_mode(self):
        reporter = utils.getErrorReporter(constants.ErrorReportingMode.SILENCE)

        self.assertIsNone(reporter(errors.FormatError, "broken"))


if __name__ == "__main__":
    unittest.main()
