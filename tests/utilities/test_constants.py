import unittest

from labelconverter.utilities import constants
from labelconverter.utilities import errors

from tests.label_converter_test_case import LabelConverterTestCase


class TestConstants(LabelConverterTestCase):
    def test_interval_as_named_tuple(self):
        sut = constants.Interval(0.5, 1, "hello")

        self.assertEqual(0.5, sut[0])
        self.assertEqual(0.5, sut.start)

        self.assertEqual(1, sut[1])
        self.assertEqual(1, sut.end)

        self.assertEqual("hello", sut[2])
        self.assertEqual("hello", sut.label)

    def test_interval_equivalence(self):
        self.assertEqual(
            constants.Interval(0.5555555556, 1.0, "hello"),
            constants.Interval(5 / 9.0, 1.0, "hello"),
        )
        self.assertNotEqual(
            constants.Interval(5 / 9.0, 1.0, "hello"), (0.5555555556, 1.0, "hello")
        )
        self.assertNotEqual(constants.Interval(5 / 9.0, 1.0, "hello"), "hello")

    def test_interval_build_keeps_label_whitespace(self):
        sut = constants.Interval.build("0", "1", " a ")

        self.assertEqual(constants.Interval(0.0, 1.0, " a "), sut)

    def test_interval_build_raises_error_for_bad_arguments(self):
        with self.assertRaises(errors.ArgumentError) as _:
            constants.Interval.build("zero", 1, "a")

    def test_point_as_named_tuple(self):
        sut = constants.Point(0.5, "hello")

        self.assertEqual(0.5, sut[0])
        self.assertEqual(0.5, sut.time)

        self.assertEqual("hello", sut[1])
        self.assertEqual("hello", sut.label)

    def test_point_equivalence(self):
        self.assertEqual(
            constants.Point(0.5555555556, "hello"),
            constants.Point(5 / 9.0, "hello"),
        )

        self.assertNotEqual(constants.Point(5 / 9.0, "hello"), (5 / 9.0, "hello"))
        self.assertNotEqual(constants.Point(5 / 9.0, "hello"), "hello")

    def test_token_and_lab_line_field_order(self):
        token = constants.Token("a", 1, 2)
        line = constants.LabLine(1, 2, "a")

        self.assertEqual(("a", 1, 2), (token.text, token.start, token.end))
        self.assertEqual(("a", 1, 2), (line.text, line.start, line.end))

    def test_ticks_per_second(self):
        self.assertEqual(10000000, constants.TICKS_PER_SECOND)

    def test_printed_labels(self):
        self.assertEqual("File type", constants.TEXTGRID_LABELS["fileType"])
        self.assertEqual("tiers", constants.TEXTGRID_LABELS["tiersExist"])
        self.assertEqual("class", constants.TIER_LABELS["tierType"])
        self.assertEqual("text", constants.INTERVAL_LABELS["label"])
        self.assertEqual("number", constants.POINT_LABELS["time"])
        self.assertEqual("mark", constants.POINT_LABELS["label"])


if __name__ == "__main__":
    unittest.main()
