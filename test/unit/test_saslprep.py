import unittest

from strprep import BidiViolation
from strprep import BidiViolationError
from strprep import ProfileId
from strprep import ProfileRegistry
from strprep import ProhibitedCharacterError


class TestSASLprep(unittest.TestCase):
    def setUp(self):
        self.prep = ProfileRegistry().get_instance(ProfileId.SASLPREP)

    def test_simple(self):
        self.assertEqual(self.prep.prepare("cfloersch"), "cfloersch")
        self.assertEqual(self.prep.prepare("user"), "user")

    def test_case_preserved(self):
        self.assertEqual(self.prep.prepare("USER"), "USER")

    def test_map_to_nothing(self):
        self.assertEqual(self.prep.prepare("I\u00adX"), "IX")
        self.assertEqual(self.prep.prepare("x\u00ady"), "xy")

    def test_non_ascii_space_mapped_to_space(self):
        self.assertEqual(self.prep.prepare("a\u00a0b"), "a b")
        self.assertEqual(self.prep.prepare("a\u3000b"), "a b")

    def test_nfkc(self):
        self.assertEqual(self.prep.prepare("\u00aa"), "a")
        self.assertEqual(self.prep.prepare("\u2163"), "IV")
        self.assertEqual(self.prep.prepare("I\u00adX"),
                         self.prep.prepare("\u2168"))

    def test_prohibited_character(self):
        with self.assertRaises(ProhibitedCharacterError) as cm:
            self.prep.prepare("\u0007")

        self.assertEqual(cm.exception.codepoint, 0x07)
        self.assertEqual(cm.exception.index, 0)
        self.assertEqual(cm.exception.input, "\u0007")

    def test_prohibited_index_after_mapping(self):
        with self.assertRaises(ProhibitedCharacterError) as cm:
            self.prep.prepare("a\u00adb\u0007")

        self.assertEqual(cm.exception.index, 2)

    def test_bidi(self):
        with self.assertRaises(BidiViolationError) as cm:
            self.prep.prepare("\u06271")

        self.assertEqual(cm.exception.reason, BidiViolation.BOUNDARY)

        self.assertEqual(self.prep.prepare("\u06271\u0628"),
                         "\u06271\u0628")
