import unittest

from strprep import BidiViolation
from strprep import BidiViolationError
from strprep import MalformedInputError
from strprep import ProfileId
from strprep import ProfileRegistry
from strprep import ProhibitedCharacterError
from strprep import UnassignedCodepointError


class TestNameprep(unittest.TestCase):
    def setUp(self):
        self.prep = ProfileRegistry().get_instance(ProfileId.NAMEPREP)

    def test_simple(self):
        self.assertEqual(self.prep.prepare("cfloersch"), "cfloersch")

    def test_case_folding(self):
        self.assertEqual(self.prep.prepare("cFloersch"), "cfloersch")
        self.assertEqual(self.prep.prepare("CFLOERSCH"), "cfloersch")
        self.assertEqual(self.prep.prepare("Pročprostěnemluvíčesky"),
                         "pročprostěnemluvíčesky")

    def test_international_mixed_text(self):
        self.assertEqual(
            self.prep.prepare("安室奈美恵-with-SUPER-MONKEYS"),
            "安室奈美恵-with-super-monkeys")

    def test_pass_through(self):
        tests = [
            # Korean
            "미술",
            # Arabic
            "ليهمابتكلم"
            "وشعربي؟",
            # Chinese
            "他们为什么不说中文",
            # Hebrew
            "למההםפשוטל"
            "אמדבריםעבר"
            "ית",
            # Russian
            "почемужеон"
            "инеговорят",
            # Japanese
            "ひとつ屋根の下2",
            # Maltese
            "bonġusaħħa",
            # Greek
            "ελληνικά",
        ]

        for text in tests:
            self.assertEqual(self.prep.prepare(text), text)

    def test_vectors(self):
        tests = [
            # map to nothing
            ("foo\u00ad\u034f\u1806\u180bbar\u200b\u2060baz"
             "\ufe00\ufe08\ufe0f\ufeff", "foobarbaz"),
            # case folding german sharp s
            ("\u00df", "ss"),
            # case folding turkish capital I with dot
            ("\u0130", "i\u0307"),
            # case folding multibyte U+0143 U+037A
            ("\u0143\u037a", "\u0144 \u03b9"),
            # normalization of U+006A U+030C U+00A0 U+00AA
            ("j\u030c\u00a0\u00aa", "\u01f0 a"),
            # case folding U+1FB7 and normalization
            ("\u1fb7", "\u1fb6\u03b9"),
            # self-reverting case folding and normalization
            ("\u0390", "\u0390"),
            ("\u03b0", "\u03b0"),
            ("\u1e96", "\u1e96"),
        ]

        for text, expected in tests:
            self.assertEqual(self.prep.prepare(text), expected)

    def test_prohibited(self):
        tests = [
            "\u0085",
            "\u180e",
            "\U0001d175",
            "\uf123",
            "\U000f1234",
            "\U0010f234",
            "\U0008fffe",
            "\U0010ffff",
            "\u2ff5",
            "\u200e",
            "\u202a",
            "\U000e0001",
            "\U000e0042",
        ]

        for text in tests:
            with self.assertRaises(ProhibitedCharacterError) as cm:
                self.prep.prepare(text)
            self.assertEqual(cm.exception.codepoint, ord(text))

    def test_ascii_controls_allowed(self):
        # C.2.1 is not part of Nameprep
        self.assertEqual(self.prep.prepare("a\u0007"), "a\u0007")

    def test_surrogate(self):
        with self.assertRaises(MalformedInputError):
            self.prep.prepare("\udf42")

        with self.assertRaises(MalformedInputError):
            self.prep.prepare(b"\xed\xbd\x82")

    def test_bidi(self):
        tests = [
            ("foo\u05bebar", BidiViolation.MIXED_DIRECTION),
            ("foo\ufd50bar", BidiViolation.MIXED_DIRECTION),
            ("\u06271", BidiViolation.BOUNDARY),
        ]

        for text, reason in tests:
            with self.assertRaises(BidiViolationError) as cm:
                self.prep.prepare(text)
            self.assertEqual(cm.exception.reason, reason)

    def test_unassigned(self):
        with self.assertRaises(UnassignedCodepointError) as cm:
            self.prep.prepare("\U000e0002")

        self.assertEqual(cm.exception.codepoint, 0xE0002)
        self.assertEqual(cm.exception.index, 0)

        self.assertEqual(self.prep.prepare("\U000e0002", allow_unassigned=True),
                         "\U000e0002")
        self.assertEqual(self.prep.prepare_query("a\U000e0002"),
                         "a\U000e0002")

        with self.assertRaises(UnassignedCodepointError) as cm:
            self.prep.prepare_stored("ab\U000e0002")
        self.assertEqual(cm.exception.index, 2)
