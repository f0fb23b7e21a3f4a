import unittest

from strprep import MappingKind
from strprep import ProfileId
from strprep import ProfileRegistry
from strprep import ProhibitedCharacterError
from strprep.profiles import get_profile
from strprep.profiles import PROFILES


class TestProfileData(unittest.TestCase):
    def test_all_profiles_defined(self):
        self.assertEqual(set(PROFILES), set(ProfileId))

    def test_get_profile(self):
        self.assertIs(get_profile("NodePrep"), PROFILES[ProfileId.NODEPREP])
        self.assertIs(get_profile(ProfileId.TRACEPREP),
                      PROFILES[ProfileId.TRACEPREP])

        with self.assertRaises(ValueError):
            get_profile("FooPrep")

    def test_flags(self):
        for profile_id, profile in PROFILES.items():
            self.assertEqual(profile.bidi,
                             profile_id != ProfileId.TRACEPREP)

        self.assertEqual(PROFILES[ProfileId.TRACEPREP].mapping,
                         MappingKind.IDENTITY)
        self.assertEqual(PROFILES[ProfileId.NAMEPREP].mapping,
                         MappingKind.CASE_FOLD)

    def test_immutable(self):
        profile = PROFILES[ProfileId.NAMEPREP]
        with self.assertRaises(AttributeError):
            profile.bidi = False


class TestNodeprep(unittest.TestCase):
    def setUp(self):
        self.prep = ProfileRegistry().get_instance(ProfileId.NODEPREP)

    def test_case_folding(self):
        self.assertEqual(self.prep.prepare("Juliet"), "juliet")
        self.assertEqual(self.prep.prepare("fußball"), "fussball")

    def test_prohibited(self):
        tests = [
            ("ju@liet", 0x40, 2),
            ("a b", 0x20, 1),
            ("d'artagnan", 0x27, 1),
            ('"juliet"', 0x22, 0),
            ("at&t", 0x26, 2),
            ("a/b", 0x2F, 1),
            ("a:b", 0x3A, 1),
            ("<a>", 0x3C, 0),
            ("a>", 0x3E, 1),
            # U+00A0 normalizes to SPACE
            ("\u00a0", 0x20, 0),
        ]

        for text, codepoint, index in tests:
            with self.assertRaises(ProhibitedCharacterError) as cm:
                self.prep.prepare(text)
            self.assertEqual(cm.exception.codepoint, codepoint)
            self.assertEqual(cm.exception.index, index)


class TestResourceprep(unittest.TestCase):
    def setUp(self):
        self.prep = ProfileRegistry().get_instance(ProfileId.RESOURCEPREP)

    def test_case_and_space_preserved(self):
        self.assertEqual(self.prep.prepare("Foo Bar"), "Foo Bar")
        self.assertEqual(self.prep.prepare("foo@bar/baz"), "foo@bar/baz")
        self.assertEqual(self.prep.prepare("♚"), "♚")

    def test_map_to_nothing(self):
        self.assertEqual(self.prep.prepare("res\u00adource"), "resource")

    def test_prohibited(self):
        with self.assertRaises(ProhibitedCharacterError) as cm:
            self.prep.prepare("res\u0001")
        self.assertEqual(cm.exception.codepoint, 0x01)
        self.assertEqual(cm.exception.index, 3)


class TestISCSIprep(unittest.TestCase):
    def setUp(self):
        self.prep = ProfileRegistry().get_instance(ProfileId.ISCSIPREP)

    def test_name(self):
        self.assertEqual(
            self.prep.prepare("IQN.2001-04.COM.Example:Storage"),
            "iqn.2001-04.com.example:storage")
        self.assertEqual(self.prep.prepare("eui.02004567A425678D"),
                         "eui.02004567a425678d")

    def test_prohibited(self):
        tests = [
            ("a b", 0x20, 1),
            ("a,b", 0x2C, 1),
            ("a/b", 0x2F, 1),
            ("a;b", 0x3B, 1),
            ("a@b", 0x40, 1),
            ("a[b", 0x5B, 1),
            ("a_b", 0x5F, 1),
            ("a`b", 0x60, 1),
            # RFC 3722 also prohibits "{ | } ~"
            ("a{b", 0x7B, 1),
            ("a|b", 0x7C, 1),
            ("a~b", 0x7E, 1),
            ("a\u007fb", 0x7F, 1),
            ("a\u3002b", 0x3002, 1),
        ]

        for text, codepoint, index in tests:
            with self.assertRaises(ProhibitedCharacterError) as cm:
                self.prep.prepare(text)
            self.assertEqual(cm.exception.codepoint, codepoint)
            self.assertEqual(cm.exception.index, index)


class TestTraceprep(unittest.TestCase):
    def setUp(self):
        self.prep = ProfileRegistry().get_instance(ProfileId.TRACEPREP)

    def test_case_and_spaces_preserved(self):
        self.assertEqual(self.prep.prepare("Hello World"), "Hello World")

    def test_no_mapping(self):
        self.assertEqual(self.prep.prepare("a\u00adb"), "a\u00adb")

    def test_normalized(self):
        self.assertEqual(self.prep.prepare("\u00aa\u2163"), "aIV")
        self.assertEqual(self.prep.prepare("a\u00a0b"), "a b")

    def test_no_bidi_check(self):
        self.assertEqual(self.prep.prepare("\u0627a"), "\u0627a")

    def test_prohibited(self):
        with self.assertRaises(ProhibitedCharacterError) as cm:
            self.prep.prepare("trace\u0007")

        self.assertEqual(cm.exception.codepoint, 0x07)
        self.assertEqual(cm.exception.index, 5)

        with self.assertRaises(ProhibitedCharacterError):
            self.prep.prepare("\ue000")
