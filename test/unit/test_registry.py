import threading
import unittest

from strprep import ProfileId
from strprep import ProfileRegistry
from strprep import StringPrep


class TestProfileRegistry(unittest.TestCase):
    def setUp(self):
        self.registry = ProfileRegistry()

    def test_same_instance(self):
        first = self.registry.get_instance(ProfileId.NAMEPREP)
        second = self.registry.get_instance(ProfileId.NAMEPREP)
        self.assertIs(first, second)
        self.assertIsInstance(first, StringPrep)

    def test_lookup_by_name(self):
        engine = self.registry.get_instance(ProfileId.SASLPREP)
        self.assertIs(self.registry.get_instance("SASLPrep"), engine)
        self.assertIs(self.registry.get_instance("saslprep"), engine)
        self.assertIs(self.registry.get_instance("SASLPREP"), engine)

    def test_distinct_profiles(self):
        engines = {id(self.registry.get_instance(profile_id))
                   for profile_id in ProfileId}
        self.assertEqual(len(engines), len(ProfileId))

        for profile_id in ProfileId:
            engine = self.registry.get_instance(profile_id)
            self.assertEqual(engine.name, profile_id.value)

    def test_unknown_profile(self):
        with self.assertRaises(ValueError):
            self.registry.get_instance("FooPrep")

        for profile_id in (None, 42, b"NamePrep"):
            with self.assertRaises(ValueError):
                self.registry.get_instance(profile_id)

        self.assertEqual(len(self.registry), 0)

    def test_registries_are_independent(self):
        other = ProfileRegistry()
        self.assertIsNot(self.registry.get_instance(ProfileId.NODEPREP),
                         other.get_instance(ProfileId.NODEPREP))

    def test_lazy(self):
        self.assertEqual(len(self.registry), 0)
        self.assertNotIn(ProfileId.NAMEPREP, self.registry)

        with self.assertLogs("strprep.registry", level="INFO"):
            self.registry.get_instance("NamePrep")

        self.assertIn(ProfileId.NAMEPREP, self.registry)
        self.assertIn("NamePrep", self.registry)
        self.assertEqual(len(self.registry), 1)

    def test_preload(self):
        self.registry.preload()
        self.assertEqual(len(self.registry), len(ProfileId))
        for profile_id in ProfileId:
            self.assertIn(profile_id, self.registry)

    def test_concurrent_first_use(self):
        thread_count = 8
        barrier = threading.Barrier(thread_count)
        engines = []
        lock = threading.Lock()

        def get_engine():
            barrier.wait()
            engine = self.registry.get_instance(ProfileId.RESOURCEPREP)
            with lock:
                engines.append(engine)

        threads = [threading.Thread(target=get_engine)
                   for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(engines), thread_count)
        for engine in engines:
            self.assertIs(engine, engines[0])
        self.assertEqual(len(self.registry), 1)

    def test_concurrent_prepare(self):
        engine = self.registry.get_instance(ProfileId.NAMEPREP)
        results = []
        lock = threading.Lock()

        def prepare():
            for _ in range(100):
                result = engine.prepare("Example")
                with lock:
                    results.append(result)

        threads = [threading.Thread(target=prepare) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(results, ["example"] * 400)
