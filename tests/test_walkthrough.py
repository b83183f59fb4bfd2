import unittest

from optionpy import Option, Some, NONE, from_nullable, EmptyAccess


def find_index(s: str, sub: str) -> Option[int]:
    i = s.find(sub)
    return Some(i) if i != -1 else NONE


class TestWalkthrough(unittest.TestCase):
    def test_hello_world_chain(self):
        doc = from_nullable("hello")
        self.assertEqual(doc.unwrap(), "hello")

        hello_world = doc.map(lambda s: s + ", world!")
        self.assertEqual(hello_world, Some("hello, world!"))

        self.assertEqual(hello_world.flat_map(lambda s: find_index(s, "world")), Some(7))
        self.assertEqual(hello_world.flat_map(lambda s: find_index(s, "XXX")).unwrap_or(-1), -1)

    def test_missing_input_stays_safe(self):
        crash: Option[int] = from_nullable(None)
        self.assertIs(crash.map(lambda x: x + 1), NONE)
        with self.assertRaises(EmptyAccess):
            crash.get()


if __name__ == "__main__":
    unittest.main()
