import unittest

from optionpy import Some, NONE, all_present


class TestAllPresent(unittest.TestCase):
    def test_all_some(self):
        self.assertEqual(all_present([Some(1), Some(2), Some(3)]), Some([1, 2, 3]))

    def test_empty_input(self):
        self.assertEqual(all_present([]), Some([]))

    def test_any_none_makes_result_none(self):
        self.assertIs(all_present([Some(1), NONE, Some(3)]), NONE)
        self.assertIs(all_present([NONE]), NONE)
        self.assertIs(all_present([Some(1), Some(2), NONE]), NONE)

    def test_stops_at_first_none(self):
        consumed = []

        def items():
            for o in (Some(1), NONE, Some(3)):
                consumed.append(o)
                yield o

        self.assertIs(all_present(items()), NONE)
        self.assertEqual(consumed, [Some(1), NONE])

    def test_fresh_list_per_call(self):
        items = [Some(1), Some(2)]
        a = all_present(items)
        b = all_present(items)
        self.assertEqual(a, b)
        self.assertIsNot(a.unwrap(), b.unwrap())
        self.assertEqual(items, [Some(1), Some(2)])

    def test_keeps_inner_none_from_some(self):
        self.assertEqual(all_present([Some(None), Some(2)]), Some([None, 2]))


if __name__ == "__main__":
    unittest.main()
