import unittest

from AgentThreads import listutil


class TestListUtil(unittest.TestCase):

    def test_constructors(self):
        self.assertEqual(listutil.list_of(1, "a", None), [1, "a", None])
        self.assertEqual(listutil.list_of(), [])
        self.assertEqual(listutil.from_array((1, 2, 3)), [1, 2, 3])
        self.assertEqual(listutil.from_iterator(iter("abc")), ["a", "b", "c"])

    def test_from_csv_skips_empty_tokens(self):
        self.assertEqual(listutil.from_csv("host,waiter,cook"), ["host", "waiter", "cook"])
        self.assertEqual(listutil.from_csv("a,,b,"), ["a", "b"])
        self.assertEqual(listutil.from_csv(""), [])

    def test_immutable_list_of_type(self):
        result = listutil.immutable_list_of_type([1, 2, True], int)
        self.assertEqual(result, (1, 2, True))
        self.assertIsInstance(result, tuple)

        with self.assertRaises(ValueError):
            listutil.immutable_list_of_type([1, None], int)
        with self.assertRaises(TypeError):
            listutil.immutable_list_of_type([1, "2"], int)
        with self.assertRaises(ValueError):
            listutil.immutable_list_of_type(None, int)

    def test_immutable_list_of_type_or_null(self):
        self.assertEqual(listutil.immutable_list_of_type_or_null(["a", None], str), ("a", None))
        with self.assertRaises(TypeError):
            listutil.immutable_list_of_type_or_null(["a", 1], str)

    def test_reverse_copy(self):
        original = [1, 2, 3]
        self.assertEqual(listutil.reverse_copy(original), [3, 2, 1])
        self.assertEqual(original, [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
