import unittest

from termtris_input import Input, InputSource, from_letter


class LetterBindingTests(unittest.TestCase):
    def test_bindings_ignore_case(self):
        self.assertIs(from_letter("h"), Input.MOVE_LEFT)
        self.assertIs(from_letter("L"), Input.MOVE_RIGHT)
        self.assertIs(from_letter("J"), Input.SOFT_DROP)
        self.assertIs(from_letter("a"), Input.ROTATE_CCW)
        self.assertIs(from_letter("S"), Input.ROTATE_CW)

    def test_unbound_letter(self):
        self.assertIsNone(from_letter("q"))

    def test_base_source_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            InputSource().poll_event()


if __name__ == "__main__":
    unittest.main()
