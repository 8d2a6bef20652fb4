"""Tests for class file attribute holders."""

import dataclasses
import unittest
from modutf8 import Attribute, ByteString, ExceptionsAttribute, Name, encode


class TestAttribute(unittest.TestCase):
    """Test cases for Attribute."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.name = ByteString.from_str("SourceFile", Name)

    def test_from_text(self) -> None:
        """from_text stores the Modified UTF-8 payload."""
        attribute = Attribute.from_text(self.name, "Main\x00.kt")
        self.assertEqual(attribute.name, self.name)
        self.assertEqual(attribute.data, encode("Main\x00.kt"))

    def test_frozen(self) -> None:
        """Attributes are immutable."""
        attribute = Attribute(self.name, b"")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            attribute.data = b"x"

    def test_empty(self) -> None:
        """EMPTY is an empty tuple of attributes."""
        self.assertEqual(Attribute.EMPTY, ())


class TestExceptionsAttribute(unittest.TestCase):
    """Test cases for ExceptionsAttribute."""

    def test_name(self) -> None:
        """NAME is the encoded attribute name."""
        self.assertEqual(ExceptionsAttribute.NAME, ByteString(b"Exceptions"))
        self.assertEqual(ExceptionsAttribute.NAME.to_str(), "Exceptions")

    def test_indices(self) -> None:
        """Checked exception indices are kept as a tuple, with no payload."""
        attribute = ExceptionsAttribute(ExceptionsAttribute.NAME, [3, 7])
        self.assertEqual(attribute.checked_exceptions_cpi, (3, 7))
        self.assertIsNone(attribute.data)
        self.assertIsInstance(attribute, Attribute)

    def test_from_text_rejected(self) -> None:
        """A text payload cannot be stored on an Exceptions attribute."""
        with self.assertRaises(TypeError):
            ExceptionsAttribute.from_text(ExceptionsAttribute.NAME, "ab")

    def test_base_from_text_unaffected(self) -> None:
        """The base class still stores the encoded payload."""
        attribute = Attribute.from_text(ExceptionsAttribute.NAME, "ab")
        self.assertEqual(attribute.data, b"ab")
        self.assertIs(type(attribute), Attribute)

    def test_equality(self) -> None:
        """Equal names and indices compare equal."""
        first = ExceptionsAttribute(ExceptionsAttribute.NAME, (1, 2))
        second = ExceptionsAttribute(ByteString(b"Exceptions"), [1, 2])
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))


if __name__ == "__main__":
    unittest.main()
