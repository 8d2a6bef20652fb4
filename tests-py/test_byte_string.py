"""Tests for ByteString handles and encode_to_handle."""

import unittest
from modutf8 import (
    ByteString,
    Constant,
    InvalidLeadingByteError,
    Name,
    Signature,
    Type,
    encode,
    encode_to_handle,
)


class TestByteString(unittest.TestCase):
    """Test cases for the ByteString container."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.name = ByteString(b"<init>", Name)

    def test_owns_copy_of_buffer(self) -> None:
        """Mutating the source buffer does not change the handle."""
        buffer = bytearray(b"abc")
        handle = ByteString(buffer)
        buffer[0] = ord("z")
        self.assertEqual(bytes(handle), b"abc")

    def test_sequence_protocol(self) -> None:
        """Length, indexing, slicing and iteration follow the bytes."""
        self.assertEqual(len(self.name), 6)
        self.assertEqual(self.name[0], ord("<"))
        self.assertEqual(self.name[1:5], b"init")
        self.assertEqual(list(self.name), list(b"<init>"))

    def test_equality_ignores_tag(self) -> None:
        """Tags do not take part in equality or hashing."""
        other = ByteString(b"<init>", Signature)
        self.assertEqual(self.name, other)
        self.assertEqual(hash(self.name), hash(other))
        self.assertNotEqual(self.name, ByteString(b"<clinit>", Name))

    def test_not_equal_to_raw_bytes(self) -> None:
        """A handle is not equal to a plain bytes object."""
        self.assertNotEqual(self.name, b"<init>")

    def test_usable_as_key(self) -> None:
        """Handles can key a dict, as an interning table would."""
        table = {self.name: 1}
        self.assertEqual(table[ByteString(b"<init>")], 1)

    def test_ordering(self) -> None:
        """Handles sort by their bytes."""
        handles = [ByteString(b"b"), ByteString(b"a"), ByteString(b"ab")]
        self.assertEqual([bytes(h) for h in sorted(handles)], [b"a", b"ab", b"b"])

    def test_rich_comparisons(self) -> None:
        """All comparison operators follow byte order."""
        a = ByteString(b"a", Name)
        b = ByteString(b"b", Type)
        self.assertTrue(a <= b)
        self.assertTrue(b > a)
        self.assertTrue(b >= a)
        self.assertTrue(a <= ByteString(b"a"))
        self.assertFalse(a > b)

    def test_to_str(self) -> None:
        """to_str decodes Modified UTF-8."""
        self.assertEqual(ByteString(b"a\xc0\x80").to_str(), "a\x00")

    def test_to_str_malformed(self) -> None:
        """to_str propagates decoding errors."""
        with self.assertRaises(InvalidLeadingByteError):
            ByteString(b"\xf0\x9f\x98\x80").to_str()

    def test_from_str(self) -> None:
        """from_str encodes and records the tag."""
        handle = ByteString.from_str("(I)V", Type)
        self.assertEqual(bytes(handle), b"(I)V")
        self.assertIs(handle.tag, Type)

    def test_repr(self) -> None:
        """repr names the tag when one is set."""
        self.assertEqual(repr(self.name), "ByteString[Name](b'<init>')")
        self.assertEqual(repr(ByteString(b"x")), "ByteString(b'x')")


class TestEncodeToHandle(unittest.TestCase):
    """Test cases for encode_to_handle."""

    def test_matches_encode(self) -> None:
        """The handle holds exactly the unterminated encoding."""
        text = "caf\xe9\x00\U0001F600"
        handle = encode_to_handle(text)
        self.assertEqual(bytes(handle), encode(text))
        self.assertIsNone(handle.tag)

    def test_tag(self) -> None:
        """The tag is carried on the handle."""
        handle = encode_to_handle("hello", Constant)
        self.assertIs(handle.tag, Constant)

    def test_roundtrip(self) -> None:
        """A handle decodes back to its source text."""
        text = "Ljava/util/List<世>;"
        self.assertEqual(encode_to_handle(text, Signature).to_str(), text)


if __name__ == "__main__":
    unittest.main()
