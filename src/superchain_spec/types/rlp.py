"""
Recursive Length Prefix (RLP) Encoding
======================================

RLP is the execution layer's serialization format for nested binary data.
Block headers are RLP lists, and a block's hash is the keccak-256 digest of
its header's RLP encoding.

+-------------+-----------------------------------------------------------+
| Prefix      | Meaning                                                   |
+=============+===========================================================+
| [0x00-0x7f] | Single byte, value is the byte itself                     |
+-------------+-----------------------------------------------------------+
| [0x80-0xb7] | Short string (0-55 bytes), length = prefix - 0x80         |
+-------------+-----------------------------------------------------------+
| [0xb8-0xbf] | Long string (>55 bytes), prefix - 0xb7 = length of length |
+-------------+-----------------------------------------------------------+
| [0xc0-0xf7] | Short list (0-55 bytes payload), length = prefix - 0xc0   |
+-------------+-----------------------------------------------------------+
| [0xf8-0xff] | Long list (>55 bytes payload), prefix - 0xf7 = len of len |
+-------------+-----------------------------------------------------------+

Integers are not an RLP primitive. Callers encode them as minimal
big-endian byte strings (zero is the empty string) before handing them in.

References:
----------
- Ethereum Yellow Paper, Appendix B
- https://ethereum.org/en/developers/docs/data-structures-and-encoding/rlp/
"""

from __future__ import annotations

from typing import TypeAlias

RLPItem: TypeAlias = bytes | list["RLPItem"]
"""Either a byte string or a (possibly nested) list of RLP items."""

SINGLE_BYTE_MAX = 0x7F
"""Largest byte value that encodes as itself."""

SHORT_STRING_PREFIX = 0x80
"""Prefix for short strings. Final prefix = 0x80 + length."""

LONG_STRING_BASE = 0xB7
"""Base for long string prefix. Final prefix = 0xb7 + length_of_length."""

SHORT_LIST_PREFIX = 0xC0
"""Prefix for short lists. Final prefix = 0xc0 + payload length."""

LONG_LIST_BASE = 0xF7
"""Base for long list prefix. Final prefix = 0xf7 + length_of_length."""

SHORT_PAYLOAD_MAX_LEN = 55
"""Longest payload that still fits the short string/list form."""


class RLPDecodingError(Exception):
    """Error during RLP decoding."""


def encode_rlp(item: RLPItem) -> bytes:
    """
    Encode an item using RLP.

    Raises:
        TypeError: If item (or anything nested in it) is not bytes or list.
    """
    if isinstance(item, bytes):
        # Single byte encoding: values 0x00-0x7f encode as themselves.
        if len(item) == 1 and item[0] <= SINGLE_BYTE_MAX:
            return item
        return _with_prefix(item, SHORT_STRING_PREFIX, LONG_STRING_BASE)
    if isinstance(item, list):
        payload = b"".join(encode_rlp(child) for child in item)
        return _with_prefix(payload, SHORT_LIST_PREFIX, LONG_LIST_BASE)
    raise TypeError(f"Cannot RLP encode type: {type(item).__name__}")


def _with_prefix(payload: bytes, short_prefix: int, long_base: int) -> bytes:
    """Prepend the short or long length header to an already-encoded payload."""
    length = len(payload)
    if length <= SHORT_PAYLOAD_MAX_LEN:
        return bytes([short_prefix + length]) + payload
    length_bytes = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([long_base + len(length_bytes)]) + length_bytes + payload


def decode_rlp(data: bytes) -> RLPItem:
    """
    Decode RLP-encoded bytes.

    Only canonical encodings are accepted.

    Raises:
        RLPDecodingError: If data is malformed, non-canonical or has trailing bytes.
    """
    if len(data) == 0:
        raise RLPDecodingError("Empty RLP data")

    item, consumed = _decode_item(data, 0)
    if consumed != len(data):
        raise RLPDecodingError(f"Trailing data: decoded {consumed} of {len(data)} bytes")
    return item


def _decode_item(data: bytes, offset: int) -> tuple[RLPItem, int]:
    """Decode one item at `offset`; return it with the offset just past it."""
    if offset >= len(data):
        raise RLPDecodingError("Unexpected end of data")

    prefix = data[offset]
    if prefix <= SINGLE_BYTE_MAX:
        return data[offset : offset + 1], offset + 1

    is_list = prefix >= SHORT_LIST_PREFIX
    short_prefix, long_base = (
        (SHORT_LIST_PREFIX, LONG_LIST_BASE) if is_list else (SHORT_STRING_PREFIX, LONG_STRING_BASE)
    )

    if prefix <= long_base:
        start = offset + 1
        length = prefix - short_prefix
    else:
        len_of_len = prefix - long_base
        _check_bounds(data, offset + 1 + len_of_len)
        length_bytes = data[offset + 1 : offset + 1 + len_of_len]
        if length_bytes[0] == 0:
            raise RLPDecodingError("Non-canonical: leading zeros in length encoding")
        length = int.from_bytes(length_bytes, "big")
        if length <= SHORT_PAYLOAD_MAX_LEN:
            raise RLPDecodingError("Non-canonical: long form used for a short payload")
        start = offset + 1 + len_of_len

    end = start + length
    _check_bounds(data, end)

    if not is_list:
        payload = data[start:end]
        if length == 1 and payload[0] <= SINGLE_BYTE_MAX:
            raise RLPDecodingError("Non-canonical: single byte wrapped in a string prefix")
        return payload, end

    items: list[RLPItem] = []
    cursor = start
    while cursor < end:
        item, cursor = _decode_item(data, cursor)
        items.append(item)
    if cursor != end:
        raise RLPDecodingError("List payload length mismatch")
    return items, end


def _check_bounds(data: bytes, end: int) -> None:
    """Verify end offset is within data bounds."""
    if end > len(data):
        raise RLPDecodingError(f"Data too short: need {end}, have {len(data)}")
