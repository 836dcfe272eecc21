"""Conversion of ECDSA signatures between DER encoding and raw R || S form.

The raw form is the fixed 64-byte layout produced by PKCS #11 ``C_Sign`` for
P-256 keys: 32 bytes of R followed by 32 bytes of S, each big-endian and
left-padded with zeros.  The DER form is the ASN.1 structure::

    SEQUENCE { INTEGER r, INTEGER s }
"""

from __future__ import annotations

__all__ = ["SignatureFormatError", "der_to_raw_signature", "raw_to_der_signature"]

_COMPONENT_SIZE = 32
_RAW_SIZE = 2 * _COMPONENT_SIZE
_PADDED_SIZE = _COMPONENT_SIZE + 1

_SEQUENCE_TAG = 0x30
_INTEGER_TAG = 0x02
_MIN_SEQUENCE_LENGTH = 0x44


class SignatureFormatError(ValueError):
    """Raised when a signature cannot be converted."""


def _read_component(data: bytes, length_index: int) -> tuple[bytes, int]:
    """Read one INTEGER whose length byte sits at ``length_index``.

    Returns the component left-padded to 32 bytes and the index of the
    length byte of the following INTEGER.
    """
    try:
        length = data[length_index]
    except IndexError:
        raise SignatureFormatError("signature is truncated") from None

    if length == _PADDED_SIZE:
        # Skip the 0x00 pad that keeps a high-bit value positive.
        start = length_index + 2
        size = _COMPONENT_SIZE
    elif length <= _COMPONENT_SIZE:
        start = length_index + 1
        size = length
    else:
        raise SignatureFormatError(
            f"component length {length} exceeds {_PADDED_SIZE} bytes"
        )

    value = data[start:start + size]
    if len(value) != size:
        raise SignatureFormatError("signature is truncated")

    # The next length byte follows the component and the next INTEGER tag.
    return value.rjust(_COMPONENT_SIZE, b"\x00"), start + size + 1


def der_to_raw_signature(der: bytes | bytearray | memoryview) -> bytes:
    """Convert a DER-encoded ECDSA signature into 64 bytes of R || S."""
    data = bytes(der)
    r, next_length_index = _read_component(data, 3)
    s, _ = _read_component(data, next_length_index)
    return r + s


def _encode_component(value: bytes) -> bytes:
    if value[0] & 0x80:
        return bytes((_INTEGER_TAG, _PADDED_SIZE, 0x00)) + value
    return bytes((_INTEGER_TAG, _COMPONENT_SIZE)) + value


def raw_to_der_signature(raw: bytes | bytearray | memoryview) -> bytes:
    """Convert a 64-byte R || S signature into its DER encoding."""
    data = bytes(raw)
    if len(data) != _RAW_SIZE:
        raise SignatureFormatError(
            f"raw signature must be {_RAW_SIZE} bytes, got {len(data)}"
        )

    body = _encode_component(data[:_COMPONENT_SIZE]) + _encode_component(
        data[_COMPONENT_SIZE:]
    )
    return bytes((_SEQUENCE_TAG, len(body))) + body