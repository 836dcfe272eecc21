# ecsigconv

Convert ECDSA signatures on 256-bit curves such as P-256 between two encodings:

- **DER**: an ASN.1 `SEQUENCE` holding two `INTEGER`s, R and S. TLS and X.509 libraries produce and expect this form.
- **Raw**: 64 bytes, the 32-byte big-endian R followed by the 32-byte big-endian S. PKCS #11 tokens and many hardware signers produce and expect this form.

The package uses only the standard library. Everything lives in the module `ecsigconv.signature`.

## Installation

```
pip install ecsigconv
```

## Usage

```python
from ecsigconv.signature import (
    SignatureFormatError,
    der_to_raw_signature,
    raw_to_der_signature,
)

raw = bytes(range(64))               # R || S, 32 bytes each
der = raw_to_der_signature(raw)      # DER-encoded SEQUENCE { INTEGER r, INTEGER s }
assert der_to_raw_signature(der) == raw
```

Both functions accept `bytes`, `bytearray` or `memoryview` and return `bytes`.

### `raw_to_der_signature(raw)`

Takes exactly 64 bytes; any other length raises `SignatureFormatError`. Each component is written as a 32-byte `INTEGER`. A component whose top bit is set gets a leading `0x00` byte, so the integer is not read as negative. The output is therefore 70, 71 or 72 bytes long. Leading zero bytes of a component are kept as they are, not stripped.

### `der_to_raw_signature(der)`

Reads the length of R from the fourth byte and the length of S from the byte after R's value and the following tag byte. A component of up to 32 bytes is left-padded with zeros to 32 bytes. For a 33-byte component the first byte, the sign pad, is dropped and the remaining 32 bytes are kept. The result is always 64 bytes.

The function does not check the `SEQUENCE` and `INTEGER` tags or the overall length byte; it relies on the length bytes alone. It raises `SignatureFormatError` when a component length is greater than 33, or when the input is too short to hold what its length bytes claim.

`SignatureFormatError` is a subclass of `ValueError`.

## What this package does not do

It only converts between the two encodings. It does not create or verify signatures, does not handle keys, and does not support curves whose components are longer than 32 bytes.

## Running the tests

```
pip install -e .[test]
pytest
```