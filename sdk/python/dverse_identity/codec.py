"""Multicodec tagging and multibase text encoding for public keys.

Encoded form: z<base58btc(multicodec_tag + public_key)>

- Multicodec tag: 0xed01 (Ed25519 public key, varint-encoded 0xed)
- Multibase indicator: z (base58btc, Bitcoin alphabet)

Only base58btc is accepted on decode.
"""

import logging

import base58

from dverse_identity.errors import (
    DecodingError,
    UnsupportedMulticodecError,
    UnsupportedMultibaseError,
)

logger = logging.getLogger(__name__)

# Ed25519 public key multicodec tag (varint-encoded 0xed)
ED25519_PUB_MULTICODEC = bytes([0xED, 0x01])

# Multibase indicator for base58btc
BASE58BTC_PREFIX = "z"

_BASE58BTC_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))

# Registered multibase indicators, used to name rejected encodings
MULTIBASE_PREFIXES = {
    "\x00": "identity",
    "0": "base2",
    "7": "base8",
    "9": "base10",
    "f": "base16",
    "F": "base16upper",
    "v": "base32hex",
    "V": "base32hexupper",
    "t": "base32hexpad",
    "T": "base32hexpadupper",
    "b": "base32",
    "B": "base32upper",
    "c": "base32pad",
    "C": "base32padupper",
    "h": "base32z",
    "k": "base36",
    "K": "base36upper",
    "z": "base58btc",
    "Z": "base58flickr",
    "m": "base64",
    "M": "base64pad",
    "u": "base64url",
    "U": "base64urlpad",
    "p": "proquint",
}


def encode_multibase(data: bytes) -> str:
    """Encode bytes as base58btc multibase text."""
    encoded = base58.b58encode(bytes(data)).decode("ascii")
    return f"{BASE58BTC_PREFIX}{encoded}"


def decode_multibase(text: str) -> bytes:
    """Decode base58btc multibase text.

    Raises:
        DecodingError: If the text is empty or not valid base58btc.
        UnsupportedMultibaseError: If the indicator is not base58btc.
    """
    if not text:
        raise DecodingError("empty multibase string")

    indicator = text[0]
    if indicator != BASE58BTC_PREFIX:
        name = MULTIBASE_PREFIXES.get(indicator)
        if name is None:
            raise UnsupportedMultibaseError(f"unknown multibase prefix {indicator!r}")
        raise UnsupportedMultibaseError(f"{name} ({indicator!r}), expected base58btc")

    # b58decode strips trailing whitespace, so check the alphabet first
    encoded = text[1:]
    for position, char in enumerate(encoded, start=1):
        if char not in _BASE58BTC_CHARS:
            raise DecodingError(
                f"invalid base58btc encoding: character {char!r} at position {position}"
            )

    try:
        return base58.b58decode(encoded)
    except ValueError as exc:
        raise DecodingError(f"invalid base58btc encoding: {exc}") from exc


def encode_public_key(tag: bytes, key: bytes) -> str:
    """Tag a public key and encode it as multibase text."""
    return encode_multibase(bytes(tag) + bytes(key))


def decode_text(text: str, expected_tag: bytes = ED25519_PUB_MULTICODEC) -> bytes:
    """Decode multibase text and check its multicodec tag.

    Args:
        text: Multibase text, e.g. the part of a DID after the method prefix.
        expected_tag: The multicodec tag the payload must start with.

    Returns:
        The decoded payload, tag included.

    Raises:
        DecodingError: If the text is empty or not valid base58btc.
        UnsupportedMultibaseError: If the indicator is not base58btc.
        UnsupportedMulticodecError: If the payload does not start with the tag.
    """
    payload = decode_multibase(text)

    tag = payload[: len(expected_tag)]
    if tag != expected_tag:
        logger.debug("Rejected multicodec tag 0x%s", tag.hex())
        raise UnsupportedMulticodecError(
            f"expected 0x{expected_tag.hex()}, got 0x{tag.hex() or '(empty)'}"
        )

    return payload
