"""Decentralized Identifier (DID) handling.

Format: did:dverse:z<base58btc(multicodec_prefix + ed25519_public_key)>

A Did wraps its string without validation, so it can be held, compared,
displayed and transmitted without ever being decoded. Validation happens
in to_public_key().
"""

import logging
from dataclasses import dataclass

from dverse_identity.codec import ED25519_PUB_MULTICODEC, decode_text, encode_public_key
from dverse_identity.errors import IdentityError, InvalidDIDFormatError, InvalidKeyLengthError
from dverse_identity.keys import PUBLIC_KEY_LENGTH, PublicKey, raw_bytes

logger = logging.getLogger(__name__)

DID_METHOD = "dverse"
DID_PREFIX = f"did:{DID_METHOD}:"


@dataclass(frozen=True, slots=True)
class Did:
    """A did:dverse identifier.

    Attributes:
        value: The DID string, unvalidated.
    """

    value: str

    @classmethod
    def from_string(cls, value: str) -> "Did":
        """Wrap a string as a Did. Performs no validation."""
        return cls(value=value)

    @classmethod
    def from_public_key(cls, public_key: PublicKey | bytes) -> "Did":
        """Create a DID from an Ed25519 public key."""
        encoded = encode_public_key(ED25519_PUB_MULTICODEC, raw_bytes(public_key, "public key"))
        return cls(value=f"{DID_PREFIX}{encoded}")

    @classmethod
    def parse(cls, value: str) -> "Did":
        """Parse a did:dverse string, validating it eagerly.

        Raises:
            IdentityError: The same errors as to_public_key().
        """
        did = cls(value=value)
        did.to_public_key()
        return did

    def to_public_key(self) -> PublicKey:
        """Decode the public key embedded in this DID.

        Raises:
            InvalidDIDFormatError: If the method prefix is missing.
            DecodingError: If the multibase text is malformed.
            UnsupportedMultibaseError: If the encoding is not base58btc.
            UnsupportedMulticodecError: If the key is not tagged Ed25519.
            InvalidKeyLengthError: If the key is not exactly 32 bytes.
        """
        if not self.value.startswith(DID_PREFIX):
            logger.debug("Rejected DID without %r prefix: %r", DID_PREFIX, self.value[:32])
            raise InvalidDIDFormatError(f"must start with {DID_PREFIX!r}")

        payload = decode_text(self.key_id, ED25519_PUB_MULTICODEC)
        key_bytes = payload[len(ED25519_PUB_MULTICODEC) :]

        if len(key_bytes) != PUBLIC_KEY_LENGTH:
            raise InvalidKeyLengthError(
                f"public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(key_bytes)}"
            )

        return PublicKey(key_bytes)

    def is_valid(self) -> bool:
        """Check whether this DID decodes to a public key, without raising."""
        try:
            self.to_public_key()
        except IdentityError:
            return False
        return True

    @property
    def key_id(self) -> str:
        """Get the multibase-encoded key portion (without the method prefix)."""
        if self.value.startswith(DID_PREFIX):
            return self.value[len(DID_PREFIX) :]
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Did({self.value})"
