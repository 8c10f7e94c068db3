"""Key management for dverse identities.

Security:
- Keys use Ed25519 via PyNaCl (libsodium bindings)
- Key generation draws from libsodium's CSPRNG
- Debug representations only show public info (DID), not secrets
- Key and signature lengths are checked before anything reaches libsodium
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey, VerifyKey

from dverse_identity.errors import (
    InvalidKeyError,
    InvalidSignatureLengthError,
    KeyGenerationError,
    SignatureVerificationError,
)

if TYPE_CHECKING:
    from dverse_identity.did import Did

logger = logging.getLogger(__name__)

PRIVATE_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


def raw_bytes(value: object, name: str) -> bytes:
    """Return the raw bytes of a key or signature value.

    Raises:
        TypeError: If value is neither a key/signature wrapper nor bytes-like.
    """
    if isinstance(value, (PrivateKey, PublicKey, Signature)):
        return value.data
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class PrivateKey:
    """Raw Ed25519 private key (the 32-byte seed)."""

    data: bytes

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"PrivateKey(<{len(self.data)} bytes>)"


@dataclass(frozen=True, slots=True)
class PublicKey:
    """Raw 32-byte Ed25519 public key."""

    data: bytes

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"PublicKey({self.data.hex()})"


@dataclass(frozen=True, slots=True)
class Signature:
    """Raw 64-byte Ed25519 signature."""

    data: bytes

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)


class KeyPair:
    """An Ed25519 private/public key pair.

    Only generate() and from_seed() guarantee the public key derives from
    the private key. Constructing a pair directly performs no validation;
    sign() and verify() check lengths before use.
    """

    __slots__ = ("_private_key", "_public_key")

    def __init__(self, private_key: PrivateKey | bytes, public_key: PublicKey | bytes) -> None:
        if not isinstance(private_key, PrivateKey):
            private_key = PrivateKey(raw_bytes(private_key, "private key"))
        if not isinstance(public_key, PublicKey):
            public_key = PublicKey(raw_bytes(public_key, "public key"))
        self._private_key = private_key
        self._public_key = public_key

    @classmethod
    def _from_signing_key(cls, signing_key: SigningKey) -> Self:
        return cls(
            PrivateKey(bytes(signing_key)),
            PublicKey(bytes(signing_key.verify_key)),
        )

    @classmethod
    def generate(cls) -> Self:
        """Generate a new random key pair.

        Raises:
            KeyGenerationError: If libsodium cannot produce a key.
        """
        try:
            signing_key = SigningKey.generate()
        except CryptoError as exc:
            raise KeyGenerationError(str(exc)) from exc
        return cls._from_signing_key(signing_key)

    @classmethod
    def from_seed(cls, seed: bytes) -> Self:
        """Create from a 32-byte seed.

        Args:
            seed: Exactly 32 bytes of seed material.

        Raises:
            InvalidKeyError: If seed is not 32 bytes.
        """
        seed = raw_bytes(seed, "seed")
        if len(seed) != PRIVATE_KEY_LENGTH:
            raise InvalidKeyError(f"seed must be {PRIVATE_KEY_LENGTH} bytes, got {len(seed)}")
        return cls._from_signing_key(SigningKey(seed))

    @classmethod
    def for_verification(cls, public_key: PublicKey | bytes) -> Self:
        """Create a verification-only pair; the private half is zeroed."""
        return cls(PrivateKey(bytes(PRIVATE_KEY_LENGTH)), public_key)

    @property
    def private_key(self) -> PrivateKey:
        return self._private_key

    @property
    def public_key(self) -> PublicKey:
        return self._public_key

    @property
    def did(self) -> Did:
        """Get the DID for this key pair's public key."""
        from dverse_identity.did import Did

        return Did.from_public_key(self._public_key)

    def sign(self, message: bytes) -> Signature:
        """Sign a message. Returns a 64-byte signature.

        Raises:
            InvalidKeyError: If the held private key is not 32 bytes.
        """
        private_bytes = bytes(self._private_key)
        if len(private_bytes) != PRIVATE_KEY_LENGTH:
            raise InvalidKeyError(
                f"private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(private_bytes)}"
            )
        signed = SigningKey(private_bytes).sign(raw_bytes(message, "message"))
        return Signature(bytes(signed.signature))

    def verify(self, message: bytes, signature: Signature | bytes) -> None:
        """Verify a signature over a message with the held public key.

        Raises:
            InvalidKeyError: If the held public key is not 32 bytes.
            InvalidSignatureLengthError: If the signature is not 64 bytes.
            SignatureVerificationError: If the signature does not verify.
        """
        public_bytes = bytes(self._public_key)
        if len(public_bytes) != PUBLIC_KEY_LENGTH:
            raise InvalidKeyError(
                f"public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_bytes)}"
            )

        signature_bytes = raw_bytes(signature, "signature")
        if len(signature_bytes) != SIGNATURE_LENGTH:
            raise InvalidSignatureLengthError(
                f"signature must be {SIGNATURE_LENGTH} bytes, got {len(signature_bytes)}"
            )

        try:
            VerifyKey(public_bytes).verify(raw_bytes(message, "message"), signature_bytes)
        except CryptoError as exc:
            logger.debug("Signature rejected for public key %s", public_bytes.hex())
            raise SignatureVerificationError() from exc

    def to_bytes(self) -> bytes:
        """Export the private key bytes.

        Warning: Handle with care.
        """
        return bytes(self._private_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return (
            self._private_key == other._private_key
            and self._public_key == other._public_key
        )

    def __hash__(self) -> int:
        return hash((self._private_key, self._public_key))

    def __repr__(self) -> str:
        return f"KeyPair(did={self.did})"
