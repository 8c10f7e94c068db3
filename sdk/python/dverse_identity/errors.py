"""Error types for dverse-identity.

Every failure is a distinct subclass of IdentityError carrying a plain
description and an ErrorKind, so callers can branch on either.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of identity failures."""

    KEY_GENERATION = "key_generation"
    INVALID_KEY = "invalid_key"
    INVALID_SIGNATURE_LENGTH = "invalid_signature_length"
    SIGNATURE_VERIFICATION = "signature_verification"
    INVALID_DID_FORMAT = "invalid_did_format"
    DECODING = "decoding"
    UNSUPPORTED_MULTIBASE = "unsupported_multibase"
    UNSUPPORTED_MULTICODEC = "unsupported_multicodec"
    INVALID_KEY_LENGTH = "invalid_key_length"


class IdentityError(Exception):
    """Base exception for dverse-identity operations."""

    kind: ErrorKind
    label = "Identity error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.label}: {message}")


class KeyGenerationError(IdentityError):
    """The signature primitive or its random source is unavailable."""

    kind = ErrorKind.KEY_GENERATION
    label = "Key generation error"


class InvalidKeyError(IdentityError):
    """Held key bytes have the wrong length."""

    kind = ErrorKind.INVALID_KEY
    label = "Invalid key"


class InvalidSignatureLengthError(IdentityError):
    """Supplied signature bytes have the wrong length."""

    kind = ErrorKind.INVALID_SIGNATURE_LENGTH
    label = "Invalid signature length"


class SignatureVerificationError(IdentityError):
    """Signature verification failed."""

    kind = ErrorKind.SIGNATURE_VERIFICATION
    label = "Signature verification failed"

    def __init__(self, message: str = "signature does not match message and key") -> None:
        super().__init__(message)


class InvalidDIDFormatError(IdentityError):
    """DID does not start with the method prefix."""

    kind = ErrorKind.INVALID_DID_FORMAT
    label = "Invalid DID format"


class DecodingError(IdentityError):
    """Multibase text is malformed for its alphabet."""

    kind = ErrorKind.DECODING
    label = "Decoding error"


class UnsupportedMultibaseError(IdentityError):
    """Multibase indicator names an alphabet other than base58btc."""

    kind = ErrorKind.UNSUPPORTED_MULTIBASE
    label = "Unsupported multibase"


class UnsupportedMulticodecError(IdentityError):
    """Decoded payload does not start with the expected multicodec tag."""

    kind = ErrorKind.UNSUPPORTED_MULTICODEC
    label = "Unsupported multicodec"


class InvalidKeyLengthError(IdentityError):
    """Decoded public key is not exactly 32 bytes."""

    kind = ErrorKind.INVALID_KEY_LENGTH
    label = "Invalid key length"
