"""dverse-identity - Python SDK.

Self-certifying decentralized identities for the did:dverse method.

Example:
    >>> from dverse_identity import KeyPair
    >>> key = KeyPair.generate()
    >>> print(key.did)
    did:dverse:z6MktNWXFy7fn9kNfwfvD9e2rDK3RPetS4MRKtZH8AxQzg9y
"""

from dverse_identity.codec import (
    BASE58BTC_PREFIX,
    ED25519_PUB_MULTICODEC,
    decode_multibase,
    decode_text,
    encode_multibase,
    encode_public_key,
)
from dverse_identity.did import DID_METHOD, DID_PREFIX, Did
from dverse_identity.document import DidDocument, VerificationMethod
from dverse_identity.errors import (
    DecodingError,
    ErrorKind,
    IdentityError,
    InvalidDIDFormatError,
    InvalidKeyError,
    InvalidKeyLengthError,
    InvalidSignatureLengthError,
    KeyGenerationError,
    SignatureVerificationError,
    UnsupportedMulticodecError,
    UnsupportedMultibaseError,
)
from dverse_identity.keys import (
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    KeyPair,
    PrivateKey,
    PublicKey,
    Signature,
)
from dverse_identity.signing import sign_bytes, verify_bytes, verify_with_did

__version__ = "0.1.0"

__all__ = [
    # Core
    "Did",
    "KeyPair",
    "PrivateKey",
    "PublicKey",
    "Signature",
    # Constants
    "BASE58BTC_PREFIX",
    "DID_METHOD",
    "DID_PREFIX",
    "ED25519_PUB_MULTICODEC",
    "PRIVATE_KEY_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    # Codec
    "decode_multibase",
    "decode_text",
    "encode_multibase",
    "encode_public_key",
    # Document
    "DidDocument",
    "VerificationMethod",
    # Signing
    "sign_bytes",
    "verify_bytes",
    "verify_with_did",
    # Errors
    "DecodingError",
    "ErrorKind",
    "IdentityError",
    "InvalidDIDFormatError",
    "InvalidKeyError",
    "InvalidKeyLengthError",
    "InvalidSignatureLengthError",
    "KeyGenerationError",
    "SignatureVerificationError",
    "UnsupportedMulticodecError",
    "UnsupportedMultibaseError",
]
