"""Message authentication against DIDs.

The reverse data flow: a DID received from a peer is decoded to its public
key, and that key checks the peer's signature. Only the public half of the
verifying KeyPair is meaningful here.
"""

import logging

from dverse_identity.did import Did
from dverse_identity.errors import IdentityError
from dverse_identity.keys import KeyPair, PublicKey, Signature

logger = logging.getLogger(__name__)


def sign_bytes(message: bytes, key: KeyPair) -> Signature:
    """Sign raw bytes. Returns 64-byte signature."""
    return key.sign(message)


def verify_with_did(message: bytes, signature: Signature | bytes, did: Did | str) -> None:
    """Verify a signature against the public key embedded in a DID.

    Raises:
        IdentityError: Any DID decoding or verification error.
    """
    if not isinstance(did, Did):
        did = Did.from_string(did)
    public_key = did.to_public_key()
    KeyPair.for_verification(public_key).verify(message, signature)


def verify_bytes(
    message: bytes, signature: Signature | bytes, public_key: PublicKey | bytes
) -> bool:
    """Check a signature on raw bytes. Returns False on any failure, never raises."""
    try:
        KeyPair.for_verification(public_key).verify(message, signature)
    except (IdentityError, TypeError) as exc:
        logger.debug("Signature check failed: %s", exc)
        return False
    return True
