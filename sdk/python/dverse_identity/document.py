"""Static resolution of did:dverse identifiers.

A did:dverse DID carries its own public key, so its DID Document is derived
from the identifier alone: one Ed25519 verification method, referenced for
authentication and assertion, with the fragment set to the DID's key id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dverse_identity.codec import encode_multibase
from dverse_identity.did import Did
from dverse_identity.keys import PublicKey

DID_CONTEXT = (
    "https://www.w3.org/ns/did/v1",
    "https://w3id.org/security/suites/ed25519-2020/v1",
)
VERIFICATION_KEY_TYPE = "Ed25519VerificationKey2020"


@dataclass(frozen=True, slots=True)
class VerificationMethod:
    """An Ed25519 public key listed in a DID Document."""

    id: str
    controller: Did
    public_key: PublicKey
    type: str = VERIFICATION_KEY_TYPE

    @property
    def public_key_multibase(self) -> str:
        return encode_multibase(bytes(self.public_key))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "controller": str(self.controller),
            "publicKeyMultibase": self.public_key_multibase,
        }


@dataclass(frozen=True, slots=True)
class DidDocument:
    """The resolved document of a did:dverse identifier."""

    id: Did
    verification_methods: tuple[VerificationMethod, ...]
    authentication: tuple[str, ...]
    assertion_method: tuple[str, ...]

    @classmethod
    def resolve(cls, did: Did | str) -> DidDocument:
        """Resolve a DID to its document.

        Raises:
            IdentityError: If the DID does not decode to a public key.
        """
        if not isinstance(did, Did):
            did = Did.from_string(did)

        public_key = did.to_public_key()
        # Re-encode so the document id is the canonical form of the key
        canonical = Did.from_public_key(public_key)
        method = VerificationMethod(
            id=f"{canonical}#{canonical.key_id}",
            controller=canonical,
            public_key=public_key,
        )
        return cls(
            id=canonical,
            verification_methods=(method,),
            authentication=(method.id,),
            assertion_method=(method.id,),
        )

    @property
    def public_key(self) -> PublicKey:
        """The key of the document's single verification method."""
        return self.verification_methods[0].public_key

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "@context": list(DID_CONTEXT),
            "id": str(self.id),
            "verificationMethod": [vm.to_dict() for vm in self.verification_methods],
            "authentication": list(self.authentication),
            "assertionMethod": list(self.assertion_method),
        }
