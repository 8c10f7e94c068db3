"""Tests for key management."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from nacl.signing import SigningKey

from dverse_identity import (
    ErrorKind,
    InvalidKeyError,
    InvalidSignatureLengthError,
    KeyGenerationError,
    KeyPair,
    PrivateKey,
    PublicKey,
    Signature,
    SignatureVerificationError,
)

MESSAGE = b"Hello, D-Verse!"


class TestKeyPair:
    def test_generate(self) -> None:
        """Generate creates 32-byte keys and a DID."""
        key = KeyPair.generate()

        assert len(key.private_key) == 32
        assert len(key.public_key) == 32
        assert str(key.did).startswith("did:dverse:z6Mk")

    def test_generate_unique(self) -> None:
        """Each generated key is unique."""
        key_one = KeyPair.generate()
        key_two = KeyPair.generate()

        assert key_one.did != key_two.did
        assert key_one.to_bytes() != key_two.to_bytes()

    def test_generate_concurrently(self) -> None:
        """Concurrent generation yields independent key pairs."""
        with ThreadPoolExecutor(max_workers=4) as pool:
            keys = list(pool.map(lambda _: KeyPair.generate(), range(16)))

        assert len({key.public_key for key in keys}) == 16

    def test_generate_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Primitive failures surface as KeyGenerationError."""
        from nacl.exceptions import CryptoError

        def broken() -> SigningKey:
            raise CryptoError("random source unavailable")

        monkeypatch.setattr(SigningKey, "generate", staticmethod(broken))

        with pytest.raises(KeyGenerationError, match="random source unavailable"):
            KeyPair.generate()

    def test_public_key_derives_from_private(self) -> None:
        """Generated public key matches the one derived from the seed."""
        key = KeyPair.generate()
        derived = bytes(SigningKey(key.to_bytes()).verify_key)

        assert bytes(key.public_key) == derived

    def test_from_seed_deterministic(self) -> None:
        """Same seed produces same key."""
        seed = b"0" * 32

        key_one = KeyPair.from_seed(seed)
        key_two = KeyPair.from_seed(seed)

        assert key_one == key_two
        assert key_one.did == key_two.did

    def test_from_seed_invalid_length(self) -> None:
        """Invalid seed length raises InvalidKeyError."""
        with pytest.raises(InvalidKeyError, match="32 bytes"):
            KeyPair.from_seed(b"too short")

    def test_roundtrip_bytes(self) -> None:
        """Key can be exported and reimported."""
        original = KeyPair.generate()
        restored = KeyPair.from_seed(original.to_bytes())

        assert original.did == restored.did

    def test_repr_no_secrets(self) -> None:
        """Repr shows DID but not secrets."""
        key = KeyPair.generate()
        repr_str = repr(key)

        assert "did:dverse:" in repr_str
        assert key.to_bytes().hex() not in repr_str
        assert key.to_bytes().hex() not in repr(key.private_key)


class TestSignVerify:
    def test_sign_length(self) -> None:
        """Signing produces a 64-byte signature."""
        signature = KeyPair.generate().sign(MESSAGE)

        assert isinstance(signature, Signature)
        assert len(signature) == 64

    def test_sign_deterministic(self) -> None:
        """Ed25519 signatures are deterministic."""
        key = KeyPair.from_seed(b"s" * 32)

        assert key.sign(MESSAGE) == key.sign(MESSAGE)

    def test_sign_verify(self) -> None:
        """Signature verifies with the pair's own keys."""
        key = KeyPair.generate()
        signature = key.sign(MESSAGE)

        key.verify(MESSAGE, signature)
        key.verify(MESSAGE, bytes(signature))

    def test_verify_empty_message(self) -> None:
        key = KeyPair.generate()

        key.verify(b"", key.sign(b""))

    def test_verify_wrong_message(self) -> None:
        """Verifying against another message fails."""
        key = KeyPair.generate()
        signature = key.sign(MESSAGE)

        with pytest.raises(SignatureVerificationError):
            key.verify(b"Goodbye, D-Verse!", signature)

    def test_verify_wrong_key(self) -> None:
        """Verifying with another key fails."""
        signature = KeyPair.generate().sign(MESSAGE)

        with pytest.raises(SignatureVerificationError):
            KeyPair.generate().verify(MESSAGE, signature)

    def test_verify_every_bit_flip(self) -> None:
        """Flipping any single signature bit fails verification."""
        key = KeyPair.from_seed(b"t" * 32)
        signature = bytes(key.sign(MESSAGE))

        for index in range(len(signature)):
            for bit in range(8):
                tampered = bytearray(signature)
                tampered[index] ^= 1 << bit
                with pytest.raises(SignatureVerificationError) as exc_info:
                    key.verify(MESSAGE, bytes(tampered))
                assert exc_info.value.kind is ErrorKind.SIGNATURE_VERIFICATION

    @pytest.mark.parametrize("length", [0, 32, 63, 65, 128])
    def test_verify_signature_length(self, length: int) -> None:
        """Signatures of the wrong length are rejected before verification."""
        key = KeyPair.generate()

        with pytest.raises(InvalidSignatureLengthError, match=f"got {length}"):
            key.verify(MESSAGE, b"\x01" * length)

    def test_sign_malformed_private_key(self) -> None:
        """Hand-constructed pair with a short private key cannot sign."""
        key = KeyPair(PrivateKey(b"\x01" * 16), KeyPair.generate().public_key)

        with pytest.raises(InvalidKeyError, match="private key"):
            key.sign(MESSAGE)

    def test_verify_malformed_public_key(self) -> None:
        """Hand-constructed pair with a short public key cannot verify."""
        key = KeyPair(PrivateKey(bytes(32)), PublicKey(b"\x01" * 31))

        with pytest.raises(InvalidKeyError, match="public key"):
            key.verify(MESSAGE, b"\x00" * 64)

    def test_public_key_checked_before_signature(self) -> None:
        """Key length is reported before signature length."""
        key = KeyPair(b"", b"")

        with pytest.raises(InvalidKeyError):
            key.verify(MESSAGE, b"")

    def test_verification_only_pair(self) -> None:
        """A pair built from a public key alone verifies signatures."""
        signer = KeyPair.generate()
        signature = signer.sign(MESSAGE)

        verifier = KeyPair.for_verification(signer.public_key)

        verifier.verify(MESSAGE, signature)
        assert verifier.private_key == PrivateKey(bytes(32))

    def test_roundtrip_did_sign_verify(self) -> None:
        """Public key recovered from a DID verifies the holder's signature."""
        signer = KeyPair.generate()
        signature = signer.sign(MESSAGE)

        recovered = signer.did.to_public_key()

        KeyPair(PrivateKey(bytes(32)), recovered).verify(MESSAGE, signature)


class TestValueTypes:
    def test_public_key_equality(self) -> None:
        """Public keys compare byte-wise."""
        assert PublicKey(b"\x01" * 32) == PublicKey(b"\x01" * 32)
        assert PublicKey(b"\x01" * 32) != PublicKey(b"\x02" * 32)

    def test_bytes_access(self) -> None:
        raw = b"\x05" * 32

        assert bytes(PublicKey(raw)) == raw
        assert bytes(PrivateKey(raw)) == raw
        assert bytes(Signature(raw * 2)) == raw * 2

    @pytest.mark.parametrize("value", [32, None, "a" * 32, [0] * 32])
    def test_key_pair_rejects_non_bytes(self, value: object) -> None:
        """Only bytes-like values or key wrappers build a pair."""
        with pytest.raises(TypeError, match="must be bytes-like"):
            KeyPair(value, bytes(32))  # type: ignore[arg-type]

        with pytest.raises(TypeError, match="must be bytes-like"):
            KeyPair(bytes(32), value)  # type: ignore[arg-type]

    def test_key_pair_accepts_bytearray(self) -> None:
        key = KeyPair(bytearray(32), bytearray(b"\x01" * 32))

        assert key.public_key == PublicKey(b"\x01" * 32)

    def test_verify_rejects_non_bytes_signature(self) -> None:
        """An int is never taken as a zero-filled signature."""
        key = KeyPair.generate()

        with pytest.raises(TypeError, match="signature"):
            key.verify(MESSAGE, 64)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Value types are immutable."""
        public_key = PublicKey(b"\x01" * 32)

        with pytest.raises(AttributeError):
            public_key.data = b"\x02" * 32  # type: ignore
