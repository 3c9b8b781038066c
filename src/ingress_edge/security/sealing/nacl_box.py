from __future__ import annotations

import base64
import binascii
from typing import Protocol

from nacl.exceptions import CryptoError
from nacl.public import Box, PrivateKey, PublicKey
from nacl.utils import random as random_bytes

from ingress_edge.kernel.errors import InvalidPublicKeyError
from ingress_edge.kernel.ingress import PAYLOAD_PREFIX

__all__ = [
    "NaclBoxSealer",
    "PayloadSealer",
    "decode_key",
    "encode_key",
]


class PayloadSealer(Protocol):
    """Encrypt a plaintext event for a project's public key."""

    def seal(self, plaintext: str, public_key: str) -> str: ...


def encode_key(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def decode_key(encoded: str) -> bytes:
    padded = encoded + "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode(padded)


class NaclBoxSealer:
    """Curve25519/XSalsa20/Poly1305 box with a fresh ephemeral sender key.

    Output: ``v1.naclbox.<nonce>.<ephemeral public key>.<ciphertext>``, each
    part base64url without padding. The project owner opens it with the
    secret half of the project key pair.
    """

    def seal(self, plaintext: str, public_key: str) -> str:
        try:
            recipient = PublicKey(decode_key(public_key))
        except (binascii.Error, ValueError, CryptoError) as exc:
            raise InvalidPublicKeyError("Project public key is not a 32-byte base64url key", cause=exc) from exc

        ephemeral = PrivateKey.generate()
        nonce = random_bytes(Box.NONCE_SIZE)
        sealed = Box(ephemeral, recipient).encrypt(plaintext.encode(), nonce)
        return PAYLOAD_PREFIX + ".".join(
            encode_key(part) for part in (nonce, bytes(ephemeral.public_key), sealed.ciphertext)
        )
