"""API keys, one-time codes and Ed25519 signatures."""

from __future__ import annotations

import binascii
import hashlib
import hmac
import secrets
from typing import Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from .config import get_config

API_KEY_LENGTH = 16
PRIVATE_KEY_SIZE = 64
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64
SEED_SIZE = 32

_DIGITS = "0123456789"


def generate_api_key() -> str:
    """Return a fresh random API key as hex text."""
    return secrets.token_hex(API_KEY_LENGTH)


def hash_api_key(api_key: str, secret: Optional[str] = None) -> str:
    """Return the hex HMAC-SHA256 of ``api_key``.

    The key defaults to the configured API secret.
    """
    if secret is None:
        secret = get_config().common.api_secret_key
    digest = hmac.new(secret.encode(), api_key.encode(), hashlib.sha256)
    return digest.hexdigest()


def verify_api_key(api_key: str, stored_hash: str, secret: Optional[str] = None) -> bool:
    """Check ``api_key`` against ``stored_hash`` in constant time."""
    return hmac.compare_digest(hash_api_key(api_key, secret).encode(), stored_hash.encode())


def generate_otp(length: int) -> str:
    """Return a random string of ``length`` decimal digits."""
    if length < 0:
        raise ValueError(f"invalid OTP length: {length}")
    return "".join(secrets.choice(_DIGITS) for _ in range(length))


def _decode_hex(text: str, what: str) -> bytes:
    try:
        return binascii.unhexlify(text.strip())
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid {what} hex: {exc}") from None


def _as_bytes(msg: Union[bytes, str]) -> bytes:
    return msg.encode() if isinstance(msg, str) else bytes(msg)


def sign_ed25519(priv_hex: str, msg: Union[bytes, str]) -> str:
    """Sign ``msg`` with a hex 64-byte private key (seed then public key).

    Returns the signature as hex text; raises ValueError for a bad key.
    """
    raw = _decode_hex(priv_hex, "private key")
    if len(raw) != PRIVATE_KEY_SIZE:
        raise ValueError(
            f"invalid private key length: got {len(raw)} bytes, want {PRIVATE_KEY_SIZE}"
        )
    key = Ed25519PrivateKey.from_private_bytes(raw[:SEED_SIZE])
    return key.sign(_as_bytes(msg)).hex()


def verify_ed25519_hex(pub_hex: str, msg: Union[bytes, str], sig_hex: str) -> bool:
    """Verify a hex signature of ``msg`` against a hex public key.

    Raises ValueError when the key or signature is malformed.
    """
    pub = _decode_hex(pub_hex, "public key")
    if len(pub) != PUBLIC_KEY_SIZE:
        raise ValueError(f"bad public key length: got {len(pub)}, want {PUBLIC_KEY_SIZE}")
    sig = _decode_hex(sig_hex, "signature")
    if len(sig) != SIGNATURE_SIZE:
        raise ValueError(f"bad signature length: got {len(sig)}, want {SIGNATURE_SIZE}")
    try:
        key = Ed25519PublicKey.from_public_bytes(pub)
        key.verify(sig, _as_bytes(msg))
    except (InvalidSignature, ValueError):
        return False
    return True


def generate_ed25519_hex() -> tuple[str, str]:
    """Return a new key pair as (private hex, public hex).

    The private key is 64 bytes: the seed followed by the public key.
    """
    key = Ed25519PrivateKey.generate()
    seed = key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )
    pub = key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return (seed + pub).hex(), pub.hex()