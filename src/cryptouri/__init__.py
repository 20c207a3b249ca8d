"""CryptoURI.

Self-describing, Bech32-checksummed text encoding for cryptographic objects:
digests, public keys, secret keys and signatures. Two encodings are
supported: URI generic syntax (``crypto:pub:key:ed25519:...#comment``) and
a URI-embeddable "dasherized" form (``crypto-pub-key-ed25519-...``).

Example:
    ```python
    from cryptouri import CryptoUri, Ed25519PublicKey

    key = Ed25519PublicKey(public_key_bytes)
    encoded = key.to_uri_string()

    uri = CryptoUri.parse_uri(encoded + "#my signing key")
    assert uri.public_key == key
    assert uri.fragment == "my signing key"

    with CryptoUri.parse_uri(secret_key_string) as secret:
        aead = secret.secret_key.aes256gcm_key().to_aead()
    # secret key bytes are zeroed here
    ```
"""

from .algorithm import Algorithm
from .digest import Digest, Sha256Digest
from .encoding import DASHERIZED_ENCODING, URI_ENCODING, Encodable, EncodingProfile, ObjectKind
from .errors import (
    AlgorithmInvalidError,
    ChecksumInvalidError,
    CryptoUriError,
    LengthInvalidError,
    ParseError,
    SchemeInvalidError,
)
from .public_key import Ed25519PublicKey, PublicKey
from .secret_key import (
    Aes128GcmKey,
    Aes256GcmKey,
    ChaCha20Poly1305Key,
    Ed25519SecretKey,
    HkdfSha256Key,
    SecretKey,
)
from .signature import Ed25519Signature, Signature
from .uri import CryptoUri, parse_dasherized, parse_uri

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "CryptoUri",
    "parse_uri",
    "parse_dasherized",
    # Encoding
    "Algorithm",
    "Encodable",
    "EncodingProfile",
    "ObjectKind",
    "URI_ENCODING",
    "DASHERIZED_ENCODING",
    # Digests
    "Digest",
    "Sha256Digest",
    # Public keys
    "PublicKey",
    "Ed25519PublicKey",
    # Secret keys
    "SecretKey",
    "Aes128GcmKey",
    "Aes256GcmKey",
    "ChaCha20Poly1305Key",
    "Ed25519SecretKey",
    "HkdfSha256Key",
    # Signatures
    "Signature",
    "Ed25519Signature",
    # Errors
    "CryptoUriError",
    "SchemeInvalidError",
    "AlgorithmInvalidError",
    "LengthInvalidError",
    "ParseError",
    "ChecksumInvalidError",
    # Version
    "__version__",
]
