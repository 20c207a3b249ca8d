"""Object size constants for CryptoURI."""

# SHA-256 digest size in bytes
SHA256_DIGEST_SIZE = 32

# Ed25519 (RFC 8032) sizes
ED25519_PUBLIC_KEY_SIZE = 32
ED25519_SECRET_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64

# AEAD key sizes
AES128_KEY_SIZE = 16
AES256_KEY_SIZE = 32
CHACHA20POLY1305_KEY_SIZE = 32

# HKDF-SHA-256 input key material size
HKDFSHA256_KEY_SIZE = 32

# Bech32 checksum length in characters
BECH32_CHECKSUM_LENGTH = 6
