"""
Stellar Keys Library Usage Examples

This file demonstrates key features of the Stellar keys library.
"""

import logging

from stellar_keys import Keypair, KeypairError, Network, StrKey

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def create_keypair_example():
    """Example 1: Random keypair and StrKey export."""
    print("\n=== Random Keypair Example ===")

    with Keypair.random() as keypair:
        print(f"Public key: {keypair.encoded_public_key()}")
        print(f"Can sign: {keypair.can_sign()}")
        print(f"Secret seed starts with: {keypair.encoded_secret_seed()[:1]}")

    print(f"Wiped after use: {keypair.wiped}")


def import_keypair_example():
    """Example 2: Import from secret seed and public key."""
    print("\n=== Import Example ===")

    seed = "SAZ443I6BNR2MD3G27C4EZIEEFMKOPT4SR6IHZDLXPODEHR2GRQVIC7R"
    keypair = Keypair.from_secret_seed(seed)
    print(f"Public key: {keypair.encoded_public_key()}")

    # Verify-only keypair
    public = Keypair.from_public_key(keypair.encoded_public_key())
    print(f"Public-only can sign: {public.can_sign()}")
    print(f"Raw public key: {StrKey.decode_ed25519_public_key(public.encoded_public_key()).hex()}")


def nonce_derivation_example():
    """Example 3: Related keypairs from one seed."""
    print("\n=== Nonce Derivation Example ===")

    seed = "SAZ443I6BNR2MD3G27C4EZIEEFMKOPT4SR6IHZDLXPODEHR2GRQVIC7R"

    # Byte-wise additive mixing
    for nonce in (b"\x01", b"\x02"):
        keypair = Keypair.from_secret_seed_with_nonce(seed, nonce)
        print(f"Additive nonce {nonce.hex()}: {keypair.encoded_public_key()}")

    # SHA-512 chained hashing
    for nonce in ("0", "1"):
        keypair = Keypair.from_master_secret(seed, nonce)
        print(f"Hashed nonce {nonce!r}: {keypair.encoded_public_key()}")


def signing_example():
    """Example 4: Sign and verify messages."""
    print("\n=== Signing Example ===")

    keypair = Keypair.from_secret_seed(
        "SAZ443I6BNR2MD3G27C4EZIEEFMKOPT4SR6IHZDLXPODEHR2GRQVIC7R"
    )
    message = b"Hello World"

    signature = keypair.sign(message)
    print(f"Signature: {signature.hex()}")
    print(f"Valid: {keypair.verify(message, signature)}")
    print(f"Valid for other message: {keypair.verify(b'Hello', signature)}")

    decorated = keypair.sign_decorated(message)
    print(f"Signature hint: {decorated.hint.hex()}")
    print(f"Testnet network id: {Network.TESTNET.network_id().hex()}")


def error_handling_example():
    """Example 5: Malformed input yields typed errors."""
    print("\n=== Error Handling Example ===")

    for text in (
        "GACAMF2WHKKQTYVHVA3CRMVUHN6GUBLTB7PBJQF73N7ATCIYAIFUCT6B",
        "GACAMF2WHKKQTYVHVA3CRMVUHN6GUBLTB7PBJQF73N7ATCIYAIFUCT6A",
        "not-a-key",
    ):
        try:
            Keypair.from_secret_seed(text)
        except KeypairError as e:
            print(f"{type(e).__name__}: {e}")


def main():
    """Run all examples."""
    create_keypair_example()
    import_keypair_example()
    nonce_derivation_example()
    signing_example()
    error_handling_example()


if __name__ == "__main__":
    main()
