import logging

import pytest

from stellar_keys import (
    Keypair,
    SecretKeypair,
    PublicKeypair,
    InvalidEncoding,
    InvalidLength,
    InvalidVersion,
    NoSecretAvailable,
    NonceTooLong,
    SigningUnavailable,
    ValidationError,
)
from stellar_keys.constants import Network
from stellar_keys.utils.encoding import StrKey

SEED = "SAZ443I6BNR2MD3G27C4EZIEEFMKOPT4SR6IHZDLXPODEHR2GRQVIC7R"
ADDRESS = "GACAMF2WHKKQTYVHVA3CRMVUHN6GUBLTB7PBJQF73N7ATCIYAIFUCT6B"
HELLO_SIGNATURE = bytes([
    249, 89, 99, 12, 220, 144, 11, 209, 11, 54, 119, 152, 58, 242, 131, 31, 212, 173, 213,
    95, 209, 35, 15, 223, 110, 215, 31, 220, 59, 125, 147, 141, 99, 116, 156, 12, 50, 28,
    137, 31, 0, 175, 86, 235, 92, 157, 151, 132, 88, 222, 147, 50, 248, 15, 191, 208, 153,
    16, 41, 169, 20, 202, 137, 15,
])


def test_from_secret_seed():
    keypair = Keypair.from_secret_seed(SEED)
    assert isinstance(keypair, SecretKeypair)
    assert keypair.encoded_public_key() == ADDRESS
    assert keypair.encoded_secret_seed() == SEED


def test_from_master_secret():
    keypair = Keypair.from_master_secret(SEED, "FWE4IF24WJ67IOQ8JWOI9EWQ3DAWD0WE")
    assert keypair.encoded_public_key() == "GCPYIII5KJ56KTSLECFAV7OCG2HRERMZJXMONUSHAVBI57EDX74OQRFY"
    assert keypair.encoded_secret_seed() == "SDLZ2JSXKPODJMQMOSQRXPKVJZGGZDLQXL6OGEDLRFJ3JBKHJ46BBTDJ"

    other = Keypair.from_master_secret(SEED, "0")
    assert other.raw_public_key().hex() == (
        "e1915815f706196b9de5e6bfe6014d40d7d18eccd8237540e494cdb2dd389d90"
    )
    assert other != keypair


def test_from_secret_seed_with_nonce():
    keypair = Keypair.from_secret_seed_with_nonce(SEED, "0")
    assert keypair.raw_public_key().hex() == (
        "825bb6d4e00848ab4ebac3c17d0ea0af9b09bb6d7b5130ff3eb2471c90d76519"
    )
    raw = StrKey.decode_ed25519_secret_seed(SEED)
    assert keypair.raw_secret_seed() == bytes([(raw[0] + ord("0")) % 256]) + raw[1:]

    with pytest.raises(NonceTooLong):
        Keypair.from_secret_seed_with_nonce(SEED, "x" * 33)


def test_nonce_factories_are_distinct():
    additive = Keypair.from_secret_seed_with_nonce(SEED, "1")
    hashed = Keypair.from_master_secret(SEED, "1")
    assert additive.raw_public_key() != hashed.raw_public_key()
    assert hashed.raw_public_key().hex() == (
        "1f257f13055670d732076cdf0eb701da66d2b3f16b7b1a49c12aed75e3d56d94"
    )


def test_from_raw_seed():
    raw_seed = StrKey.decode_ed25519_secret_seed(SEED)
    keypair = Keypair.from_raw_seed(raw_seed)
    assert keypair.raw_secret_seed() == raw_seed
    assert keypair.encoded_public_key() == ADDRESS
    assert keypair == Keypair.from_secret_seed(SEED)

    for size in (31, 33):
        with pytest.raises(InvalidLength):
            Keypair.from_raw_seed(bytes(size))


def test_from_raw_seed_with_nonce():
    raw_seed = StrKey.decode_ed25519_secret_seed(SEED)
    keypair = Keypair.from_raw_seed_with_nonce(raw_seed, b"0")
    assert keypair == Keypair.from_secret_seed_with_nonce(SEED, "0")

    unchanged = Keypair.from_raw_seed_with_nonce(raw_seed, b"")
    assert unchanged.encoded_public_key() == ADDRESS


def test_public_key_matches_secret_seed():
    for keypair in (
        Keypair.from_secret_seed(SEED),
        Keypair.from_master_secret(SEED, "0"),
        Keypair.from_secret_seed_with_nonce(SEED, b"\x07"),
        Keypair.random(),
    ):
        rederived = Keypair.from_raw_seed(keypair.raw_secret_seed())
        assert rederived.raw_public_key() == keypair.raw_public_key()


def test_from_public_key():
    keypair = Keypair.from_public_key(ADDRESS)
    assert isinstance(keypair, PublicKeypair)
    assert keypair.encoded_public_key() == ADDRESS
    assert keypair.raw_secret_seed() is None
    with pytest.raises(NoSecretAvailable):
        keypair.encoded_secret_seed()
    with pytest.raises(SigningUnavailable):
        keypair.sign(b"Hello World")


def test_from_public_key_rejects_secret_seed():
    with pytest.raises(InvalidVersion):
        Keypair.from_public_key(SEED)
    with pytest.raises(InvalidVersion):
        Keypair.from_secret_seed(ADDRESS)
    with pytest.raises(InvalidLength):
        Keypair.from_secret_seed("not a key")
    with pytest.raises(InvalidEncoding):
        Keypair.from_secret_seed(SEED.lower())


def test_can_sign():
    assert not Keypair.from_public_key(ADDRESS).can_sign()
    assert Keypair.from_secret_seed(SEED).can_sign()


def test_sign_message():
    keypair = Keypair.from_secret_seed(SEED)
    assert keypair.sign(b"Hello World") == HELLO_SIGNATURE
    assert keypair.sign("Hello World") == HELLO_SIGNATURE


def test_verify_signed_message():
    keypair = Keypair.from_public_key(ADDRESS)
    assert keypair.verify(b"Hello World", HELLO_SIGNATURE)
    assert not keypair.verify(b"Hello World.", HELLO_SIGNATURE)
    assert not keypair.verify(b"Hello World", HELLO_SIGNATURE[:-1] + b"\x00")
    assert not keypair.verify(b"Hello World", b"")


def test_sign_verify_roundtrip():
    keypair = Keypair.random()
    message = b"\x00\x01 arbitrary payload"
    signature = keypair.sign(message)
    assert keypair.verify(message, signature)

    tampered = bytearray(message)
    tampered[0] ^= 0xFF
    assert not keypair.verify(bytes(tampered), signature)


def test_sign_decorated():
    keypair = Keypair.from_secret_seed(SEED)
    decorated = keypair.sign_decorated(b"Hello World")
    assert decorated.hint == keypair.raw_public_key()[-4:]
    assert decorated.signature == HELLO_SIGNATURE


def test_random_keypair():
    keypair_1 = Keypair.random()
    keypair_2 = Keypair.random()
    keypair_3 = Keypair.random()

    assert keypair_1.raw_secret_seed() != keypair_2.raw_secret_seed()
    assert keypair_2.raw_secret_seed() != keypair_3.raw_secret_seed()
    assert keypair_1.encoded_secret_seed().startswith("S")
    assert keypair_1.encoded_public_key().startswith("G")


def test_wipe_on_exit():
    with Keypair.from_secret_seed(SEED) as keypair:
        assert keypair.sign(b"Hello World") == HELLO_SIGNATURE
    assert keypair.wiped
    assert not keypair.can_sign()
    with pytest.raises(SigningUnavailable):
        keypair.sign(b"Hello World")
    with pytest.raises(NoSecretAvailable):
        keypair.encoded_secret_seed()
    # Public half stays usable
    assert keypair.verify(b"Hello World", HELLO_SIGNATURE)


def test_wipe_on_error():
    with pytest.raises(RuntimeError):
        with Keypair.random() as keypair:
            raise RuntimeError("boom")
    assert keypair.wiped
    assert not keypair.can_sign()


def test_equality_and_repr():
    secret = Keypair.from_secret_seed(SEED)
    public = Keypair.from_public_key(ADDRESS)
    assert secret != public
    assert public == PublicKeypair(secret.raw_public_key())
    assert hash(public) == hash(Keypair.from_public_key(ADDRESS))
    assert repr(secret) == f"SecretKeypair({ADDRESS})"
    assert SEED not in repr(secret)


def test_network_id():
    assert Network.PUBLIC.network_id().hex() == (
        "7ac33997544e3175d266bd022439b22cdb16508c01163f26e5cb2a3e1045a979"
    )
    assert Network.TESTNET.network_id().hex() == (
        "cee0302d59844d32bdca915c8203dd44b33fbb7edc19051ea37abedf28ecd472"
    )


def test_wipe_without_context_manager():
    keypair = Keypair.from_secret_seed(SEED)
    assert keypair.can_sign()
    keypair.wipe()
    assert not keypair.can_sign()


def test_base_keypair_is_abstract():
    with pytest.raises(TypeError):
        Keypair(bytes(32))


def test_message_type_checked():
    keypair = Keypair.from_secret_seed(SEED)
    with pytest.raises(ValidationError):
        keypair.sign(3)
    with pytest.raises(ValidationError):
        keypair.sign(None)
    assert not keypair.verify(None, HELLO_SIGNATURE)
    assert not keypair.verify(3, HELLO_SIGNATURE)
    assert keypair.sign(bytearray(b"Hello World")) == HELLO_SIGNATURE


def test_rejections_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="stellar_keys")

    with pytest.raises(InvalidLength):
        Keypair.from_secret_seed("not a key")
    with pytest.raises(InvalidEncoding):
        Keypair.from_secret_seed(SEED.lower())
    with pytest.raises(InvalidVersion):
        Keypair.from_public_key(SEED)
    with pytest.raises(InvalidLength):
        Keypair.from_raw_seed(bytes(31))
    with pytest.raises(NonceTooLong):
        Keypair.from_raw_seed_with_nonce(bytes(32), bytes(33))

    records = [record for record in caplog.records if record.name.startswith("stellar_keys")]
    messages = [record.getMessage() for record in records]
    assert len(messages) == 5
    assert all(record.levelno == logging.DEBUG for record in records)
    assert any("version" in message for message in messages)
    assert SEED not in " ".join(messages)


def test_nonce_length_logged_in_bytes(caplog):
    caplog.set_level(logging.DEBUG, logger="stellar_keys")
    Keypair.from_master_secret(SEED, "é")
    assert "nonce length 2" in caplog.text
