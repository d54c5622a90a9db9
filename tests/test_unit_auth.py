from carrental.utils.security import generate_hash, check_hash


def test_password_hash_roundtrip():
    pw = "Secret123"
    h = generate_hash(pw)
    assert check_hash(pw, h)
    assert not check_hash("wrong", h)


def test_hash_is_not_plaintext_and_is_salted():
    h1 = generate_hash("pw1")
    h2 = generate_hash("pw1")
    assert "pw1" not in h1
    assert h1.startswith("pbkdf2:sha256")
    assert h1 != h2


def test_malformed_hash_does_not_verify():
    assert not check_hash("pw1", "not-a-hash")
