from tenant_auth.app.services.password_hasher import BcryptPasswordHasher


def test_hash_and_verify(hasher):
    digest = hasher.hash("Passw0rd1")

    assert digest != "Passw0rd1"
    assert hasher.verify("Passw0rd1", digest) is True
    assert hasher.verify("Passw0rd2", digest) is False


def test_hash_is_salted(hasher):
    assert hasher.hash("Passw0rd1") != hasher.hash("Passw0rd1")


def test_verify_malformed_digest_returns_false(hasher):
    assert hasher.verify("Passw0rd1", "not-a-bcrypt-hash") is False
    assert hasher.verify("Passw0rd1", None) is False


def test_default_rounds_from_config():
    from tenant_auth.config import ApplicationConfig

    assert BcryptPasswordHasher().rounds == ApplicationConfig.BCRYPT_ROUNDS


def test_dummy_verify_reuses_digest(hasher):
    hasher.dummy_verify("anything")
    first = hasher._dummy_digest
    hasher.dummy_verify("something else")

    assert first is not None
    assert hasher._dummy_digest == first
