import jwt
import pytest

from eventhub.core.security import create_access_token, decode_access_token, get_password_hash, verify_password


def test_password_hash_round_trip():
    hashed = get_password_hash("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("S3cret", hashed)


def test_password_hash_is_salted():
    assert get_password_hash("s3cret") != get_password_hash("s3cret")


def test_token_carries_id_and_email():
    claims = decode_access_token(create_access_token(7, "ada@example.com"))
    assert claims == {"id": 7, "email": "ada@example.com"}


def test_token_has_no_expiry():
    token = create_access_token(7, "ada@example.com")
    assert "exp" not in jwt.decode(token, options={"verify_signature": False})


def test_token_signed_elsewhere_is_rejected():
    forged = jwt.encode({"id": 7, "email": "ada@example.com"}, "some-other-signing-secret-0123456789abc", algorithm="HS256")
    with pytest.raises(jwt.PyJWTError):
        decode_access_token(forged)


def test_token_without_id_is_rejected():
    from eventhub.core.config import settings
    token = jwt.encode({"email": "ada@example.com"}, settings.secret_key, algorithm="HS256")
    with pytest.raises(jwt.PyJWTError):
        decode_access_token(token)
