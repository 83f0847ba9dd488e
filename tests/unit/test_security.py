"""
Unit tests for account_service.core.security
"""
import jwt
import pytest
from account_service.core.exceptions import ValidationError
from account_service.core.security import (
    hash_password,
    BCRYPT_MAX_PASSWORD_BYTES,
    verify_password,
    create_jwt_token,
    create_access_token,
    decode_jwt_token,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"
        assert "secret123" not in result

    def test_password_over_72_bytes_raises(self):
        # 40 characters but 80 UTF-8 bytes
        with pytest.raises(ValidationError, match="72 bytes"):
            hash_password("é" * 40)

    def test_password_at_byte_limit_is_hashed(self):
        plain = "a" * BCRYPT_MAX_PASSWORD_BYTES
        assert verify_password(plain, hash_password(plain))


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_empty_stored_hash_returns_false(self):
        assert verify_password("anything", "") is False

    def test_malformed_stored_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    """Tests for create_jwt_token, create_access_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self, mock_settings):
        token = create_jwt_token({"sub": "user-123"})
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["exp"] - decoded["iat"] == 1440 * 60

    def test_access_token_subject_is_user_id(self, mock_settings):
        decoded = decode_jwt_token(create_access_token("abc"))
        assert decoded["sub"] == "abc"

    def test_decode_invalid_token_raises(self, mock_settings):
        with pytest.raises(ValueError) as exc_info:
            decode_jwt_token("invalid.jwt.token")
        assert "Invalid token" in str(exc_info.value)

    def test_decode_tampered_token_raises(self, mock_settings):
        token = create_jwt_token({"sub": "user-1"})
        tampered = token[:-5] + "xxxxx"
        with pytest.raises(ValueError):
            decode_jwt_token(tampered)

    def test_decode_expired_token_raises(self, mock_settings):
        token = create_jwt_token({"sub": "user-1"}, expires_minutes=-1)
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token(token)

    def test_decode_token_signed_with_other_secret_raises(self, mock_settings):
        token = jwt.encode({"sub": "user-1"}, "some-other-secret", algorithm="HS256")
        with pytest.raises(ValueError):
            decode_jwt_token(token)
