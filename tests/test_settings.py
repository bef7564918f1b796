"""
Tests for the signing-secret startup invariant.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings


class TestJwtSecretInvariant:
    def test_missing_secret_refuses_to_start(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("secret", ["secret", "SECRET", "change-me-jwt-secret-key", "changeme"])
    def test_known_insecure_defaults_rejected(self, secret):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_secret=secret)

    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_secret="tooshort")

    def test_strong_secret_accepted(self):
        settings = Settings(_env_file=None, jwt_secret="a-long-enough-random-secret")
        assert settings.jwt_expiry_seconds == 3600
        assert settings.bcrypt_rounds == 10
