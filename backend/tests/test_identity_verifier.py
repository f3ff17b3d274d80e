"""
Credential verifier unit tests (no HTTP).

Covers validation order, the default role, exact comparison and the
configuration error raised for a role without a secret.
"""
from __future__ import annotations

import logging

import pytest

from identity_access.credentials import CredentialConfig, load_credential_config
from identity_access.errors import ConfigurationError, ValidationError
from identity_access.verifier import VerificationResult, resolve_role, verify_credentials


def _config(**secrets: str) -> CredentialConfig:
    return CredentialConfig(secrets)


def test_user_password_matches_with_default_role():
    result = verify_credentials("hunter2", None, _config(user="hunter2"))
    assert result == VerificationResult(is_valid=True, role="user")


def test_admin_password_matches_admin_role():
    cfg = _config(user="hunter2", admin="s3cret-admin")
    result = verify_credentials("s3cret-admin", "admin", cfg)
    assert result.is_valid is True
    assert result.role == "admin"


def test_mismatch_returns_invalid_without_role():
    result = verify_credentials("wrong", "user", _config(user="hunter2"))
    assert result.is_valid is False
    assert result.role is None
    assert result.to_dict() == {"isValid": False, "role": None}


def test_comparison_is_case_sensitive_and_exact():
    cfg = _config(user="Hunter2")
    assert verify_credentials("hunter2", "user", cfg).is_valid is False
    assert verify_credentials("Hunter2 ", "user", cfg).is_valid is False
    assert verify_credentials("Hunter2", "user", cfg).is_valid is True


def test_user_secret_does_not_unlock_admin():
    cfg = _config(user="hunter2", admin="other")
    assert verify_credentials("hunter2", "admin", cfg).is_valid is False


@pytest.mark.parametrize("password", [None, ""])
def test_missing_password_is_validation_error(password):
    with pytest.raises(ValidationError) as exc:
        verify_credentials(password, "user", _config(user="hunter2"))
    assert exc.value.code == "password_required"


def test_unknown_role_is_validation_error():
    with pytest.raises(ValidationError) as exc:
        verify_credentials("hunter2", "superadmin", _config(user="hunter2"))
    assert exc.value.code == "invalid_role"


def test_password_is_checked_before_role():
    with pytest.raises(ValidationError) as exc:
        verify_credentials("", "superadmin", _config())
    assert exc.value.code == "password_required"


def test_role_is_checked_before_configuration():
    with pytest.raises(ValidationError) as exc:
        verify_credentials("x", "superadmin", _config())
    assert exc.value.code == "invalid_role"


def test_unconfigured_role_raises_and_logs(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.ERROR, logger="toolkit.identity_access"):
        with pytest.raises(ConfigurationError) as exc:
            verify_credentials("anything", "admin", _config(user="hunter2"))
    assert exc.value.role == "admin"
    assert exc.value.env_var == "ADMIN_PASSWORD"
    assert str(exc.value) == "admin access not configured"
    assert "ADMIN_PASSWORD" in caplog.text
    # The submitted password must never reach the logs
    assert "anything" not in caplog.text


def test_resolve_role_defaults_to_user():
    assert resolve_role(None) == "user"
    assert resolve_role("admin") == "admin"
    with pytest.raises(ValidationError):
        resolve_role("Admin")


def test_empty_secret_counts_as_not_configured():
    cfg = CredentialConfig({"user": "", "admin": "x"})
    assert cfg.secret_for("user") is None
    assert cfg.missing_roles() == ["user"]
    with pytest.raises(ConfigurationError):
        verify_credentials("y", "user", cfg)


def test_load_credential_config_reads_role_variables():
    cfg = load_credential_config({"APP_PASSWORD": "hunter2", "ADMIN_PASSWORD": "", "OTHER": "x"})
    assert cfg.secret_for("user") == "hunter2"
    assert cfg.secret_for("admin") is None
    assert cfg.missing_roles() == ["admin"]


def test_load_credential_config_defaults_to_process_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_PASSWORD", "from-env")
    cfg = load_credential_config()
    assert cfg.secret_for("user") == "from-env"
    assert cfg.secret_for("admin") is None


def test_lone_surrogate_password_is_a_plain_mismatch():
    result = verify_credentials("\ud800", "user", _config(user="hunter2"))
    assert result == VerificationResult(is_valid=False, role=None)


def test_lone_surrogate_secret_still_matches_itself():
    assert verify_credentials("a\udfffb", "user", _config(user="a\udfffb")).is_valid is True
