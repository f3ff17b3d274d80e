"""
Credential configuration loaded from the process environment.

Security: Secrets are kept in memory only and never logged. The mapping is
read-only after load; tests build their own `CredentialConfig` instead of
mutating a shared one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
import os

from .domain import ROLE_ADMIN, ROLE_USER

# Role -> environment variable holding its secret
ROLE_SECRET_ENV: Mapping[str, str] = MappingProxyType(
    {
        ROLE_USER: "APP_PASSWORD",
        ROLE_ADMIN: "ADMIN_PASSWORD",
    }
)


@dataclass(frozen=True)
class CredentialConfig:
    secrets: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Empty values count as "not configured"
        cleaned = {role: value for role, value in dict(self.secrets).items() if value}
        object.__setattr__(self, "secrets", MappingProxyType(cleaned))

    def secret_for(self, role: str) -> Optional[str]:
        return self.secrets.get(role)

    def missing_roles(self) -> list[str]:
        return sorted(role for role in ROLE_SECRET_ENV if role not in self.secrets)


def load_credential_config(environ: Mapping[str, str] | None = None) -> CredentialConfig:
    """Read one secret per role from the environment.

    Missing variables are tolerated here; they surface as a
    `ConfigurationError` when the affected role is attempted.
    """
    env = os.environ if environ is None else environ
    return CredentialConfig({role: env.get(var, "") for role, var in ROLE_SECRET_ENV.items()})


__all__ = ["ROLE_SECRET_ENV", "CredentialConfig", "load_credential_config"]
