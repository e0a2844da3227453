"""
Configuration Management for DPS

Provides the DpsConfig container used by components in the DPS ecosystem.
Values are loaded from DPS_* environment variables at construction time;
every field is optional and getters fall back to defaults suitable for
local development.

Usage:
    from dps_config import DpsConfig

    config = DpsConfig()
    config.set_domain('example.com')
    print(config.get_auth_api_url())

No validation is performed on configured values. Consuming services are
responsible for checking ports, protocols and secrets where it matters.
"""

from typing import Any, Optional

from pydantic import AliasChoices, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .parsing import parse_bool, parse_text, parse_u16, parse_u64

# Defaults applied by getters when a value is not configured
DEFAULT_DOMAIN = 'dps.localhost'
DEFAULT_API_SUBDOMAIN = 'api'
DEFAULT_DEVELOPMENT_MODE = False
DEFAULT_AUTH_API_SUBDOMAIN = 'auth'
DEFAULT_AUTH_API_PROTOCOL = 'https'
DEFAULT_AUTH_API_INSECURE_COOKIE = False
DEFAULT_AUTH_API_SQLITE_MAIN_FILE_PATH = 'data/main-development.db'
DEFAULT_AUTH_API_SQLITE_MAIN_POOL_SIZE = 1
DEFAULT_AUTH_API_SESSION_TTL_SECONDS = 14 * 24 * 60 * 60


class DpsConfig(BaseSettings):
    """
    Central configuration container for DPS components.

    Raw fields hold None when a value is absent. Use the get_* methods to
    read values with defaults applied, and the set_* methods to override
    anything loaded from the environment.

    Environment variables:
        DPS_DOMAIN
        DPS_API_SUBDOMAIN
        DPS_DEVELOPMENT_MODE                ("Y" for true)
        DPS_AUTH_API_SUBDOMAIN
        DPS_AUTH_API_PORT
        DPS_AUTH_API_PROTOCOL
        DPS_AUTH_API_INSECURE_COOKIE        ("Y" for true)
        DPS_AUTH_API_SQLITE_MAIN_FILE_PATH  (legacy: DPS_AUTH_API_SQLITE_FILE_PATH)
        DPS_AUTH_API_SQLITE_MAIN_POOL_SIZE
        DPS_AUTH_API_SESSION_SECRET
        DPS_AUTH_API_SESSION_TTL_SECONDS
    """

    # Env names are matched exactly; empty variables count as unset so the
    # legacy SQLite path is used when the main one is set but empty.
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_ignore_empty=True,
        populate_by_name=True,
        extra='ignore',
    )

    # Global
    domain: Optional[str] = Field(default=None, validation_alias='DPS_DOMAIN')
    api_subdomain: Optional[str] = Field(
        default=None, validation_alias='DPS_API_SUBDOMAIN'
    )
    development_mode: Optional[bool] = Field(
        default=None, validation_alias='DPS_DEVELOPMENT_MODE'
    )

    # Auth API
    auth_api_subdomain: Optional[str] = Field(
        default=None, validation_alias='DPS_AUTH_API_SUBDOMAIN'
    )
    auth_api_port: Optional[int] = Field(
        default=None, validation_alias='DPS_AUTH_API_PORT'
    )
    auth_api_protocol: Optional[str] = Field(
        default=None, validation_alias='DPS_AUTH_API_PROTOCOL'
    )
    auth_api_insecure_cookie: Optional[bool] = Field(
        default=None, validation_alias='DPS_AUTH_API_INSECURE_COOKIE'
    )
    auth_api_sqlite_main_file_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            'DPS_AUTH_API_SQLITE_MAIN_FILE_PATH',
            'DPS_AUTH_API_SQLITE_FILE_PATH',
        ),
    )
    auth_api_sqlite_main_pool_size: Optional[int] = Field(
        default=None, validation_alias='DPS_AUTH_API_SQLITE_MAIN_POOL_SIZE'
    )
    auth_api_session_secret: Optional[str] = Field(
        default=None, validation_alias='DPS_AUTH_API_SESSION_SECRET', repr=False
    )
    auth_api_session_ttl_seconds: Optional[int] = Field(
        default=None, validation_alias='DPS_AUTH_API_SESSION_TTL_SECONDS'
    )

    @field_validator(
        'domain',
        'api_subdomain',
        'auth_api_subdomain',
        'auth_api_protocol',
        'auth_api_sqlite_main_file_path',
        'auth_api_session_secret',
        mode='before',
    )
    @classmethod
    def _empty_text_is_unset(cls, value: Any, info: ValidationInfo) -> Any:
        return parse_text(value, info.field_name)

    @field_validator('development_mode', 'auth_api_insecure_cookie', mode='before')
    @classmethod
    def _y_is_true(cls, value: Any) -> Any:
        return parse_bool(value)

    @field_validator('auth_api_port', 'auth_api_sqlite_main_pool_size', mode='before')
    @classmethod
    def _lenient_u16(cls, value: Any, info: ValidationInfo) -> Any:
        return parse_u16(value, info.field_name)

    @field_validator('auth_api_session_ttl_seconds', mode='before')
    @classmethod
    def _lenient_u64(cls, value: Any, info: ValidationInfo) -> Any:
        return parse_u64(value, info.field_name)

    # --------------------
    # Global getters/setters
    # --------------------

    def get_domain(self) -> str:
        """Returns the configured domain or the default "dps.localhost"."""
        return self.domain if self.domain is not None else DEFAULT_DOMAIN

    def set_domain(self, value: str) -> None:
        """Set the domain (overrides any environment-provided value)."""
        self.domain = value

    def get_api_subdomain(self) -> str:
        """Returns the API subdomain or the default "api"."""
        if self.api_subdomain is not None:
            return self.api_subdomain
        return DEFAULT_API_SUBDOMAIN

    def set_api_subdomain(self, value: str) -> None:
        self.api_subdomain = value

    def get_development_mode(self) -> bool:
        """Returns whether development mode is enabled. Defaults to False."""
        if self.development_mode is not None:
            return self.development_mode
        return DEFAULT_DEVELOPMENT_MODE

    def set_development_mode(self, value: bool) -> None:
        self.development_mode = value

    # --------------------
    # Auth API getters/setters
    # --------------------

    def get_auth_api_subdomain(self) -> str:
        """Returns the auth API subdomain or the default "auth"."""
        if self.auth_api_subdomain is not None:
            return self.auth_api_subdomain
        return DEFAULT_AUTH_API_SUBDOMAIN

    def set_auth_api_subdomain(self, value: str) -> None:
        self.auth_api_subdomain = value

    def get_auth_api_port(self) -> Optional[int]:
        """Returns the configured auth API port, if any. There is no default."""
        return self.auth_api_port

    def set_auth_api_port(self, value: Optional[int]) -> None:
        """Set the auth API port. Use None to unset."""
        self.auth_api_port = value

    def get_auth_api_protocol(self) -> str:
        """Returns the auth API protocol or the default "https"."""
        if self.auth_api_protocol is not None:
            return self.auth_api_protocol
        return DEFAULT_AUTH_API_PROTOCOL

    def set_auth_api_protocol(self, value: str) -> None:
        """Set the auth API protocol (e.g. "http" or "https")."""
        self.auth_api_protocol = value

    def get_auth_api_insecure_cookie(self) -> bool:
        """Returns whether insecure cookies are enabled. Defaults to False."""
        if self.auth_api_insecure_cookie is not None:
            return self.auth_api_insecure_cookie
        return DEFAULT_AUTH_API_INSECURE_COOKIE

    def set_auth_api_insecure_cookie(self, value: bool) -> None:
        self.auth_api_insecure_cookie = value

    def get_auth_api_sqlite_main_file_path(self) -> str:
        """
        Returns the SQLite main database file path for the auth API.

        Defaults to "data/main-development.db".
        """
        if self.auth_api_sqlite_main_file_path is not None:
            return self.auth_api_sqlite_main_file_path
        return DEFAULT_AUTH_API_SQLITE_MAIN_FILE_PATH

    def set_auth_api_sqlite_main_file_path(self, value: str) -> None:
        self.auth_api_sqlite_main_file_path = value

    def get_auth_api_sqlite_main_pool_size(self) -> int:
        """Returns the SQLite connection pool size. Defaults to 1."""
        if self.auth_api_sqlite_main_pool_size is not None:
            return self.auth_api_sqlite_main_pool_size
        return DEFAULT_AUTH_API_SQLITE_MAIN_POOL_SIZE

    def set_auth_api_sqlite_main_pool_size(self, value: Optional[int]) -> None:
        """Set the SQLite connection pool size. Use None to reset to default."""
        self.auth_api_sqlite_main_pool_size = value

    def get_auth_api_session_secret(self) -> Optional[str]:
        """Returns the auth API session secret, if configured."""
        return self.auth_api_session_secret

    def set_auth_api_session_secret(self, value: Optional[str]) -> None:
        """Set or unset the auth API session secret."""
        self.auth_api_session_secret = value

    def get_auth_api_session_secret_bytes(self) -> Optional[bytes]:
        """
        Returns the session secret encoded as UTF-8 bytes, if configured.

        Useful for handing the secret to encryption or session libraries
        that expect key material as bytes.
        """
        if self.auth_api_session_secret is None:
            return None
        return self.auth_api_session_secret.encode('utf-8')

    def get_auth_api_session_ttl_seconds(self) -> int:
        """Returns the session TTL in seconds. Defaults to 14 days (1209600)."""
        if self.auth_api_session_ttl_seconds is not None:
            return self.auth_api_session_ttl_seconds
        return DEFAULT_AUTH_API_SESSION_TTL_SECONDS

    def set_auth_api_session_ttl_seconds(self, value: Optional[int]) -> None:
        """Set or unset the session TTL in seconds."""
        self.auth_api_session_ttl_seconds = value

    # --------------------
    # Computed getters
    # --------------------

    def get_api_domain(self) -> str:
        """
        Returns the computed API domain: {api_subdomain}.{domain}

        Example: api.dps.localhost
        """
        return f"{self.get_api_subdomain()}.{self.get_domain()}"

    def get_auth_api_url(self) -> str:
        """
        Returns the full auth API URL, including protocol and optional port.

        Examples:
            https://auth.api.dps.localhost
            http://auth.api.dps.localhost:3000
        """
        url = (
            f"{self.get_auth_api_protocol()}://"
            f"{self.get_auth_api_subdomain()}.{self.get_api_domain()}"
        )
        if self.auth_api_port is not None:
            url = f"{url}:{self.auth_api_port}"
        return url
