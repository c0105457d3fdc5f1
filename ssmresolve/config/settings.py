"""
settings.py

Application configuration for ssmresolve.

Features:
- Centralized application configuration using Pydantic settings
- Environment overrides with the SSMR_ prefix
- Construction of ResolveOptions from the configured defaults

Usage:
Import appsettings for application configuration values.
"""

from typing import Final, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from ssmresolve.models.dataModel import ResolveOptions

# Byte limit for documents read by the file operations
DEFAULT_MAX_FILE_SIZE: Final[int] = 1024 * 1024

# GetParameters accepts at most this many names per call
SSM_MAX_BATCH: Final[int] = 10


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with SSMR_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        resolveSecureParameters: Default for ResolveOptions when no flag is given
        maxFileSize: Upper bound, in bytes, for input documents
        awsRegion: Region for the parameter store client
        ssmEndpointUrl: Alternative endpoint (e.g. a local SSM emulator)
        ssmBatchSize: Names sent per GetParameters call
    """

    beQuiet: bool = False
    resolveSecureParameters: bool = False
    maxFileSize: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)

    awsRegion: Optional[str] = None
    ssmEndpointUrl: Optional[str] = None
    ssmBatchSize: int = Field(default=SSM_MAX_BATCH, ge=1, le=SSM_MAX_BATCH)

    model_config = SettingsConfigDict(
        env_prefix="SSMR_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="ignore",
    )


def options_fromSettings(
    settings: App, resolve_secure: Optional[bool] = None
) -> ResolveOptions:
    """
    Build ResolveOptions from settings, letting an explicit flag win.

    Args:
        settings: The application settings to read defaults from
        resolve_secure: Explicit override, or None to use the configured default

    Returns:
        ResolveOptions: The options to pass into a resolve operation
    """
    if resolve_secure is None:
        resolve_secure = settings.resolveSecureParameters
    return ResolveOptions(resolve_secure_parameters=resolve_secure)


# Create the application settings instance
appsettings: Final[App] = App()
