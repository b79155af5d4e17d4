from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WSDL = "https://api.sedo.com/api/sedointerface.php?wsdl"


class SedoSettings(BaseSettings):
    """
    Sedo client configuration using Pydantic BaseSettings.
    Loads values from environment variables or a .env file.
    """

    # Credentials
    SEDO_USERNAME: str = Field(..., description="Sedo account username")
    SEDO_PASSWORD: str = Field(..., description="Sedo account password")
    SEDO_SIGN_KEY: str = Field(..., description="Partner sign key")
    SEDO_PARTNER_ID: str = Field(..., description="Partner ID")

    # SOAP endpoint
    SEDO_TIMEOUT: int = Field(30, description="Connection timeout in seconds")
    SEDO_WSDL: str = Field(DEFAULT_WSDL, description="URL of the Sedo WSDL")

    # Call log
    SEDO_LOG_ENABLED: bool = Field(False, description="Write request/response pairs to daily log files")
    SEDO_LOG_PATH: str = Field("", description="Directory for daily log files (empty means cwd)")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Settings singleton
_settings_instance = None


def get_settings() -> SedoSettings:
    """
    Return a cached settings instance.
    Avoids reading the environment more than once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = SedoSettings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None
