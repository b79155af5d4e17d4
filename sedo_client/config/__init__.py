from .settings import DEFAULT_WSDL, SedoSettings, get_settings, reset_settings

__all__ = ["DEFAULT_WSDL", "SedoSettings", "get_settings", "reset_settings"]
