# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Sedo)
# Description: Sedo SOAP method registry.
# ============================================================================
"""SOAP Method Registry.

Extensible registry of Sedo operations and their bulk limits.
New operations can be added without modifying the client class.

Usage:
    registry = MethodRegistry()
    registry.register("domain_status", "DomainStatus", "domainlist", 100)
    config = registry.get("domain_status")
"""

from collections.abc import Mapping, Sized
from dataclasses import dataclass
from typing import Any


@dataclass
class MethodConfig:
    """Configuration for a SOAP method.

    Attributes:
        soap_method: Remote operation name (e.g., "DomainStatus").
        bulk_key: Parameter holding the bulk list, if any.
        max_elements: Maximum entries allowed under bulk_key.
    """

    soap_method: str
    bulk_key: str | None = None
    max_elements: int | None = None

    @property
    def is_bulk(self) -> bool:
        """Whether the operation caps the size of a bulk parameter."""
        return self.bulk_key is not None and self.max_elements is not None

    def bulk_data(self, params: Mapping[str, Any]) -> Sized:
        """Get the bulk entries from the request parameters.

        Args:
            params: Request parameters.

        Returns:
            The bulk collection, or an empty list if absent.
        """
        if self.bulk_key is None:
            return []
        data = params.get(self.bulk_key)
        return data if data is not None else []


class MethodRegistry:
    """Registry of SOAP method configurations."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._methods: dict[str, MethodConfig] = {}

    def register(
        self,
        name: str,
        soap_method: str,
        bulk_key: str | None = None,
        max_elements: int | None = None,
    ) -> "MethodRegistry":
        """Register a SOAP method.

        Args:
            name: Internal method name (e.g., "domain_status").
            soap_method: Remote operation name (e.g., "DomainStatus").
            bulk_key: Parameter holding the bulk list.
            max_elements: Maximum entries allowed under bulk_key.

        Returns:
            Self for method chaining.
        """
        self._methods[name] = MethodConfig(
            soap_method=soap_method,
            bulk_key=bulk_key,
            max_elements=max_elements,
        )
        return self

    def get(self, name: str) -> MethodConfig:
        """Get method configuration.

        Args:
            name: Internal method name.

        Returns:
            MethodConfig for the method.

        Raises:
            KeyError: If method not registered.
        """
        if name not in self._methods:
            raise KeyError(f"Method '{name}' not registered in registry")
        return self._methods[name]

    def has(self, name: str) -> bool:
        """Check if method is registered."""
        return name in self._methods

    def list_methods(self) -> list[str]:
        """List all registered method names."""
        return list(self._methods.keys())


def create_default_registry() -> MethodRegistry:
    """Create registry with the common Sedo operations.

    Returns:
        MethodRegistry with domain management and search methods.
    """
    registry = MethodRegistry()

    # ==========================================================================
    # Domain management
    # ==========================================================================
    registry.register("domain_insert", "DomainInsert", "domainentry", 50)
    registry.register("domain_update", "DomainUpdate", "domainentry", 50)
    registry.register("domain_delete", "DomainDelete", "domains", 50)

    # ==========================================================================
    # Domain queries
    # ==========================================================================
    registry.register("domain_status", "DomainStatus", "domainlist", 100)
    registry.register("domain_details", "DomainDetails", "domainlist", 100)
    registry.register("domain_list", "DomainList")
    registry.register("domain_search", "DomainSearch")

    return registry


# Default registry singleton
_default_registry: MethodRegistry | None = None


def get_default_registry() -> MethodRegistry:
    """Get the default method registry singleton."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry
