"""Base resolver interface."""

from abc import ABC, abstractmethod
from typing import Optional

from license_resolver.models.license import License


class BaseLicenseResolver(ABC):
    """Abstract base class for license URL resolvers.

    All license resolvers must inherit from this class and implement
    the async resolve_license() method.
    """

    @abstractmethod
    async def resolve_license(self, license_url: Optional[str]) -> Optional[License]:
        """Resolve the license a license file URL points at.

        Args:
            license_url: URL of a license file, or None.

        Returns:
            License with id, name and the unchanged input URL,
            or None if this resolver has no answer for the URL.

        Raises:
            LicenseResolverError: If the remote platform fails in a way
                the caller must handle.
        """
