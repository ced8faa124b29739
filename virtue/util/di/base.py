"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["identity", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider that sets ``__mock_component__`` is the base of a swappable
    component. Its subclasses are the implementations: one production
    provider and, once the test package is imported, one mock
    (``__is_mock__ = True``). Providers without a component are used as is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Pick the concrete provider class for this component.

        Args:
            mock: Whether the mock implementation is wanted

        Returns:
            Provider class (not instantiated)

        Raises:
            ValueError: If that implementation is not registered
        """
        if cls.__mock_component__ is None:
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == mock:
                return subclass

        kind = "mock" if mock else "production"
        raise ValueError(f"No {kind} implementation for {cls.__mock_component__}")
