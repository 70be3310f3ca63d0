"""Provider base class and component registry for dishka."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components whose providers have a production and a mock variant
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider that may stand for a swappable component.

    A provider with subclasses is a component: its subclasses are the
    production and in-memory variants, told apart by ``__is_mock__``.
    A provider without subclasses is installed as-is in every container.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def variant(cls, use_mock: bool) -> type["ProviderBase"]:
        """Concrete provider class to install for this base.

        Raises:
            ValueError: If the component has no variant of the requested kind
        """
        variants = cls.__subclasses__()
        if not variants:
            return cls

        for candidate in variants:
            if candidate.__is_mock__ is use_mock:
                return candidate

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} provider for component {cls.__mock_component__ or cls.__name__}"
        )
