"""Provider base class carrying mock metadata."""

from typing import ClassVar, Literal

from dishka import Provider

# External systems that tests can swap for in-process fakes
Component = Literal["facebook", "persistence", "storage"]


class ProviderBase(Provider):
    """Base for every provider in PROVIDERS.

    Attributes:
        __mock_component__: Component a mockable base stands for, None otherwise
        __is_mock__: Set on the fake implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
