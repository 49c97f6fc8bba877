"""Provider base class shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests may swap for a recording mock
Component = Literal["mail", "persistence", "realtime", "reputation"]


class ProviderBase(Provider):
    """Provider tagged with the component it serves.

    Mockable components get one production and one mock subclass, told apart
    by ``__is_mock__``. Providers with no subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
