"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests may swap for an in-process fake
Component = Literal["persistence", "sentiment"]


class ProviderBase(Provider):
    """Provider with mock-selection metadata.

    A mockable component is declared as a base provider carrying
    ``__mock_component__``; its production and mock implementations subclass
    it and differ in ``__is_mock__``. Concrete providers leave both unset.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
