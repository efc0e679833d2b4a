"""Base repository pattern for read-only data access."""

from typing import Any, Generic, List, Type, TypeVar

from sqlmodel import select

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Generic read repository.

    Audits never write, so only lookups are offered.
    """

    def __init__(self, session: Any, model: Type[T]):
        """Initialize repository with session and model type.

        Args:
            session: SQLModel database session
            model: The model class this repository operates on
        """
        self.session: Any = session
        self.model = model

    def list_all(self) -> List[T]:
        """List every entity in creation order.

        The id tie-break keeps the order stable across runs, which the
        first-seen grouping order relies on.
        """
        model: Any = self.model
        stmt = select(model).order_by(model.created_at, model.id)
        return list(self.session.exec(stmt).all())
