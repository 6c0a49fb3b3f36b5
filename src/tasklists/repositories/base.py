"""Base repository pattern with common operations.

Provides the foundation for the persistence gateway with standardized
CRUD operations and query patterns.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID, uuid4

from sqlmodel import Session, select


EntityT = TypeVar("EntityT")


class BaseRepository(Generic[EntityT], ABC):
    """Base repository with common operations.

    Repositories flush but never commit; the owning service decides when a
    unit of work is committed.
    """

    def __init__(self, session: Session):
        self.session = session

    @abstractmethod
    def get_entity_class(self) -> type[EntityT]:
        """Return the SQLModel entity class."""
        pass

    def list_all(self) -> list[EntityT]:
        """Get all entities in storage order."""
        statement = select(self.get_entity_class())
        return list(self.session.exec(statement).all())

    def get_by_id(self, entity_id: UUID) -> EntityT | None:
        """Get entity by ID."""
        return self.session.get(self.get_entity_class(), entity_id)

    def exists_by_id(self, entity_id: UUID) -> bool:
        """Whether an entity with this ID exists."""
        return self.get_by_id(entity_id) is not None

    def save(self, entity: EntityT) -> EntityT:
        """Insert the entity when it has no ID yet, otherwise overwrite it.

        New entities receive a freshly generated UUID.
        """
        if entity.id is None:
            entity.id = uuid4()
        self.session.add(entity)
        self.session.flush()
        self.session.refresh(entity)
        return entity

    def delete_by_id(self, entity_id: UUID) -> bool:
        """Delete entity by ID."""
        entity = self.get_by_id(entity_id)
        if entity:
            self.session.delete(entity)
            self.session.flush()
            return True
        return False
