"""Exceptions raised by relation stores and the follow/favorite services."""


class RelationError(Exception):
    """Base exception for follow/favorite edge errors."""

    def __init__(self, owner_id, target_id, relation, message: str | None = None):
        """Initialize relation error.

        Args:
            owner_id: Id of the user that owns the edge
            target_id: Id of the user or micropost the edge points at
            relation: The relation the edge belongs to
            message: Optional error message
        """
        self.owner_id = owner_id
        self.target_id = target_id
        self.relation = relation
        super().__init__(message or f"{relation}: ({owner_id}, {target_id})")


class DuplicateEdge(RelationError):
    """An insert lost to the uniqueness constraint on (owner, target)."""


class NotFoundReference(RelationError):
    """The target id does not exist in the backing store."""
