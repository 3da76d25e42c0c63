from typing import Any, List, Sequence, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[str]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def values(self, field: str, *, order_by: Sequence[str] = (), **lookup: Any) -> List[Any]:
        """Return a flat list of one field for objects matching lookup."""
        qs = self._apply_ordering(self.model.objects.filter(**lookup), order_by)
        return list(qs.values_list(field, flat=True))

    def exists(self, **lookup: Any) -> bool:
        """Return True if any object matches the lookup."""
        return self.model.objects.filter(**lookup).exists()

    def count(self, **lookup: Any) -> int:
        """Return the number of objects matching the lookup."""
        return self.model.objects.filter(**lookup).count()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
