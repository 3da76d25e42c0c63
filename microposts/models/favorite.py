"""Join model linking a user to a micropost they marked as favorite."""

from django.conf import settings
from django.db import models

class Favorite(models.Model):
    """Favorite edge between a user and a micropost, with timestamps."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favorite_edges",
        db_column="user_id",
    )

    micropost = models.ForeignKey(
        "microposts.Micropost",
        on_delete=models.CASCADE,
        related_name="favorite_edges",
        db_column="micropost_id",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """DB metadata and constraints for Favorite."""
        db_table = "favorites"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "micropost"],
                name="uniq_favorites_user_micropost",
            ),
        ]
        indexes = [
            models.Index(fields=["user"], name="favorites_user_idx"),
            models.Index(fields=["micropost"], name="favorites_micropost_idx"),
        ]

    def __str__(self) -> str:
        """Readable label for admin/debugging."""
        return f"Favorite(user={self.user_id}, micropost={self.micropost_id})"
