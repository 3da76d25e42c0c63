"""Model representing a short post written by a user."""

from django.conf import settings
from django.db import models

class Micropost(models.Model):
    """A user's short text post."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="microposts",
        db_column="user_id",
    )
    content = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Table name and indexes for microposts."""
        db_table = "microposts"
        indexes = [
            models.Index(fields=["user", "created_at"], name="microposts_user_created_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"Micropost(user={self.user_id}, content={self.content[:20]})"
