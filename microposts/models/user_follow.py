"""Join table for directed follow edges between users."""

from __future__ import annotations
from django.conf import settings
from django.db import models
from django.db.models import Q, F


class UserFollow(models.Model):
    """Follow edge where ``user`` receives ``follow``'s posts in their feed."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following_edges",   # user.following_edges -> rows this user created (outbound)
        db_column="user_id",
    )
    follow = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="follower_edges",    # user.follower_edges -> rows pointing to this user (inbound)
        db_column="follow_id",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """DB metadata and constraints for follow edges."""
        db_table = "user_follow"
        constraints = [
            models.UniqueConstraint(fields=["user", "follow"], name="uniq_user_follow_user_follow"),
            models.CheckConstraint(condition=~Q(user=F("follow")), name="chk_user_follow_not_self"),
        ]
        indexes = [
            models.Index(fields=["user"], name="user_follow_user_idx"),
            models.Index(fields=["follow"], name="user_follow_follow_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"UserFollow(user={self.user_id}, follow={self.follow_id})"
