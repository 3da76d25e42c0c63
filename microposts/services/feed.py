"""Micropost querysets for a user's feed and favorites."""

from typing import Optional

from django.db.models import QuerySet

from microposts.models import Micropost
from .follow_graph import FollowGraph
from .favorite_set import FavoriteSet


class FeedService:
    """Build micropost querysets scoped by the follow graph and favorites."""

    def __init__(
        self,
        *,
        follow_graph: Optional[FollowGraph] = None,
        favorite_set: Optional[FavoriteSet] = None,
    ) -> None:
        self.follow_graph = follow_graph or FollowGraph()
        self.favorite_set = favorite_set or FavoriteSet()

    def base_posts_queryset(self) -> QuerySet:
        """Base queryset of microposts with their author, newest first."""
        return Micropost.objects.select_related("user").order_by("-created_at", "-id")

    def feed_microposts(self, actor_id: int) -> QuerySet:
        """Return posts by the users actor_id follows and by actor_id."""
        author_ids = self.follow_graph.feed_author_ids(actor_id)
        return self.base_posts_queryset().filter(user_id__in=author_ids)

    def favorite_microposts(self, user_id: int) -> QuerySet:
        """Return the posts user_id has favorited."""
        post_ids = self.favorite_set.favorite_ids(user_id)
        return self.base_posts_queryset().filter(id__in=post_ids)
