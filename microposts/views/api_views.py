from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from microposts.serializers import (
    MicropostSerializer,
    RelationshipCountsSerializer,
    UserSerializer,
)
from microposts.services import FeedService, FollowGraph, RelationshipCountsService

User = get_user_model()


class FeedApi(generics.ListAPIView):
    """List posts from the current user and the users they follow."""
    serializer_class = MicropostSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return FeedService().feed_microposts(self.request.user.id)


class _UserRelationListApi(generics.ListAPIView):
    """Base for lists of users related to the user in the URL."""
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    def related_ids(self, follow_graph, user_id):
        raise NotImplementedError

    def get_queryset(self):
        user = get_object_or_404(User, pk=self.kwargs["user_id"])
        ids = self.related_ids(FollowGraph(), user.id)
        return User.objects.filter(id__in=ids).order_by("id")


class FollowingsApi(_UserRelationListApi):
    """List users the given user follows."""

    def related_ids(self, follow_graph, user_id):
        return follow_graph.following_ids(user_id)


class FollowersApi(_UserRelationListApi):
    """List users following the given user."""

    def related_ids(self, follow_graph, user_id):
        return follow_graph.follower_ids(user_id)


class FavoritesApi(generics.ListAPIView):
    """List posts the given user has favorited."""
    serializer_class = MicropostSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        user = get_object_or_404(User, pk=self.kwargs["user_id"])
        return FeedService().favorite_microposts(user.id)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def relationship_counts_api(request, user_id):
    """Return micropost, following, follower and favorite counts for a user."""
    user = get_object_or_404(User, pk=user_id)
    counts = RelationshipCountsService().for_user(user.id)
    return Response(RelationshipCountsSerializer(counts).data)
