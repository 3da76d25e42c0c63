"""
URL configuration for the micropostr project.

The root path renders the feed page. HTML toggle endpoints redirect back to
the referring page, or to the feed page; the ``api/``
endpoints return JSON for the feed, follow lists, favorites and counts.
"""
from django.contrib import admin
from django.urls import path

from microposts.views.feed_view import feed
from microposts.views.favorites_views import favorites
from microposts.views.follow_views import user_follow
from microposts.views.api_views import (
    FeedApi,
    FollowingsApi,
    FollowersApi,
    FavoritesApi,
    relationship_counts_api,
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', feed, name='feed'),
    path('favorites/<int:micropost_id>/', favorites, name='favorites'),
    path('users/<int:user_id>/follow/', user_follow, name='user_follow'),
    path('api/feed/', FeedApi.as_view(), name='feed_api'),
    path('api/users/<int:user_id>/followings/', FollowingsApi.as_view(), name='user_followings_api'),
    path('api/users/<int:user_id>/followers/', FollowersApi.as_view(), name='user_followers_api'),
    path('api/users/<int:user_id>/favorites/', FavoritesApi.as_view(), name='user_favorites_api'),
    path('api/users/<int:user_id>/counts/', relationship_counts_api, name='relationship_counts_api'),
]
