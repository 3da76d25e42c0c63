from django.contrib.auth.decorators import login_required
from django.shortcuts import render

from microposts.services import FeedService, RelationshipCountsService

feed_service_factory = FeedService


@login_required
def feed(request):
    """Render the current user's feed with their profile counts."""
    service = feed_service_factory()
    user_id = request.user.id
    context = {
        "microposts": service.feed_microposts(user_id),
        "favorite_ids": service.favorite_set.favorite_ids(user_id),
        "counts": RelationshipCountsService(
            follow_graph=service.follow_graph,
            favorite_set=service.favorite_set,
        ).for_user(user_id),
    }
    return render(request, "microposts/feed.html", context)
