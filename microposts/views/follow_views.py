from django.contrib.auth.decorators import login_required
from django.http import Http404
from django.views.decorators.http import require_http_methods

from microposts.exceptions import NotFoundReference
from microposts.services import FollowGraph
from microposts.views.view_utils import redirect_back

follow_graph_factory = FollowGraph


@login_required
@require_http_methods(["POST", "DELETE"])
def user_follow(request, user_id):
    """Follow (POST) or unfollow (DELETE) another user; self-follow is ignored."""
    follow_graph = follow_graph_factory()
    try:
        if request.method == "POST":
            follow_graph.follow(request.user.id, user_id)
        else:
            follow_graph.unfollow(request.user.id, user_id)
    except NotFoundReference:
        raise Http404("User not found.")
    return redirect_back(request)
