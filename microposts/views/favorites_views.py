from django.contrib.auth.decorators import login_required
from django.http import Http404
from django.views.decorators.http import require_http_methods

from microposts.exceptions import NotFoundReference
from microposts.services import FavoriteSet
from microposts.views.view_utils import redirect_back

favorite_set_factory = FavoriteSet


@login_required
@require_http_methods(["POST", "DELETE"])
def favorites(request, micropost_id):
    """Favorite (POST) or unfavorite (DELETE) a micropost, then go back."""
    favorite_set = favorite_set_factory()
    try:
        if request.method == "POST":
            favorite_set.favorite(request.user.id, micropost_id)
        else:
            favorite_set.unfavorite(request.user.id, micropost_id)
    except NotFoundReference:
        raise Http404("Micropost not found.")
    return redirect_back(request)
