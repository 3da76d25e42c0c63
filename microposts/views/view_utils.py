from django.shortcuts import redirect
from django.urls import reverse


def redirect_back(request):
    """Redirect to the referring page, or the feed when there is none."""
    return redirect(request.META.get("HTTP_REFERER") or reverse("feed"))
