from unittest.mock import patch

from django.test import TestCase
from django.urls import reverse

from microposts.models import Favorite
from microposts.tests.helpers import make_micropost, make_user


class FavoritesViewTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="viewer")
        self.post = make_micropost(content="to be saved")
        self.url = reverse("favorites", args=[self.post.id])
        self.client.login(username="viewer", password="Password123")

    def test_post_favorites_and_redirects_back(self):
        response = self.client.post(self.url, HTTP_REFERER="/somewhere/")
        self.assertRedirects(response, "/somewhere/", fetch_redirect_response=False)
        self.assertTrue(Favorite.objects.filter(user=self.user, micropost=self.post).exists())

    def test_post_twice_still_redirects(self):
        self.client.post(self.url)
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(Favorite.objects.count(), 1)

    def test_redirects_to_feed_without_referer(self):
        response = self.client.post(self.url)
        self.assertRedirects(response, reverse("feed"), fetch_redirect_response=False)
        self.assertEqual(response["Location"], "/")

    def test_delete_unfavorites(self):
        Favorite.objects.create(user=self.user, micropost=self.post)
        response = self.client.delete(self.url, HTTP_REFERER="/back/")
        self.assertRedirects(response, "/back/", fetch_redirect_response=False)
        self.assertFalse(Favorite.objects.exists())

    def test_delete_when_not_favorited_redirects(self):
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, 302)

    def test_unknown_post_returns_404(self):
        response = self.client.post(reverse("favorites", args=[999999]))
        self.assertEqual(response.status_code, 404)

    def test_get_not_allowed(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 405)

    def test_requires_login(self):
        self.client.logout()
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 302)
        self.assertIn("/admin/login/", response["Location"])
        self.assertFalse(Favorite.objects.exists())

    def test_actor_is_passed_explicitly(self):
        with patch("microposts.views.favorites_views.favorite_set_factory") as factory:
            self.client.post(self.url)
        factory.return_value.favorite.assert_called_once_with(self.user.id, self.post.id)
