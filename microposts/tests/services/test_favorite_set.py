from unittest.mock import MagicMock

from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase

from microposts.exceptions import DuplicateEdge
from microposts.models import Favorite
from microposts.repos import InMemoryRelationStore, Relation
from microposts.services import FavoriteSet
from microposts.tests.helpers import make_micropost, make_user


class FavoriteSetTestCase(SimpleTestCase):
    def setUp(self):
        self.favorites = FavoriteSet(InMemoryRelationStore())

    def test_favorite_then_unfavorite_sequence(self):
        states = [self.favorites.is_favorite(1, 10)]
        first = self.favorites.favorite(1, 10)
        states.append(self.favorites.is_favorite(1, 10))
        second = self.favorites.unfavorite(1, 10)
        states.append(self.favorites.is_favorite(1, 10))

        self.assertEqual(states, [False, True, False])
        self.assertEqual([first, second], [True, True])

    def test_favorite_twice(self):
        results = [self.favorites.favorite(1, 10), self.favorites.favorite(1, 10)]
        self.assertEqual(results, [True, False])
        self.assertTrue(self.favorites.is_favorite(1, 10))

    def test_unfavorite_when_absent_is_noop(self):
        self.assertFalse(self.favorites.unfavorite(1, 10))

    def test_same_id_for_user_and_post_is_allowed(self):
        self.assertTrue(self.favorites.favorite(5, 5))

    def test_favorite_ids_and_count(self):
        self.favorites.favorite(1, 10)
        self.favorites.favorite(1, 11)
        self.favorites.favorite(2, 10)
        self.assertEqual(self.favorites.favorite_ids(1), {10, 11})
        self.assertEqual(self.favorites.favorites_count(1), 2)
        self.assertEqual(self.favorites.favorites_count(3), 0)

    def test_duplicate_edge_race_returns_false(self):
        store = MagicMock()
        store.exists.return_value = False
        store.add.side_effect = DuplicateEdge(1, 10, Relation.FAVORITES)
        self.assertFalse(FavoriteSet(store).favorite(1, 10))

    def test_unfavorite_logs_edge_removed_concurrently(self):
        store = MagicMock()
        store.exists.return_value = True
        store.remove.return_value = 0
        with self.assertLogs("microposts.services.favorite_set", level="INFO") as logs:
            self.assertFalse(FavoriteSet(store).unfavorite(1, 10))
        self.assertIn("unfavorite(1, 10) found the edge already removed", logs.output[0])

    def test_database_error_propagates(self):
        store = MagicMock()
        store.exists.side_effect = DatabaseError("down")
        with self.assertRaises(DatabaseError):
            FavoriteSet(store).favorite(1, 10)


class FavoriteSetDatabaseTests(TestCase):
    def setUp(self):
        self.favorites = FavoriteSet()
        self.user = make_user(username="saver")
        self.post = make_micropost(user=self.user, content="mine")

    def test_favorite_own_post_persists(self):
        self.assertTrue(self.favorites.favorite(self.user.id, self.post.id))
        self.assertTrue(Favorite.objects.filter(user=self.user, micropost=self.post).exists())
        self.assertFalse(self.favorites.favorite(self.user.id, self.post.id))
        self.assertEqual(Favorite.objects.count(), 1)

    def test_unfavorite_deletes_row(self):
        self.favorites.favorite(self.user.id, self.post.id)
        self.assertTrue(self.favorites.unfavorite(self.user.id, self.post.id))
        self.assertFalse(Favorite.objects.exists())
