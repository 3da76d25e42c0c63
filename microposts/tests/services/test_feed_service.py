from django.test import TestCase

from microposts.repos import InMemoryRelationStore
from microposts.services import FavoriteSet, FeedService, FollowGraph
from microposts.tests.helpers import make_micropost, make_user


class FeedServiceTests(TestCase):
    def setUp(self):
        self.service = FeedService()
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")
        self.cara = make_user(username="cara")
        self.alice_post = make_micropost(user=self.alice, content="alice post")
        self.bob_post = make_micropost(user=self.bob, content="bob post")
        self.cara_post = make_micropost(user=self.cara, content="cara post")

    def test_feed_contains_own_posts_only_without_followings(self):
        self.assertEqual(list(self.service.feed_microposts(self.alice.id)), [self.alice_post])

    def test_feed_includes_followed_authors_newest_first(self):
        self.service.follow_graph.follow(self.alice.id, self.bob.id)
        newer = make_micropost(user=self.bob, content="bob again")

        feed = list(self.service.feed_microposts(self.alice.id))

        self.assertEqual(feed, [newer, self.bob_post, self.alice_post])
        self.assertNotIn(self.cara_post, feed)

    def test_feed_uses_injected_follow_graph(self):
        store = InMemoryRelationStore()
        graph = FollowGraph(store)
        graph.follow(self.alice.id, self.cara.id)
        service = FeedService(follow_graph=graph, favorite_set=FavoriteSet(store))

        authors = {post.user_id for post in service.feed_microposts(self.alice.id)}

        self.assertEqual(authors, {self.alice.id, self.cara.id})

    def test_favorite_microposts(self):
        self.service.favorite_set.favorite(self.alice.id, self.cara_post.id)
        self.service.favorite_set.favorite(self.alice.id, self.alice_post.id)

        posts = set(self.service.favorite_microposts(self.alice.id))

        self.assertEqual(posts, {self.cara_post, self.alice_post})
        self.assertEqual(list(self.service.favorite_microposts(self.bob.id)), [])
