from django.db import IntegrityError, transaction
from django.test import TestCase

from microposts.models import UserFollow
from microposts.tests.helpers import make_user


class UserFollowModelTestCase(TestCase):

    def setUp(self):
        self.user_a = make_user(username="usera")
        self.user_b = make_user(username="userb")
        self.user_c = make_user(username="userc")

    def test_user_can_follow_another_user(self):
        edge = UserFollow.objects.create(user=self.user_a, follow=self.user_b)

        self.assertEqual(edge.user, self.user_a)
        self.assertEqual(edge.follow, self.user_b)
        self.assertIsNotNone(edge.created_at)
        self.assertIsNotNone(edge.updated_at)
        self.assertEqual(UserFollow.objects.count(), 1)

    def test_duplicate_follow_not_allowed(self):
        UserFollow.objects.create(user=self.user_a, follow=self.user_b)

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                UserFollow.objects.create(user=self.user_a, follow=self.user_b)

    def test_reverse_direction_is_a_separate_edge(self):
        UserFollow.objects.create(user=self.user_a, follow=self.user_b)
        UserFollow.objects.create(user=self.user_b, follow=self.user_a)
        self.assertEqual(UserFollow.objects.count(), 2)

    def test_self_follow_rejected_by_check_constraint(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                UserFollow.objects.create(user=self.user_a, follow=self.user_a)

    def test_related_names_expose_both_directions(self):
        UserFollow.objects.create(user=self.user_a, follow=self.user_c)
        UserFollow.objects.create(user=self.user_b, follow=self.user_c)

        self.assertEqual(self.user_a.following_edges.count(), 1)
        self.assertCountEqual(
            self.user_c.follower_edges.values_list("user_id", flat=True),
            [self.user_a.id, self.user_b.id],
        )

    def test_edges_removed_with_user(self):
        UserFollow.objects.create(user=self.user_a, follow=self.user_b)
        self.user_b.delete()
        self.assertFalse(UserFollow.objects.exists())

    def test_string_representation(self):
        edge = UserFollow.objects.create(user=self.user_a, follow=self.user_b)
        self.assertEqual(str(edge), f"UserFollow(user={self.user_a.id}, follow={self.user_b.id})")

    def test_table_name(self):
        self.assertEqual(UserFollow._meta.db_table, "user_follow")
