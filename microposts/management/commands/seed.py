"""Management command to seed the database with sample users, posts, follows and favorites."""

from random import Random

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Q

from microposts.models import Micropost, User
from microposts.services import FavoriteSet, FollowGraph

class Command(BaseCommand):
    """Management command to seed the database with sample data."""
    USER_COUNT = 20
    POSTS_PER_USER = 3
    FOLLOWS_PER_USER = 5
    FAVORITES_PER_USER = 4
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        """Add optional seeding size and seed flags."""
        parser.add_argument(
            "--users",
            type=int,
            default=self.USER_COUNT,
            help="Number of sample users to create.",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducible sample data.",
        )

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.rng = Random()

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        if options.get("seed") is not None:
            self.faker.seed_instance(options["seed"])
            self.rng.seed(options["seed"])
        with transaction.atomic():
            users = self.create_users(options["users"])
            posts = self.create_microposts(users)
            follow_count = self.seed_follows(users)
            favorite_count = self.seed_favorites(users, posts)
        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {len(users)} users, {len(posts)} microposts, "
                f"{follow_count} follows and {favorite_count} favorites."
            )
        )

    def create_users(self, count):
        """Create `count` users with unique usernames and emails."""
        users = []
        for _ in range(count):
            username = self.available_username()
            users.append(
                User.objects.create_user(
                    username=username,
                    email=f"{username}@example.org",
                    password=self.DEFAULT_PASSWORD,
                    name=self.faker.name(),
                )
            )
        return users

    def available_username(self):
        """Return a Faker username not yet taken by any user or email in the database."""
        base = self.faker.unique.user_name()
        username, suffix = base, 1
        while User.objects.filter(
            Q(username=username) | Q(email=f"{username}@example.org")
        ).exists():
            suffix += 1
            username = f"{base}{suffix}"
        return username

    def create_microposts(self, users):
        """Create a few microposts per user."""
        posts = []
        for user in users:
            for _ in range(self.POSTS_PER_USER):
                posts.append(
                    Micropost.objects.create(user=user, content=self.faker.sentence(nb_words=10)[:255])
                )
        return posts

    def seed_follows(self, users):
        """Have each user follow a random sample of the others."""
        follow_graph = FollowGraph()
        created = 0
        for user in users:
            others = [u for u in users if u.id != user.id]
            for target in self.rng.sample(others, min(self.FOLLOWS_PER_USER, len(others))):
                if follow_graph.follow(user.id, target.id):
                    created += 1
        return created

    def seed_favorites(self, users, posts):
        """Have each user favorite a random sample of posts."""
        favorite_set = FavoriteSet()
        created = 0
        for user in users:
            for post in self.rng.sample(posts, min(self.FAVORITES_PER_USER, len(posts))):
                if favorite_set.favorite(user.id, post.id):
                    created += 1
        return created
