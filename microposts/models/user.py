"""Custom user model with a display name and avatar helpers."""

from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar

class User(AbstractUser):
    """Account that can post microposts, follow users and favorite posts."""

    email = models.EmailField(unique=True, blank=False)
    name = models.CharField(max_length=255, blank=True)

    class Meta:
        """Table name and default ordering for users."""
        db_table = "users"
        ordering = ["id"]

    def display_name(self):
        """Return the display name, falling back to the username."""
        return self.name or self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    def mini_gravatar(self):
        """Return smaller gravatar URL."""
        return self.gravatar(size=60)
