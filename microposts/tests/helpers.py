import uuid

from microposts.models import Micropost, User


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        name=kwargs.pop("name", "John Doe"),
        **kwargs,
    )


def make_micropost(*, user=None, content="hello world", **extra):
    """Create and return a micropost, creating an author when none is given."""
    if user is None:
        user = make_user(username=f"author_{uuid.uuid4().hex[:6]}")
    return Micropost.objects.create(user=user, content=content, **extra)
