from rest_framework import serializers
from microposts.models import Micropost, User


class UserSerializer(serializers.ModelSerializer):
    """Public user fields with a gravatar avatar."""
    avatar_url = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "username", "name", "avatar_url"]
        read_only_fields = fields

    def get_avatar_url(self, obj):
        return obj.mini_gravatar()


class MicropostSerializer(serializers.ModelSerializer):
    """Serializer for Micropost with its author."""
    user = UserSerializer(read_only=True)

    class Meta:
        model = Micropost
        fields = ["id", "user", "content", "created_at", "updated_at"]
        read_only_fields = fields


class RelationshipCountsSerializer(serializers.Serializer):
    """Profile summary counts."""
    microposts = serializers.IntegerField()
    followings = serializers.IntegerField()
    followers = serializers.IntegerField()
    favorites = serializers.IntegerField()
