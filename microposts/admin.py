from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from microposts.models import Favorite, Micropost, User, UserFollow


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for users with the display name field."""
    list_display = ('username', 'name', 'email', 'is_staff')
    search_fields = ('username', 'name', 'email')
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Profile", {"fields": ("name",)}),
    )


@admin.register(Micropost)
class MicropostAdmin(admin.ModelAdmin):
    """Admin configuration for microposts."""
    list_display = ('short_content', 'user', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('content', 'user__username')

    def short_content(self, obj):
        """Shorten post content for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content
    short_content.short_description = "Content"


@admin.register(UserFollow)
class UserFollowAdmin(admin.ModelAdmin):
    """Admin configuration for follow edges."""
    list_display = ('user', 'follow', 'created_at')
    search_fields = ('user__username', 'follow__username')


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    """Admin configuration for favorite edges."""
    list_display = ('user', 'micropost', 'created_at')
    search_fields = ('user__username', 'micropost__content')
