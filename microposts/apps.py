from django.apps import AppConfig

class MicropostsConfig(AppConfig):
    """Django app config for microposts, follows and favorites."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'microposts'
