from .feed_view import *
from .favorites_views import *
from .follow_views import *
from .api_views import *
