"""Import every model so metadata is complete before create_all."""

from tourism.models.user import User  # noqa: F401
from tourism.models.place import Place  # noqa: F401
from tourism.models.review import Review  # noqa: F401
from tourism.models.category import Category  # noqa: F401
from tourism.models.favorite import Favorite  # noqa: F401
from tourism.models.shared_favorite import SharedFavoriteList, SharedFavoriteListPlace  # noqa: F401
from tourism.models.notification import Notification  # noqa: F401
