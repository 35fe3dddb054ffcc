"""Expose schemas for easier import."""

from tourism.schemas.base import IdRef, PlaceRef, SuccessResponse  # noqa: F401
from tourism.schemas.category import CategoryCreate, CategoryOut, CategoryUpdate  # noqa: F401
from tourism.schemas.favorite import (  # noqa: F401
    FavoriteOut,
    SharedFavoriteCreate,
    SharedFavoriteCreated,
    SharedFavoriteListOut,
    SharedFavoriteOut,
    ShareRef,
)
from tourism.schemas.notification import NotificationCreate, NotificationOut, NotificationRef  # noqa: F401
from tourism.schemas.place import PlaceCreate, PlaceOut, PlaceRecord, PlaceUpdate  # noqa: F401
from tourism.schemas.review import AdminReviewOut, ReviewCreate, ReviewOut  # noqa: F401
from tourism.schemas.stats import ViewStats  # noqa: F401
from tourism.schemas.upload import UploadRequest, UploadResult  # noqa: F401
from tourism.schemas.user import UserOut  # noqa: F401
