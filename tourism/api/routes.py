"""Root API router: one sub-router per resource, one route per procedure."""

from fastapi import APIRouter

from tourism.api.endpoints import (
    auth,
    categories,
    favorites,
    notifications,
    places,
    reviews,
    shared_favorites,
    stats,
    upload,
)

router = APIRouter()

router.include_router(auth.router)
router.include_router(places.router)
router.include_router(reviews.router)
router.include_router(categories.router)
router.include_router(favorites.router)
router.include_router(shared_favorites.router)
router.include_router(notifications.router)
router.include_router(stats.router)
router.include_router(upload.router)
