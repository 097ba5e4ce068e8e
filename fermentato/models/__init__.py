"""Database models."""
from fermentato.models.base import Base
from fermentato.models.user import User, OAuthAccount, UserSession, Role
from fermentato.models.catalog import Brewery, Beer
from fermentato.models.pub import Pub, PubRating
from fermentato.models.listing import TapListEntry, BottleListEntry, BottleSize
from fermentato.models.menu import MenuCategory, MenuItem
from fermentato.models.favorite import Favorite, BeerTasting, ItemType, TastingFormat
from fermentato.models.review import Review, Report, ReviewStatus, ReportStatus, ReportTarget
from fermentato.models.publican import PublicanRequest, RequestStatus

__all__ = [
    "Base",
    "User",
    "OAuthAccount",
    "UserSession",
    "Role",
    "Brewery",
    "Beer",
    "Pub",
    "PubRating",
    "TapListEntry",
    "BottleListEntry",
    "BottleSize",
    "MenuCategory",
    "MenuItem",
    "Favorite",
    "BeerTasting",
    "ItemType",
    "TastingFormat",
    "Review",
    "Report",
    "ReviewStatus",
    "ReportStatus",
    "ReportTarget",
    "PublicanRequest",
    "RequestStatus",
]
