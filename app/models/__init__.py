from .base import Base
from .admin import Admin, AdminRole
from .menu.menu_item import MenuItem
from .gallery.gallery_item import GalleryItem
