from datetime import datetime
import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String

from app.models.base import Base


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # bilingual {"en": ..., "ar": ...}
    name = Column(JSON, nullable=False)
    description = Column(JSON, nullable=False)
    category = Column(JSON, nullable=False)

    price = Column(Float, nullable=False)
    original_price = Column(Float, nullable=True)
    is_discounted = Column(Boolean, nullable=False, default=False)
    discount_percentage = Column(Float, nullable=False, default=0)

    image = Column(String, nullable=True)

    # {"en": [...], "ar": [...]}
    ingredients = Column(JSON, nullable=False, default=lambda: {"en": [], "ar": []})
    allergens = Column(JSON, nullable=False, default=lambda: {"en": [], "ar": []})
    # {"calories", "protein", "carbs", "fat"}
    nutritional_info = Column(JSON, nullable=True)

    is_available = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    tags = Column(JSON, nullable=False, default=list)
    order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
