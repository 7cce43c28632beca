from datetime import datetime
import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String

from app.models.base import Base


class GalleryItem(Base):
    __tablename__ = "gallery_items"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # bilingual {"en": ..., "ar": ...}
    title = Column(JSON, nullable=False)
    description = Column(JSON, nullable=True)
    category = Column(JSON, nullable=False)

    image = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    order = Column(Integer, nullable=False, default=0)  # lower first

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
