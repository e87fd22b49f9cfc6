from sqlalchemy import Column, String, Integer, DateTime

from app.core.database import Base, generate_id, utcnow


class Image(Base):
    """
    Metadata for a file hosted in object storage (uploads, favicons, screenshots).
    """
    __tablename__ = "image"

    id = Column(String, primary_key=True, default=generate_id)
    url = Column(String, unique=True, index=True, nullable=False)
    thumbnail_url = Column(String, nullable=True)
    file_id = Column(String, nullable=True)  # storage key
    filename = Column(String, nullable=True)
    original_name = Column(String, nullable=True)
    size = Column(Integer, nullable=True)  # bytes
    mime_type = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
