from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from app.core.database import Base, generate_id, utcnow


class Category(Base):
    __tablename__ = "category"

    id = Column(String, primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    label = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Tools keep existing when their category goes away
    tools = relationship("Tool", back_populates="category")
