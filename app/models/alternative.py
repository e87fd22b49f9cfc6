from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Index, Table
from sqlalchemy.orm import relationship

from app.core.database import Base, generate_id, utcnow

alternatives_to_tools = Table(
    "alternatives_to_tools",
    Base.metadata,
    Column("alternative_id", String, ForeignKey("alternative.id", ondelete="CASCADE"), primary_key=True),
    Column("tool_id", String, ForeignKey("tool.id", ondelete="CASCADE"), primary_key=True),
    Index("alternatives_to_tools_toolId_idx", "tool_id"),
    Index("alternatives_to_tools_alternativeId_idx", "alternative_id"),
)


class Alternative(Base):
    """
    The well-known product a tool is an alternative to
    (e.g. a React library that Vue tools replace).
    """
    __tablename__ = "alternative"

    id = Column(String, primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    website_url = Column(String, nullable=False)
    favicon_url = Column(String, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_open_source = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    tools = relationship("Tool", secondary=alternatives_to_tools, back_populates="alternatives")
