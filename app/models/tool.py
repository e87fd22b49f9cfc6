from sqlalchemy import Column, String, Text, Boolean, Integer, DateTime, ForeignKey, Index, event
from sqlalchemy.orm import relationship

from app.core.database import Base, generate_id, utcnow
from app.models.alternative import alternatives_to_tools


class Tool(Base):
    __tablename__ = "tool"
    __table_args__ = (
        Index("Tool_id_slug_idx", "id", "slug"),
        Index("Tool_descriptionSearch_idx", "description_search"),
    )

    id = Column(String, primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=False)
    website_url = Column(String, nullable=False)
    screenshot_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    favicon_url = Column(String, nullable=True)
    content = Column(Text, nullable=True)
    tagline = Column(String, nullable=True)
    is_open_source = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    submitter_name = Column(String, nullable=True)
    submitter_email = Column(String, nullable=True)
    page_views = Column(Integer, default=0)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    category_id = Column(String, ForeignKey("category.id", ondelete="SET NULL"), nullable=True)
    account_id = Column(String, ForeignKey("account.id", ondelete="SET NULL"), nullable=True)

    # Lower-cased name/tagline/description, kept in sync by the listeners below
    description_search = Column(Text, nullable=True)

    category = relationship("Category", back_populates="tools")
    account = relationship("Account", back_populates="tools")
    alternatives = relationship("Alternative", secondary=alternatives_to_tools, back_populates="tools")
    likes = relationship("Like", back_populates="tool", cascade="all, delete-orphan")


def build_description_search(target: Tool) -> str:
    parts = [target.name, target.tagline, target.description]
    return " ".join(part.strip() for part in parts if part).lower()


@event.listens_for(Tool, "before_insert")
@event.listens_for(Tool, "before_update")
def _refresh_description_search(mapper, connection, target):
    target.description_search = build_description_search(target)
