from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.core.database import Base, generate_id, utcnow


class Like(Base):
    __tablename__ = "like"
    __table_args__ = (
        UniqueConstraint("tool_id", "account_id", name="Like_toolId_accountId_key"),
    )

    id = Column(String, primary_key=True, default=generate_id)
    account_id = Column(String, ForeignKey("account.id", ondelete="CASCADE"), index=True)
    tool_id = Column(String, ForeignKey("tool.id", ondelete="CASCADE"), index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    account = relationship("Account", back_populates="likes")
    tool = relationship("Tool", back_populates="likes")
