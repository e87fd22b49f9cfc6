from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from app.core.database import Base, generate_id, utcnow


class Account(Base):
    """
    Local record of a user from the external identity provider.
    Synced on sign-in; the role is only ever raised out of band.
    """
    __tablename__ = "account"

    id = Column(String, primary_key=True, default=generate_id)
    user_id = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    image = Column(String, nullable=True)
    role = Column(String, nullable=False, default="user", server_default="user")

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    tools = relationship("Tool", back_populates="account")
    likes = relationship("Like", back_populates="account", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
