import uuid

from sqlalchemy import Column, String, TIMESTAMP, func
from sqlalchemy.orm import relationship

from moderation_admin.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    nickname = Column(String(50), nullable=False, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    role = Column(String(20), nullable=False, default="member", index=True)
    tier = Column(String(20), nullable=False, default="basic", index=True)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    posts = relationship("Post", back_populates="owner")
