from sqlalchemy import Column, String, Text, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship

from moderation_admin.database import Base
from moderation_admin.models.user import _new_id


class Report(Base):
    __tablename__ = "reports"

    id = Column(String(36), primary_key=True, default=_new_id)
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="SET NULL"), nullable=True, index=True)
    reporter_user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    reason = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="pending", index=True)
    resolver_admin_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)
    resolved_at = Column(TIMESTAMP, nullable=True)

    post = relationship("Post")
    reporter = relationship("User", foreign_keys=[reporter_user_id])
