from sqlalchemy import Column, String, Integer, DateTime
from skillnest.database import Base
from skillnest.models.base import new_id, utcnow

class SkillProgress(Base):
    __tablename__ = "skill_progress"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    skill_name = Column(String, nullable=False)
    category = Column(String, nullable=True)
    current_level = Column(Integer, nullable=True, default=0)
    target_level = Column(Integer, nullable=True, default=100)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
