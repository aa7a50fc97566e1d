from sqlalchemy import Column, String, Text, DateTime, JSON
from skillnest.database import Base
from skillnest.models.base import new_id, utcnow

class CareerGoal(Base):
    __tablename__ = "career_goals"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    roadmap = Column(JSON, nullable=True)  # opaque nested roadmap as returned by the model
    status = Column(String, nullable=True, default="active")
    target_date = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
