"""
User profile. One row per user, the only record the API updates in place.
"""
from sqlalchemy import Column, String, Integer, Float, DateTime, JSON
from skillnest.database import Base
from skillnest.models.base import new_id, utcnow


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    role = Column(String, nullable=True)  # student | job_seeker
    job_title = Column(String, nullable=True)
    target_role = Column(String, nullable=True)
    skills = Column(JSON, nullable=True)
    experience_years = Column(Integer, nullable=True)
    career_readiness_score = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Profile {self.user_id}>"
