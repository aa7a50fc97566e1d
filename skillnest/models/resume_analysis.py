from sqlalchemy import Column, String, Text, Float, DateTime, JSON
from skillnest.database import Base
from skillnest.models.base import new_id, utcnow

class ResumeAnalysis(Base):
    __tablename__ = "resume_analyses"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    resume_text = Column(Text, nullable=False)
    target_role = Column(String, nullable=True)
    ats_score = Column(Float, nullable=False, default=0)
    strengths = Column(JSON, nullable=True)
    improvements = Column(JSON, nullable=True)
    missing_skills = Column(JSON, nullable=True)
    suggestions = Column(Text, nullable=True)
    rewritten_resume = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
