from sqlalchemy import Column, String, Text, Float, DateTime, JSON
from skillnest.database import Base
from skillnest.models.base import new_id, utcnow

class JobAnalysis(Base):
    __tablename__ = "job_analyses"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    resume_text = Column(Text, nullable=False)
    job_description = Column(Text, nullable=False)
    ats_score = Column(Float, nullable=False, default=0)
    matched_keywords = Column(JSON, nullable=True)
    missing_keywords = Column(JSON, nullable=True)
    improvements = Column(JSON, nullable=True)
    rewrite_suggestions = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
