from sqlalchemy import Column, String, Text, Boolean, DateTime
from skillnest.database import Base
from skillnest.models.base import new_id, utcnow

class Resume(Base):
    __tablename__ = "resumes"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    file_name = Column(String, nullable=False)
    file_url = Column(String, nullable=True)
    parsed_text = Column(Text, nullable=False)
    is_primary = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
