from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# Row shapes follow the table columns (snake_case), as the data store's REST
# interface exposes them.

# --- PROFILE ---

class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[str] = None
    job_title: Optional[str] = None
    target_role: Optional[str] = None
    skills: Optional[List[str]] = None
    experience_years: Optional[int] = Field(default=None, ge=0)
    career_readiness_score: Optional[float] = None

class ProfileResponse(ProfileUpdate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

# --- RESUMES ---

class ResumeCreate(BaseModel):
    file_name: str
    file_url: Optional[str] = None
    parsed_text: str
    is_primary: Optional[bool] = False

class ResumeResponse(ResumeCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime

# --- RESUME ANALYSES ---

class ResumeAnalysisCreate(BaseModel):
    resume_text: str
    target_role: Optional[str] = None
    ats_score: float = 0
    strengths: Optional[List[str]] = None
    improvements: Optional[List[str]] = None
    missing_skills: Optional[List[str]] = None
    suggestions: Optional[str] = None
    rewritten_resume: Optional[str] = None

class ResumeAnalysisResponse(ResumeAnalysisCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime

# --- JOB ANALYSES ---

class JobAnalysisCreate(BaseModel):
    resume_text: str
    job_description: str
    ats_score: float = 0
    matched_keywords: Optional[List[str]] = None
    missing_keywords: Optional[List[str]] = None
    improvements: Optional[List[str]] = None
    rewrite_suggestions: Optional[str] = None

class JobAnalysisResponse(JobAnalysisCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime

# --- CHAT ---

class ChatMessageCreate(BaseModel):
    role: Literal["user", "assistant"]
    content: str = Field(min_length=1)

class ChatMessageResponse(ChatMessageCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime

class ClearResult(BaseModel):
    deleted: int

# --- CAREER GOALS ---

class CareerGoalCreate(BaseModel):
    title: str
    description: Optional[str] = None
    roadmap: Optional[Dict[str, Any]] = None
    status: Optional[str] = "active"
    target_date: Optional[str] = None

class CareerGoalResponse(CareerGoalCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime

# --- SKILL PROGRESS ---

class SkillProgressCreate(BaseModel):
    skill_name: str
    category: Optional[str] = None
    current_level: Optional[int] = Field(default=0, ge=0, le=100)
    target_level: Optional[int] = Field(default=100, ge=0, le=100)

class SkillProgressResponse(SkillProgressCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime

# --- ANALYTICS ---

class ScorePoint(BaseModel):
    name: str
    score: float
    date: datetime

class AnalyticsSummary(BaseModel):
    resume_analyses: int
    average_ats_score: int
    skills_tracked: int
    average_skill_level: int
    career_goals: int
    job_analyses: int
    score_history: List[ScorePoint]
