from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Any, Dict

# Request bodies keep the camelCase field names the frontend sends.
# Required fields are Optional here so presence is reported with the
# documented 400 message instead of a generic validation error.

class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

# --- RESUME ANALYSIS ---

class AnalyzeResumeRequest(CamelModel):
    resume_text: Optional[str] = Field(default=None, alias="resumeText")
    target_role: Optional[str] = Field(default=None, alias="targetRole")
    skills: Optional[List[str]] = None

# --- JOB MATCH ---

class AnalyzeJobMatchRequest(CamelModel):
    resume_text: Optional[str] = Field(default=None, alias="resumeText")
    job_description: Optional[str] = Field(default=None, alias="jobDescription")

# --- ROADMAP ---

class GenerateRoadmapRequest(CamelModel):
    target_role: Optional[str] = Field(default=None, alias="targetRole")
    current_skills: Optional[List[str]] = Field(default=None, alias="currentSkills")
    experience_years: Optional[float] = Field(default=None, alias="experienceYears")
    timeframe: Optional[str] = None

# --- ROAST ---

class RoastResumeRequest(CamelModel):
    resume_text: Optional[str] = Field(default=None, alias="resumeText")
    target_role: Optional[str] = Field(default=None, alias="targetRole")

# --- MENTOR CHAT ---

class ChatTurn(BaseModel):
    role: str
    content: str

class UserContext(CamelModel):
    job_title: Optional[str] = Field(default=None, alias="jobTitle")
    target_role: Optional[str] = Field(default=None, alias="targetRole")
    skills: Optional[List[str]] = None
    experience_years: Optional[float] = Field(default=None, alias="experienceYears")

class MentorChatRequest(CamelModel):
    messages: Optional[List[ChatTurn]] = None
    user_context: Optional[UserContext] = Field(default=None, alias="userContext")

    def history(self) -> List[Dict[str, str]]:
        return [m.model_dump() for m in self.messages or []]

    def context(self) -> Optional[Dict[str, Any]]:
        if self.user_context is None:
            return None
        return self.user_context.model_dump(by_alias=True)

# --- PDF ---

class ExtractedText(CamelModel):
    text: str
    file_name: str = Field(alias="fileName")
