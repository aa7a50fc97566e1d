from .profile import Profile
from .resume import Resume
from .resume_analysis import ResumeAnalysis
from .job_analysis import JobAnalysis
from .chat_message import ChatMessage
from .career_goal import CareerGoal
from .skill_progress import SkillProgress
