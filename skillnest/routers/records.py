"""
Data store REST interface.

Flat, user-owned rows. Everything is append-only except the profile, and the
only delete is the bulk chat-history clear.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from skillnest.core.exceptions import NotFoundError
from skillnest.core.security import get_current_user_id, require_function_key
from skillnest.database import get_db
from skillnest.models import (
    CareerGoal,
    ChatMessage,
    JobAnalysis,
    Profile,
    Resume,
    ResumeAnalysis,
    SkillProgress,
)
from skillnest.schemas.records import (
    AnalyticsSummary,
    CareerGoalCreate,
    CareerGoalResponse,
    ChatMessageCreate,
    ChatMessageResponse,
    ClearResult,
    JobAnalysisCreate,
    JobAnalysisResponse,
    ProfileResponse,
    ProfileUpdate,
    ResumeAnalysisCreate,
    ResumeAnalysisResponse,
    ResumeCreate,
    ResumeResponse,
    SkillProgressCreate,
    SkillProgressResponse,
)
from skillnest.services.analytics import build_summary

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_function_key)])


def _insert(db: Session, row):
    db.add(row)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(row)
    return row


# --- PROFILE ---

@router.get("/profile", response_model=ProfileResponse)
def get_profile(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    profile = db.query(Profile).filter(Profile.user_id == user_id).first()
    if not profile:
        raise NotFoundError("Profile")
    return profile


@router.put("/profile", response_model=ProfileResponse)
def upsert_profile(
    update: ProfileUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Update the fields sent in the body, creating the row on first save."""
    profile = db.query(Profile).filter(Profile.user_id == user_id).first()
    if profile is None:
        profile = Profile(user_id=user_id)
        db.add(profile)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(profile, field, value)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(profile)
    logger.info(f"Profile saved for user {user_id}")
    return profile


# --- RESUMES ---

@router.get("/resumes", response_model=List[ResumeResponse])
def list_resumes(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return (
        db.query(Resume)
        .filter(Resume.user_id == user_id)
        .order_by(Resume.created_at.desc())
        .all()
    )


@router.post("/resumes", response_model=ResumeResponse, status_code=201)
def create_resume(
    resume: ResumeCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return _insert(db, Resume(user_id=user_id, **resume.model_dump()))


# --- RESUME ANALYSES ---

@router.get("/resume-analyses", response_model=List[ResumeAnalysisResponse])
def list_resume_analyses(
    limit: int = Query(default=10, ge=1, le=500),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return (
        db.query(ResumeAnalysis)
        .filter(ResumeAnalysis.user_id == user_id)
        .order_by(ResumeAnalysis.created_at.desc())
        .limit(limit)
        .all()
    )


@router.get("/resume-analyses/latest", response_model=ResumeAnalysisResponse)
def latest_resume_analysis(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    analysis = (
        db.query(ResumeAnalysis)
        .filter(ResumeAnalysis.user_id == user_id)
        .order_by(ResumeAnalysis.created_at.desc())
        .first()
    )
    if not analysis:
        raise NotFoundError("Resume analysis")
    return analysis


@router.post("/resume-analyses", response_model=ResumeAnalysisResponse, status_code=201)
def create_resume_analysis(
    analysis: ResumeAnalysisCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return _insert(db, ResumeAnalysis(user_id=user_id, **analysis.model_dump()))


# --- JOB ANALYSES ---

@router.get("/job-analyses", response_model=List[JobAnalysisResponse])
def list_job_analyses(
    limit: int = Query(default=10, ge=1, le=500),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return (
        db.query(JobAnalysis)
        .filter(JobAnalysis.user_id == user_id)
        .order_by(JobAnalysis.created_at.desc())
        .limit(limit)
        .all()
    )


@router.post("/job-analyses", response_model=JobAnalysisResponse, status_code=201)
def create_job_analysis(
    analysis: JobAnalysisCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return _insert(db, JobAnalysis(user_id=user_id, **analysis.model_dump()))


# --- CHAT HISTORY ---

@router.get("/chat-messages", response_model=List[ChatMessageResponse])
def list_chat_messages(
    limit: int = Query(default=50, ge=1, le=500),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return (
        db.query(ChatMessage)
        .filter(ChatMessage.user_id == user_id)
        .order_by(ChatMessage.created_at.asc())
        .limit(limit)
        .all()
    )


@router.post("/chat-messages", response_model=ChatMessageResponse, status_code=201)
def create_chat_message(
    message: ChatMessageCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return _insert(db, ChatMessage(user_id=user_id, **message.model_dump()))


@router.delete("/chat-messages", response_model=ClearResult)
def clear_chat_messages(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    deleted = (
        db.query(ChatMessage)
        .filter(ChatMessage.user_id == user_id)
        .delete(synchronize_session=False)
    )
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Cleared {deleted} chat messages for user {user_id}")
    return ClearResult(deleted=deleted)


# --- CAREER GOALS ---

@router.get("/career-goals", response_model=List[CareerGoalResponse])
def list_career_goals(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return (
        db.query(CareerGoal)
        .filter(CareerGoal.user_id == user_id)
        .order_by(CareerGoal.created_at.desc())
        .all()
    )


@router.post("/career-goals", response_model=CareerGoalResponse, status_code=201)
def create_career_goal(
    goal: CareerGoalCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return _insert(db, CareerGoal(user_id=user_id, **goal.model_dump()))


# --- SKILL PROGRESS ---

@router.get("/skill-progress", response_model=List[SkillProgressResponse])
def list_skill_progress(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return (
        db.query(SkillProgress)
        .filter(SkillProgress.user_id == user_id)
        .order_by(SkillProgress.current_level.desc())
        .all()
    )


@router.post("/skill-progress", response_model=SkillProgressResponse, status_code=201)
def create_skill_progress(
    skill: SkillProgressCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return _insert(db, SkillProgress(user_id=user_id, **skill.model_dump()))


# --- ANALYTICS ---

@router.get("/analytics", response_model=AnalyticsSummary)
def get_analytics(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return build_summary(db, user_id)
