import math
from typing import Any, Dict

from sqlalchemy.orm import Session

from skillnest.models import CareerGoal, JobAnalysis, ResumeAnalysis, SkillProgress


def _rounded_mean(values) -> int:
    values = [v for v in values if v is not None]
    if not values:
        return 0
    # Halves round up
    return int(math.floor(sum(values) / len(values) + 0.5))


def build_summary(db: Session, user_id: str) -> Dict[str, Any]:
    """Dashboard numbers: counts, rounded averages and the ATS score history (oldest first)."""
    analyses = (
        db.query(ResumeAnalysis)
        .filter(ResumeAnalysis.user_id == user_id)
        .order_by(ResumeAnalysis.created_at.asc())
        .all()
    )
    skills = db.query(SkillProgress).filter(SkillProgress.user_id == user_id).all()
    goals = db.query(CareerGoal).filter(CareerGoal.user_id == user_id).count()
    job_analyses = db.query(JobAnalysis).filter(JobAnalysis.user_id == user_id).count()

    return {
        "resume_analyses": len(analyses),
        "average_ats_score": _rounded_mean(a.ats_score for a in analyses),
        "skills_tracked": len(skills),
        "average_skill_level": _rounded_mean(s.current_level for s in skills),
        "career_goals": goals,
        "job_analyses": job_analyses,
        "score_history": [
            {"name": f"Analysis {i}", "score": a.ats_score, "date": a.created_at}
            for i, a in enumerate(analyses, start=1)
        ],
    }
