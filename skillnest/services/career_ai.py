import logging
from typing import Any, Dict, List, Optional

from skillnest.core import prompts
from skillnest.core.exceptions import AIError, MissingFieldError
from skillnest.services import llm_client
from skillnest.services.json_repair import extract_json_object, parse_or_fallback

logger = logging.getLogger(__name__)

CHAT_ROLES = {"user", "assistant"}


def _messages(system_prompt: str, user_content: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_content},
    ]


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def analyze_resume(resume_text: Optional[str], target_role: Optional[str], skills: Optional[List[str]]) -> Dict[str, Any]:
    """
    ATS-style review of a resume for a target role.
    Unparseable model output is replaced by the fallback analysis.
    """
    if _is_blank(resume_text):
        raise MissingFieldError("Resume text is required")

    logger.info("Analyzing resume", extra={"target_role": target_role})
    user_content = prompts.get_prompt(
        prompts.RESUME_ANALYSIS_USER_TEMPLATE,
        target_role=target_role or "",
        resume_text=resume_text,
        skills=prompts.join_or_default(skills, "Not provided"),
    )
    content = llm_client.complete(
        _messages(prompts.RESUME_ANALYSIS_SYSTEM, user_content), temperature=0.7
    )
    return parse_or_fallback(content, prompts.resume_analysis_fallback(resume_text))


def analyze_job_match(resume_text: Optional[str], job_description: Optional[str]) -> Dict[str, Any]:
    """Keyword comparison of a resume against a job description."""
    if _is_blank(resume_text) or _is_blank(job_description):
        raise MissingFieldError("Resume text and job description are required")

    logger.info("Analyzing job match")
    user_content = prompts.get_prompt(
        prompts.JOB_MATCH_USER_TEMPLATE,
        resume_text=resume_text,
        job_description=job_description,
    )
    content = llm_client.complete(
        _messages(prompts.JOB_MATCH_SYSTEM, user_content), temperature=0.7, json_mode=True
    )
    return parse_or_fallback(content, prompts.JOB_MATCH_FALLBACK)


def generate_roadmap(
    target_role: Optional[str],
    current_skills: Optional[List[str]],
    experience_years: Optional[float],
    timeframe: Optional[str],
) -> Dict[str, Any]:
    """
    Phase-by-phase learning roadmap. The result is opaque nested JSON; there is
    no meaningful fallback, so unparseable output is an error.
    """
    if _is_blank(target_role):
        raise MissingFieldError("Target role is required")

    logger.info("Generating roadmap", extra={"target_role": target_role, "timeframe": timeframe})
    user_content = prompts.get_prompt(
        prompts.ROADMAP_USER_TEMPLATE,
        target_role=target_role,
        current_skills=prompts.join_or_default(current_skills, "None specified"),
        experience_years=_format_years(experience_years),
        timeframe=timeframe or "6 months",
    )
    content = llm_client.complete(
        _messages(prompts.ROADMAP_SYSTEM, user_content), temperature=0.7
    )
    try:
        return extract_json_object(content)
    except ValueError:
        logger.error("Failed to parse roadmap response", extra={"raw": content[:2000]})
        raise AIError("Failed to generate roadmap. Please try again.")


def roast_resume(resume_text: Optional[str], target_role: Optional[str]) -> Dict[str, Any]:
    if _is_blank(resume_text):
        raise MissingFieldError("Resume text is required")

    role_suffix = f" for someone trying to become a {target_role}" if target_role else ""
    user_content = prompts.get_prompt(
        prompts.ROAST_USER_TEMPLATE, role_suffix=role_suffix, resume_text=resume_text
    )
    # Higher temperature for more creative/funny responses
    content = llm_client.complete(
        _messages(prompts.ROAST_SYSTEM, user_content), temperature=0.9
    )
    return parse_or_fallback(content, prompts.ROAST_FALLBACK)


def build_mentor_system_prompt(user_context: Optional[Dict[str, Any]]) -> str:
    context_block = ""
    if user_context is not None:
        context_block = prompts.get_prompt(
            prompts.MENTOR_USER_CONTEXT_TEMPLATE,
            job_title=user_context.get("jobTitle") or "Not specified",
            target_role=user_context.get("targetRole") or "Not specified",
            skills=prompts.join_or_default(user_context.get("skills"), "Not specified"),
            experience_years=_format_years(user_context.get("experienceYears")),
        )
    return prompts.get_prompt(prompts.MENTOR_CHAT_SYSTEM_TEMPLATE, user_context=context_block)


def mentor_chat(messages: Optional[List[Dict[str, str]]], user_context: Optional[Dict[str, Any]]) -> llm_client.StreamHandle:
    """Open a streamed mentor reply for the given conversation history."""
    if not messages:
        raise MissingFieldError("Messages are required")
    history = []
    for message in messages:
        if message.get("role") not in CHAT_ROLES or _is_blank(message.get("content")):
            raise MissingFieldError("Each message needs a role (user or assistant) and content")
        history.append({"role": message["role"], "content": message["content"]})

    logger.info(f"Mentor chat with {len(history)} messages")
    return llm_client.open_stream(
        [{"role": "system", "content": build_mentor_system_prompt(user_context)}, *history]
    )


def _format_years(value: Optional[float]) -> str:
    if not value:
        return "0"
    # 3.0 -> "3", 2.5 -> "2.5"
    return f"{value:g}"
