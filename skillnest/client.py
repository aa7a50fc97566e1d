"""
HTTP client for the SkillNest API.

Mirrors what the browser app does: call an AI function, then persist the
result through the record endpoints. Chat replies are read as a raw event
stream and reassembled with ChatStreamParser.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

import requests

from skillnest.services.sse import ChatStreamParser

logger = logging.getLogger(__name__)


class SkillNestAPIError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class SkillNestClient:
    def __init__(
        self,
        base_url: str,
        user_id: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 120,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_id = user_id
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # --- plumbing ---

    def _headers(self) -> Dict[str, str]:
        headers = {"X-User-Id": self.user_id}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path.lstrip('/')}"

    @staticmethod
    def _check(response: requests.Response, default_message: str) -> None:
        if response.ok:
            return
        try:
            message = response.json().get("error") or default_message
        except ValueError:
            message = default_message
        raise SkillNestAPIError(response.status_code, message)

    def _request(self, method: str, path: str, default_message: str, **kwargs) -> Any:
        response = self.session.request(
            method, self._url(path), headers=self._headers(), timeout=self.timeout, **kwargs
        )
        self._check(response, default_message)
        return response.json()

    # --- profile ---

    def get_profile(self) -> Dict[str, Any]:
        return self._request("GET", "profile", "Profile not found")

    def save_profile(self, **fields) -> Dict[str, Any]:
        """Create or update the profile. Fields not passed keep their stored values."""
        return self._request("PUT", "profile", "Failed to update profile", json=fields)

    def user_context(self) -> Optional[Dict[str, Any]]:
        """Profile fields the mentor prompt uses, or None when there is no profile yet."""
        try:
            profile = self.get_profile()
        except SkillNestAPIError as e:
            if e.status_code == 404:
                return None
            raise
        return {
            "jobTitle": profile.get("job_title"),
            "targetRole": profile.get("target_role"),
            "skills": profile.get("skills"),
            "experienceYears": profile.get("experience_years"),
        }

    # --- AI functions + persistence ---

    def analyze_resume(self, resume_text: str, target_role: str = "", skills: Optional[List[str]] = None) -> Dict[str, Any]:
        result = self._request(
            "POST", "analyze-resume", "Analysis failed",
            json={"resumeText": resume_text, "targetRole": target_role, "skills": skills or []},
        )
        self._request(
            "POST", "resume-analyses", "Failed to save analysis",
            json={
                "resume_text": resume_text,
                "target_role": target_role,
                "ats_score": result.get("atsScore", 0),
                "strengths": result.get("strengths"),
                "improvements": result.get("improvements"),
                "missing_skills": result.get("missingSkills"),
                "suggestions": result.get("suggestions"),
                "rewritten_resume": result.get("rewrittenResume"),
            },
        )
        return result

    def analyze_job_match(self, resume_text: str, job_description: str) -> Dict[str, Any]:
        result = self._request(
            "POST", "analyze-job-match", "Analysis failed",
            json={"resumeText": resume_text, "jobDescription": job_description},
        )
        self._request(
            "POST", "job-analyses", "Failed to save analysis",
            json={
                "resume_text": resume_text,
                "job_description": job_description,
                "ats_score": result.get("ats_score", 0),
                "matched_keywords": result.get("matched_keywords"),
                "missing_keywords": result.get("missing_keywords"),
                "improvements": result.get("improvements"),
                "rewrite_suggestions": result.get("rewrite_suggestions"),
            },
        )
        return result

    def generate_roadmap(
        self,
        target_role: str,
        current_skills: Optional[List[str]] = None,
        experience_years: float = 0,
        timeframe: str = "6 months",
    ) -> Dict[str, Any]:
        roadmap = self._request(
            "POST", "generate-roadmap", "Failed to generate roadmap",
            json={
                "targetRole": target_role,
                "currentSkills": current_skills or [],
                "experienceYears": experience_years,
                "timeframe": timeframe,
            },
        )
        self._request(
            "POST", "career-goals", "Failed to save roadmap",
            json={
                "title": f"{target_role} Roadmap",
                "description": roadmap.get("description"),
                "roadmap": roadmap,
            },
        )
        return roadmap

    def roast_resume(self, resume_text: str, target_role: Optional[str] = None) -> Dict[str, Any]:
        # Roasts are for fun and are not stored
        return self._request(
            "POST", "roast-resume", "Roast failed",
            json={"resumeText": resume_text, "targetRole": target_role},
        )

    def extract_pdf_text(self, file_name: str, data: bytes) -> Dict[str, Any]:
        return self._request(
            "POST", "extract-pdf-text", "Failed to extract text",
            files={"file": (file_name, data, "application/pdf")},
        )

    # --- chat ---

    def chat_history(self, limit: int = 50) -> List[Dict[str, Any]]:
        return self._request("GET", "chat-messages", "Failed to load chat", params={"limit": limit})

    def clear_chat(self) -> int:
        return self._request("DELETE", "chat-messages", "Failed to clear chat")["deleted"]

    def _save_message(self, role: str, content: str) -> None:
        self._request("POST", "chat-messages", "Failed to save message", json={"role": role, "content": content})

    def send_chat_message(
        self,
        content: str,
        history: Optional[List[Dict[str, str]]] = None,
        user_context: Optional[Dict[str, Any]] = None,
        on_delta: Optional[Callable[[str], None]] = None,
    ) -> str:
        """
        Send one user turn and stream the mentor's reply.

        ``on_delta`` receives the reply text accumulated so far after every
        fragment. Both turns are stored; an empty reply is not.
        """
        content = content.strip()
        if not content:
            raise ValueError("Message content is empty")

        self._save_message("user", content)
        messages = [{"role": m["role"], "content": m["content"]} for m in history or []]
        messages.append({"role": "user", "content": content})

        body: Dict[str, Any] = {"messages": messages}
        if user_context is not None:
            body["userContext"] = user_context

        response = self.session.post(
            self._url("mentor-chat"),
            json=body,
            headers=self._headers(),
            timeout=self.timeout,
            stream=True,
        )
        reply = ""
        try:
            self._check(response, "Failed to get response")
            parser = ChatStreamParser()
            for chunk in response.iter_content(chunk_size=None):
                for delta in parser.feed(chunk):
                    reply += delta
                    if on_delta:
                        on_delta(reply)
                if parser.done:
                    break
            for delta in parser.finish():
                reply += delta
                if on_delta:
                    on_delta(reply)
        finally:
            response.close()

        if reply:
            self._save_message("assistant", reply)
        else:
            logger.warning("Mentor stream ended without any content")
        return reply
