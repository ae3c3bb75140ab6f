"""Prompt do rascunho de e-mail de follow-up."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

DEFAULT_JOB_TITLE = "a professional"

FOLLOW_UP_EMAIL_TEMPLATE = """You are a professional about to send a follow-up email. Your goal is to strengthen the connection and open doors to future opportunities.

**Task:**
Write a draft email to {name}, who works as {job_title} at {company}.

**Context (assume):**
- You recently met them at an event (for example a seminar, a trade show or a business meeting).
- The conversation went well and you want to continue the professional relationship.

**Email instructions:**
1.  **Subject line:** Write a short, personal and clear subject, for example: "Great Meeting You at [Event Name]" or "Continuing Our Conversation".
2.  **Opening paragraph:** Greet {name} personally and mention where and when you met to refresh their memory.
3.  **Body paragraph:**
    -   Mention one specific, interesting detail from your conversation with them. This shows you were really listening. (Example: "I was really interested in your view on...")
    -   State your intent clearly: you would like to stay connected to explore a possible collaboration or simply to grow your professional network.
4.  **Closing paragraph (call to action):**
    -   Suggest a concrete but low-pressure next step. Example: "Perhaps we could continue this discussion over coffee sometime?" or "I would be glad to connect on LinkedIn."
    -   Close with a professional sign-off such as "Best regards," or "Thank you,".

**Constraints:**
-   Tone: professional, sincere and to the point.
-   Length: keep the email short, ideally under 120 words."""


def format_follow_up_email_prompt(card: Mapping[str, Any]) -> str:
    """Formata o prompt a partir dos campos do card.

    Args:
        card: Card serializado (chaves name, jobTitle, company)
    """
    return FOLLOW_UP_EMAIL_TEMPLATE.format(
        name=_text(card.get("name")),
        job_title=_text(card.get("jobTitle")) or DEFAULT_JOB_TITLE,
        company=_text(card.get("company")),
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
