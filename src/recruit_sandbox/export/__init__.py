"""Text and markdown export of generated artifacts."""

from recruit_sandbox.export.text_export import (
    job_description_to_text,
    outreach_to_text,
    session_to_markdown,
)

__all__ = ["job_description_to_text", "outreach_to_text", "session_to_markdown"]
