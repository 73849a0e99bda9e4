"""
Markdown export of meeting notes.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from meeting_notes.models.schemas import TranscriptResult
from meeting_notes.utils.logger import logging

ANALYSIS_UNAVAILABLE_NOTICE = (
    "> LeMUR analysis unavailable on current plan. Upgrade to enable AI summaries."
)


def generate_markdown(result: TranscriptResult, generated_at: Optional[datetime] = None) -> str:
    """
    Serialize a transcript result into a Markdown document.

    Args:
        result: Transcript and analysis to export
        generated_at: Timestamp for the header (now if None)

    Returns:
        Markdown text
    """
    generated_at = generated_at or datetime.now()

    sections: List[str] = []
    if result.summary_available and result.summary:
        sections.append(f"## Summary\n\n{result.summary}")
    if result.action_items:
        sections.append(f"## Action Items\n\n{result.action_items}")
    if result.topics_available and result.topics:
        sections.append(f"## Topics Discussed\n\n{result.topics}")
    if not sections:
        sections.append(ANALYSIS_UNAVAILABLE_NOTICE)

    speaker_lines = "\n\n".join(
        f"**Speaker {u.speaker}:** {u.text}" for u in result.utterances
    )

    analysis = "".join(f"{section}\n\n---\n\n" for section in sections)

    return (
        "# Meeting Notes\n\n"
        f"*Generated on {generated_at.strftime('%Y-%m-%d %H:%M:%S')}*\n\n"
        "---\n\n"
        f"{analysis}"
        "## Full Transcript\n\n"
        f"{speaker_lines}\n"
    )


def save_markdown(markdown: str, output_file: str) -> Path:
    """Write a Markdown document to disk."""
    output_path = Path(output_file)
    output_path.write_text(markdown, encoding="utf-8")
    logging.info(f"Meeting notes saved to: {output_path}")
    return output_path
