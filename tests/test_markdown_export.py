"""
Tests for the Markdown export module.
"""

from datetime import datetime

from meeting_notes.core.markdown_export import (
    ANALYSIS_UNAVAILABLE_NOTICE,
    generate_markdown,
    save_markdown,
)

GENERATED_AT = datetime(2026, 3, 14, 9, 30, 0)


def test_speaker_lines_in_order(full_result):
    """Every utterance becomes a bold speaker line in conversation order."""
    markdown = generate_markdown(full_result, GENERATED_AT)
    lines = markdown.splitlines()

    first = lines.index("**Speaker A:** Hello")
    second = lines.index("**Speaker B:** Hi there")
    assert first < second


def test_header_and_sections(full_result):
    """A full result has the header and all analysis sections."""
    markdown = generate_markdown(full_result, GENERATED_AT)

    assert markdown.startswith("# Meeting Notes\n\n*Generated on 2026-03-14 09:30:00*\n\n---\n\n")
    assert "## Summary\n\nThe team greeted each other.\n\n---\n\n" in markdown
    assert "## Action Items\n\n- Send the agenda\n\n---\n\n" in markdown
    assert "## Topics Discussed\n\n- Greetings\n\n---\n\n" in markdown
    assert markdown.index("## Topics Discussed") < markdown.index("## Full Transcript")
    assert ANALYSIS_UNAVAILABLE_NOTICE not in markdown
    assert markdown.endswith("**Speaker B:** Hi there\n")


def test_unavailable_sections_are_omitted(full_result):
    """Sections whose flag is false are left out."""
    partial = full_result.model_copy(update={
        "topics_available": False,
        "action_items": None,
    })

    markdown = generate_markdown(partial, GENERATED_AT)

    assert "## Summary" in markdown
    assert "## Action Items" not in markdown
    assert "## Topics Discussed" not in markdown


def test_transcript_only(transcript_only_result):
    """Without any analysis a notice replaces the sections."""
    markdown = generate_markdown(transcript_only_result, GENERATED_AT)

    assert "## Summary" not in markdown
    assert ANALYSIS_UNAVAILABLE_NOTICE in markdown
    assert "## Full Transcript\n\n**Speaker A:** Hello\n\n**Speaker B:** Hi there\n" in markdown


def test_save_markdown(tmp_path, full_result):
    output_file = tmp_path / "notes-output.md"

    path = save_markdown(generate_markdown(full_result, GENERATED_AT), str(output_file))

    assert path == output_file
    assert "**Speaker A:** Hello" in output_file.read_text(encoding="utf-8")
