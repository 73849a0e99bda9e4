"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Callable, Optional, Tuple

from meeting_notes.core.markdown_export import generate_markdown
from meeting_notes.core.presentation import (
    ACTIONS_TAB,
    SUMMARY_TAB,
    TOPICS_TAB,
    TRANSCRIPT_TAB,
    default_tab,
    speaker_color,
    step_states,
    visible_tabs,
)
from meeting_notes.models.schemas import ProgressStep, TranscriptResult

STEP_ICONS = {"done": "✅", "active": "⏳", "pending": "⚪"}


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="Meeting Notes Generator",
        page_icon="🎙️",
        layout="centered",
    )

    st.title("🎙️ Meeting Notes Generator")
    st.markdown("""
    Paste an audio URL or upload a file to generate AI-powered meeting notes.
    """)
    st.divider()


def sidebar():
    """Display the sidebar with app information and options."""
    with st.sidebar:
        st.title("Meeting Notes")

        st.markdown("## About")
        st.info("""
        This app turns recordings into meeting notes:
        - Speaker-labelled transcript
        - Summary, action items and topics
        - Markdown export
        """)

        st.markdown("## Settings")
        st.text_input("API URL", key="api_url")

        st.divider()
        st.markdown("Powered by [AssemblyAI](https://www.assemblyai.com)")


def audio_input() -> Tuple[Optional[str], Optional[object]]:
    """
    Display the URL field and file uploader.

    Returns:
        The entered URL and the uploaded file; at most one of them is set
    """
    with st.form(key="audio_form"):
        url = st.text_input(
            "Audio URL",
            placeholder="https://example.com/meeting-audio.mp3",
        )
        uploaded_file = st.file_uploader(
            "or upload an audio file",
            type=["mp3", "wav", "m4a", "mp4", "webm", "ogg"],
        )
        submit = st.form_submit_button("Generate Notes")

    if not submit:
        return None, None
    if uploaded_file is not None:
        return None, uploaded_file
    if url:
        return url.strip(), None
    return None, None


def progress_steps(placeholder, step: Optional[ProgressStep]):
    """
    Render the progress indicator into a placeholder.

    Args:
        placeholder: ``st.empty()`` container to draw into
        step: Current step; IDLE or None clears the indicator
    """
    if step is None or step == ProgressStep.IDLE:
        placeholder.empty()
        return

    lines = [f"{STEP_ICONS[state]} {label}" for label, state in step_states(step)]
    placeholder.markdown("  \n".join(lines))


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message)


def display_transcript(result: TranscriptResult):
    """Display the speaker-labelled transcript."""
    st.markdown("## Full Transcript")
    with st.container(height=500):
        for utterance in result.utterances:
            color = speaker_color(utterance.speaker)
            st.markdown(f"**:{color}[Speaker {utterance.speaker}]**  \n{utterance.text}")


def display_result(result: TranscriptResult, summarize_callback: Callable[[TranscriptResult], None]):
    """
    Display the result tabs and the Markdown download button.

    Only tabs whose results are available are shown.

    Args:
        result: Transcript and analysis
        summarize_callback: Called when the user asks for a chat model summary
    """
    tabs = visible_tabs(result)
    first = default_tab(result)
    tabs.sort(key=lambda tab: tab != first)

    for tab, container in zip(tabs, st.tabs([tab.label for tab in tabs])):
        with container:
            if tab == SUMMARY_TAB:
                st.markdown("## Summary")
                st.markdown(result.summary)
            elif tab == ACTIONS_TAB:
                st.markdown("## Action Items")
                st.markdown(result.action_items)
            elif tab == TOPICS_TAB:
                st.markdown("## Topics Discussed")
                st.markdown(result.topics)
            elif tab == TRANSCRIPT_TAB:
                display_transcript(result)

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Download as Markdown",
            data=generate_markdown(result),
            file_name="meeting-notes.md",
            mime="text/markdown",
        )
    with col2:
        if st.button("Summarize with chat model", disabled=not result.utterances):
            summarize_callback(result)
