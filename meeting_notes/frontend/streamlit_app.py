"""
Main Streamlit application for the meeting notes generator.
"""

import streamlit as st
from dotenv import load_dotenv
import os
from meeting_notes.core.presentation import format_transcript_text
from meeting_notes.frontend.api_client import ApiClient, ApiError
from meeting_notes.frontend.components import (
    header, sidebar, audio_input, progress_steps,
    display_error, display_result,
)
from meeting_notes.models.schemas import ProgressStep, TranscriptResult


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "api_url" not in st.session_state:
        st.session_state.api_url = os.getenv("API_URL", "http://localhost:8000")

    if "result" not in st.session_state:
        st.session_state.result = None

    if "chat_summary" not in st.session_state:
        st.session_state.chat_summary = None

    st.session_state.api_client = ApiClient(st.session_state.api_url)


def process_audio(url, uploaded_file):
    """
    Send the audio to the backend while showing the progress steps.

    Args:
        url: Audio URL, or None
        uploaded_file: Streamlit UploadedFile, or None
    """
    client = st.session_state.api_client
    placeholder = st.empty()

    st.session_state.result = None
    st.session_state.chat_summary = None

    try:
        if uploaded_file is not None:
            progress_steps(placeholder, ProgressStep.UPLOADING)
            result = client.transcribe_file(uploaded_file.name, uploaded_file.getvalue())
        else:
            progress_steps(placeholder, ProgressStep.TRANSCRIBING)
            result = client.transcribe_url(url)

        progress_steps(placeholder, ProgressStep.ANALYZING)
        st.session_state.result = result
    except ApiError as e:
        display_error(str(e))
    except Exception as e:
        display_error(f"Error processing audio: {str(e)}")
    finally:
        progress_steps(placeholder, ProgressStep.IDLE)


def handle_summarize(result: TranscriptResult):
    """
    Ask the chat model for a summary of the current transcript.

    Args:
        result: Transcript to summarize
    """
    client = st.session_state.api_client

    try:
        with st.spinner("Summarizing..."):
            summary = client.summarize(format_transcript_text(result.utterances))
    except Exception as e:
        display_error(f"Error: {str(e)}")
        return

    st.session_state.chat_summary = summary
    if not result.summary_available:
        st.session_state.result = result.model_copy(
            update={"summary": summary, "summary_available": True}
        )
    st.rerun()


def main():
    """Main application entry point."""
    # Set up the UI
    header()
    init_session_state()
    sidebar()

    url, uploaded_file = audio_input()
    if url or uploaded_file is not None:
        process_audio(url, uploaded_file)

    if st.session_state.result is not None:
        display_result(st.session_state.result, handle_summarize)

        if st.session_state.chat_summary:
            st.markdown("### Chat Model Summary")
            st.markdown(st.session_state.chat_summary)


if __name__ == "__main__":
    main()
