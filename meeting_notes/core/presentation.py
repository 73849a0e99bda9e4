"""
Presentation rules shared by the CLI, the API and the Streamlit frontend.
"""

from typing import List, NamedTuple, Optional, Tuple

from meeting_notes.models.schemas import ProgressStep, TranscriptResult, Utterance

SPEAKER_COLORS = ["blue", "green", "orange", "violet", "red"]


class Tab(NamedTuple):
    key: str
    label: str


SUMMARY_TAB = Tab("summary", "Summary")
ACTIONS_TAB = Tab("actions", "Action Items")
TOPICS_TAB = Tab("topics", "Topics")
TRANSCRIPT_TAB = Tab("transcript", "Transcript")

TABS = [SUMMARY_TAB, ACTIONS_TAB, TOPICS_TAB, TRANSCRIPT_TAB]

PROGRESS_STEPS = [
    (ProgressStep.UPLOADING, "Uploading audio"),
    (ProgressStep.TRANSCRIBING, "Transcribing with speaker labels"),
    (ProgressStep.ANALYZING, "Generating AI notes with LeMUR"),
]


def is_tab_visible(tab: Tab, result: TranscriptResult) -> bool:
    if tab == SUMMARY_TAB:
        return result.summary_available
    if tab == ACTIONS_TAB:
        return result.lemur_available and result.action_items is not None
    if tab == TOPICS_TAB:
        return result.topics_available
    return tab == TRANSCRIPT_TAB


def visible_tabs(result: TranscriptResult) -> List[Tab]:
    """Tabs to show for a result; the transcript tab is always present."""
    return [tab for tab in TABS if is_tab_visible(tab, result)]


def default_tab(result: TranscriptResult) -> Tab:
    return SUMMARY_TAB if result.lemur_available and result.summary_available else TRANSCRIPT_TAB


def speaker_color(speaker: str) -> str:
    """Pick a stable colour for a speaker letter."""
    if not speaker:
        return SPEAKER_COLORS[0]
    index = ord(speaker[0].upper()) - ord("A")
    return SPEAKER_COLORS[index % len(SPEAKER_COLORS)]


def step_states(current: Optional[ProgressStep]) -> List[Tuple[str, str]]:
    """
    Describe every progress step as done, active or pending.

    Args:
        current: Step being executed, or None / IDLE when nothing runs

    Returns:
        List of ``(label, state)`` pairs in pipeline order
    """
    keys = [step for step, _ in PROGRESS_STEPS]
    if current is None or current == ProgressStep.IDLE:
        return [(label, "pending") for _, label in PROGRESS_STEPS]

    current_index = keys.index(current)
    states = []
    for index, (_, label) in enumerate(PROGRESS_STEPS):
        if index < current_index:
            states.append((label, "done"))
        elif index == current_index:
            states.append((label, "active"))
        else:
            states.append((label, "pending"))
    return states


def format_transcript_text(utterances: List[Utterance]) -> str:
    """Plain speaker-tagged transcript, one utterance per line."""
    return "\n".join(f"Speaker {u.speaker}: {u.text}" for u in utterances)
