"""
Module for summarizing transcripts with a general chat completion model.
"""

from typing import Optional

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter
from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from meeting_notes.config import config
from meeting_notes.core import prompts
from meeting_notes.models.schemas import SummaryConfig
from meeting_notes.utils.error_handling import (
    ConfigurationError,
    InputValidationError,
    MeetingNotesError,
    SummarizationError,
)
from meeting_notes.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, summary_config: Optional[SummaryConfig] = None, api_key: Optional[str] = None):
        """
        Initialize the summarizer with API key.

        Args:
            summary_config: Model and chunking options
            api_key: OpenAI API key (if None, taken from the configuration)
        """
        self.summary_config = summary_config or SummaryConfig()
        self.api_key = api_key or config.OPENAI_API_KEY
        if not self.api_key:
            raise ConfigurationError("OPENAI_API_KEY is not configured on the server.")

    def _init_llm(self):
        return init_chat_model(
            model=self.summary_config.model,
            model_provider=self.summary_config.model_provider,
            temperature=self.summary_config.temperature,
            max_tokens=self.summary_config.max_tokens,
            api_key=self.api_key,
        )

    def summarize(self, transcript_text: str) -> str:
        """
        Summarize a transcript text.

        Args:
            transcript_text: Full transcript text to summarize

        Returns:
            Summarized text

        Raises:
            InputValidationError: if the text is empty
            SummarizationError: if the model fails or returns nothing
        """
        if not transcript_text or not transcript_text.strip():
            raise InputValidationError("No transcript text provided.")

        try:
            summary = self._summarize(transcript_text)
        except MeetingNotesError:
            raise
        except Exception as e:
            raise SummarizationError(str(e) or "Failed to generate summary.") from e

        if not summary or not summary.strip():
            raise SummarizationError("No summary was generated.")
        return summary.strip()

    def _summarize(self, transcript_text: str) -> str:
        document = Document(page_content=transcript_text)

        # For longer transcripts, split into chunks
        text_splitter = RecursiveCharacterTextSplitter(
            chunk_size=self.summary_config.chunk_size,
            chunk_overlap=self.summary_config.chunk_overlap
        )
        docs = text_splitter.split_documents([document])

        llm = self._init_llm()

        summary_prompt = ChatPromptTemplate.from_messages([
            ("system", prompts.chat_system_prompt),
            ("user", prompts.chat_summary_prompt),
        ])

        # For shorter transcripts: use the "stuff" method
        if len(docs) <= 1:
            chain = summary_prompt | llm
            summary = chain.invoke({"text": transcript_text})
            return summary.content

        # For longer transcripts: use map-reduce
        logging.info(f"Transcript split into {len(docs)} chunks for summarization")
        map_prompt = ChatPromptTemplate.from_messages([
            ("system", prompts.chat_system_prompt),
            ("user", prompts.chat_chunk_prompt),
        ])
        map_chain = map_prompt | llm

        interim_summaries = []
        for doc in docs:
            interim_summary = map_chain.invoke({"text": doc.page_content})
            interim_summaries.append(interim_summary.content)

        reduce_prompt = ChatPromptTemplate.from_messages([
            ("system", prompts.chat_system_prompt),
            ("user", prompts.chat_combine_prompt),
        ])
        reduce_chain = reduce_prompt | llm

        final_summary = reduce_chain.invoke({"summaries": "\n\n".join(interim_summaries)})
        return final_summary.content
