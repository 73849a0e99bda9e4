summary_prompt = (
    "Provide a concise summary of this conversation in 3-5 sentences. "
    "Focus on the main points discussed."
)

action_items_prompt = (
    "List the key action items from this conversation as a bullet-point list. "
    "If there are no clear action items, note that."
)

topics_prompt = "List the main topics discussed in this conversation as a bullet-point list."

chat_system_prompt = (
    "You are a helpful assistant that summarizes meeting transcripts. "
    "Provide concise, well-structured summaries."
)

chat_summary_prompt = (
    "Provide a concise summary of this conversation in 3-5 sentences. "
    "Focus on the main points discussed, key decisions made, and any important outcomes."
    "\n\nTranscript:\n{text}"
)

chat_chunk_prompt = "Summarize this part of a meeting transcript:\n\n{text}"

chat_combine_prompt = (
    "Combine these partial summaries of one meeting into a single summary "
    "of 3-5 sentences:\n\n{summaries}"
)
