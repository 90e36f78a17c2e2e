"""Builds the single prompt sent to the Gemini API."""

from backend.conf.prompts import (
    BUTTONS_INSTRUCTIONS,
    CONTENT_END_MARKER,
    CONTENT_START_MARKER,
    POETRY_ANSWER_INSTRUCTIONS,
    USER_QUERY_TEMPLATE,
)


def build_prompt(reference_text: str, user_query: str) -> str:
    """Combine the instructions, the poetry book and the user's query.

    The order is fixed: answering instructions, the full reference text between
    the start/end markers, the follow-up buttons instructions, then the quoted
    query as the last line. The reference text is embedded verbatim.

    Args:
        reference_text: The complete poetry book text
        user_query: The question asked by the user

    Returns:
        The prompt text
    """
    sections = [
        POETRY_ANSWER_INSTRUCTIONS,
        f"{CONTENT_START_MARKER}\n{reference_text}\n{CONTENT_END_MARKER}",
        BUTTONS_INSTRUCTIONS,
        USER_QUERY_TEMPLATE.format(query=user_query),
    ]
    return "\n\n".join(sections)
