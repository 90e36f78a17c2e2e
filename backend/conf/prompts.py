"""Prompts used to ground answers in the poetry book."""

BUTTONS_PREFIX: str = "BUTTONS: "

CONTENT_START_MARKER: str = "--- POETRY BOOK CONTENT START ---"
CONTENT_END_MARKER: str = "--- POETRY BOOK CONTENT END ---"

POETRY_ANSWER_INSTRUCTIONS: str = """Based *only* on the following poetry book content, discuss the user's query.
Focus on themes, imagery, poetic style, or specific poems/stanzas as they appear in the text.
Provide any relevant information found, even if it's not a complete direct answer. Do not use external information."""

BUTTONS_INSTRUCTIONS: str = f"""If your response discusses a specific poem or a clearly defined section/theme (e.g., headings like '## Poem 1: Echoes of Dawn' or '## Themes Explored'), please list these *exact* titles or headings at the end of your response.
Prefix these with "{BUTTONS_PREFIX}" and separate them with commas. For example: "{BUTTONS_PREFIX}Poem 1: Echoes of Dawn, Themes Explored".
Only suggest buttons for topics that can be directly queried and fully answered from the *exact phrases* found in the document. Do not invent new topics for buttons."""

USER_QUERY_TEMPLATE: str = 'User\'s query: "{query}"'
