# Hike descriptions are written in Markdown and served as HTML

from typing import Optional

import markdown


def render_description(text: Optional[str]) -> Optional[str]:
    """HTML for a stored Markdown description. Empty and missing stay as they are."""
    if not text:
        return text
    return markdown.markdown(text)
