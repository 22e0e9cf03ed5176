"""Markdown rendering of an ``Answer`` for chat-style hosts."""

from typing import List

from .models import Answer


def render_markdown(answer: Answer) -> str:
    """Render the answer; the file and suggestion sections only appear when non-empty."""
    lines: List[str] = ["## Repository Answer", "", answer.text]
    if answer.related_files:
        lines += ["", "## Related Files", ""]
        lines += [f"- [{f.path}]({f.url})" for f in answer.related_files]
    if answer.suggestions:
        lines += ["", "## Suggestions", ""]
        lines += [f"- {s}" for s in answer.suggestions]
    return "\n".join(lines) + "\n"
