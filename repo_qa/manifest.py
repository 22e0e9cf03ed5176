"""Plugin manifest: callable schema, user settings schema and output template.

Hosts that load the Q&A layer as a function-calling plugin read this to know
what to send (``parameters``), which secret to collect from the user
(``settings``) and how the result is laid out (``output``).
"""

from typing import Any, Dict

from .models import QueryRequest

FUNCTION_NAME = "answer_repository_question"

# Rendered by ``render.render_markdown``; sections with ``only_if_present`` are
# dropped when their field is empty.
OUTPUT_SECTIONS = [
    {"title": "Repository Answer", "field": "text", "only_if_present": False},
    {"title": "Related Files", "field": "relatedFiles", "only_if_present": True},
    {"title": "Suggestions", "field": "suggestions", "only_if_present": True},
]


def build_manifest() -> Dict[str, Any]:
    return {
        "name": FUNCTION_NAME,
        "description": "Answers questions about GitHub repositories and provides insights.",
        "parameters": QueryRequest.model_json_schema(),
        "settings": {
            "type": "object",
            "required": ["githubToken"],
            "properties": {
                "githubToken": {
                    "type": "string",
                    "format": "password",
                    "title": "GitHub Personal Access Token",
                    "description": "Token used for every GitHub API call.",
                },
            },
        },
        "output": {"format": "markdown", "sections": OUTPUT_SECTIONS},
    }
