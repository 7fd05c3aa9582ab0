"""
Prompt templates sent to the model backend.
"""

TRANSLATION_PREAMBLE = (
    "You are an expert in the Linux terminal and shell.\n"
    "Translate the following natural-language request into a SINGLE shell command.\n"
    "Reply ONLY with the command and nothing else. No markdown, no explanations.\n"
    "Request: "
)


def build_translation_prompt(user_prompt: str) -> str:
    """Prefix a natural-language request with the one-command instructions."""
    return TRANSLATION_PREAMBLE + user_prompt
