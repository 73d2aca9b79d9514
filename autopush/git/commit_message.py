import logging

from ..llm import TextGenerator
from .contracts import CommitMessage, MessageOrigin

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Update files"

NO_CHANGES = CommitMessage(text="No changes to commit", origin=MessageOrigin.NO_CHANGES)


class CommitMessageGenerator:
    MAX_INPUT_CHARS = 4000

    RULES = """Rules:
- Title under 50 characters
- Use a conventional commit prefix (feat:, fix:, docs:, refactor:, test:, chore:)
- Be concise and specific
- Return ONLY the commit message, nothing else"""

    def __init__(self, client: TextGenerator) -> None:
        self.client = client

    def build_prompt(self, status_text: str, diff_stat_text: str) -> str:
        return f"""Generate a git commit message for these changes.

Git status:
{status_text[:self.MAX_INPUT_CHARS]}

Diff stat:
{diff_stat_text[:self.MAX_INPUT_CHARS]}

{self.RULES}"""

    def generate(self, status_text: str, diff_stat_text: str) -> CommitMessage:
        if not status_text.strip():
            return NO_CHANGES

        prompt = self.build_prompt(status_text, diff_stat_text)
        try:
            raw = self.client.generate_text(prompt)
        except Exception as e:
            logger.warning(f"Commit message generation failed, using fallback: {e}")
            return CommitMessage(text=FALLBACK_MESSAGE, origin=MessageOrigin.FALLBACK)

        text = clean_message(raw or "")
        if not text:
            logger.warning("Commit message generation returned nothing usable, using fallback")
            return CommitMessage(text=FALLBACK_MESSAGE, origin=MessageOrigin.FALLBACK)

        return CommitMessage(text=text, origin=MessageOrigin.GENERATED)


def clean_message(raw: str) -> str:
    """Trim whitespace and drop every double quote and NUL byte."""
    return raw.replace("\x00", "").replace('"', "").strip()
