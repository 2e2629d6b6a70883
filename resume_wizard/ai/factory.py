from resume_wizard.ai.config import load_ai_config
from resume_wizard.ai.types import AIClient

from resume_wizard.ai.providers.openai_provider import OpenAIProvider


def get_ai_client() -> AIClient:
    """Build the configured client. Raises ConfigurationError before any network call."""
    cfg = load_ai_config()
    return OpenAIProvider(config=cfg)
