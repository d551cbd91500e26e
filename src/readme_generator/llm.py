import logging

from openai import AsyncOpenAI

from readme_generator import config, models, prompts

logger = logging.getLogger(__name__)

SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
]


class LLMError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(LLMError):
    pass


class GenerationBlockedError(LLMError):
    def __init__(self, reason: str):
        super().__init__(f"Failed to generate content. {reason}")


class ReadmeGenerator:
    """Turns extracted repository context into README text with one model call."""

    def __init__(self, client: AsyncOpenAI, model_name: str, timeout: float):
        self._client = client
        self.model_name = model_name
        self.timeout = timeout

    @classmethod
    def from_config(cls, cfg: config.LLMConfig) -> "ReadmeGenerator":
        if not cfg.google_api_key:
            raise ConfigurationError("API key not configured.")
        client = AsyncOpenAI(
            api_key=cfg.google_api_key,
            base_url=cfg.gemini_base_url,
            max_retries=0,
        )
        return cls(client, cfg.model_name, cfg.generation_timeout)

    async def generate(self, repo_url: str, context: str) -> models.GenerationResult:
        prompt = prompts.build_readme_prompt(repo_url, context)
        logger.info(f"Sending prompt to {self.model_name} ({len(prompt)} chars)")
        response = await self._client.chat.completions.create(
            model=self.model_name,
            messages=[{"role": "user", "content": prompt}],
            timeout=self.timeout,
            # Gemini-specific options travel in a nested extra_body
            extra_body={"extra_body": {"google": {"safety_settings": SAFETY_SETTINGS}}},
        )

        feedback = (response.model_extra or {}).get("prompt_feedback")
        choices = getattr(response, "choices", None) or []
        if not choices:
            logger.error(f"Model returned no candidates, feedback: {feedback}")
            return models.GenerationResult(feedback=feedback)

        choice = choices[0]
        finish_reason = getattr(choice, "finish_reason", None)
        message = getattr(choice, "message", None)
        text = getattr(message, "content", None)
        if not text:
            logger.error(f"Model returned no text, finish_reason={finish_reason} feedback: {feedback}")
            return models.GenerationResult(finish_reason=finish_reason, feedback=feedback)

        logger.info(f"Received {len(text)} chars, finish_reason={finish_reason}")
        return models.GenerationResult(readme=text, finish_reason=finish_reason)
