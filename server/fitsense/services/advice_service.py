# fitsense/services/advice_service.py
import logging
import re
from typing import List, Optional

from groq import AsyncGroq

from fitsense.config import get_settings
from fitsense.models.fitness import AdviceResult

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a certified fitness coach. Give short, practical, safe advice as plain lines of text."

_LINE_BREAKS = re.compile(r"[\r\n]+")


def build_advice_prompt(bmi: float, category: str, activity_level: str, language: str) -> str:
    return f"""Give 3 personalized fitness tips for:
- BMI: {bmi}
- Category: {category}
- Activity Level: {activity_level}
- Language: {language}

Respond only in {language}. Use short, practical advice."""


def split_advice_lines(text: str) -> List[str]:
    """Split a reply into its non-blank lines, keeping order"""
    return [line for line in _LINE_BREAKS.split(text or "") if line.strip()]


class AdviceClient:
    """
    Fetches personalized fitness tips from Groq.

    Never raises: a missing key, timeout, API error or empty reply all
    produce AdviceResult.unavailable().
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "llama-3.3-70b-versatile",
        temperature: float = 0.7,
        max_tokens: int = 512,
        timeout: float = 20.0,
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.client = None

        if api_key:
            try:
                self.client = AsyncGroq(api_key=api_key, timeout=timeout, max_retries=1)
                logger.info("Advice client: Groq client initialized successfully")
            except Exception as e:
                logger.error(f"Advice client: Failed to initialize Groq client: {e}")
                self.client = None
        else:
            logger.warning("Advice client: GROQ_API_KEY not set. Suggestions will use the fallback message.")

    @classmethod
    def from_settings(cls, settings=None) -> "AdviceClient":
        settings = settings or get_settings()
        return cls(
            api_key=settings.GROQ_API_KEY,
            model=settings.GROQ_MODEL,
            temperature=settings.ADVICE_TEMPERATURE,
            max_tokens=settings.ADVICE_MAX_TOKENS,
            timeout=settings.ADVICE_TIMEOUT_SECONDS,
        )

    async def get_fitness_advice(self, bmi: float, category: str, activity_level: str, language: str) -> AdviceResult:
        if self.client is None:
            return AdviceResult.unavailable()

        prompt = build_advice_prompt(bmi, category, activity_level, language)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
            )
            content = response.choices[0].message.content
        except Exception as e:
            logger.error(f"Groq advice error: {type(e).__name__}: {e}")
            return AdviceResult.unavailable()

        suggestions = split_advice_lines(content if isinstance(content, str) else "")
        if not suggestions:
            logger.warning("Groq advice error: empty response")
            return AdviceResult.unavailable()

        return AdviceResult(suggestions=suggestions)
