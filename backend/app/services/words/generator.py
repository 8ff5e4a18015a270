"""
Word-pair generation through the configured LLM provider.
"""

from typing import Any, List, Optional

from app.config import WORD_MODEL_CONFIG, WordModelConfig
from app.core.constants import get_language_name
from app.core.exceptions import ParseError
from app.core.logging import get_logger, LogTimer
from app.services.infrastructure.parsing import get_case_insensitive, parse_json_array
from app.services.llm import LLMConfig, LLMProvider, ProviderType
from app.services.timeline import WordPair

from .prompts import WORD_PAIRS, WORD_PAIRS_SYSTEM

logger = get_logger(__name__, component="word_generator")


def parse_word_pairs(content: str) -> List[WordPair]:
    """
    Recover word pairs from an LLM reply.

    Keys `source` and `target` are matched case-insensitively; entries
    missing either one, or with a blank value, are skipped.

    Raises:
        ParseError: No JSON array in the reply, or no usable pair in it
    """
    items = parse_json_array(content)

    pairs: List[WordPair] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        source = get_case_insensitive(item, "source")
        target = get_case_insensitive(item, "target")
        if not isinstance(source, str) or not isinstance(target, str):
            continue
        if not source.strip() or not target.strip():
            continue
        pairs.append(WordPair(source_word=source.strip(), target_word=target.strip()))

    if not pairs:
        raise ParseError("No word pairs found in response", content=content)
    return pairs


class WordGenerator:
    """Asks an LLM for `count` vocabulary pairs on a topic"""

    def __init__(self, provider: LLMProvider, model_config: Optional[WordModelConfig] = None):
        self.provider = provider
        self.model_config = model_config or WORD_MODEL_CONFIG

    def _model_for(self, provider: LLMProvider) -> str:
        models = {
            ProviderType.OPENAI: self.model_config.openai_model,
            ProviderType.GEMINI: self.model_config.gemini_model,
            ProviderType.OLLAMA: self.model_config.ollama_model,
        }
        return models.get(provider.provider_type, provider.default_model)

    def build_prompt(self, topic: str, count: int, source_language: str, target_language: str) -> str:
        return WORD_PAIRS.format(
            count=count,
            topic=topic,
            source_language=get_language_name(source_language),
            target_language=get_language_name(target_language),
        )

    async def generate_word_pairs(
        self,
        topic: str,
        count: int,
        source_language: str,
        target_language: str,
    ) -> List[WordPair]:
        """
        Generate vocabulary pairs for a topic.

        Args:
            topic: Subject of the vocabulary list
            count: Number of pairs requested
            source_language: Language code of the first word
            target_language: Language code of the translation

        Returns:
            Pairs in the order the model produced them; may be fewer than count

        Raises:
            CollaboratorError: Provider transport failure
            CollaboratorTimeoutError: Provider timed out
            ParseError: Reply could not be turned into word pairs
        """
        config = LLMConfig(
            model=self._model_for(self.provider),
            temperature=self.model_config.temperature,
            max_tokens=self.model_config.max_tokens_for(count),
            system_instruction=WORD_PAIRS_SYSTEM.template,
        )
        prompt = self.build_prompt(topic, count, source_language, target_language)

        log_context = {
            "topic": topic,
            "requested_count": count,
            "source_language": source_language,
            "target_language": target_language,
            "provider": self.provider.name,
        }
        logger.info("Generating word pairs", extra=log_context)

        with LogTimer(logger, f"word pair generation for '{topic}'"):
            response = await self.provider.generate(prompt, config)

        try:
            pairs = parse_word_pairs(response.text)
        except ParseError:
            logger.error(
                "Could not parse word pairs from LLM reply",
                extra={**log_context, "content": response.text},
            )
            raise

        if len(pairs) < count:
            logger.warning(
                f"Generated only {len(pairs)} word pairs instead of requested {count}",
                extra={**log_context, "actual_count": len(pairs)},
            )

        logger.info(
            f"Generated {len(pairs)} word pairs",
            extra={**log_context, "actual_count": len(pairs), "usage": _usage_dict(response.usage)},
        )
        return pairs


def _usage_dict(usage: Any) -> Optional[dict]:
    if usage is None:
        return None
    return {
        "input": usage.input_tokens,
        "output": usage.output_tokens,
        "total": usage.total_tokens,
    }
