"""
Prompt templates for word-pair generation.
"""

from dataclasses import dataclass


@dataclass
class PromptTemplate:
    """
    A prompt template with {placeholders}.

    Placeholders are substituted by plain replacement so literal JSON braces
    in the template survive.

    Usage:
        template = PromptTemplate(template="Hello {name}!", description="A greeting")
        result = template.format(name="World")
    """
    template: str
    description: str = ""

    def format(self, **kwargs) -> str:
        result = self.template
        for key, value in kwargs.items():
            result = result.replace("{" + key + "}", str(value))
        return result

    def __str__(self) -> str:
        return f"PromptTemplate({self.description})"


WORD_PAIRS_SYSTEM = PromptTemplate(
    template=(
        "You are a helpful language learning assistant that generates "
        "vocabulary words with translations."
    ),
    description="System instruction for word-pair generation",
)

WORD_PAIRS = PromptTemplate(
    template="""Generate exactly {count} common vocabulary words related to the topic "{topic}"
in {source_language} with their translations in {target_language}.

Requirements:
1. Words should be commonly used and relevant to the topic
2. Keep words simple and suitable for language learning
3. Return ONLY a JSON array in this exact format (no additional text):

[
  {"source": "word1", "target": "translation1"},
  {"source": "word2", "target": "translation2"}
]

Topic: {topic}
Source language: {source_language}
Target language: {target_language}
Number of words: {count}""",
    description="Vocabulary list for a topic as a JSON array of source/target pairs",
)
