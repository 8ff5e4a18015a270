"""
Word-pair generation
"""

from .generator import WordGenerator, parse_word_pairs
from .prompts import PromptTemplate, WORD_PAIRS, WORD_PAIRS_SYSTEM

__all__ = [
    "WordGenerator",
    "parse_word_pairs",
    "PromptTemplate",
    "WORD_PAIRS",
    "WORD_PAIRS_SYSTEM",
]
