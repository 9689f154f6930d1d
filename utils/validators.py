# DEPENDENCIES
from typing import Tuple
from typing import Optional

from config.settings import settings
from utils.text_processor import TextProcessor


class AnalysisInputValidator:
    """
    Reject documents that cannot be meaningfully analyzed, before they reach the detector

    The detector accepts any string, these checks belong to the calling layer
    """
    def __init__(self, min_word_count: Optional[int] = None, max_length: Optional[int] = None):
        """
        Arguments:
        ----------
            min_word_count { int } : Minimum number of words (defaults to settings.MIN_WORD_COUNT)

            max_length     { int } : Maximum number of characters (defaults to settings.MAX_CONTRACT_LENGTH)
        """
        self.min_word_count = settings.MIN_WORD_COUNT if min_word_count is None else min_word_count
        self.max_length     = settings.MAX_CONTRACT_LENGTH if max_length is None else max_length


    def validate(self, content: Optional[str], word_count: Optional[int] = None) -> Tuple[bool, str, str]:
        """
        Validate document text for analysis

        Arguments:
        ----------
            content    { str } : Extracted document text

            word_count { int } : Word count reported by the text extractor, counted here when missing

        Returns:
        --------
               { tuple }       : (is_valid, validation_type, message) tuple
        """
        if ((not content) or (not content.strip())):
            return (False, "empty", "No text content provided for analysis")

        if word_count is None:
            word_count = TextProcessor.count_words(content)

        if (word_count < self.min_word_count):
            return (False, "too_short", f"Document too short for meaningful analysis (minimum {self.min_word_count} words required)")

        if (len(content) > self.max_length):
            return (False, "too_long", f"Document too long ({len(content)} chars, maximum {self.max_length})")

        return (True, "valid", "OK")
