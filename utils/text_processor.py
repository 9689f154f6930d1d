# DEPENDENCIES
import re


ELLIPSIS = "..."


class TextProcessor:
    """
    Text normalization helpers shared by the detector and the API layer
    """
    @staticmethod
    def collapse_whitespace(text: str) -> str:
        """
        Collapse every run of whitespace (newlines and tabs included) into a single space

        Line-wrapped phrases must still match rules whose keywords span the wrap

        Arguments:
        ----------
            text { str } : Raw document text

        Returns:
        --------
               { str }   : Text with single spaces only
        """
        return re.sub(r'\s+', ' ', text)


    @staticmethod
    def truncate_excerpt(text: str, max_length: int = 100) -> str:
        """
        Keep the first `max_length` characters, marking the cut with an ellipsis
        """
        if (len(text) <= max_length):
            return text

        return text[:max_length] + ELLIPSIS


    @staticmethod
    def count_words(text: str) -> int:
        """
        Count words in text
        """
        return len(text.split())
