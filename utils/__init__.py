# DEPENDENCIES
from .text_processor import TextProcessor
from .logger import LegalAnalyzerLogger
from .validators import AnalysisInputValidator


__all__ = ['TextProcessor',
           'LegalAnalyzerLogger',
           'AnalysisInputValidator',
          ]
