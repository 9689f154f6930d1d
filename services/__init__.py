# DEPENDENCIES
from .data_models import DetectedIssue
from .data_models import AnalysisResult
from .legal_issue_detector import analyze_document
from .legal_issue_detector import LegalIssueDetector



__all__ = ['DetectedIssue',
           'AnalysisResult',
           'analyze_document',
           'LegalIssueDetector',
          ]
