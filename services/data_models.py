# DEPENDENCIES
from typing import Any
from typing import Dict
from typing import Tuple
from collections import Counter
from dataclasses import dataclass

from config.legal_rules import Severity
from config.legal_rules import LegalRule


# Score bands used when presenting a risk score (upper bounds, inclusive)
RISK_BANDS = (("Low", 0.3),
              ("Medium", 0.7),
              ("High", 1.0),
             )


@dataclass(frozen = True)
class DetectedIssue:
    """
    A legal rule that fired for one document, with its match data
    """
    rule         : LegalRule
    matches      : int    # >= 1
    matched_text : str    # excerpt of the first match, or a synthetic message for absence rules

    @property
    def id(self) -> str:
        return self.rule.id


    @property
    def severity(self) -> Severity:
        return self.rule.severity


    @property
    def category(self) -> str:
        return self.rule.category


    @property
    def weight(self) -> float:
        return self.rule.weight


    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"id"          : self.rule.id,
                "name"        : self.rule.name,
                "riskLevel"   : self.rule.severity.value,
                "issue"       : self.rule.issue,
                "suggestion"  : self.rule.suggestion,
                "legalBasis"  : self.rule.legal_basis,
                "category"    : self.rule.category,
                "matches"     : self.matches,
                "matchedText" : self.matched_text,
               }


@dataclass(frozen = True)
class AnalysisResult:
    """
    Outcome of one document analysis: saturating risk score plus the issues in registry order
    """
    risk_score : float                      # 0.0-1.0
    issues     : Tuple[DetectedIssue, ...]

    @property
    def total_issues(self) -> int:
        return len(self.issues)


    @property
    def compliance_score(self) -> float:
        return round(1.0 - self.risk_score, 4)


    @property
    def risk_band(self) -> str:
        for band, upper_bound in RISK_BANDS:
            if (self.risk_score <= upper_bound):
                return band

        return RISK_BANDS[-1][0]


    def severity_distribution(self) -> Dict[str, int]:
        """
        Count issues per severity level, every level present
        """
        counts = Counter(issue.severity.value for issue in self.issues)

        return {severity.value: counts.get(severity.value, 0) for severity in Severity}


    def category_distribution(self) -> Dict[str, int]:
        """
        Count issues per category, in order of first appearance
        """
        return dict(Counter(issue.category for issue in self.issues))


    def to_dict(self) -> Dict[str, Any]:
        return {"riskScore"   : self.risk_score,
                "issues"      : [issue.to_dict() for issue in self.issues],
                "totalIssues" : self.total_issues,
               }
