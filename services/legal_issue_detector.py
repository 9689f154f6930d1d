# DEPENDENCIES
from typing import Dict
from typing import List
from typing import Optional

from utils.logger import log_debug
from config.settings import settings
from config.legal_rules import RuleSet
from config.legal_rules import LegalRule
from utils.text_processor import TextProcessor
from utils.logger import LegalAnalyzerLogger
from services.data_models import DetectedIssue
from services.data_models import AnalysisResult
from config.legal_rules import DEFAULT_RULE_SET


MAX_RISK_SCORE = 1.0


class LegalIssueDetector:
    """
    Deterministic, rule-based legal issue detector

    Analysis runs in two passes over the whitespace-normalized text:
    1. Positive rules: every rule with a pattern is matched independently,
       each rule that fires contributes its severity weight once
    2. Absence rules: one whole-document presence scan per absence rule
       (e.g. any dispute resolution language); the rule fires when the scan
       finds nothing. This cannot be expressed as a single positive match,
       so it is kept out of pass 1 entirely

    The risk score is the sum of fired weights, saturated at 1.0. The
    detector holds no mutable state and is safe to share between threads
    """
    def __init__(self, rule_set: RuleSet = DEFAULT_RULE_SET, excerpt_length: Optional[int] = None):
        """
        Initialize the detector

        Arguments:
        ----------
            rule_set       { RuleSet } : Rule catalog to evaluate, in reporting order

            excerpt_length { int }     : Maximum matched-text excerpt length before the ellipsis
        """
        self.rule_set       = rule_set
        self.excerpt_length = settings.EXCERPT_MAX_LENGTH if excerpt_length is None else excerpt_length


    def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze document text against the rule set

        Never raises for a string input: empty or very short text simply
        produces fewer (positive) issues

        Arguments:
        ----------
            text { str }      : Plain document text

        Returns:
        --------
            { AnalysisResult } : Risk score in [0, 1] and the detected issues in registry order
        """
        clean_text = TextProcessor.collapse_whitespace(text)

        detected   = self._match_positive_rules(clean_text = clean_text)
        detected.update(self._check_absence_rules(clean_text = clean_text))

        issues     = tuple(detected[rule.id] for rule in self.rule_set if rule.id in detected)
        risk_score = self._calculate_risk_score(issues = issues)
        result     = AnalysisResult(risk_score = risk_score,
                                    issues     = issues,
                                   )

        log_debug("Legal issue analysis complete",
                  text_length  = len(text),
                  total_issues = result.total_issues,
                  risk_score   = result.risk_score,
                  issue_ids    = [issue.id for issue in issues],
                 )

        return result


    def _match_positive_rules(self, clean_text: str) -> Dict[str, DetectedIssue]:
        """
        Pass 1: evaluate every rule that carries a pattern
        """
        detected = dict()

        for rule in self.rule_set:
            if rule.is_absence_rule:
                continue

            matches = [match.group(0) for match in rule.pattern.finditer(clean_text)]

            if matches:
                detected[rule.id] = DetectedIssue(rule         = rule,
                                                  matches      = len(matches),
                                                  matched_text = TextProcessor.truncate_excerpt(matches[0], self.excerpt_length),
                                                 )

        return detected


    def _check_absence_rules(self, clean_text: str) -> Dict[str, DetectedIssue]:
        """
        Pass 2: fire absence rules whose presence scan finds nothing in the whole document
        """
        detected = dict()

        for rule in self._absence_rules():
            check = self.rule_set.absence_check(rule.id)

            if not check.is_present(clean_text):
                detected[rule.id] = DetectedIssue(rule         = rule,
                                                  matches      = 1,
                                                  matched_text = check.excerpt,
                                                 )

        return detected


    def _absence_rules(self) -> List[LegalRule]:
        return [rule for rule in self.rule_set if rule.is_absence_rule]


    @staticmethod
    def _calculate_risk_score(issues) -> float:
        """
        Saturating weighted sum: each fired rule counts once, regardless of its match count
        """
        total = sum(issue.weight for issue in issues)

        # rounding removes float accumulation noise (0.15 * 3 must equal 0.45)
        return round(min(total, MAX_RISK_SCORE), 4)


_default_detector = LegalIssueDetector()


@LegalAnalyzerLogger.log_execution_time("analyze_document")
def analyze_document(text: str) -> AnalysisResult:
    """
    Analyze text with the default Indian Contract Act rule set
    """
    return _default_detector.analyze(text)
