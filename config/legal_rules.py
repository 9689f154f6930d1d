# DEPENDENCIES
import re
from enum import Enum
from typing import Dict
from typing import List
from typing import Tuple
from typing import Iterator
from typing import Optional
from dataclasses import dataclass


class Severity(Enum):
    HIGH   = "HIGH"
    MEDIUM = "MEDIUM"
    LOW    = "LOW"


    @property
    def weight(self) -> float:
        """
        Risk score contribution of one matching rule at this severity
        """
        return SEVERITY_WEIGHTS[self]


SEVERITY_WEIGHTS : Dict[Severity, float] = {Severity.HIGH   : 0.25,
                                            Severity.MEDIUM : 0.15,
                                            Severity.LOW    : 0.10,
                                           }


@dataclass(frozen = True)
class LegalRule:
    """
    One fixed detection criterion of the rule registry

    A rule with `pattern = None` is an absence rule: it is never matched
    positively, the detector emits it when the whole-document scan bound to
    it finds nothing
    """
    id          : str
    name        : str
    pattern     : Optional[re.Pattern]
    severity    : Severity
    issue       : str
    suggestion  : str
    legal_basis : str
    category    : str


    @property
    def weight(self) -> float:
        return self.severity.weight


    @property
    def is_absence_rule(self) -> bool:
        return self.pattern is None


    def to_dict(self) -> Dict:
        """
        Convert to dictionary (catalog view, no match data)
        """
        return {"id"         : self.id,
                "name"       : self.name,
                "riskLevel"  : self.severity.value,
                "weight"     : self.weight,
                "issue"      : self.issue,
                "suggestion" : self.suggestion,
                "legalBasis" : self.legal_basis,
                "category"   : self.category,
               }


def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


def _gap(stop: str, allowed: str = r"[^.]") -> str:
    """
    Lazy in-sentence gap that cannot run past another occurrence of `stop`

    Each scan started at a keyword ends at the next occurrence of the same keyword, so
    every character is scanned a bounded number of times and matching stays linear
    """
    return r"(?:(?!" + stop + r")" + allowed + r")*?"


@dataclass(frozen = True)
class AbsenceCheck:
    """
    Whole-document presence scan bound to an absence rule

    The rule is suppressed when `pattern` finds anything, or when every pattern in
    `co_occurring` is found somewhere in the document (in any order, any sentence)
    """
    pattern      : re.Pattern
    excerpt      : str                     # reported as the matched text of the absence issue
    co_occurring : Tuple[re.Pattern, ...] = ()


    def is_present(self, text: str) -> bool:
        if self.pattern.search(text):
            return True

        return bool(self.co_occurring) and all(pattern.search(text) for pattern in self.co_occurring)


# Presence scans for the absence rule `missing_arbitration`
DISPUTE_RESOLUTION_PATTERN         = _compile(r"\barbitration\b|\bmediation\b|\bdispute\s+resolution\b")
COURT_JURISDICTION_PATTERNS        = (_compile(r"\bjurisdiction\b"),
                                      _compile(r"\bcourts?\b"),
                                     )

MISSING_DISPUTE_RESOLUTION_EXCERPT = "No dispute resolution mechanism found in document"

# Jurisdictions treated as foreign for a contract between Indian parties
FOREIGN_JURISDICTIONS              = ["england", "english", "wales", "united\\s+kingdom", "uk", "united\\s+states", "usa", "american",
                                      "new\\s+york", "delaware", "california", "singapore", "hong\\s+kong", "foreign",
                                     ]

# "US" only in capitals, the pronoun "us" is not a jurisdiction
_JURISDICTION                      = r"\b(?:(?:" + "|".join(FOREIGN_JURISDICTIONS) + r")\b|u\.s\.|(?-i:US\b))"

_GOVERNED_BY                       = r"\bgoverned\s+by\b"
_LAW                               = r"\blaws?\b"


INDIAN_CONTRACT_ACT_RULES  = (LegalRule(id          = "unlimited_liability",
                                        name        = "Unlimited Liability Clause",
                                        pattern     = _compile(r"\bunlimited\b" + _gap(r"\bunlimited\b") + r"\bliability\b|"
                                                               r"\bliability\b" + _gap(r"\bliability\b") + r"\bunlimited\b|"
                                                               r"\bliable\s+for\s+all\b|\bwithout\s+limitation\s+of\s+liability\b"),
                                        severity    = Severity.HIGH,
                                        issue       = "Unlimited liability clauses can expose parties to excessive financial risk",
                                        suggestion  = "Limit liability to contract value or specify maximum liability amount",
                                        legal_basis = "Section 73, Indian Contract Act 1872 - Compensation for loss or damage",
                                        category    = "Liability",
                                       ),
                              LegalRule(id          = "penalty_clause",
                                        name        = "Penalty Clause (Unenforceable)",
                                        pattern     = _compile(r"\bpenalt(?:y|ies)\b|\bpunitive\s+damages\b"),
                                        severity    = Severity.HIGH,
                                        issue       = "Penalty clauses are unenforceable under Indian law - only liquidated damages allowed",
                                        suggestion  = "Replace \"penalty\" with \"liquidated damages\" and ensure amount is reasonable estimate of actual loss",
                                        legal_basis = "Section 74, Indian Contract Act 1872 - Compensation for breach of contract",
                                        category    = "Damages",
                                       ),
                              # "governed by the laws of England" or "governed by English law"
                              LegalRule(id          = "foreign_jurisdiction",
                                        name        = "Foreign Governing Law",
                                        pattern     = _compile(_GOVERNED_BY + _gap(_GOVERNED_BY, r"[^.;]") + _LAW + _gap(_LAW, r"[^.;]") + _JURISDICTION + "|" +
                                                               _GOVERNED_BY + _gap(_GOVERNED_BY, r"[^.;]") + _JURISDICTION + r"\s+laws?\b"),
                                        severity    = Severity.MEDIUM,
                                        issue       = "Foreign governing law may not be enforceable in Indian courts",
                                        suggestion  = "Add Indian law as governing law or include dual jurisdiction clause",
                                        legal_basis = "Indian courts prefer Indian law for contracts with Indian parties",
                                        category    = "Jurisdiction",
                                       ),
                              LegalRule(id          = "unfair_termination",
                                        name        = "Unfair Termination Rights",
                                        pattern     = _compile(r"\bterminat\w*\b" + _gap(r"\bterminat") + r"\bwithout\b" + _gap(r"\bwithout\b") + r"\bnotice\b|"
                                                               r"\bimmediate\s+termination\b|"
                                                               r"\bterminat\w*\b" + _gap(r"\bterminat") + r"\bat[\s-]+will\b"),
                                        severity    = Severity.MEDIUM,
                                        issue       = "Immediate termination without notice may be deemed unfair",
                                        suggestion  = "Provide reasonable notice period (30-90 days) or payment in lieu of notice",
                                        legal_basis = "Indian Contract Act principles of reasonableness and fairness",
                                        category    = "Termination",
                                       ),
                              # Absence rule, always reported last: evaluated by a second whole-document pass
                              LegalRule(id          = "missing_arbitration",
                                        name        = "No Dispute Resolution Mechanism",
                                        pattern     = None,
                                        severity    = Severity.MEDIUM,
                                        issue       = "No clear dispute resolution mechanism specified",
                                        suggestion  = "Add arbitration clause with seat in India under Arbitration Act 2015",
                                        legal_basis = "Arbitration and Conciliation Act, 2015",
                                        category    = "Dispute Resolution",
                                       ),
                             )


class RuleSet:
    """
    Immutable, ordered catalog of legal rules

    Built once and shared by every detector; registry order is the order
    detected issues are reported in
    """
    def __init__(self, rules: Tuple[LegalRule, ...], absence_checks: Optional[Dict[str, AbsenceCheck]] = None):
        """
        Arguments:
        ----------
            rules          { tuple } : Rules in reporting order, ids must be unique

            absence_checks { dict }  : Absence rule id -> AbsenceCheck that suppresses it
        """
        ids            = [rule.id for rule in rules]

        if (len(ids) != len(set(ids))):
            raise ValueError(f"Duplicate rule ids in rule set: {ids}")

        absence_checks = dict(absence_checks or {})

        for rule in rules:
            if (rule.is_absence_rule and (rule.id not in absence_checks)):
                raise ValueError(f"Absence rule '{rule.id}' has no absence check")

        self._rules          = tuple(rules)
        self._by_id          = {rule.id: rule for rule in self._rules}
        self._absence_checks = absence_checks


    def __iter__(self) -> Iterator[LegalRule]:
        return iter(self._rules)


    def __len__(self) -> int:
        return len(self._rules)


    @property
    def rules(self) -> Tuple[LegalRule, ...]:
        return self._rules


    def get(self, rule_id: str) -> Optional[LegalRule]:
        return self._by_id.get(rule_id)


    def absence_check(self, rule_id: str) -> Optional[AbsenceCheck]:
        return self._absence_checks.get(rule_id)


    def categories(self) -> List[str]:
        """
        Unique category labels in registry order
        """
        return list(dict.fromkeys(rule.category for rule in self._rules))


DEFAULT_RULE_SET = RuleSet(rules          = INDIAN_CONTRACT_ACT_RULES,
                           absence_checks = {"missing_arbitration": AbsenceCheck(pattern      = DISPUTE_RESOLUTION_PATTERN,
                                                                                 excerpt      = MISSING_DISPUTE_RESOLUTION_EXCERPT,
                                                                                 co_occurring = COURT_JURISDICTION_PATTERNS,
                                                                                ),
                                            },
                          )
