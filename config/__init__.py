# DEPENDENCIES
from .settings import settings
from .legal_rules import RuleSet
from .legal_rules import Severity
from .legal_rules import LegalRule
from .legal_rules import AbsenceCheck
from .legal_rules import DEFAULT_RULE_SET


__all__ = ['RuleSet',
           'Severity',
           'settings',
           'LegalRule',
           'AbsenceCheck',
           'DEFAULT_RULE_SET',
          ]
