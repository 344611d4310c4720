"""Rule validation exceptions."""

from anchor.domain.exceptions.base import AnchorError


class RuleValidationError(AnchorError):
    """DependencyRule is inconsistent with its rule type.

    Raised while constructing a rule, before any check runs: a rule without
    selectors, or a forbidding rule with nothing forbidden.

    Attributes:
        rule_name: Display name of the rule (type value if unnamed)
        reason: What is inconsistent
    """

    def __init__(self, rule_name: str, reason: str) -> None:
        if not rule_name:
            raise ValueError("rule_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")
        self.rule_name = rule_name
        self.reason = reason
        super().__init__(f"Invalid rule '{rule_name}': {reason}")
