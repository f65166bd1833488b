import logging
import typing

from app.config import CONFIG
from app.diff.models.diff import FileChange
from app.review.messages import Catalogue
from app.review.models.review import Analysis, Finding
from app.review.rules import (
    IRule,
    LargeChangeRule,
    RuleSet,
    javascript_rule_set,
    python_rule_set,
)

log = logging.getLogger(__name__)
log.setLevel(CONFIG.LOG_LEVEL)


class RuleEngine:
    """Dispatches heuristic rules over parsed file changes by language

    Args:
        rule_sets (dict[str, RuleSet]): language name mapped to the rules applied to it
        common_rules (list[IRule]): rules applied to every file regardless of the language
    """

    def __init__(
        self,
        rule_sets: dict[str, RuleSet],
        common_rules: typing.Sequence[IRule],
    ) -> None:
        self.rule_sets = dict(rule_sets)
        self.common_rules = list(common_rules)

    def evaluate(self, files: typing.Sequence[FileChange]) -> Analysis:
        issues = list[Finding]()
        # insertion-ordered set, local to this call
        suggestions = dict[str, None]()

        for file in files:
            rules = list[IRule]()

            rule_set = self.rule_sets.get(file.language)
            if rule_set is not None:
                log.debug(f"Applying {file.language} rules to {file.filename}")
                rules.extend(rule_set.rules)
                suggestions.update(dict.fromkeys(rule_set.suggestions))

            rules.extend(self.common_rules)

            for rule in rules:
                findings = rule.evaluate(file)
                issues.extend(findings)
                suggestions.update(dict.fromkeys(rule.suggestions(findings)))

        return Analysis(issues=issues, suggestions=list(suggestions))


def default_rule_engine(
    locale: str | None = None,
    large_change_threshold: int | None = None,
    commented_code_min_length: int | None = None,
) -> RuleEngine:
    """Build the engine with the built-in rule table, falling back to CONFIG for unset values"""

    catalogue = Catalogue(locale or CONFIG.REVIEWER_LOCALE)

    if large_change_threshold is None:
        large_change_threshold = CONFIG.LARGE_CHANGE_THRESHOLD
    if commented_code_min_length is None:
        commented_code_min_length = CONFIG.COMMENTED_CODE_MIN_LENGTH

    javascript = javascript_rule_set(catalogue, commented_code_min_length)

    return RuleEngine(
        rule_sets={
            "JavaScript": javascript,
            "TypeScript": javascript,
            "Python": python_rule_set(catalogue),
        },
        common_rules=[LargeChangeRule(catalogue, large_change_threshold)],
    )


def evaluate(files: typing.Sequence[FileChange]) -> Analysis:
    return default_rule_engine().evaluate(files)
