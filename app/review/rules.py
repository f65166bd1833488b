import abc
import re
import typing

from app.diff.models.diff import ChangeLine, FileChange
from app.review.messages import Catalogue, Message
from app.review.models.review import Finding, IssueType, Severity


class IRule(abc.ABC):
    """Heuristic check over one file's changes"""

    @abc.abstractmethod
    def evaluate(self, file: FileChange) -> list[Finding]:
        pass

    def suggestions(self, findings: list[Finding]) -> list[str]:
        """Suggestions contributed by the rule given its findings on one file"""

        return list()


class ILineRule(abc.ABC):
    """Heuristic check over the content of a single added line"""

    severity: Severity
    type: IssueType
    message: Message

    def __init__(self, catalogue: Catalogue) -> None:
        self._catalogue = catalogue

    @abc.abstractmethod
    def matches(self, content: str) -> bool:
        pass

    def check(self, filename: str, change: ChangeLine) -> Finding | None:
        if not self.matches(change.content):
            return None

        return Finding(
            filename=filename,
            line_number=change.line_number,
            severity=self.severity,
            message=self._catalogue.text(self.message),
            type=self.type,
        )


class LineRules(IRule):
    """Applies line rules to every added line, keeping per-change order of the findings"""

    def __init__(self, rules: typing.Sequence[ILineRule]) -> None:
        self.rules = list(rules)

    def evaluate(self, file: FileChange) -> list[Finding]:
        findings = list[Finding]()
        for change in file.added_lines():
            for rule in self.rules:
                finding = rule.check(file.filename, change)
                if finding is not None:
                    findings.append(finding)
        return findings


class RuleSet:
    """Ordered rules plus the suggestions a language always contributes"""

    def __init__(
        self, rules: typing.Sequence[IRule], suggestions: typing.Sequence[str]
    ) -> None:
        self.rules = list(rules)
        self.suggestions = list(suggestions)


#########################
# JavaScript/TypeScript #
#########################


class ConsoleLogRule(ILineRule):
    severity = Severity.WARNING
    type = IssueType.DEBUG_CODE
    message = Message.CONSOLE_LOG

    def matches(self, content: str) -> bool:
        return "console.log" in content


class EvalRule(ILineRule):
    severity = Severity.ERROR
    type = IssueType.SECURITY
    message = Message.EVAL_CALL

    def matches(self, content: str) -> bool:
        return "eval(" in content


class CommentedCodeRule(ILineRule):
    severity = Severity.INFO
    type = IssueType.CODE_QUALITY
    message = Message.COMMENTED_CODE

    def __init__(self, catalogue: Catalogue, min_length: int) -> None:
        super().__init__(catalogue)
        self.min_length = min_length

    def matches(self, content: str) -> bool:
        return content.lstrip().startswith("//") and len(content) > self.min_length


##########
# Python #
##########


class PrintRule(ILineRule):
    severity = Severity.INFO
    type = IssueType.DEBUG_CODE
    message = Message.PRINT_CALL

    def matches(self, content: str) -> bool:
        return "print(" in content


class BareExceptRule(ILineRule):
    severity = Severity.WARNING
    type = IssueType.ERROR_HANDLING
    message = Message.BARE_EXCEPT

    BARE_EXCEPT = re.compile(r"\bexcept\s*:")

    def matches(self, content: str) -> bool:
        return self.BARE_EXCEPT.search(content) is not None


#####################
# language-agnostic #
#####################


class LargeChangeRule(IRule):
    """Flags files adding more lines than the threshold"""

    def __init__(self, catalogue: Catalogue, threshold: int) -> None:
        self._catalogue = catalogue
        self.threshold = threshold

    def evaluate(self, file: FileChange) -> list[Finding]:
        added = file.additions
        if added <= self.threshold:
            return list()

        return [
            Finding(
                filename=file.filename,
                severity=Severity.WARNING,
                message=self._catalogue.text(Message.LARGE_CHANGE, count=added),
                type=IssueType.CODE_REVIEW_PRACTICE,
            )
        ]

    def suggestions(self, findings: list[Finding]) -> list[str]:
        if len(findings) == 0:
            return list()
        return [self._catalogue.text(Message.SPLIT_LARGE_CHANGES)]


def javascript_rule_set(catalogue: Catalogue, commented_code_min_length: int) -> RuleSet:
    return RuleSet(
        rules=[
            LineRules(
                [
                    ConsoleLogRule(catalogue),
                    EvalRule(catalogue),
                    CommentedCodeRule(catalogue, commented_code_min_length),
                ]
            )
        ],
        suggestions=[
            catalogue.text(Message.USE_JS_LINTERS),
            catalogue.text(Message.ADD_JSDOC),
        ],
    )


def python_rule_set(catalogue: Catalogue) -> RuleSet:
    return RuleSet(
        rules=[LineRules([PrintRule(catalogue), BareExceptRule(catalogue)])],
        suggestions=[
            catalogue.text(Message.USE_PY_FORMATTER),
            catalogue.text(Message.USE_TYPE_HINTS),
        ],
    )
