import enum
import functools
import typing
import pydantic
import pydantic.alias_generators


@functools.total_ordering
class Severity(enum.Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank


_SEVERITY_RANK = {
    Severity.INFO: 0,
    Severity.WARNING: 1,
    Severity.ERROR: 2,
}


class IssueType(enum.Enum):
    DEBUG_CODE = "debug-code"
    SECURITY = "security"
    CODE_QUALITY = "code-quality"
    ERROR_HANDLING = "error-handling"
    CODE_REVIEW_PRACTICE = "code-review-practice"


class ReviewModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        alias_generator=pydantic.alias_generators.to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Finding(ReviewModel):
    filename: str
    line_number: typing.Optional[pydantic.PositiveInt] = None
    severity: Severity
    message: str
    type: IssueType


class Analysis(ReviewModel):
    issues: list[Finding] = pydantic.Field(default_factory=list)
    suggestions: list[str] = pydantic.Field(default_factory=list)

    def by_severity(self) -> list[Finding]:
        """Issues ordered from the most to the least severe, stable within a severity"""

        return sorted(self.issues, key=lambda issue: issue.severity, reverse=True)

    def to_json_dict(self) -> dict[str, typing.Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
