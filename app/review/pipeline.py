import typing
import pydantic

from app.diff.models.diff import ParsedDiff
from app.diff.parser import parse_diff
from app.review.engine import RuleEngine, default_rule_engine
from app.review.models.review import Analysis


class Review(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    diff: ParsedDiff
    analysis: Analysis

    def to_json_dict(self) -> dict[str, typing.Any]:
        return {
            "diff": self.diff.to_json_dict(),
            "analysis": self.analysis.to_json_dict(),
        }


def review(diff_text: str, engine: RuleEngine | None = None) -> Review:
    """Parse the diff and run the heuristic rules over its files

    Raises:
        ParseError: in case the diff cannot be parsed, the rules are not run then
    """

    diff = parse_diff(diff_text)
    analysis = (engine or default_rule_engine()).evaluate(diff.files)
    return Review(diff=diff, analysis=analysis)
