import logging
import typing
import pydantic
import pydantic.alias_generators

from app.config import CONFIG
from app.diff.models.diff import FileChange
from app.diff.parser import parse_diff
from app.review.engine import default_rule_engine
from app.review.pipeline import review
from app.routes.api.v1.validation import translate_errors, validate_result
from app.routes.api.v1.diff.schemas import (
    ANALYSIS_SCHEMA,
    PARSED_DIFF_SCHEMA,
    REVIEW_SCHEMA,
)

log = logging.getLogger(__name__)
log.setLevel(CONFIG.LOG_LEVEL)


class RequestBody(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        alias_generator=pydantic.alias_generators.to_camel,
        populate_by_name=True,
    )


class DiffRequest(RequestBody):
    diff_content: str


class AnalyzeRequest(RequestBody):
    files: list[FileChange]


Response = dict[str, typing.Any]


@translate_errors
@validate_result(PARSED_DIFF_SCHEMA)
def endpoint_diff_parse(body: DiffRequest) -> Response:
    """Parse unified diff text into structured file changes

    Args:
        body (DiffRequest): request with the raw diff text

    Raises:
        fastapi.HTTPException: 422 in case the diff cannot be parsed

    Returns:
        Response: `{files, summary}`
    """

    diff = parse_diff(body.diff_content)
    log.info(
        f"Parsed diff: {diff.summary.total_files} files, "
        f"+{diff.summary.total_additions} -{diff.summary.total_deletions}"
    )
    return diff.to_json_dict()


@translate_errors
@validate_result(ANALYSIS_SCHEMA)
def endpoint_diff_analyze(body: AnalyzeRequest) -> Response:
    """Run the heuristic rules over already parsed file changes

    Args:
        body (AnalyzeRequest): request with the file changes

    Returns:
        Response: `{issues, suggestions}`
    """

    analysis = default_rule_engine().evaluate(body.files)
    log.info(f"Analyzed {len(body.files)} files: {len(analysis.issues)} issues")
    return analysis.to_json_dict()


@translate_errors
@validate_result(REVIEW_SCHEMA)
def endpoint_review(body: DiffRequest) -> Response:
    result = review(body.diff_content)
    log.info(
        f"Reviewed {result.diff.summary.total_files} files: "
        f"{len(result.analysis.issues)} issues"
    )
    return result.to_json_dict()
