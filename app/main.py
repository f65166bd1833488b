import contextlib
import fastapi
import logging

from app.config import CONFIG
from app.routes.api.v1.diff.endpoint import (
    AnalyzeRequest,
    DiffRequest,
    Response as ResponseApiV1Diff,
    endpoint_diff_analyze,
    endpoint_diff_parse,
    endpoint_review,
)
from app.routes.health.endpoint import (
    endpoint_health,
    Response as ResponseHealth,
)

log = logging.getLogger(__name__)
log.setLevel(CONFIG.LOG_LEVEL)


@contextlib.asynccontextmanager
async def lifespan(app: fastapi.FastAPI):  # type: ignore
    log.info(
        f"Rule engine ready: locale={CONFIG.REVIEWER_LOCALE}, "
        f"large change threshold={CONFIG.LARGE_CHANGE_THRESHOLD}"
    )
    log.info("Listening for requests")
    yield
    log.info("Shutting down")


listener = fastapi.FastAPI(lifespan=lifespan)


@listener.get("/health")
def health() -> ResponseHealth:
    """Basic healthcheck endpoint

    Returns:
        ResponseHealth: response with the 'healthy' status and the languages having rules
    """

    return endpoint_health()


@listener.post("/api/v1/diff/parse")
def api_v1_diff_parse(body: DiffRequest) -> ResponseApiV1Diff:
    """Parse a unified diff into structured file changes

    Args:
        body (DiffRequest): `{"diffContent": str}`

    Returns:
        ResponseApiV1Diff: `{files, summary}`
    """

    return endpoint_diff_parse(body)


@listener.post("/api/v1/diff/analyze")
def api_v1_diff_analyze(body: AnalyzeRequest) -> ResponseApiV1Diff:
    """Run heuristic rules over parsed file changes

    Args:
        body (AnalyzeRequest): `{"files": [FileChange]}`

    Returns:
        ResponseApiV1Diff: `{issues, suggestions}`
    """

    return endpoint_diff_analyze(body)


@listener.post("/api/v1/review")
def api_v1_review(body: DiffRequest) -> ResponseApiV1Diff:
    """Parse the diff and analyze it in one pass

    Args:
        body (DiffRequest): `{"diffContent": str}`

    Returns:
        ResponseApiV1Diff: `{diff: {files, summary}, analysis: {issues, suggestions}}`
    """

    return endpoint_review(body)
