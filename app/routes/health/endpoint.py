import pydantic
import typing

from app.config import CONFIG
from app.review.engine import default_rule_engine


class Response(pydantic.BaseModel):
    status: typing.Literal["healthy"]
    locale: str
    languages: list[str]


def endpoint_health() -> Response:
    engine = default_rule_engine()
    return Response(
        status="healthy",
        locale=CONFIG.REVIEWER_LOCALE,
        languages=sorted(engine.rule_sets.keys()),
    )
