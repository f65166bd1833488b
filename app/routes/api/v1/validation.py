import fastapi
import functools
import jsonschema
import logging
import typing

from app.config import CONFIG
from app.diff.errors import ParseError

RT = typing.TypeVar("RT")  # return type

log = logging.getLogger(__name__)
log.setLevel(CONFIG.LOG_LEVEL)


def validate_result(
    schema: dict[str, typing.Any],
) -> typing.Callable[[typing.Callable[..., RT]], typing.Callable[..., RT]]:
    """Decorator for the endpoint's result validation against the public contract

    Args:
        schema (dict[str, object]): schema used to validate result of the function
    """

    def decorator(func: typing.Callable[..., RT]) -> typing.Callable[..., RT]:
        @functools.wraps(func)
        def wrapper(*args: typing.Any, **kwargs: typing.Any) -> RT:
            result = func(*args, **kwargs)
            try:
                jsonschema.validate(result, schema)
            except jsonschema.ValidationError as e:
                raise fastapi.HTTPException(
                    status_code=500,
                    detail=f"Error while validating {func.__name__}'s result : {e.message}",
                )
            return result

        return wrapper

    return decorator


def translate_errors(
    func: typing.Callable[..., RT],
) -> typing.Callable[..., RT]:
    """Decorator mapping pipeline failures onto HTTP errors

    ParseError becomes 422 with the offending block attached, any other
    unexpected exception becomes 500.
    """

    @functools.wraps(func)
    def wrapper(*args: typing.Any, **kwargs: typing.Any) -> RT:
        try:
            return func(*args, **kwargs)
        except fastapi.HTTPException as httpe:
            raise httpe
        except ParseError as e:
            log.warning(f"[{func.__name__}] Could not parse diff: {e.message}")
            raise fastapi.HTTPException(
                status_code=422,
                detail={
                    "message": f"[{func.__name__}] Could not parse diff: {e.message}",
                    "block": e.block,
                },
            )
        except Exception as e:
            raise fastapi.HTTPException(
                status_code=500,
                detail=f"[{func.__name__}] Exception {type(e)} occured during handling request: {str(e)}",
            )

    return wrapper
