import unittest
import fastapi

from app.diff.errors import ParseError
from app.routes.api.v1.validation import translate_errors, validate_result
from app.routes.api.v1.diff.schemas import ANALYSIS_SCHEMA

GOOD_ANALYSIS = {
    "issues": [
        {
            "filename": "a.py",
            "lineNumber": 3,
            "severity": "info",
            "message": "msg",
            "type": "debug-code",
        }
    ],
    "suggestions": ["one", "two"],
}


class ValidateResultTest(unittest.TestCase):
    def test_valid_result(self) -> None:
        @validate_result(ANALYSIS_SCHEMA)
        def endpoint() -> dict:
            return GOOD_ANALYSIS

        self.assertEqual(endpoint(), GOOD_ANALYSIS)

    def test_invalid_result(self) -> None:
        @validate_result(ANALYSIS_SCHEMA)
        def endpoint() -> dict:
            return {"issues": [], "suggestions": ["same", "same"]}

        with self.assertRaises(fastapi.HTTPException) as ctx:
            endpoint()
        self.assertEqual(ctx.exception.status_code, 500)

    def test_null_line_number_rejected(self) -> None:
        @validate_result(ANALYSIS_SCHEMA)
        def endpoint() -> dict:
            issue = dict(GOOD_ANALYSIS["issues"][0], lineNumber=None)
            return {"issues": [issue], "suggestions": []}

        with self.assertRaises(fastapi.HTTPException):
            endpoint()


class TranslateErrorsTest(unittest.TestCase):
    def test_parse_error(self) -> None:
        @translate_errors
        def endpoint() -> None:
            raise ParseError("bad header", block="@@ -1\n")

        with self.assertRaises(fastapi.HTTPException) as ctx:
            endpoint()
        self.assertEqual(ctx.exception.status_code, 422)
        self.assertEqual(ctx.exception.detail["block"], "@@ -1\n")
        self.assertIn("bad header", ctx.exception.detail["message"])

    def test_unexpected_error(self) -> None:
        @translate_errors
        def endpoint() -> None:
            raise RuntimeError("boom")

        with self.assertRaises(fastapi.HTTPException) as ctx:
            endpoint()
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertIn("boom", ctx.exception.detail)

    def test_http_error_passes_through(self) -> None:
        @translate_errors
        def endpoint() -> None:
            raise fastapi.HTTPException(status_code=400, detail="nope")

        with self.assertRaises(fastapi.HTTPException) as ctx:
            endpoint()
        self.assertEqual(ctx.exception.status_code, 400)


if __name__ == "__main__":
    unittest.main()
