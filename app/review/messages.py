import enum


class Message(enum.Enum):
    # findings
    CONSOLE_LOG = "console_log"
    EVAL_CALL = "eval_call"
    COMMENTED_CODE = "commented_code"
    PRINT_CALL = "print_call"
    BARE_EXCEPT = "bare_except"
    LARGE_CHANGE = "large_change"
    # suggestions
    USE_JS_LINTERS = "use_js_linters"
    ADD_JSDOC = "add_jsdoc"
    USE_PY_FORMATTER = "use_py_formatter"
    USE_TYPE_HINTS = "use_type_hints"
    SPLIT_LARGE_CHANGES = "split_large_changes"


CATALOGUES: dict[str, dict[Message, str]] = {
    "en": {
        Message.CONSOLE_LOG: "Code contains a console.log statement, remove it before shipping to production",
        Message.EVAL_CALL: "Code uses eval, which may introduce security risks",
        Message.COMMENTED_CODE: "Large block of commented-out code, consider removing unused code",
        Message.PRINT_CALL: "Code contains a print statement, use logging in production code",
        Message.BARE_EXCEPT: "Catch-all exception handler, specify the exception types to catch",
        Message.LARGE_CHANGE: "This file adds a large amount of code ({count} lines), consider splitting it into smaller commits",
        Message.USE_JS_LINTERS: "Consider using ESLint and Prettier to keep the code style consistent",
        Message.ADD_JSDOC: "Consider adding JSDoc documentation to complex functions",
        Message.USE_PY_FORMATTER: "Consider formatting Python code with Black or YAPF",
        Message.USE_TYPE_HINTS: "Use type hints to improve code readability",
        Message.SPLIT_LARGE_CHANGES: "Consider splitting large changes into several smaller commits to ease review",
    },
    "zh": {
        Message.CONSOLE_LOG: "代码中包含console.log语句，生产环境中应移除",
        Message.EVAL_CALL: "使用了eval函数，可能导致安全风险",
        Message.COMMENTED_CODE: "存在大块注释代码，建议移除未使用代码",
        Message.PRINT_CALL: "代码中包含print语句，生产环境中应使用日志",
        Message.BARE_EXCEPT: "使用了通用异常捕获，应指定具体异常类型",
        Message.LARGE_CHANGE: "此文件添加了大量代码({count}行)，建议拆分为更小的提交",
        Message.USE_JS_LINTERS: "考虑使用ESLint和Prettier保持代码风格一致",
        Message.ADD_JSDOC: "对于复杂函数，考虑添加JSDoc文档",
        Message.USE_PY_FORMATTER: "考虑使用Black或YAPF格式化Python代码",
        Message.USE_TYPE_HINTS: "使用类型提示(Type Hints)增强代码可读性",
        Message.SPLIT_LARGE_CHANGES: "考虑将大型变更拆分为多个小型提交，便于审查",
    },
}


class Catalogue:
    """Fixed message templates for one locale"""

    def __init__(self, locale: str = "en") -> None:
        if locale not in CATALOGUES:
            raise ValueError(f"Unsupported locale: {locale}")
        self.locale = locale
        self._templates = CATALOGUES[locale]

    def text(self, message: Message, **values: object) -> str:
        return self._templates[message].format(**values)
