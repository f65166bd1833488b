CHANGE_LINE_SCHEMA = {
    "description": "One line inside a diff hunk",
    "type": "object",
    "properties": {
        "kind": {"enum": ["added", "removed", "context"]},
        "content": {"type": "string"},
        "lineNumber": {"type": "integer", "minimum": 1},
    },
    "required": ["kind", "content"],
    "additionalProperties": False,
}

FILE_CHANGE_SCHEMA = {
    "description": "One file's diff entry",
    "type": "object",
    "properties": {
        "filename": {
            "description": "Path in the new revision, empty for deleted files",
            "type": "string",
        },
        "oldFilename": {
            "description": "Path in the old revision, only when it differs from filename",
            "type": "string",
        },
        "status": {"enum": ["added", "deleted", "modified", "renamed"]},
        "language": {"type": "string"},
        "binary": {"type": "boolean"},
        "additions": {"type": "integer", "minimum": 0},
        "deletions": {"type": "integer", "minimum": 0},
        "changes": {"type": "array", "items": CHANGE_LINE_SCHEMA},
    },
    "required": [
        "filename",
        "status",
        "language",
        "binary",
        "additions",
        "deletions",
        "changes",
    ],
    "additionalProperties": False,
}

DIFF_SUMMARY_SCHEMA = {
    "type": "object",
    "properties": {
        "totalFiles": {"type": "integer", "minimum": 0},
        "totalAdditions": {"type": "integer", "minimum": 0},
        "totalDeletions": {"type": "integer", "minimum": 0},
    },
    "required": ["totalFiles", "totalAdditions", "totalDeletions"],
    "additionalProperties": False,
}

PARSED_DIFF = {
    "description": "Result of parsing a unified diff",
    "type": "object",
    "properties": {
        "files": {"type": "array", "items": FILE_CHANGE_SCHEMA},
        "summary": DIFF_SUMMARY_SCHEMA,
    },
    "required": ["files", "summary"],
    "additionalProperties": False,
}

FINDING_SCHEMA = {
    "description": "One heuristic observation",
    "type": "object",
    "properties": {
        "filename": {"type": "string"},
        "lineNumber": {"type": "integer", "minimum": 1},
        "severity": {"enum": ["info", "warning", "error"]},
        "message": {"type": "string"},
        "type": {
            "enum": [
                "debug-code",
                "security",
                "code-quality",
                "error-handling",
                "code-review-practice",
            ]
        },
    },
    "required": ["filename", "severity", "message", "type"],
    "additionalProperties": False,
}

ANALYSIS = {
    "description": "Findings and deduplicated suggestions of the rule engine",
    "type": "object",
    "properties": {
        "issues": {"type": "array", "items": FINDING_SCHEMA},
        "suggestions": {
            "type": "array",
            "items": {"type": "string"},
            "uniqueItems": True,
        },
    },
    "required": ["issues", "suggestions"],
    "additionalProperties": False,
}

REVIEW_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "description": "Parsed diff together with its analysis",
    "type": "object",
    "properties": {
        "diff": PARSED_DIFF,
        "analysis": ANALYSIS,
    },
    "required": ["diff", "analysis"],
    "additionalProperties": False,
}

PARSED_DIFF_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    **PARSED_DIFF,
}

ANALYSIS_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    **ANALYSIS,
}
