import posixpath

UNKNOWN_LANGUAGE = "Unknown"

EXTENSION_LANGUAGES: dict[str, str] = {
    "js": "JavaScript",
    "ts": "TypeScript",
    "py": "Python",
    "java": "Java",
    "rb": "Ruby",
    "go": "Go",
    "php": "PHP",
    "cs": "C#",
    "cpp": "C++",
    "c": "C",
}


def infer_language(path: str) -> str:
    """Infer the language of a file from its extension

    Args:
        path (str): path of the file inside the repository

    Returns:
        str: language name or `UNKNOWN_LANGUAGE` for unmapped or missing extensions
    """

    basename = posixpath.basename(path)
    if "." not in basename:
        return UNKNOWN_LANGUAGE

    extension = basename.rsplit(".", 1)[1]
    return EXTENSION_LANGUAGES.get(extension, UNKNOWN_LANGUAGE)
