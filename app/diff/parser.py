import logging
import re
import unidiff

from app.config import CONFIG
from app.diff.errors import ParseError
from app.diff.language import infer_language
from app.diff.models.diff import (
    ChangeKind,
    ChangeLine,
    FileChange,
    FileStatus,
    ParsedDiff,
)

log = logging.getLogger(__name__)
log.setLevel(CONFIG.LOG_LEVEL)

DEV_NULL = "/dev/null"

HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
BINARY_FILES = re.compile(r"^Binary files? .+ (?:differ|has changed)")

SOURCE_HEADER_PREFIX = "--- "
TARGET_HEADER_PREFIX = "+++ "
DIFF_COMMAND_PREFIX = "diff "


def parse_diff(diff_text: str) -> ParsedDiff:
    """Parse unified diff text into per-file change models

    Args:
        diff_text (str): diff as produced by `git diff` or `diff -u`

    Raises:
        ParseError: in case file headers or hunk headers cannot be recognized

    Returns:
        ParsedDiff: one FileChange per file block, in input order
    """

    blocks = split_file_blocks(diff_text)
    log.debug(f"Split diff into {len(blocks)} file blocks")

    return ParsedDiff(files=[_parse_block(block) for block in blocks])


def split_file_blocks(diff_text: str) -> list[str]:
    """Split diff text into raw per-file blocks

    Hunk bodies are consumed according to the lengths declared in their
    headers, so content lines never open a new block. Text before the
    first file header is dropped.

    Args:
        diff_text (str): diff text

    Raises:
        ParseError: in case of truncated hunk headers, hunks outside of a file
            block or dangling file headers

    Returns:
        list[str]: raw text of every file block
    """

    lines = _split_lines(diff_text)

    blocks = list[list[str]]()
    current: list[str] | None = None
    in_git_header = False
    expect_target = False
    had_hunk = False
    old_left = 0
    new_left = 0

    for idx, line in enumerate(lines):
        if current is not None and (old_left > 0 or new_left > 0):
            if _is_hunk_body_line(line):
                current.append(line)
                old_left, new_left = _consume_hunk_line(line, old_left, new_left)
                continue
            # short hunk, reported by unidiff for the block
            old_left = new_left = 0

        if line.startswith("\\"):
            if current is not None:
                current.append(line)
            continue

        if line.startswith("@@"):
            match = HUNK_HEADER.match(line)
            if match is None:
                raise ParseError(
                    f"Malformed hunk header: {line.rstrip()}",
                    block=_join(current or []) + line,
                )
            if current is None:
                raise ParseError(
                    f"Hunk found before any file header: {line.rstrip()}",
                    block=_join(current or []) + line,
                )
            current.append(line)
            in_git_header = False
            had_hunk = True
            old_left = _hunk_length(match.group(2))
            new_left = _hunk_length(match.group(4))
            continue

        if line.startswith(DIFF_COMMAND_PREFIX):
            current = [line]
            blocks.append(current)
            in_git_header = True
            had_hunk = False
            continue

        if line.startswith(SOURCE_HEADER_PREFIX):
            if not _next_is_target_header(lines, idx):
                if current is not None:
                    raise ParseError(
                        f"Source file header without target file header: {line.rstrip()}",
                        block=_join(current) + line,
                    )
                continue
            if current is None or not in_git_header:
                current = list[str]()
                blocks.append(current)
                had_hunk = False
            current.append(line)
            in_git_header = False
            expect_target = True
            continue

        if line.startswith(TARGET_HEADER_PREFIX):
            if not expect_target or current is None:
                raise ParseError(
                    f"Target file header without source file header: {line.rstrip()}",
                    block=_join(current or []) + line,
                )
            current.append(line)
            expect_target = False
            continue

        if BINARY_FILES.match(line) and not in_git_header:
            current = [line]
            blocks.append(current)
            had_hunk = False
            continue

        if current is None or _is_blank(line):
            continue

        if had_hunk and _is_signature_separator(line):
            # format-patch trailer, nothing after it belongs to the block
            current = None
            continue

        if had_hunk and line[0] in " +-":
            raise ParseError(
                f"Hunk is longer than declared: {line.rstrip()}",
                block=_join(current) + line,
            )

        current.append(line)

    return [_join(block) for block in blocks]


###########
# private #
###########


def _parse_block(block: str) -> FileChange:
    try:
        patch_set = unidiff.PatchSet(block)
    except unidiff.UnidiffParseError as e:
        raise ParseError(f"Unable to parse file block: {str(e)}", block=block) from e

    if len(patch_set) != 1:
        raise ParseError(
            f"Expected exactly one file in block, got {len(patch_set)}",
            block=block,
        )

    return _to_file_change(patch_set[0])


def _to_file_change(patched_file: unidiff.PatchedFile) -> FileChange:
    old_path = _strip_prefix(patched_file.source_file, "a/")
    new_path = _strip_prefix(patched_file.target_file, "b/")
    status = _infer_status(old_path, new_path)

    filename = "" if status is FileStatus.DELETED else new_path
    old_filename = (
        old_path if status in (FileStatus.DELETED, FileStatus.RENAMED) else None
    )

    changes = list[ChangeLine]()
    for hunk in patched_file:
        for line in hunk:
            change = _to_change_line(line)
            if change is not None:
                changes.append(change)

    return FileChange(
        filename=filename,
        old_filename=old_filename,
        status=status,
        language=infer_language(filename),
        binary=bool(patched_file.is_binary_file),
        changes=changes,
    )


def _to_change_line(line: unidiff.patch.Line) -> ChangeLine | None:
    content = line.value.rstrip("\r\n")

    if line.is_added:
        return ChangeLine(
            kind=ChangeKind.ADDED, content=content, line_number=line.target_line_no
        )

    if line.is_removed:
        return ChangeLine(
            kind=ChangeKind.REMOVED, content=content, line_number=line.source_line_no
        )

    if line.is_context:
        return ChangeLine(
            kind=ChangeKind.CONTEXT, content=content, line_number=line.source_line_no
        )

    # "\ No newline at end of file" and trailing empty lines
    return None


def _infer_status(old_path: str, new_path: str) -> FileStatus:
    if old_path == DEV_NULL:
        return FileStatus.ADDED
    if new_path == DEV_NULL:
        return FileStatus.DELETED
    if old_path != new_path:
        return FileStatus.RENAMED
    return FileStatus.MODIFIED


def _strip_prefix(path: str | None, prefix: str) -> str:
    if path is None:
        return ""
    if path != DEV_NULL and path.startswith(prefix):
        return path[len(prefix) :]
    return path


def _next_is_target_header(lines: list[str], idx: int) -> bool:
    return idx + 1 < len(lines) and lines[idx + 1].startswith(TARGET_HEADER_PREFIX)


def _is_blank(line: str) -> bool:
    return line.strip("\r\n") == ""


def _is_signature_separator(line: str) -> bool:
    return line.rstrip("\r\n") in ("--", "-- ")


def _is_hunk_body_line(line: str) -> bool:
    return _is_blank(line) or line[0] in " +-\\"


def _consume_hunk_line(line: str, old_left: int, new_left: int) -> tuple[int, int]:
    if line.startswith("+"):
        return old_left, new_left - 1
    if line.startswith("-"):
        return old_left - 1, new_left
    if line.startswith("\\"):
        return old_left, new_left
    return old_left - 1, new_left - 1


def _hunk_length(group: str | None) -> int:
    return 1 if group is None else int(group)


def _split_lines(text: str) -> list[str]:
    # only "\n" terminates a diff line, content may hold form feeds and the like
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line + "\n" for line in lines]


def _join(lines: list[str]) -> str:
    return "".join(lines)
