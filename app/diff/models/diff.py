import enum
import typing
import pydantic
import pydantic.alias_generators

from app.diff.language import UNKNOWN_LANGUAGE


class ChangeKind(enum.Enum):
    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"


class FileStatus(enum.Enum):
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"


class DiffModel(pydantic.BaseModel):
    """Base for the parsed diff entities: camelCase on the wire, read-only after creation"""

    model_config = pydantic.ConfigDict(
        alias_generator=pydantic.alias_generators.to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ChangeLine(DiffModel):
    kind: ChangeKind
    content: str
    line_number: typing.Optional[pydantic.PositiveInt] = None


class FileChange(DiffModel):
    filename: str
    old_filename: typing.Optional[str] = None
    status: FileStatus = FileStatus.MODIFIED
    language: str = UNKNOWN_LANGUAGE
    binary: bool = False
    changes: list[ChangeLine] = pydantic.Field(default_factory=list)

    @pydantic.computed_field  # type: ignore[prop-decorator]
    @property
    def additions(self) -> int:
        return self.count(ChangeKind.ADDED)

    @pydantic.computed_field  # type: ignore[prop-decorator]
    @property
    def deletions(self) -> int:
        return self.count(ChangeKind.REMOVED)

    def count(self, kind: ChangeKind) -> int:
        return sum(1 for change in self.changes if change.kind is kind)

    def added_lines(self) -> list[ChangeLine]:
        return [change for change in self.changes if change.kind is ChangeKind.ADDED]


class DiffSummary(DiffModel):
    total_files: int
    total_additions: int
    total_deletions: int

    @staticmethod
    def from_files(files: typing.Sequence[FileChange]) -> "DiffSummary":
        return DiffSummary(
            total_files=len(files),
            total_additions=sum(file.additions for file in files),
            total_deletions=sum(file.deletions for file in files),
        )


class ParsedDiff(DiffModel):
    files: list[FileChange] = pydantic.Field(default_factory=list)

    @pydantic.computed_field  # type: ignore[prop-decorator]
    @property
    def summary(self) -> DiffSummary:
        return DiffSummary.from_files(self.files)

    def to_json_dict(self) -> dict[str, typing.Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
