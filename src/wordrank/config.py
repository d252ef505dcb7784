"""Configuration parsing for ranking jobs."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .sources import CACHE_DIR_NAME, STDIN_SOURCE, is_url

DEFAULT_TOP = 10
DEFAULT_ENCODING = "utf-8"

# Parameters that may be overridden from the command line
PARAMETERS = ("top", "encoding")


def validate_top(value: Any) -> int:
    """Check that a result count is a positive integer and return it."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"top must be a positive integer, got {value!r}")
    return value


def validate_max_workers(value: Any) -> int | None:
    """Check that a worker count is None or a positive integer and return it."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"max_workers must be a positive integer, got {value!r}")
    return value


@dataclass
class DocumentConfig:
    """A single document to rank."""

    name: str
    source: str  # path, URL, or "-" for stdin
    top: int | None = None  # None = use job-level parameter
    encoding: str | None = None

    @classmethod
    def from_dict(cls, name: str, entry: Any) -> "DocumentConfig":
        """Create DocumentConfig from a YAML entry.

        A plain string is taken as the document path.
        """
        if not isinstance(entry, dict):
            return cls(name=name, source=str(entry))
        if "path" not in entry:
            raise KeyError(f"Document '{name}' must have 'path' field")
        top = entry.get("top")
        return cls(
            name=name,
            source=str(entry["path"]),
            top=validate_top(top) if top is not None else None,
            encoding=entry.get("encoding"),
        )


@dataclass
class JobConfig:
    """Configuration for ranking a set of documents."""

    documents: list[DocumentConfig]
    parameters: dict[str, Any] = field(default_factory=dict)
    base_dir: Path = field(default_factory=Path.cwd)
    parallel: bool = False
    max_workers: int | None = None

    @classmethod
    def from_yaml(cls, path: Path) -> "JobConfig":
        """Load job configuration from YAML file.

        Relative document paths are resolved relative to the directory
        containing the YAML file.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        documents = [
            DocumentConfig.from_dict(str(name), entry)
            for name, entry in (data.get("documents") or {}).items()
        ]
        if not documents:
            raise ValueError(f"No documents defined in {path}")

        execution = data.get("execution") or {}
        config = cls(
            documents=documents,
            parameters=data.get("parameters") or {},
            base_dir=path.parent.resolve(),
            parallel=execution.get("parallel", False),
            max_workers=validate_max_workers(execution.get("max_workers")),
        )
        config.default_top()
        return config

    @classmethod
    def from_sources(
        cls,
        sources: list[str],
        top: int = DEFAULT_TOP,
        base_dir: Path | None = None,
    ) -> "JobConfig":
        """Build a job from command-line sources, each named after itself."""
        if not sources:
            raise ValueError("At least one document source is required")
        return cls(
            documents=[DocumentConfig(name=s, source=s) for s in sources],
            parameters={"top": validate_top(top)},
            base_dir=base_dir or Path.cwd(),
        )

    def default_top(self) -> int:
        """Job-level result count."""
        return validate_top(self.parameters.get("top", DEFAULT_TOP))

    def top_for(self, doc: DocumentConfig) -> int:
        """Result count for a document, falling back to the job default."""
        return doc.top if doc.top is not None else self.default_top()

    def encoding_for(self, doc: DocumentConfig) -> str:
        """Text encoding for a document, falling back to the job default."""
        return doc.encoding or self.parameters.get("encoding", DEFAULT_ENCODING)

    def resolve_source(self, doc: DocumentConfig) -> str:
        """Resolve a document source; local paths become absolute."""
        if doc.source == STDIN_SOURCE or is_url(doc.source):
            return doc.source
        path = Path(doc.source)
        if not path.is_absolute():
            path = self.base_dir / path
        return str(path)

    def add_sources(self, sources: list[str]) -> None:
        """Append command-line sources to the configured documents."""
        for source in sources:
            self.documents.append(DocumentConfig(name=source, source=source))

    def override_parameters(self, overrides: dict[str, Any]) -> None:
        """Override parameter values."""
        self.parameters.update(overrides)
        self.default_top()

    def get_cache_dir(self) -> Path:
        """Get the download cache directory for this job."""
        return self.base_dir / CACHE_DIR_NAME


def parse_parameter_overrides(args: list[str]) -> dict[str, Any]:
    """Parse --set style "key=value" overrides for job parameters.

    Only "top" and "encoding" are accepted. "top" is converted to a
    positive int.

    Raises:
        ValueError: On a malformed pair, an unknown key or a bad value.
    """
    result: dict[str, Any] = {}
    for arg in args:
        if "=" not in arg:
            raise ValueError(f"Invalid format: {arg}. Expected key=value")
        key, value = arg.split("=", 1)

        if key == "top":
            try:
                result[key] = validate_top(int(value))
            except ValueError:
                raise ValueError(f"top must be a positive integer, got {value!r}") from None
        elif key == "encoding":
            if not value:
                raise ValueError("encoding must not be empty")
            result[key] = value
        else:
            raise ValueError(
                f"Unknown parameter: {key}. Expected one of: {', '.join(PARAMETERS)}"
            )

    return result
