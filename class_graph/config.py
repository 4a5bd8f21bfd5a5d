"""Analysis configuration, loadable from a YAML file."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from class_graph.errors import InvalidArguments
from class_graph.models import GraphMode

DEFAULT_EXTENSIONS: tuple[str, ...] = (".java", ".kt")

# hidden directories only; "build" or "out" may be package segments
DEFAULT_SKIP_DIRS: tuple[str, ...] = (".*",)

OUTPUT_SUFFIX = "-class-diagram.gv"


@dataclass
class AnalysisConfig:
    """Configuration for one analysis run."""
    source_dir: Path | None = None
    destination_dir: Path | None = None
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    skip_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
    mode: GraphMode = GraphMode.DIRECTED
    namespace_keyword: str = "package"
    import_keyword: str = "import"

    def validate(self) -> None:
        """Raise InvalidArguments unless both directories are set and non-blank."""
        for name in ("source_dir", "destination_dir"):
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise InvalidArguments(f"Missing required option: {name}")

    @property
    def output_path(self) -> Path:
        self.validate()
        source = Path(self.source_dir).resolve()
        return Path(self.destination_dir) / f"{source.name}{OUTPUT_SUFFIX}"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        for name in ("source_dir", "destination_dir"):
            if data[name] is not None:
                data[name] = str(data[name])
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisConfig:
        """Create a config from a mapping, ignoring unknown keys."""
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_fields}

        for name in ("source_dir", "destination_dir"):
            if filtered.get(name) is not None:
                filtered[name] = Path(filtered[name])
        if "mode" in filtered:
            try:
                filtered["mode"] = GraphMode(filtered["mode"])
            except ValueError:
                raise InvalidArguments(f"Unknown graph mode: {filtered['mode']!r}")
        if "extensions" in filtered:
            filtered["extensions"] = [normalize_extension(e) for e in _as_list(filtered["extensions"], "extensions")]
        if "skip_dirs" in filtered:
            filtered["skip_dirs"] = _as_list(filtered["skip_dirs"], "skip_dirs")
        return cls(**filtered)


def load_config(path: Path) -> AnalysisConfig:
    """Load an AnalysisConfig from a YAML file."""
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidArguments(f"Invalid config file {path}: {e}")
    if data is None:
        return AnalysisConfig()
    if not isinstance(data, dict):
        raise InvalidArguments(f"Config file {path} must contain a mapping")
    return AnalysisConfig.from_dict(data)


def normalize_extension(ext: str) -> str:
    ext = ext.strip()
    return ext if ext.startswith(".") else f".{ext}"


def _as_list(value: Any, name: str) -> list[str]:
    """Accept a single string or a list of strings."""
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidArguments(f"'{name}' must be a string or a list of strings")
    return list(value)
