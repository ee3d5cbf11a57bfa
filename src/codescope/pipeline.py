"""Per-file and batch analysis pipeline.

parse -> extract -> score -> assemble runs synchronously per file. Batch
analysis processes files in input order; a failure on one file is logged,
recorded and skipped without aborting the batch. The dependency graph is
built in a second pass once every module is assembled, and rules run last so
coupling checks can see incoming edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from codescope.adapters.base import ParseError
from codescope.adapters.typescript import default_adapters
from codescope.cache import FileKey
from codescope.graph.dependency_graph import build_dependency_graph
from codescope.rules.config import CodeScopeConfig, build_registry
from codescope.scan.files import find_source_files

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from codescope.adapters.base import AdapterRegistry
    from codescope.cache import AnalysisCache
    from codescope.graph.dependency_graph import DependencyGraph
    from codescope.ir.models import Module
    from codescope.rules.base import RuleRegistry

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileFailure:
    path: str
    error: str


@dataclass
class BatchResult:
    """Modules assembled from a batch, in input order, plus failures."""

    modules: list[Module] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.failures)


def parse_source(path: str, source: str, adapters: AdapterRegistry) -> Module:
    """Parse source text with the adapter registered for its extension.

    Raises:
        ParseError: If no adapter handles the extension or parsing fails.
    """
    adapter = adapters.for_path(path)
    if adapter is None:
        raise ParseError(path, "no language adapter for this file type")
    return adapter.parse(path, source)


def parse_file(
    file_path: Path,
    *,
    adapters: AdapterRegistry,
    cache: AnalysisCache | None = None,
    display_path: str | None = None,
) -> Module:
    """Read and parse one file, consulting the cache first.

    Args:
        file_path: File to read
        adapters: Adapter registry used for dispatch
        cache: Optional cache keyed by (path, size, mtime)
        display_path: Path recorded in the Module (defaults to ``file_path``)

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        ParseError: If the file cannot be parsed.
    """
    module_path = display_path if display_path is not None else file_path.as_posix()

    digest: str | None = None
    if cache is not None:
        digest = FileKey.from_path(file_path).digest()
        cached = cache.get(digest)
        if cached is not None:
            log.debug("Cache hit for %s", module_path)
            # The key identifies the file on disk; the recorded path depends on
            # the caller's root.
            return cached.model_copy(update={"path": module_path}, deep=True)

    source = file_path.read_text(encoding="utf-8")
    module = parse_source(module_path, source, adapters)

    if cache is not None and digest is not None:
        cache.insert(digest, module.model_copy(deep=True))
    return module


def analyze_file(
    file_path: Path,
    *,
    adapters: AdapterRegistry | None = None,
    registry: RuleRegistry | None = None,
    cache: AnalysisCache | None = None,
) -> Module:
    """Parse one file and attach rule findings.

    Incoming edges are empty for a lone file, so coupling reports fan-in 0.
    """
    module = parse_file(
        file_path,
        adapters=adapters if adapters is not None else default_adapters(),
        cache=cache,
    )
    if registry is None:
        registry = build_registry(CodeScopeConfig().rules)
    return registry.apply(module)


def parse_paths(
    paths: Iterable[Path],
    *,
    adapters: AdapterRegistry,
    cache: AnalysisCache | None = None,
    root: Path | None = None,
) -> BatchResult:
    """Parse many files sequentially, skipping and counting failures.

    Module paths are recorded relative to ``root`` when given.
    """
    result = BatchResult()
    for file_path in paths:
        display_path = (
            file_path.relative_to(root).as_posix()
            if root is not None
            else file_path.as_posix()
        )
        try:
            module = parse_file(
                file_path,
                adapters=adapters,
                cache=cache,
                display_path=display_path,
            )
        except (ParseError, OSError, UnicodeDecodeError) as exc:
            log.warning("Skipping %s: %s", display_path, exc)
            result.failures.append(FileFailure(path=display_path, error=str(exc)))
            continue
        result.modules.append(module)
    return result


def analyze_directory(
    root: Path,
    *,
    config: CodeScopeConfig | None = None,
    adapters: AdapterRegistry | None = None,
    cache: AnalysisCache | None = None,
) -> tuple[BatchResult, DependencyGraph]:
    """Analyze every supported file under a directory.

    Args:
        root: Directory to scan
        config: Thresholds and file filters (defaults when omitted)
        adapters: Adapter registry (TypeScript/TSX/JavaScript when omitted)
        cache: Optional module cache

    Returns:
        The batch result with rule findings attached, and the populated
        dependency graph.
    """
    if config is None:
        config = CodeScopeConfig()
    if adapters is None:
        adapters = default_adapters()

    files = find_source_files(
        root,
        adapters.extensions(),
        include_patterns=config.include,
        exclude_patterns=config.exclude,
        nested_gitignore=config.nested_gitignore,
    )
    result = parse_paths(files, adapters=adapters, cache=cache, root=root)
    graph = build_dependency_graph(result.modules)

    registry = build_registry(config.rules)
    for module in result.modules:
        registry.apply(module)

    log.info(
        "Analyzed %d files under %s (%d failed)",
        len(result.modules),
        root,
        result.error_count,
    )
    return result, graph


__all__ = [
    "BatchResult",
    "FileFailure",
    "analyze_directory",
    "analyze_file",
    "parse_file",
    "parse_paths",
    "parse_source",
]
