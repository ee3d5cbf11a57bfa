"""Command-line interface for codescope."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import orjson

from codescope.adapters.base import ParseError
from codescope.adapters.typescript import default_adapters
from codescope.graph.dependency_graph import DependencyGraph
from codescope.ir.io import module_to_dict, module_to_json
from codescope.pipeline import analyze_directory, parse_file
from codescope.rules.config import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG_TOML,
    build_registry,
    find_config,
    load_config_or_default,
)
from codescope.rules.suggestions import generate_suggestions

if TYPE_CHECKING:
    from codescope.ir.models import Module, QualityMetric, Symbol

_STATUS_ICONS = {"error": "x", "warning": "!", "info": "ok"}

_METRIC_CATEGORIES = (
    ("Size", ("file", "loc", "comment", "blank")),
    ("Structure", ("function", "class", "interface", "type")),
    ("Coupling", ("fan", "import", "coupling")),
)


def metric_category(name: str) -> str:
    """Report grouping for a finding, matched on keywords in its name."""
    for category, keywords in _METRIC_CATEGORIES:
        if any(keyword in name for keyword in keywords):
            return category
    return "Other"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codescope", description="Code structure analysis tool"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze code structure")
    analyze_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="File or directory to analyze (default: .)",
    )
    analyze_parser.add_argument(
        "-f",
        "--format",
        choices=("table", "json", "md"),
        default="table",
        help="Output format: table, json or md (default: table)",
    )
    analyze_parser.add_argument(
        "-o", "--output", default=None, help="Write output to a file"
    )
    analyze_parser.add_argument(
        "-c",
        "--config",
        default=None,
        help=f"Config file (default: {CONFIG_FILENAME} next to the path)",
    )
    analyze_parser.add_argument(
        "--no-suggest", action="store_true", help="Hide refactoring suggestions"
    )
    analyze_parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit with status 1 when any finding has error severity",
    )

    init_parser = subparsers.add_parser(
        "init", help=f"Generate a default {CONFIG_FILENAME} config file"
    )
    init_parser.add_argument(
        "path", nargs="?", default=".", help="Target directory (default: .)"
    )
    init_parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing config file"
    )

    return parser


def _format_metric(metric: QualityMetric, indent: str) -> list[str]:
    threshold = "-" if metric.threshold is None else f"{metric.threshold:.0f}"
    lines = [
        f"{indent}{metric_category(metric.name):<12} {metric.name:<25} "
        f"{metric.value:<10.0f} {threshold:<10} {_STATUS_ICONS[metric.severity]}"
    ]
    if metric.message:
        lines.append(f"{indent}{'':<12} {metric.message}")
    return lines


def _render_table(module: Module, suggestions: list[str] | None) -> str:
    lines = [
        f"Target: {module.path} ({module.language or 'unknown'}, {module.loc} LOC, "
        f"{module.comment_lines} comment, {module.blank_lines} blank)",
        "",
    ]

    if module.metrics:
        lines.append("[Quality Metrics]")
        lines.append(
            f"{'Category':<12} {'Metric':<25} {'Value':<10} {'Threshold':<10} Status"
        )
        lines.append("-" * 69)
        for metric in module.metrics:
            lines.extend(_format_metric(metric, ""))
        lines.append("")

    if module.symbols:
        lines.append("[Symbols]")
        for symbol in module.symbols:
            complexity = (
                ""
                if symbol.branching_complexity is None
                else f", complexity {symbol.branching_complexity}"
            )
            lines.append(f"{symbol.kind:<10} {symbol.name} ({symbol.loc} LOC{complexity})")
            for metric in symbol.metrics:
                lines.extend(_format_metric(metric, "    "))
        lines.append("")

    if suggestions:
        lines.append("[Suggestions]")
        lines.extend(f"- {suggestion}" for suggestion in suggestions)
        lines.append("")

    return "\n".join(lines)


def _symbol_issues(symbol: Symbol) -> str:
    issues = [m.name.replace("_", " ") for m in symbol.metrics if m.is_breach]
    return ", ".join(issues) if issues else "-"


def _render_markdown(module: Module, suggestions: list[str] | None) -> str:
    lines = [
        f"# {module.path}",
        "",
        f"**Language:** {module.language or 'unknown'} | **LOC:** {module.loc} | "
        f"**Comment:** {module.comment_lines} | **Blank:** {module.blank_lines}",
        "",
    ]

    if module.metrics:
        lines.append("## Quality Metrics")
        lines.append("")
        lines.append("| Category | Metric | Value | Threshold | Status |")
        lines.append("|----------|--------|-------|-----------|--------|")
        for metric in module.metrics:
            threshold = "-" if metric.threshold is None else f"{metric.threshold:.0f}"
            lines.append(
                f"| {metric_category(metric.name)} | {metric.name} "
                f"| {metric.value:.0f} | {threshold} "
                f"| {_STATUS_ICONS[metric.severity]} |"
            )
        lines.append("")

    if module.symbols:
        lines.append("## Structure")
        lines.append("")
        lines.append("| Type | Name | LOC | Complexity | Issues |")
        lines.append("|------|------|-----|------------|--------|")
        for symbol in module.symbols:
            complexity = (
                "-"
                if symbol.branching_complexity is None
                else str(symbol.branching_complexity)
            )
            lines.append(
                f"| {symbol.kind} | {symbol.name} | {symbol.loc} | {complexity} "
                f"| {_symbol_issues(symbol)} |"
            )
        lines.append("")

    if suggestions:
        lines.append("## Suggestions")
        lines.append("")
        lines.extend(f"- {suggestion}" for suggestion in suggestions)
        lines.append("")

    return "\n".join(lines)


def _has_error_findings(modules: list[Module]) -> bool:
    for module in modules:
        if any(metric.severity == "error" for metric in module.metrics):
            return True
        for symbol in module.symbols:
            if any(metric.severity == "error" for metric in symbol.metrics):
                return True
    return False


def _render(
    modules: list[Module],
    graph: DependencyGraph,
    output_format: str,
    *,
    no_suggest: bool,
    single: bool,
) -> bytes:
    if output_format == "json":
        if single:
            return module_to_json(modules[0], indent=True) + b"\n"
        payload = [module_to_dict(module) for module in modules]
        opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
        return orjson.dumps(payload, option=opts) + b"\n"

    renderer = _render_markdown if output_format == "md" else _render_table
    sections: list[str] = []
    for module in modules:
        suggestions = (
            None
            if no_suggest
            else generate_suggestions(
                module, graph.fan_in(module.path), len(module.outgoing)
            )
        )
        sections.append(renderer(module, suggestions))
    return "\n".join(sections).encode("utf-8")


def _handle_analyze(args: argparse.Namespace) -> int:
    target = Path(args.path).expanduser().resolve()
    if not target.exists():
        sys.stderr.write(f"error: path does not exist: {target}\n")
        return 2

    config_path = (
        Path(args.config).expanduser().resolve()
        if args.config is not None
        else find_config(target)
    )
    config = load_config_or_default(config_path)

    if target.is_dir():
        result, graph = analyze_directory(target, config=config)
        modules = result.modules
        for failure in result.failures:
            sys.stderr.write(f"{failure.path}: {failure.error}\n")
    else:
        try:
            module = parse_file(target, adapters=default_adapters())
        except (ParseError, OSError, UnicodeDecodeError) as exc:
            sys.stderr.write(f"error: {exc}\n")
            return 2
        build_registry(config.rules).apply(module)
        modules = [module]
        graph = DependencyGraph()
        graph.add_module(module)

    content = _render(
        modules,
        graph,
        args.format,
        no_suggest=args.no_suggest,
        single=not target.is_dir(),
    )

    if args.output is not None:
        output_path = Path(args.output).expanduser()
        try:
            output_path.write_bytes(content)
        except OSError as exc:
            sys.stderr.write(f"error: cannot write {output_path}: {exc}\n")
            return 2
        sys.stdout.write(f"Output written to: {output_path}\n")
    else:
        sys.stdout.write(content.decode("utf-8"))

    if args.fail_on_error and _has_error_findings(modules):
        return 1
    return 0


def _handle_init(args: argparse.Namespace) -> int:
    directory = Path(args.path).expanduser().resolve()
    if not directory.is_dir():
        sys.stderr.write(f"error: not a directory: {directory}\n")
        return 2

    config_path = directory / CONFIG_FILENAME
    if config_path.exists() and not args.force:
        sys.stderr.write(
            f"error: config file already exists: {config_path}\n"
            "Use --force to overwrite\n"
        )
        return 1

    config_path.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    sys.stdout.write(f"Created config file: {config_path}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "analyze":
        return _handle_analyze(args)

    if args.command == "init":
        return _handle_init(args)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
