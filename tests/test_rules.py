from __future__ import annotations

import pytest

from codescope.ir.models import DepEdge, Module, QualityMetric, Symbol
from codescope.rules import (
    ComplexityRule,
    CouplingRule,
    FileSizeRule,
    FunctionSizeRule,
    RuleRegistry,
    StructureStatsRule,
    generate_suggestions,
    parse_severity,
)
from codescope.rules.config import RulesConfig, build_registry


def _function(name: str, loc: int, complexity: int = 1) -> Symbol:
    return Symbol(kind="function", name=name, loc=loc, branching_complexity=complexity)


def _edges(count: int) -> list[DepEdge]:
    return [
        DepEdge(target=f"./dep{i}", relation="import", strength=0.7)
        for i in range(count)
    ]


def _by_name(metrics: list[QualityMetric]) -> dict[str, QualityMetric]:
    return {metric.name: metric for metric in metrics}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Error", "error"),
        ("WARNING", "warning"),
        ("info", "info"),
        (" warning ", "warning"),
        ("critical", "info"),
        ("", "info"),
    ],
)
def test_parse_severity(value: str, expected: str) -> None:
    assert parse_severity(value) == expected


def test_file_size_within_threshold_reports_info_only() -> None:
    module = Module(path="a.ts", loc=100)

    metrics = FileSizeRule().check_module(module)

    assert [m.name for m in metrics] == ["file_loc"]
    assert metrics[0].value == 100.0
    assert metrics[0].threshold == 300.0
    assert metrics[0].severity == "info"


def test_file_size_at_threshold_is_compliant() -> None:
    metrics = FileSizeRule(max_loc=300).check_module(Module(path="a.ts", loc=300))

    assert [m.name for m in metrics] == ["file_loc"]


def test_file_size_breach() -> None:
    module = Module(path="a.ts", loc=500)

    metrics = FileSizeRule(max_loc=300, severity="error").check_module(module)

    assert [m.name for m in metrics] == ["file_loc", "file_size"]
    breach = metrics[1]
    assert breach.severity == "error"
    assert breach.value == 500.0
    assert breach.message == "File has 500 lines, exceeds threshold of 300"


def test_function_size_rule() -> None:
    rule = FunctionSizeRule(max_loc=40)
    small = _function("small", 10)
    large = _function("large", 50)
    module = Module(path="a.ts", symbols=[small, large])

    aggregate = rule.check_module(module)

    assert len(aggregate) == 1
    assert aggregate[0].name == "large_function_count"
    assert aggregate[0].value == 1.0
    assert aggregate[0].threshold == 0.0
    assert aggregate[0].severity == "warning"
    assert "large (50 LOC)" in (aggregate[0].message or "")

    assert rule.check_symbol(small) == []
    findings = rule.check_symbol(large)
    assert [m.name for m in findings] == ["function_size"]
    assert findings[0].value == 50.0
    assert findings[0].threshold == 40.0


def test_function_size_ignores_non_functions() -> None:
    rule = FunctionSizeRule(max_loc=5)
    big_class = Symbol(kind="class", name="Big", loc=100)

    assert rule.check_symbol(big_class) == []
    compliant = rule.check_module(Module(path="a.ts", symbols=[big_class]))
    assert compliant[0].value == 0.0
    assert compliant[0].severity == "info"
    assert compliant[0].message is None


def test_complexity_rule() -> None:
    rule = ComplexityRule(max_complexity=10)
    simple = _function("simple", 5, complexity=3)
    tangled = _function("tangled", 5, complexity=12)
    module = Module(path="a.ts", symbols=[simple, tangled])

    aggregate = rule.check_module(module)

    assert aggregate[0].name == "high_complexity_count"
    assert aggregate[0].value == 1.0
    assert "tangled (complexity: 12)" in (aggregate[0].message or "")
    assert rule.check_symbol(simple) == []
    findings = rule.check_symbol(tangled)
    assert findings[0].name == "cyclomatic_complexity"
    assert findings[0].value == 12.0
    assert findings[0].threshold == 10.0


def test_complexity_rule_never_flags_symbols_without_complexity() -> None:
    rule = ComplexityRule(max_complexity=0)
    interface = Symbol(kind="interface", name="Shape", loc=20)

    assert rule.check_symbol(interface) == []


def test_coupling_rule() -> None:
    module = Module(
        path="a.ts",
        outgoing=_edges(8),
        incoming=_edges(3),
    )

    metrics = CouplingRule(max_fan_out=7, max_imports=15).check_module(module)

    assert [m.name for m in metrics] == ["fan_out", "fan_in", "import_count"]
    by_name = _by_name(metrics)
    assert by_name["fan_out"].value == 8.0
    assert by_name["fan_out"].severity == "warning"
    assert by_name["fan_out"].message == (
        "Module has 8 dependencies, exceeds threshold of 7"
    )
    assert by_name["fan_in"].value == 3.0
    assert by_name["fan_in"].severity == "info"
    assert by_name["fan_in"].threshold is None
    assert by_name["import_count"].severity == "info"


def test_coupling_rule_fan_in_never_breaches() -> None:
    module = Module(path="a.ts", incoming=_edges(100))

    metrics = CouplingRule(max_fan_out=0, max_imports=0).check_module(module)

    assert all(m.severity == "info" for m in metrics)


def test_structure_stats_rule() -> None:
    module = Module(
        path="a.ts",
        comment_lines=4,
        blank_lines=0,
        symbols=[
            _function("a", 1),
            _function("b", 1),
            _function("c", 1),
            Symbol(kind="class", name="C", loc=1),
            Symbol(kind="interface", name="I", loc=1),
            Symbol(kind="type", name="T", loc=1),
            Symbol(kind="enum", name="E", loc=1),
        ],
    )

    metrics = StructureStatsRule(
        max_functions_per_file=2, max_types_per_file=30
    ).check_module(module)

    assert [m.name for m in metrics] == [
        "function_count",
        "class_count",
        "interface_count",
        "type_definition_count",
        "comment_lines",
    ]
    by_name = _by_name(metrics)
    assert by_name["function_count"].value == 3.0
    assert by_name["function_count"].severity == "warning"
    assert by_name["class_count"].value == 1.0
    assert by_name["interface_count"].value == 1.0
    assert by_name["type_definition_count"].value == 3.0
    assert by_name["type_definition_count"].severity == "info"
    assert by_name["comment_lines"].value == 4.0


def test_registry_concatenates_in_registration_order() -> None:
    registry = RuleRegistry()
    registry.register(StructureStatsRule())
    registry.register(FileSizeRule())

    metrics = registry.check_module(Module(path="a.ts", loc=10))

    assert metrics[0].name == "function_count"
    assert metrics[-1].name == "file_loc"
    assert [rule.name for rule in registry.rules] == ["structure_stats", "file_size"]
    assert len(registry) == 2


def test_registry_apply_attaches_findings() -> None:
    registry = build_registry(RulesConfig(max_function_loc=5))
    long_function = _function("long", 10)
    module = Module(path="a.ts", loc=10, symbols=[long_function])

    returned = registry.apply(module)

    assert returned is module
    assert [m.name for m in module.metrics][:3] == [
        "file_loc",
        "large_function_count",
        "high_complexity_count",
    ]
    assert [m.name for m in long_function.metrics] == ["function_size"]


def test_empty_registry_returns_no_findings() -> None:
    module = Module(path="a.ts", loc=1000)

    assert RuleRegistry().check_module(module) == []
    assert RuleRegistry().apply(module).metrics == []


def _breach_count(module: Module, rules: RulesConfig) -> int:
    return sum(1 for m in build_registry(rules).check_module(module) if m.is_breach)


@pytest.mark.parametrize("loc", [0, 100, 299, 300, 301, 1000])
def test_raising_thresholds_never_adds_findings(loc: int) -> None:
    module = Module(
        path="a.ts",
        loc=loc,
        outgoing=_edges(9),
        symbols=[_function("f", max(loc, 1), complexity=12)],
    )

    strict = _breach_count(module, RulesConfig(max_file_loc=100, max_fan_out=5))
    lenient = _breach_count(module, RulesConfig(max_file_loc=900, max_fan_out=50))

    assert lenient <= strict


def test_generate_suggestions() -> None:
    module = Module(
        path="a.ts",
        loc=600,
        symbols=[_function("huge", 120), Symbol(kind="class", name="Small", loc=10)],
    )

    suggestions = generate_suggestions(module, fan_in=11, fan_out=12)

    assert suggestions == [
        "Large file detected - consider splitting into smaller modules",
        "High fan-out (12) - consider reducing dependencies",
        "High fan-in (11) - consider extracting shared utilities",
        "Large function 'huge' (120 LOC) - consider splitting",
    ]


def test_generate_suggestions_for_small_module() -> None:
    module = Module(path="a.ts", loc=500, symbols=[_function("f", 80)])

    assert generate_suggestions(module, fan_in=10, fan_out=10) == []


def test_compliant_module_findings_are_uniform_across_rules() -> None:
    module = Module(path="a.ts", loc=10, symbols=[_function("f", 3)])
    registry = build_registry(RulesConfig())

    metrics = registry.check_module(module)

    assert metrics
    for metric in metrics:
        assert metric.severity == "info"
        assert metric.message is None
    by_name = _by_name(metrics)
    assert by_name["file_loc"].threshold == 300.0
    assert by_name["large_function_count"] == QualityMetric(
        name="large_function_count", value=0.0, threshold=0.0
    )
    assert by_name["high_complexity_count"] == QualityMetric(
        name="high_complexity_count", value=0.0, threshold=0.0
    )


def test_breach_findings_carry_threshold_and_message() -> None:
    module = Module(
        path="a.ts",
        loc=1000,
        outgoing=_edges(40),
        symbols=[_function(f"f{i}", 100, complexity=50) for i in range(30)],
    )
    registry = build_registry(RulesConfig())

    breaches = [m for m in registry.check_module(module) if m.is_breach]
    breaches += [m for m in registry.check_symbol(module.symbols[0]) if m.is_breach]

    assert {m.name for m in breaches} == {
        "file_size",
        "large_function_count",
        "high_complexity_count",
        "fan_out",
        "import_count",
        "function_count",
        "function_size",
        "cyclomatic_complexity",
    }
    for metric in breaches:
        assert metric.severity == "warning"
        assert metric.threshold is not None
        assert metric.message
