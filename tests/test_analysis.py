"""Tests for grouping, wildcard expansion and dependency resolution."""

from pathlib import Path

from class_graph.analysis import (
    expand_import,
    group_by_namespace,
    resolve_explicit_dependencies,
    resolve_implicit_dependencies,
    resolve_import,
    resolve_wildcard_imports,
)
from class_graph.models import (
    DependencyRecord,
    ExternalDependency,
    InternalDependency,
    SourceUnit,
)


# ── Helpers ───────────────────────────────────────────────────

def _unit(qualified_name, imports=(), path=None):
    namespace, _, name = qualified_name.rpartition(".")
    return SourceUnit(
        path=path or Path(f"/fake/{name}.java"),
        simple_name=name,
        namespace=namespace,
        raw_imports=tuple(imports),
    )


def _file_unit(tmp_path, qualified_name, body, imports=()):
    namespace, _, name = qualified_name.rpartition(".")
    path = tmp_path / namespace.replace(".", "/") / f"{name}.java"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"package {namespace};\n\n{body}\n", encoding="utf-8")
    return _unit(qualified_name, imports, path)


def _labels(record):
    return [d.label for d in record.dependencies]


def _internal_units(record):
    return [d.unit for d in record.dependencies if not d.is_external]


# ── Namespace grouping ────────────────────────────────────────

class TestGrouping:
    def test_partition(self):
        units = [_unit("a.Foo"), _unit("a.Bar"), _unit("b.Baz"), _unit("a.b.Qux")]
        groups = group_by_namespace(units)

        assert set(groups) == {"a", "b", "a.b"}
        members = [u for g in groups.values() for u in g.units]
        assert sorted(u.qualified_name for u in members) == sorted(u.qualified_name for u in units)
        assert len(members) == len(set(members))

    def test_empty(self):
        assert group_by_namespace([]) == {}

    def test_find(self):
        groups = group_by_namespace([_unit("a.Foo"), _unit("a.Bar")])
        assert groups["a"].find("Bar").qualified_name == "a.Bar"
        assert groups["a"].find("Nope") is None

    def test_unit_identity_ignores_path_and_imports(self):
        first = _unit("a.Foo", imports=["x.Y"], path=Path("/one/Foo.java"))
        second = _unit("a.Foo", path=Path("/two/Foo.kt"))
        assert first == second
        assert hash(first) == hash(second)


# ── Wildcard imports ──────────────────────────────────────────

class TestWildcard:
    def test_known_namespace_expands_to_every_member(self):
        groups = group_by_namespace([_unit("q.X"), _unit("q.Y"), _unit("r.Z")])
        assert expand_import("q.*", groups) == ["q.X", "q.Y"]

    def test_unknown_prefix_falls_back_to_single_name(self):
        groups = group_by_namespace([_unit("q.X")])
        assert expand_import("org.junit.Assert.*", groups) == ["org.junit.Assert"]

    def test_plain_import_passes_through(self):
        assert expand_import("java.util.List", {}) == ["java.util.List"]

    def test_sub_namespace_not_included(self):
        groups = group_by_namespace([_unit("q.X"), _unit("q.inner.Y")])
        assert expand_import("q.*", groups) == ["q.X"]

    def test_resolve_deduplicates_and_strips_wildcards(self):
        units = [
            _unit("p.Widget", imports=["q.*", "q.X", "java.util.List"]),
            _unit("q.X"),
            _unit("q.Y"),
        ]
        resolved = resolve_wildcard_imports(units, group_by_namespace(units))
        widget = resolved[0]

        assert widget.raw_imports == ("q.X", "q.Y", "java.util.List")
        assert all(not i.endswith(".*") for u in resolved for i in u.raw_imports)

    def test_resolve_returns_new_units(self):
        units = [_unit("p.Widget", imports=["q.*"]), _unit("q.X")]
        resolved = resolve_wildcard_imports(units, group_by_namespace(units))

        assert units[0].raw_imports == ("q.*",)
        assert resolved[0] == units[0]
        assert resolved[0].path == units[0].path


# ── Explicit dependencies ─────────────────────────────────────

class TestExplicit:
    def test_internal_binding(self):
        target = _unit("q.X")
        dep = resolve_import("q.X", group_by_namespace([target]))
        assert dep == InternalDependency(target)
        assert dep.unit is target
        assert not dep.is_external

    def test_unknown_namespace_is_external(self):
        dep = resolve_import("java.util.List", group_by_namespace([_unit("q.X")]))
        assert dep == ExternalDependency("java.util.List")
        assert dep.is_external

    def test_known_namespace_unknown_name_is_external(self):
        dep = resolve_import("q.Missing", group_by_namespace([_unit("q.X")]))
        assert dep == ExternalDependency("q.Missing")

    def test_single_segment_is_external(self):
        dep = resolve_import("Foo", group_by_namespace([_unit("a.Foo")]))
        assert dep == ExternalDependency("Foo")

    def test_one_dependency_per_import(self):
        units = [
            _unit("p.Widget", imports=["q.X", "q.Y", "java.util.List", "Solo"]),
            _unit("q.X"),
            _unit("q.Y"),
        ]
        records = resolve_explicit_dependencies(units, group_by_namespace(units))

        assert len(records) == 3
        assert _labels(records[0]) == ["q.X", "q.Y", "java.util.List", "Solo"]
        assert [d.is_external for d in records[0].dependencies] == [False, False, True, True]
        assert records[1].dependencies == ()

    def test_own_namespace_wildcard_skips_self(self):
        units = [_unit("q.X", imports=["q.*"]), _unit("q.Y")]
        groups = group_by_namespace(units)
        records = resolve_explicit_dependencies(
            resolve_wildcard_imports(units, groups), groups,
        )

        assert _labels(records[0]) == ["q.Y"]
        assert records[0].unit not in _internal_units(records[0])

    def test_static_self_import_skips_self(self):
        units = [_unit("q.Consts", imports=["q.Consts.*"])]
        groups = group_by_namespace(units)
        records = resolve_explicit_dependencies(
            resolve_wildcard_imports(units, groups), groups,
        )
        assert records[0].dependencies == ()


# ── Implicit dependencies ─────────────────────────────────────

class TestImplicit:
    def test_same_namespace_usage(self, tmp_path):
        foo = _file_unit(tmp_path, "a.Foo", "class Foo {}")
        bar = _file_unit(tmp_path, "a.Bar", "class Bar { Foo foo; }")
        units = [foo, bar]
        groups = group_by_namespace(units)
        records = resolve_implicit_dependencies(
            resolve_explicit_dependencies(units, groups), groups,
        )

        assert _labels(records[0]) == []
        assert _labels(records[1]) == ["a.Foo"]
        assert records[1].dependencies[0].unit is foo

    def test_self_is_never_a_dependency(self, tmp_path):
        foo = _file_unit(tmp_path, "a.Foo", "class Foo { Foo next; }")
        groups = group_by_namespace([foo])
        records = resolve_implicit_dependencies([DependencyRecord(unit=foo)], groups)
        assert records[0].dependencies == ()

    def test_whole_token_match_only(self, tmp_path):
        foo = _file_unit(tmp_path, "a.Foo", "class Foo {}")
        bar = _file_unit(tmp_path, "a.Bar", "class Bar { FooBar x; MyFoo y; Foo$Inner z; foo w; }")
        groups = group_by_namespace([foo, bar])
        records = resolve_implicit_dependencies([DependencyRecord(unit=bar)], groups)
        assert records[0].dependencies == ()

    def test_matches_inside_comments_and_strings(self, tmp_path):
        foo = _file_unit(tmp_path, "a.Foo", "class Foo {}")
        bar = _file_unit(tmp_path, "a.Bar", '// see Foo\nclass Bar { String s = "Foo"; }')
        groups = group_by_namespace([foo, bar])
        records = resolve_implicit_dependencies([DependencyRecord(unit=bar)], groups)
        assert _labels(records[0]) == ["a.Foo"]

    def test_other_namespaces_are_not_searched(self, tmp_path):
        parent = _file_unit(tmp_path, "a.Parent", "class Parent { Child c; Other o; }")
        child = _file_unit(tmp_path, "a.sub.Child", "class Child {}")
        other = _file_unit(tmp_path, "b.Other", "class Other {}")
        groups = group_by_namespace([parent, child, other])
        records = resolve_implicit_dependencies([DependencyRecord(unit=parent)], groups)
        assert records[0].dependencies == ()

    def test_merge_does_not_duplicate_explicit_import(self, tmp_path):
        foo = _file_unit(tmp_path, "a.Foo", "class Foo {}")
        bar = _file_unit(tmp_path, "a.Bar", "class Bar { Foo foo; }", imports=["a.Foo", "java.util.List"])
        units = [foo, bar]
        groups = group_by_namespace(units)
        records = resolve_implicit_dependencies(
            resolve_explicit_dependencies(units, groups), groups,
        )

        assert _labels(records[1]) == ["a.Foo", "java.util.List"]

    def test_no_record_targets_itself(self, tmp_path):
        units = [
            _file_unit(tmp_path, "a.Foo", "class Foo { Bar b; }", imports=["a.Bar"]),
            _file_unit(tmp_path, "a.Bar", "class Bar { Foo f; Bar self; }"),
        ]
        groups = group_by_namespace(units)
        records = resolve_implicit_dependencies(
            resolve_explicit_dependencies(units, groups), groups,
        )
        for record in records:
            assert record.unit not in _internal_units(record)
