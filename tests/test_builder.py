# tests/test_builder.py
import pytest

from catalogue import iter_nodes
from data_model import RuleNode
from rules_text import (
    ClassifiedLine,
    IssueCode,
    LineKind,
    OrphanPolicy,
    ParserConfig,
    TreeBuilder,
    parse_document,
)


def _shape(node: RuleNode):
    return (node.title, [_shape(c) for c in node.children])


def _titles(node: RuleNode) -> list[str]:
    return [c.title for c in node.children]


def _codes(report) -> list[IssueCode]:
    return [i.code for i in report.issues]


def test_nesting_by_control_depth_reopens_sibling_under_grandparent():
    root = parse_document("\x01A:\n\x02B:\n\x01C:\n").root
    assert _titles(root) == ["A", "C"]
    assert _titles(root.children[0]) == ["B"]
    assert root.children[1].children == []


def test_depth_gaps_do_not_create_intermediate_nodes():
    root = parse_document("A:\n\x01\x01\x01B:\n\x01C:\n").root
    a = root.children[0]
    assert _titles(a) == ["B", "C"]
    assert a.children[0].depth == 3
    assert a.children[1].depth == 1


def test_rebuild_from_depth_annotated_routes(sample_report):
    builder = TreeBuilder()
    for node, _ in iter_nodes(sample_report.root):
        builder.feed(ClassifiedLine(LineKind.ROUTE, text=node.title, depth=node.depth))
    rebuilt = builder.finish()
    assert _shape(rebuilt) == _shape(sample_report.root)


def test_field_attaches_to_innermost_open_route():
    root = parse_document("A:\n\x01B:\n?S Назва:\n").root
    b = root.children[0].children[0]
    assert root.children[0].form is None
    assert [f.key for f in b.form.fields] == ["назва"]


def test_meta_goes_to_last_field_holder():
    root = parse_document("A:\n?S Назва:\nДодатковий опис\nB:\nще текст\n").root
    a, b = root.children
    assert a.form.meta == ["Додатковий опис"]
    assert b.form.meta == ["ще текст"]
    assert b.form.fields == []


def test_orphan_field_attaches_to_root_form_by_default():
    report = parse_document("?N Сума:·1\nA:\n")
    root = report.root
    assert root.form is not None
    assert [f.code for f in root.form.fields] == ["N"]
    assert root.form.path == []
    assert _codes(report) == [IssueCode.ORPHAN_FIELD]


def test_orphan_field_dropped_by_policy():
    report = parse_document("?N Сума:·1\nA:\n", ParserConfig(orphan_policy=OrphanPolicy.DROP))
    assert report.root.form is None
    assert _titles(report.root) == ["A"]
    assert _codes(report) == [IssueCode.ORPHAN_FIELD]


def test_orphan_meta_is_dropped():
    report = parse_document("Текст на початку\nA:\n")
    assert report.root.form is None
    assert report.root.children[0].form is None
    assert _codes(report) == [IssueCode.ORPHAN_META]


def test_malformed_code_folded_into_meta():
    report = parse_document("A:\n?n lower: x\n")
    form = report.root.children[0].form
    assert form.fields == []
    assert form.meta == ["?n lower: x"]
    assert _codes(report) == [IssueCode.MALFORMED_FIELD_CODE]


def test_duplicate_key_last_write_wins():
    report = parse_document("A:\n?S Назва:\n?N назва:\n")
    form = report.root.children[0].form
    assert len(form.fields) == 2
    assert form.by_key()["назва"].code == "N"
    assert _codes(report) == [IssueCode.DUPLICATE_KEY]
    assert report.issues[0].line_no == 3


def test_unparsable_number_reported_field_kept():
    report = parse_document("A:\n?N Сума:abc·10\n")
    field = report.root.children[0].form.fields[0]
    assert field.spec.min is None
    assert field.spec.max == 10.0
    assert _codes(report) == [IssueCode.UNPARSABLE_NUMBER]


def test_finish_only_once():
    builder = TreeBuilder()
    builder.feed(ClassifiedLine(LineKind.ROUTE, text="A", depth=0))
    builder.finish()
    with pytest.raises(RuntimeError):
        builder.finish()
    with pytest.raises(RuntimeError):
        builder.feed(ClassifiedLine(LineKind.ROUTE, text="B", depth=0))


def test_builders_do_not_share_state():
    first = TreeBuilder()
    second = TreeBuilder()
    first.feed(ClassifiedLine(LineKind.ROUTE, text="A", depth=0))
    assert second.finish().children == []
    assert _titles(first.finish()) == ["A"]


def test_underscore_number_reported_as_unparsable():
    report = parse_document("A:\n?N Сума:1_000·5\n")
    field = report.root.children[0].form.fields[0]
    assert field.spec.min is None
    assert field.spec.max == 5.0
    assert _codes(report) == [IssueCode.UNPARSABLE_NUMBER]
    assert report.issues[0].line_no == 2
