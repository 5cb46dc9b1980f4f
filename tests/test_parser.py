# tests/test_parser.py
from data_model import NumberSpec, RuleNode, SpecKind
from export import dump_json
from rules_text import IssueCode, parse_document, parse_rules_text, split_lines


def _walk(root: RuleNode):
    """(węzeł, rodzic) dla wszystkich tras."""
    stack = [(c, root) for c in root.children]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        stack.extend((c, node) for c in node.children)


def test_minimal_document():
    root = parse_rules_text("Замовлення:\n?N Сума:·100·500\n")
    assert [c.title for c in root.children] == ["Замовлення"]

    form = root.children[0].form
    assert len(form.fields) == 1
    field = form.fields[0]
    assert field.code == "N"
    assert field.label == "Сума"
    assert field.spec.kind is SpecKind.NUMBER
    assert field.spec == NumberSpec(default=None, min=100.0, max=500.0)


def test_sample_document(sample_report):
    root = sample_report.root
    assert [c.title for c in root.children] == ["Продаж", "Склад"]
    assert sample_report.route_count == 5
    assert sample_report.field_count == 7
    assert sample_report.issues == []

    order = root.children[0].children[0].form
    assert [f.key for f in order.fields] == ["сума", "оплата", "клієнт"]
    assert [f.spec.kind for f in order.fields] == ["number", "select", "string"]
    assert order.meta == ["Поля позначені * обов'язкові"]

    receipt = root.children[1].children[0].form
    assert [f.spec.kind for f in receipt.fields] == ["loop", "sum"]


def test_parsing_is_deterministic(sample_text):
    assert dump_json(parse_rules_text(sample_text)) == dump_json(parse_rules_text(sample_text))


def test_paths_extend_parent_path(sample_report):
    root = sample_report.root
    assert root.path == []
    for node, parent in _walk(root):
        assert node.path == [*parent.path, node.title]
        if node.form is not None:
            assert node.form.path == node.path
            assert node.form.title == node.title


def test_malformed_field_does_not_break_following_lines():
    report = parse_document("A:\n?: broken\n?S Назва:\nB:\n")
    a = report.root.children[0]
    assert [f.key for f in a.form.fields] == ["назва"]
    assert "?: broken" not in a.form.meta
    assert [c.title for c in report.root.children] == ["A", "B"]
    assert [i.code for i in report.issues] == [IssueCode.MALFORMED_FIELD_CODE]
    assert report.issues[0].line_no == 2


def test_crlf_line_endings():
    root = parse_rules_text("A:\r\n?S Назва:x\r\n\x01B:\r\n")
    a = root.children[0]
    assert a.title == "A"
    assert a.form.fields[0].meta.raw == "x"
    assert a.children[0].title == "B"


def test_control_bytes_never_leak_into_text():
    text = "\x01\x02Б\x05лок:\n?S На\x06зва:зна\x07чення\nоп\x08ис\n"
    root = parse_rules_text(text)
    node = root.children[0]
    values = [node.title, *node.form.meta]
    for f in node.form.fields:
        values += [f.label, f.key, f.meta.raw, *f.meta.tokens]
    assert values == ["Блок", "опис", "Назва", "назва", "значення", "значення"]


def test_indentation_nesting():
    root = parse_rules_text("A:\n  B:\n    C:\n  D:\n\tE:\n")
    a = root.children[0]
    assert [c.title for c in a.children] == ["B", "D"]
    assert [c.title for c in a.children[0].children] == ["C"]
    # tabulator = 4 kolumny = 2 poziomy, więc E jest dzieckiem D
    assert [c.title for c in a.children[1].children] == ["E"]


def test_empty_and_routeless_input():
    empty = parse_document("")
    assert empty.root.children == []
    assert empty.issues == []

    text_only = parse_document("просто текст\n")
    assert text_only.root.children == []
    assert text_only.issues_by_code().keys() == {IssueCode.ORPHAN_META}


def test_split_lines():
    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]
    assert split_lines("\x01a\n") == ["\x01a", ""]
