# tests/test_catalogue.py
from catalogue import (
    describe_node,
    filter_tree,
    find_by_path,
    iter_nodes,
    matches,
    ref_placeholder,
    select_pairs,
)
from catalogue.summary import DEFAULT_REF_PLACEHOLDER


def _rows(rows):
    return [(node.title, level) for node, level in rows]


def test_iter_nodes_pre_order_with_levels(sample_report):
    assert _rows(iter_nodes(sample_report.root)) == [
        ("Продаж", 0),
        ("Замовлення", 1),
        ("Повернення", 1),
        ("Склад", 0),
        ("Прихід", 1),
    ]


def test_filter_by_field_label_keeps_ancestors(sample_report):
    assert _rows(filter_tree(sample_report.root, "сума")) == [("Продаж", 0), ("Замовлення", 1)]


def test_filter_is_case_insensitive(sample_report):
    assert _rows(filter_tree(sample_report.root, "ПРИХІД")) == [("Склад", 0), ("Прихід", 1)]


def test_empty_query_returns_whole_tree(sample_report):
    assert len(filter_tree(sample_report.root, "  ")) == 5
    assert filter_tree(sample_report.root, "нема такого") == []


def test_matches_title_only_when_no_form(sample_report):
    sales = sample_report.root.children[0]
    assert matches(sales, "прод")
    assert not matches(sales, "сума")


def test_find_by_path(sample_report):
    root = sample_report.root
    assert find_by_path(root, ["Продаж", "Повернення"]).title == "Повернення"
    assert find_by_path(root, []) is root
    assert find_by_path(root, ["Повернення"]) is None


def test_describe_node(sample_report):
    node = find_by_path(sample_report.root, ["Продаж", "Замовлення"])
    summary = describe_node(node)
    assert summary.breadcrumbs == "Продаж / Замовлення"
    assert summary.field_keys == ["сума (number)", "оплата (select)", "клієнт (string)"]
    assert summary.field_count == 3
    assert summary.child_count == 0


def test_select_pairs(sample_report):
    node = find_by_path(sample_report.root, ["Продаж", "Замовлення"])
    payment = node.form.by_key()["оплата"]
    assert select_pairs(payment) == [("1", "Готівка"), ("2", "Картка")]


def test_ref_placeholder(sample_report):
    node = find_by_path(sample_report.root, ["Продаж", "Повернення"])
    fields = node.form.by_key()
    assert ref_placeholder(fields["документ"]) == "посилання на 37"
    assert ref_placeholder(fields["причина"]) == DEFAULT_REF_PLACEHOLDER
