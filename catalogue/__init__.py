"""
catalogue — pomocnicze operacje na gotowym drzewie reguł (nawigacja, opis).

Publiczne API:
  iter_nodes, matches, filter_tree, find_by_path   (search)
  NodeSummary, describe_node, select_pairs,
  ref_placeholder                                  (summary)
"""

from .search import filter_tree, find_by_path, iter_nodes, matches
from .summary import NodeSummary, describe_node, ref_placeholder, select_pairs

__all__ = [
    "filter_tree",
    "find_by_path",
    "iter_nodes",
    "matches",
    "NodeSummary",
    "describe_node",
    "ref_placeholder",
    "select_pairs",
]
