"""Property tests for import classification and canonical ordering."""

from hypothesis import given, settings, HealthCheck
from hypothesis import strategies as st

from imporder.core import check_import_order
from imporder.core import classify_import
from imporder.core import sort_imports
from imporder.models import CATEGORY_ORDER
from imporder.models import ImportDecl
from imporder.models import ImportSpec
from imporder.models import Position

BASE = "myorg/"

segment = st.text(alphabet="abcxyz.", min_size=1, max_size=6)
import_path = st.one_of(
    st.lists(segment, min_size=1, max_size=3).map("/".join),
    segment.map(lambda s: BASE + s),
)
paths = st.lists(st.one_of(import_path, st.just("")), max_size=20)


def _groups(sequence):
    groups = [[]]
    for path in sequence:
        if path:
            groups[-1].append(path)
        else:
            groups.append([])
    return groups


@given(st.text(), st.text())
def test_classify_is_total(path, prefix):
    assert classify_import(path, prefix) in CATEGORY_ORDER


@given(paths)
@settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
def test_sort_imports_is_idempotent(items):
    once = sort_imports(items, BASE)
    assert sort_imports(once, BASE) == once


@given(paths)
def test_sort_imports_groups_are_sorted_and_ordered(items):
    result = sort_imports(items, BASE)
    if not result:
        assert all(not p for p in items)
        return
    assert result[0] != "" and result[-1] != ""

    groups = _groups(result)
    assert all(groups), "no empty group and no doubled separator"
    categories = []
    for group in groups:
        assert group == sorted(group)
        kinds = {classify_import(p, BASE) for p in group}
        assert len(kinds) == 1
        categories.append(CATEGORY_ORDER.index(kinds.pop()))
    assert categories == sorted(set(categories))
    assert sorted(p for p in result if p) == sorted(p for p in items if p)


@given(paths)
def test_canonical_block_has_no_diagnostic(items):
    canonical = sort_imports(items, BASE)
    specs = tuple(
        ImportSpec(path=path, pos=Position("", 0, 2 + i, 2))
        for i, path in enumerate(canonical)
        if path
    )
    decl = ImportDecl(
        pos=Position("", 0, 1, 1),
        end=Position("", 0, len(canonical) + 2, 2),
        specs=specs,
        lparen=Position("", 7, 1, 8),
        rparen=Position("", 0, len(canonical) + 2, 1),
    )
    assert check_import_order(decl, BASE) == []
