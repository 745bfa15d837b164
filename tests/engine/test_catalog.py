"""Tests for the index catalog and skip decision."""

from collections.abc import Sequence

from hypothesis import given
from hypothesis import strategies as st

from graphload.contracts import IndexName, IndexSpec, IngestCounts, TupleKind
from graphload.engine.catalog import INDEX_CATALOG, indexes_of_kind, select_indexes

TRIPLE_INDEXES = ["SPO", "POS", "OSP"]
QUAD_INDEXES = ["GSPO", "GPOS", "GOSP", "SPOG", "POSG", "OSPG"]


def _names(specs: Sequence[IndexSpec]) -> list[str]:
    return [spec.name.value for spec in specs]


class TestCatalog:
    """Fixed catalog contents."""

    def test_triples_before_quads(self) -> None:
        assert _names(INDEX_CATALOG) == TRIPLE_INDEXES + QUAD_INDEXES

    def test_kinds(self) -> None:
        assert _names(indexes_of_kind(TupleKind.TRIPLES)) == TRIPLE_INDEXES
        assert _names(indexes_of_kind(TupleKind.QUADS)) == QUAD_INDEXES

    def test_spec_kind_matches_name(self) -> None:
        for spec in INDEX_CATALOG:
            assert spec.kind is IndexName(spec.name).kind


class TestSelectIndexes:
    """select_indexes() is a pure function of the optional counts."""

    def test_no_counts_builds_everything(self) -> None:
        assert _names(select_indexes(None)) == TRIPLE_INDEXES + QUAD_INDEXES

    def test_no_triples_skips_triple_indexes(self) -> None:
        assert _names(select_indexes(IngestCounts(triples=0, quads=10))) == QUAD_INDEXES

    def test_no_quads_skips_quad_indexes(self) -> None:
        assert _names(select_indexes(IngestCounts(triples=10, quads=0))) == TRIPLE_INDEXES

    def test_empty_load_builds_nothing(self) -> None:
        assert select_indexes(IngestCounts(triples=0, quads=0)) == []

    @given(
        triples=st.integers(min_value=0, max_value=10**9),
        quads=st.integers(min_value=0, max_value=10**9),
    )
    def test_selection_follows_counts(self, triples: int, quads: int) -> None:
        selected = select_indexes(IngestCounts(triples=triples, quads=quads))
        names = _names(selected)

        assert (set(TRIPLE_INDEXES) <= set(names)) == (triples > 0)
        assert (set(QUAD_INDEXES) <= set(names)) == (quads > 0)
        assert not (set(TRIPLE_INDEXES) & set(names)) or triples > 0
        assert not (set(QUAD_INDEXES) & set(names)) or quads > 0
        # Catalog order preserved
        assert selected == [spec for spec in INDEX_CATALOG if spec in selected]
