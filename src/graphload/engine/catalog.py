"""Index catalog and the index-skip decision."""

from graphload.contracts.enums import IndexName, TupleKind
from graphload.contracts.results import IndexSpec, IngestCounts

# Catalog order: triples-kind first, then quads-kind
INDEX_CATALOG: tuple[IndexSpec, ...] = tuple(IndexSpec.for_name(name) for name in IndexName)


def indexes_of_kind(kind: TupleKind) -> tuple[IndexSpec, ...]:
    """Catalog entries ordering the given tuple kind."""
    return tuple(spec for spec in INDEX_CATALOG if spec.kind is kind)


def select_indexes(counts: IngestCounts | None) -> list[IndexSpec]:
    """Indexes to build, in catalog order.

    A tuple kind with zero ingested tuples has nothing to sort, so all of
    its indexes are skipped. Without counts every index is built.
    """
    if counts is None:
        return list(INDEX_CATALOG)
    return [spec for spec in INDEX_CATALOG if counts.count_for(spec.kind) > 0]
