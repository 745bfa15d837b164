"""Closed vocabularies shared across the loader: tuple kinds, index names,
system variants and process exit codes.

Index names are NOT free-floating strings. Every IndexName knows which
TupleKind it orders, so skip decisions compare kinds, never names.
"""

from enum import Enum, IntEnum


class TupleKind(str, Enum):
    """Kind of tuple an index orders.

    Uses (str, Enum) because the value appears in log events.
    """

    TRIPLES = "triples"
    QUADS = "quads"


class IndexName(str, Enum):
    """Field permutation of an on-disk index.

    Triples-kind indexes have three letters, quads-kind indexes four
    (the G is the named-graph field). Declaration order is catalog order.
    """

    SPO = "SPO"
    POS = "POS"
    OSP = "OSP"
    GSPO = "GSPO"
    GPOS = "GPOS"
    GOSP = "GOSP"
    SPOG = "SPOG"
    POSG = "POSG"
    OSPG = "OSPG"

    @property
    def kind(self) -> TupleKind:
        """Tuple kind this index orders."""
        return TupleKind.QUADS if len(self.value) == 4 else TupleKind.TRIPLES


class SystemVariant(str, Enum):
    """Database variant the loader builds.

    Only TDB2 has a separate node-table phase and a supported builder set.
    TDB1 is recognised so that it can be rejected with its own exit code.
    """

    TDB1 = "tdb1"
    TDB2 = "tdb2"

    @property
    def supported(self) -> bool:
        """Whether the loader can build this variant."""
        return self is SystemVariant.TDB2

    @property
    def has_node_table_phase(self) -> bool:
        """Whether node-table construction runs as its own stage."""
        return self is SystemVariant.TDB2


class ExitCode(IntEnum):
    """Process exit status per failure class.

    Calling automation branches on these, so values are fixed:
        OK: Load completed
        FAILURE: Generic fatal error (config, subprocess, runtime environment)
        TMPDIR_OR_SYSTEM: Temp directory unusable, or unrecognised system
            variant (both share status 2)
        LOCATION_EXISTS: Database location already exists
        MISSING_TOOLS: Required tools missing, or unsupported system variant
    """

    OK = 0
    FAILURE = 1
    TMPDIR_OR_SYSTEM = 2
    LOCATION_EXISTS = 3
    MISSING_TOOLS = 9
