"""Command lines for the external builder phases.

Every builder gets the same leading argument triple:

    --loc <location> --tmpdir <tmpdir> --threads <n>

followed by stage-specific arguments:
- node table: the data files
- ingest: --triples <file> --quads <file>, then the data files
- index: --index <NAME> --triples <file> --quads <file>
"""

from dataclasses import dataclass

from graphload.contracts.results import IndexSpec
from graphload.core.config import JobConfig, RuntimeSettings
from graphload.engine.artifacts import WorkArtifacts


@dataclass(frozen=True)
class BuilderLauncher:
    """Builds ``java <jvm args> -cp <classpath> <class> <args>`` commands.

    Attributes:
        settings: JVM launch settings
        java: Java launcher resolved for this run
    """

    settings: RuntimeSettings
    java: str

    def _java_command(self, main_class: str, args: list[str]) -> list[str]:
        return [
            self.java,
            *self.settings.jvm_args,
            "-cp",
            self.settings.classpath,
            main_class,
            *args,
        ]

    @staticmethod
    def _common_args(config: JobConfig) -> list[str]:
        return [
            "--loc",
            str(config.location),
            "--tmpdir",
            str(config.tmpdir),
            "--threads",
            str(config.threads),
        ]

    @staticmethod
    def _tuple_args(artifacts: WorkArtifacts) -> list[str]:
        return ["--triples", str(artifacts.triples), "--quads", str(artifacts.quads)]

    def node_table(self, config: JobConfig) -> list[str]:
        """Command for the node-table phase."""
        args = self._common_args(config) + [str(f) for f in config.data_files]
        return self._java_command(self.settings.node_table_class, args)

    def ingest(self, config: JobConfig, artifacts: WorkArtifacts) -> list[str]:
        """Command for the ingest phase."""
        args = (
            self._common_args(config)
            + self._tuple_args(artifacts)
            + [str(f) for f in config.data_files]
        )
        return self._java_command(self.settings.ingest_class, args)

    def index(self, config: JobConfig, artifacts: WorkArtifacts, spec: IndexSpec) -> list[str]:
        """Command for building one index."""
        args = (
            self._common_args(config)
            + ["--index", spec.name.value]
            + self._tuple_args(artifacts)
        )
        return self._java_command(self.settings.index_class, args)
