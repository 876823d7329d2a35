"""Generation pipeline: a pure ``generate`` step wrapped by file-based orchestration."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .assembler import DocumentAssembler
from .config import ConfigError, RefDocConfig, load_config
from .examples.extractor import ExampleExtractor, ExampleSet
from .examples.loader import load_pairs, load_results
from .logging import get_logger
from .members.source_scanner import scan_class_source
from .members.table import load_descriptor_table
from .models import GenerationIssue, MemberDescriptor, PackageMetadata
from .package_metadata import load_package_metadata
from .parsing.readme import Document, ReadmeParser
from .postproc.issues import IssueScanner


@dataclass
class GenerationResult:
    """Rendered document plus the non-fatal issues found in it."""

    document: str
    issues: List[GenerationIssue] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 1 if self.issues else 0


@dataclass
class RunOutcome:
    """Result of a file-based generation run."""

    result: GenerationResult
    output_path: Path
    written: bool
    elapsed: float


def generate(
    readme: Union[str, Document],
    metadata: PackageMetadata,
    members: Sequence[MemberDescriptor],
    examples: ExampleSet,
    *,
    owner: str,
    assembler: DocumentAssembler | None = None,
    scanner: IssueScanner | None = None,
) -> GenerationResult:
    """Assemble the reference document without touching the filesystem."""
    document = ReadmeParser().parse(readme) if isinstance(readme, str) else readme
    assembler = assembler or DocumentAssembler(owner)
    text = assembler.assemble(document, metadata, members, examples)
    issues = (scanner or IssueScanner()).scan(text)
    return GenerationResult(document=text, issues=issues)


class Orchestrator:
    """Reads inputs named by ``.refdoc.yml``, generates, and writes the reference."""

    def __init__(
        self,
        readme_parser: ReadmeParser | None = None,
        extractor: ExampleExtractor | None = None,
        scanner: IssueScanner | None = None,
    ) -> None:
        self.readme_parser = readme_parser or ReadmeParser()
        self.extractor = extractor or ExampleExtractor()
        self.scanner = scanner or IssueScanner()
        self.logger = get_logger("orchestrator")

    def run(
        self,
        path: str,
        *,
        output: Optional[str] = None,
        dry_run: bool = False,
    ) -> RunOutcome:
        started = time.perf_counter()
        config = load_config(Path(path))
        if not config.class_name:
            raise ConfigError("Set 'class' in .refdoc.yml to the documented class name")
        self.logger.info("Generating reference for %s in %s", config.class_name, config.root)

        readme = self.readme_parser.parse(
            config.resolve(config.readme).read_text(encoding="utf-8")
        )
        metadata = load_package_metadata(config.resolve(config.package))
        members = self._load_members(config)
        examples = self._load_examples(config)
        self.logger.debug("Loaded %d members and %d examples", len(members), len(examples))

        assembler = DocumentAssembler(
            config.class_name,
            code_language=config.rendering.code_language,
            templates_dir=(
                config.resolve(config.rendering.templates_dir)
                if config.rendering.templates_dir
                else None
            ),
            contributing=config.rendering.contributing,
        )
        result = generate(
            readme,
            metadata,
            members,
            examples,
            owner=config.class_name,
            assembler=assembler,
            scanner=self.scanner,
        )

        output_path = Path(output) if output else config.resolve(config.output)
        if not dry_run:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.document, encoding="utf-8")
            self.logger.info("Wrote %s", output_path)

        return RunOutcome(
            result=result,
            output_path=output_path,
            written=not dry_run,
            elapsed=time.perf_counter() - started,
        )

    def _load_members(self, config: RefDocConfig) -> List[MemberDescriptor]:
        if config.members.source:
            text = config.resolve(config.members.source).read_text(encoding="utf-8")
            return scan_class_source(text, config.class_name)
        if config.members.table:
            return load_descriptor_table(config.resolve(config.members.table))
        raise ConfigError("Configure either members.source or members.table")

    def _load_examples(self, config: RefDocConfig) -> ExampleSet:
        settings = config.examples
        if settings.pairs:
            return self.extractor.from_pairs(load_pairs(config.resolve(settings.pairs)))
        if settings.source is None and settings.results is None:
            self.logger.warning("No examples configured; every method will lack usage")
            return ExampleSet()
        if settings.source is None or settings.results is None:
            raise ConfigError("examples.source and examples.results must be set together")

        source_text = config.resolve(settings.source).read_text(encoding="utf-8")
        results = load_results(config.resolve(settings.results))
        if settings.start_line is not None:
            return self.extractor.extract(source_text, settings.start_line, results)
        if settings.marker:
            return self.extractor.extract_marked(source_text, settings.marker, results)
        raise ConfigError("examples.start_line or examples.marker is required with examples.source")


__all__ = ["GenerationResult", "Orchestrator", "RunOutcome", "generate"]
