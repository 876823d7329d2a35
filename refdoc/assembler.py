"""Assemble README sections, member signatures and examples into the reference."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from .examples.extractor import ExampleSet
from .logging import get_logger
from .markdown import Heading, MarkdownBlock, fenced
from .members.signature import MemberSignatureBuilder
from .models import MEMBER_SEPARATOR, MemberDescriptor, PackageMetadata
from .parsing.doc_comment import TagCommentParser
from .parsing.readme import Document
from .postproc.issues import MISSING_EXAMPLES_PLACEHOLDER
from .rendering import TemplateRenderer

INSTALLATION_TEXT = "You can install the package with the following command:"
DEFAULT_CONTRIBUTING = (
    "Contributions are welcome. Please open an issue to discuss your idea "
    "before submitting a pull request."
)
SHELL_LANGUAGE = "bash"


class DocumentAssembler:
    """Builds one block per documented member and lays out the full document."""

    def __init__(
        self,
        owner: str,
        *,
        code_language: str = "code",
        templates_dir: Path | None = None,
        contributing: Optional[str] = None,
        doc_parser: TagCommentParser | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.owner = owner
        self.code_language = code_language
        self.default_contributing = contributing or DEFAULT_CONTRIBUTING
        self.doc_parser = doc_parser or TagCommentParser()
        self.signature_builder = MemberSignatureBuilder(owner)
        self.renderer = renderer or TemplateRenderer(templates_dir)
        self.logger = get_logger("assembler")

    def assemble(
        self,
        readme: Document,
        metadata: PackageMetadata,
        members: Sequence[MemberDescriptor],
        examples: ExampleSet,
    ) -> str:
        reference = self.method_blocks(members, examples)
        blocks: List[MarkdownBlock] = [
            MarkdownBlock(Heading(readme.title, 1), readme.description),
            MarkdownBlock(
                Heading("Installation", 2),
                f"{INSTALLATION_TEXT}\n\n{fenced(metadata.install_command, SHELL_LANGUAGE)}",
            ),
        ]

        basic_usage = readme.basic_usage
        if basic_usage is not None:
            blocks.append(MarkdownBlock(Heading("Basic Usage", 2), basic_usage.content))
        else:
            self.logger.warning("README has no 'Basic Usage' section; skipping it")

        blocks.append(MarkdownBlock(Heading("Full Reference", 2), children=tuple(reference)))

        blocks.append(MarkdownBlock(Heading("License", 2), readme.license.content))
        blocks.append(MarkdownBlock(Heading("Attributions", 2), readme.attributions.content))

        contributing = readme.contributing
        blocks.append(
            MarkdownBlock(
                Heading("Contributing", 2),
                contributing.content if contributing is not None else self.default_contributing,
            )
        )

        return self.renderer.render(
            title=readme.title,
            package=metadata,
            sections=[block.render().rstrip("\n") for block in blocks],
            reference=[block.render() for block in reference],
        )

    def method_blocks(
        self, members: Sequence[MemberDescriptor], examples: ExampleSet
    ) -> List[MarkdownBlock]:
        documented = [member for member in members if member.is_documented]
        self.logger.debug(
            "Documenting %d of %d members of %s", len(documented), len(members), self.owner
        )
        return [self.method_block(member, examples) for member in documented]

    def method_block(self, member: MemberDescriptor, examples: ExampleSet) -> MarkdownBlock:
        doc = self.doc_parser.parse(member.doc_comment)
        signature = self.signature_builder.build(member, doc)

        parts = []
        if doc.description:
            parts.append(doc.description)
        parts.append(fenced(signature.render(), self.code_language))

        matches = examples.examples_for_method(self.owner, member.name)
        if matches:
            usage = fenced("\n".join(example.render() for example in matches), self.code_language)
        else:
            self.logger.debug("No examples found for %s", member.name)
            usage = MISSING_EXAMPLES_PLACEHOLDER

        return MarkdownBlock(
            Heading(f"`{self.owner}{MEMBER_SEPARATOR}{member.name}()`", 3),
            "\n\n".join(parts),
            children=(MarkdownBlock(Heading("Usage", 4), usage),),
        )


__all__ = ["DEFAULT_CONTRIBUTING", "DocumentAssembler", "INSTALLATION_TEXT"]
