"""Check TypeScript sources for component member order violations."""

import logging
from collections.abc import Iterable
from pathlib import Path

from member_order.config import RULE_NAME, MemberOrderConfig
from member_order.errors import ParserError
from member_order.languages.typescript import TS_EXTENSIONS, TypeScriptMemberExtractor
from member_order.models import ClassDeclarationModel, FindingModel, ViolationModel
from member_order.validator import find_violations, validate_order_spec

logger = logging.getLogger(__name__)

_DEFAULT_SOURCE_NAME = "<source>"
_DEFAULT_ENCODING = "utf-8"
_MESSAGE_PREFIX = "angular component order"


def format_violation_message(violation: ViolationModel) -> str:
    """Build the diagnostic message for a violation."""
    member_name = violation.member.name or "<unnamed>"
    return (
        f"{_MESSAGE_PREFIX}: '{member_name}' ({violation.category}) "
        f"should be declared before {violation.previous_category}"
    )


class MemberOrderChecker:
    """Runs member extraction, classification and order validation over sources.

    The configured order is validated on construction, so an invalid order
    fails before any file is read.
    """

    def __init__(self, config: MemberOrderConfig | None = None) -> None:
        """Initialise the checker.

        Args:
            config: Rule configuration (defaults apply if None)

        Raises:
            InvalidConfigurationError: If the configured order is invalid

        """
        self.config = config or MemberOrderConfig()
        self.order = self.config.effective_order
        validate_order_spec(self.order)
        self._extractor = TypeScriptMemberExtractor()

    @staticmethod
    def is_supported_file(file_path: Path) -> bool:
        """Check if a file has a supported TypeScript extension."""
        return file_path.suffix.lower() in TS_EXTENSIONS

    def check_class(
        self, class_declaration: ClassDeclarationModel, file_path: str
    ) -> list[FindingModel]:
        """Return a finding for every out of order member of one class."""
        return [
            FindingModel(
                rule=RULE_NAME,
                file_path=file_path,
                class_name=class_declaration.name,
                member_name=violation.member.name,
                category=violation.category,
                previous_category=violation.previous_category,
                line=violation.member.line,
                column=violation.member.column,
                message=format_violation_message(violation),
            )
            for violation in find_violations(class_declaration.members, self.order)
        ]

    def check_source(
        self, source_code: str, file_path: str = _DEFAULT_SOURCE_NAME
    ) -> list[FindingModel]:
        """Check TypeScript source text.

        Args:
            source_code: TypeScript source to check
            file_path: Name reported in findings

        Returns:
            Findings for every class in the source, in document order

        """
        findings: list[FindingModel] = []
        for class_declaration in self._extractor.extract_source(source_code):
            class_findings = self.check_class(class_declaration, file_path)
            logger.debug(
                "Class %s in %s: %d members, %d violations",
                class_declaration.name,
                file_path,
                len(class_declaration.members),
                len(class_findings),
            )
            findings.extend(class_findings)
        return findings

    def check_file(self, file_path: Path) -> list[FindingModel]:
        """Check a single TypeScript file.

        Files above the configured size limit are skipped with a warning.

        Raises:
            ParserError: If the file type is unsupported or the file cannot be read

        """
        if not self.is_supported_file(file_path):
            raise ParserError(
                f"Cannot check file with extension '{file_path.suffix}': {file_path}. "
                f"Supported extensions: {list(TS_EXTENSIONS)}"
            )

        try:
            size = file_path.stat().st_size
            if size > self.config.max_file_size:
                logger.warning(
                    "Skipping %s: %d bytes exceeds limit of %d bytes",
                    file_path,
                    size,
                    self.config.max_file_size,
                )
                return []
            source_code = file_path.read_text(encoding=_DEFAULT_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise ParserError(f"Failed to read source file {file_path}: {e}") from e

        return self.check_source(source_code, str(file_path))

    def iter_source_files(self, paths: Iterable[Path]) -> list[Path]:
        """Expand paths into the supported files to check.

        Files given explicitly are kept as they are; directories are searched
        recursively, skipping excluded directory names.
        """
        files: list[Path] = []
        for path in paths:
            if path.is_dir():
                files.extend(
                    sorted(
                        candidate
                        for candidate in path.rglob("*")
                        if candidate.is_file()
                        and self.is_supported_file(candidate)
                        and not self._is_excluded(candidate.relative_to(path))
                    )
                )
            else:
                files.append(path)
        return files

    def check_paths(self, paths: Iterable[Path]) -> list[FindingModel]:
        """Check files and directories, returning all findings."""
        files = self.iter_source_files(paths)
        findings: list[FindingModel] = []
        for file_path in files:
            logger.debug("Checking %s", file_path)
            findings.extend(self.check_file(file_path))

        logger.info(
            "Checked %d files, found %d member order violations",
            len(files),
            len(findings),
        )
        return findings

    def _is_excluded(self, relative_path: Path) -> bool:
        return any(part in self.config.exclude for part in relative_path.parts[:-1])
