"""
Configuration Resolver

Decides which source directory supplies the document of an environment.
The preset directory always wins over the custom directory; documents are
never merged across the two.

Author: config-complete Project
License: MIT
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from .documents import DocumentFormat, list_documents, read_mapping
from .errors import SourceNotFoundError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class SourceKind(str, Enum):
    """Configuration source kinds, in precedence order."""
    PRESET = "preset"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ConfigSource:
    """A directory of environment documents, scanned once."""
    kind: SourceKind
    directory: Optional[str]
    available: FrozenSet[str]

    @classmethod
    def scan(cls, kind: SourceKind, directory: Optional[str], extension: str) -> 'ConfigSource':
        """
        Scan a directory for environment documents.

        Raises:
            OSError: If the directory cannot be listed
        """
        available = list_documents(directory, extension)
        if directory is None:
            logger.debug(f"No {kind.value} directory configured, source disabled")
        else:
            logger.info(f"Scanned {kind.value} directory {directory}: {len(available)} documents")
        return cls(kind=kind, directory=directory, available=available)

    @property
    def enabled(self) -> bool:
        return self.directory is not None

    def provides(self, filename: str) -> bool:
        return filename in self.available

    def path_of(self, filename: str) -> str:
        return os.path.join(self.directory, filename)


class Resolver:
    """
    Resolves environment names to documents of the preset or custom source.
    """

    def __init__(
        self,
        presets_directory: Optional[str] = None,
        customs_directory: Optional[str] = None,
        document_format: DocumentFormat = DocumentFormat.JSON
    ):
        """
        Scan both source directories.

        Args:
            presets_directory: Preset documents directory (wins over customs)
            customs_directory: Custom documents directory
            document_format: Format of the environment documents
        """
        self.document_format = DocumentFormat(document_format)
        extension = self.document_format.extension
        self.presets = ConfigSource.scan(SourceKind.PRESET, presets_directory, extension)
        self.customs = ConfigSource.scan(SourceKind.CUSTOM, customs_directory, extension)

    @property
    def sources(self) -> Tuple[ConfigSource, ConfigSource]:
        return (self.presets, self.customs)

    def filename_for(self, environment: str) -> str:
        return environment + self.document_format.extension

    def source_for(self, filename: str) -> ConfigSource:
        """
        Find the source supplying a document filename.

        Raises:
            SourceNotFoundError: If no enabled source holds the file
        """
        for source in self.sources:
            if source.provides(filename):
                return source
        raise SourceNotFoundError(filename)

    def load(self, filename: str) -> Dict[str, Any]:
        """
        Parse a document from the source it resolves to.

        Returns:
            Freshly parsed configuration mapping
        """
        source = self.source_for(filename)
        logger.debug(f"Loading {filename} from the {source.kind.value} directory")
        return read_mapping(source.path_of(filename), self.document_format)

    def environments(self) -> List[str]:
        """Sorted environment names available from any source."""
        extension = self.document_format.extension
        names = set()
        for source in self.sources:
            names.update(filename[:-len(extension)] for filename in source.available)
        names.discard("")
        return sorted(names)
