"""
Configuration Accessor

Entry point of config-complete. Construction scans the preset and custom
directories and loads the schema description once; every get_conf() call
then re-reads the environment document, validates it and tags it with the
environment name.

Author: config-complete Project
License: MIT
"""

from typing import Any, Dict, List, Optional

from .documents import DocumentFormat
from .errors import SourceNotFoundError, ValidationAggregateError
from .resolver import ConfigSource, Resolver
from .schema_description import Subtree, load_description
from .validator import find_missing_properties
from ..config.settings import AccessorSettings, DEFAULT_ENVIRONMENT
from ..config.settings_loader import load_settings
from ..utils.logger import get_logger

logger = get_logger(__name__)

ENV_KEY = "env"


class ConfigComplete:
    """
    Configuration accessor.

    Features:
    - Preset documents override custom documents of the same environment
    - Presence validation against an optional schema description
    - Fresh, caller-owned dictionaries on every call
    """

    def __init__(self, settings: Optional[AccessorSettings] = None):
        """
        Scan the sources and load the schema description.

        Args:
            settings: Accessor settings (all sources disabled if None)

        Raises:
            OSError: If a directory or the description cannot be read
            MalformedDocumentError: If the description root is not a mapping
        """
        self.settings = settings or AccessorSettings()
        self._resolver = Resolver(
            presets_directory=self.settings.presets_directory,
            customs_directory=self.settings.customs_directory,
            document_format=self.settings.document_format
        )
        self._description: Optional[Subtree] = load_description(self.settings.description_file)

    @property
    def description(self) -> Optional[Subtree]:
        """Loaded schema description, None when validation is disabled."""
        return self._description

    @property
    def validates(self) -> bool:
        return self._description is not None

    @property
    def available_environments(self) -> List[str]:
        """Environment names resolvable by this accessor."""
        return self._resolver.environments()

    def has_environment(self, environment: Optional[str] = None) -> bool:
        """Whether get_conf() would find a document for the environment."""
        environment = environment or self.settings.default_environment
        filename = self._resolver.filename_for(environment)
        return any(source.provides(filename) for source in self._resolver.sources)

    def resolve_source(self, environment: Optional[str] = None) -> ConfigSource:
        """
        Get the source supplying an environment's document.

        Raises:
            SourceNotFoundError: If no source holds the document
        """
        environment = environment or self.settings.default_environment
        return self._resolver.source_for(self._resolver.filename_for(environment))

    def get_conf(self, environment: Optional[str] = None) -> Dict[str, Any]:
        """
        Load the configuration of an environment.

        Args:
            environment: Environment name (defaults to "development")

        Returns:
            Parsed configuration with the "env" key set to the environment

        Raises:
            SourceNotFoundError: If no source holds the environment document
            ValidationAggregateError: If required properties are missing
            OSError: If the document cannot be read
        """
        environment = environment or self.settings.default_environment
        filename = self._resolver.filename_for(environment)

        try:
            config = self._resolver.load(filename)
        except SourceNotFoundError:
            logger.warning(f"No source provides {filename}")
            raise

        if self._description is not None:
            missing = find_missing_properties(config, self._description)
            if missing:
                logger.warning(f"{filename} misses {len(missing)} required properties")
                raise ValidationAggregateError(filename, missing)

        config[ENV_KEY] = environment
        return config


def create(
    presets_directory: Optional[str] = None,
    description_file: Optional[str] = None,
    customs_directory: Optional[str] = None,
    document_format: DocumentFormat = DocumentFormat.JSON,
    default_environment: str = DEFAULT_ENVIRONMENT
) -> ConfigComplete:
    """
    Create a configuration accessor.

    Args:
        presets_directory: Preset documents directory, None to disable
        description_file: Schema description file, None to skip validation
        customs_directory: Custom documents directory, None to disable
        document_format: Format of the environment documents
        default_environment: Environment used when get_conf() gets none

    Returns:
        ConfigComplete accessor
    """
    settings = AccessorSettings(
        presets_directory=presets_directory,
        description_file=description_file,
        customs_directory=customs_directory,
        document_format=document_format,
        default_environment=default_environment
    )
    return create_from_settings(settings)


def create_from_settings(settings: AccessorSettings) -> ConfigComplete:
    return ConfigComplete(settings)


def create_from_env(env_file: Optional[str] = None, **overrides: Any) -> ConfigComplete:
    """
    Create an accessor from CONFIG_COMPLETE_* environment variables.

    Args:
        env_file: Optional .env file to load first
        **overrides: Settings fields taking precedence over the environment
    """
    return ConfigComplete(load_settings(env_file, **overrides))


def load_conf(
    environment: Optional[str] = None,
    presets_directory: Optional[str] = None,
    description_file: Optional[str] = None,
    customs_directory: Optional[str] = None,
    **options: Any
) -> Dict[str, Any]:
    """
    Convenience function resolving a single configuration.

    Returns:
        Validated configuration of the environment
    """
    accessor = create(presets_directory, description_file, customs_directory, **options)
    return accessor.get_conf(environment)
