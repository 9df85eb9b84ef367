"""
Application configuration module
"""
import os
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class OutputConfig:
    """
    Configuration for the CSV output files
    """
    output_dir: str = 'output'
    all_data_file: str = 'output.csv'
    top_data_file: str = 'topHitsOutput.csv'
    top_entries: int = 10

    @property
    def all_data_path(self) -> str:
        return os.path.join(self.output_dir, self.all_data_file)

    @property
    def top_data_path(self) -> str:
        return os.path.join(self.output_dir, self.top_data_file)


@dataclass
class AppConfig:
    """
    Application-wide configuration
    """
    output: OutputConfig = field(default_factory=OutputConfig)
    debug: bool = False


def load_config() -> AppConfig:
    """
    Build the configuration, applying environment overrides

    Recognised variables: SEARCHCRAWLER_OUTPUT_DIR,
    SEARCHCRAWLER_TOP_ENTRIES and SEARCHCRAWLER_DEBUG.
    """
    output = OutputConfig()
    output.output_dir = os.environ.get('SEARCHCRAWLER_OUTPUT_DIR', output.output_dir)
    top_entries = os.environ.get('SEARCHCRAWLER_TOP_ENTRIES')
    if top_entries:
        try:
            output.top_entries = int(top_entries)
        except ValueError:
            logger.warning(f"Ignoring SEARCHCRAWLER_TOP_ENTRIES={top_entries!r}, using {output.top_entries}")
    return AppConfig(output=output, debug=_env_flag('SEARCHCRAWLER_DEBUG'))


# Create default configuration instance
config = load_config()
