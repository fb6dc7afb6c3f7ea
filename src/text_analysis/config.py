"""Loading of config.yaml and logging setup for the Streamlit app."""

import copy
import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from src.text_analysis.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.yaml"

DEFAULT_CONFIG = {
    'analysis': {
        'latency_seconds': 0.0
    },
    'output': {
        'plot_dir': './output/plots'
    },
    'export': {
        'filename': 'nlp-analysis.json',
        'clipboard_header': 'NLP Analysis Results'
    },
    'logging': {
        'level': 'INFO'
    }
}


def _merge(defaults: dict, overrides: dict) -> dict:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _check_latency(config: dict, config_path: Path) -> None:
    if not isinstance(config['analysis'], dict):
        raise ConfigError(f"Expected a mapping under analysis in {config_path}")
    latency = config['analysis'].get('latency_seconds')
    # bool is an int subclass but never a meaningful delay
    if isinstance(latency, bool) or not isinstance(latency, (int, float)) or latency < 0:
        raise ConfigError(
            f"analysis.latency_seconds in {config_path} must be a non-negative number, got {latency!r}")


def load_config(config_path: Optional[Union[str, Path]] = None) -> dict:
    """
    Load application config, falling back to defaults for missing keys.

    Args:
        config_path: Path to YAML config file (default: config.yaml in the repository root)

    Returns:
        Dictionary with analysis, output, export and logging sections

    Raises:
        ConfigError: If the file can't be read or parsed, isn't a mapping,
            or holds an invalid latency_seconds
    """
    config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.info("Config file %s not found, using defaults", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}, got {type(loaded).__name__}")

    config = _merge(DEFAULT_CONFIG, loaded)
    _check_latency(config, config_path)
    return config


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Set up root logging once; later calls only adjust the level."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    logging.getLogger().setLevel(level)
