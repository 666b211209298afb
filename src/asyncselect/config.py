"""Select control configuration.

Options may be built in code or parsed from a JSON file, e.g.::

    {"pagination": true, "multi": true, "no_results_text": "Nothing found"}
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from asyncselect.logger import get_logger

logger = get_logger("config")


class SelectConfig(BaseModel):
    """Recognized options of an asynchronous select control."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    autoload: bool = Field(True, description="Load the empty query when the control mounts")
    pagination: bool = Field(False, description="Load further pages when the menu is scrolled to the end")
    ignore_accents: bool = Field(True, description="Strip diacritics from the query")
    ignore_case: bool = Field(True, description="Lower-case the query")
    clear_options_on_selection: bool = Field(
        True, description="Clear the visible options after adding a value in multi mode"
    )
    multi: bool = Field(False, description="Allow selecting several values")
    loading_placeholder: Optional[str] = Field("Loading...", description="Replaces the placeholder while loading")
    no_results_text: Optional[str] = Field(None, description="Shown when a non-empty query has no options")
    search_prompt_text: Optional[str] = Field("Type to search", description="Prompt shown before typing")
    placeholder: Optional[str] = Field(None, description="Placeholder shown when there is no value")


def load_select_config(config_path: str | Path) -> SelectConfig:
    """
    Load a select configuration from a JSON file.

    Args:
        config_path: Path to the JSON configuration file

    Returns:
        SelectConfig: Parsed configuration object

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If the configuration structure is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        error_msg = f"Select configuration file not found: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading select configuration from: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file {config_path}: {e}")
        raise

    try:
        return SelectConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid configuration structure in {config_path}: {e}")
        raise
