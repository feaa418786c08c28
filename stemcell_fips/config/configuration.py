import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import jsonschema
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"
SCHEMA_PATH = Path(__file__).parent / "settings-schema.json"


class Configuration:
    """
    Settings of a verification run. Each setting is stored as a ``{"value": ..., "description": ...}``
    mapping and read as its plain value. Loading a file overrides only the keys the file defines.
    """

    def load(self, filepath: Union[str, Path]) -> None:
        with Path(filepath).open("r") as file:
            state = yaml.load(file, Loader=yaml.FullLoader)

        with SCHEMA_PATH.open("r") as file:
            jsonschema.validate(state, json.load(file))

        for k, v in state.items():
            setattr(self, k, v)
        logger.debug(f"Loaded configuration from {filepath}")

    def __getattribute__(self, key: str) -> Any:
        res = object.__getattribute__(self, key)
        if isinstance(res, dict) and "value" in res:
            return res["value"]
        return res

    def get_description(self, key: str) -> Optional[str]:
        res = object.__getattribute__(self, key)
        if isinstance(res, dict) and "description" in res:
            return res["description"]
        return None


config = Configuration()
config.load(DEFAULT_CONFIG_PATH)
