# Renders the settings of stemcell_fips.config into a markdown page
from pathlib import Path
from typing import Union

from stemcell_fips.config.configuration import DEFAULT_CONFIG_PATH, config


def write_config_page(output_path: Union[str, Path] = "./configuration.md") -> None:
    with Path(output_path).open("w") as handle:
        handle.write("# Configuration\n\n")
        handle.write(
            f"Defaults are read from `{DEFAULT_CONFIG_PATH.name}`. Pass your own file with `stemcell-fips --config`, "
            "it only needs the keys it overrides.\n\n"
        )
        for key in config.__dict__:
            handle.write(f"`{key}`\n\n- Description: {config.get_description(key)}\n")
            handle.write(f"- Default value: `{getattr(config, key)}`\n\n")


if __name__ == "__main__":
    write_config_page()
