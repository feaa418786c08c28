#!/usr/bin/env python3
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import jsonschema

from stemcell_fips import constants
from stemcell_fips.config.configuration import config
from stemcell_fips.exceptions import AmbiguousScenario, NoScenarioApplicable, UnknownPlatform
from stemcell_fips.packages.loader import AssetPackageListLoader
from stemcell_fips.platform import Platform
from stemcell_fips.suite import run_suite
from stemcell_fips.target import TargetError, TestinfraTarget

logger = logging.getLogger(__name__)


def setup_logging(quiet: bool) -> None:
    file_handler = logging.FileHandler(config.log_filepath)
    stream_handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    file_handler.setFormatter(formatter)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [file_handler] if quiet else [file_handler, stream_handler]
    logging.basicConfig(level=logging.INFO, handlers=handlers)


@click.command()
@click.option(
    "-p",
    "--platform",
    "platform_name",
    type=click.Choice([x.value for x in Platform], case_sensitive=False),
    envvar="STEMCELL_INFRASTRUCTURE",
    help="Infrastructure the stemcell was built for. Defaults to the `platform` setting.",
)
@click.option(
    "-H",
    "--host",
    "hostspec",
    default=None,
    help="Testinfra host specification of the image under test, e.g. ssh://vcap@10.0.0.5. Defaults to the `target_host` setting.",
)
@click.option(
    "-c",
    "--config",
    "configpath",
    default=None,
    type=click.Path(file_okay=True, dir_okay=False, readable=True),
    help="Path to your own config yaml file that will override the default one.",
)
@click.option(
    "-a",
    "--assets",
    "assets_dir",
    default=None,
    type=click.Path(file_okay=False, dir_okay=True, readable=True),
    help="Directory with the reference package lists. Defaults to the lists shipped with the tool.",
)
@click.option(
    "-o",
    "--output",
    "outputpath",
    default=None,
    type=click.Path(file_okay=True, dir_okay=False, writable=True, resolve_path=True),
    help="If set, the report of the run is stored as JSON at this path.",
)
@click.option("-q", "--quiet", is_flag=True, help="If set, will not print to stdout")
def main(
    platform_name: str | None,
    hostspec: str | None,
    configpath: str | None,
    assets_dir: str | None,
    outputpath: str | None,
    quiet: bool,
):
    """Verify that a built FIPS stemcell has the expected kernel, SSH, bootloader and package configuration."""
    if configpath:
        try:
            config.load(Path(configpath))
        except FileNotFoundError:
            print("Error: Bad path to configuration file")
            sys.exit(constants.EXIT_CONFIG_ERROR)
        except (ValueError, jsonschema.exceptions.ValidationError) as e:
            print(f"Error: Bad format of configuration file: {e}")
            sys.exit(constants.EXIT_CONFIG_ERROR)

    setup_logging(quiet)

    platform_name = platform_name or config.platform
    if not platform_name:
        print("Error: No platform given. Use --platform, STEMCELL_INFRASTRUCTURE or the `platform` setting.")
        sys.exit(constants.EXIT_CONFIG_ERROR)

    try:
        platform = Platform.from_str(platform_name)
        target = TestinfraTarget(hostspec or config.target_host)
        loader = AssetPackageListLoader(assets_dir or config.assets_dir)
        report = run_suite(target, platform, loader)
    except (UnknownPlatform, NoScenarioApplicable, AmbiguousScenario, TargetError) as e:
        logger.error(e)
        print(f"Error: {e}")
        sys.exit(constants.EXIT_CONFIG_ERROR)

    if outputpath:
        report.to_json(outputpath)
        logger.info(f"Report stored at {outputpath}")
    if not quiet:
        print(report.summary())

    sys.exit(constants.EXIT_OK if report.passed else constants.EXIT_CHECKS_FAILED)


if __name__ == "__main__":
    main()
