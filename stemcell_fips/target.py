"""
Access to the image under test. A target runs commands and reads files on a built stemcell,
either through testinfra (local, ssh, docker, ...) or from in-memory snapshots.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

import testinfra

from stemcell_fips.exceptions import StemcellCheckError

logger = logging.getLogger(__name__)


class TargetError(StemcellCheckError):
    """Raised when a command cannot be run or a file cannot be read on the target."""


@dataclass(frozen=True)
class CommandResult:
    stdout: str
    exit_status: int = 0
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0


class Target(ABC):
    @abstractmethod
    def run(self, command: str) -> CommandResult:
        raise NotImplementedError("Not meant to be implemented")

    @abstractmethod
    def is_file(self, path: str) -> bool:
        raise NotImplementedError("Not meant to be implemented")

    @abstractmethod
    def read_file(self, path: str) -> str:
        raise NotImplementedError("Not meant to be implemented")

    @abstractmethod
    def package_installed(self, name: str) -> bool:
        raise NotImplementedError("Not meant to be implemented")


class TestinfraTarget(Target):
    __test__ = False

    def __init__(self, hostspec: str = "local://", **kwargs):
        self.hostspec = hostspec
        with self._backend("connect"):
            self.host = testinfra.get_host(hostspec, **kwargs)

    @contextmanager
    def _backend(self, action: str) -> Iterator[None]:
        try:
            yield
        except TargetError:
            raise
        except Exception as e:
            raise TargetError(f"Failed to {action} on {self.hostspec}: {e}") from e

    def run(self, command: str) -> CommandResult:
        logger.debug(f"Running `{command}` on {self.hostspec}")
        with self._backend(f"run `{command}`"):
            result = self.host.run(command)
        return CommandResult(result.stdout, result.rc, result.stderr)

    def is_file(self, path: str) -> bool:
        with self._backend(f"stat {path}"):
            return self.host.file(path).is_file

    def read_file(self, path: str) -> str:
        with self._backend(f"read {path}"):
            file = self.host.file(path)
            if not file.is_file:
                raise TargetError(f"{path} is not a regular file on {self.hostspec}")
            return file.content_string

    def package_installed(self, name: str) -> bool:
        with self._backend(f"query package {name}"):
            return self.host.package(name).is_installed

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hostspec!r})"


class FakeTarget(Target):
    """Target assembled from captured command outputs and file contents."""

    def __init__(
        self,
        commands: Mapping[str, CommandResult | str] | None = None,
        files: Mapping[str, str] | None = None,
        installed_packages: Iterable[str] = (),
    ):
        self.commands = {
            cmd: res if isinstance(res, CommandResult) else CommandResult(res) for cmd, res in (commands or {}).items()
        }
        self.files = dict(files or {})
        self.installed_packages = set(installed_packages)

    def run(self, command: str) -> CommandResult:
        if command not in self.commands:
            raise TargetError(f"No output captured for `{command}`")
        return self.commands[command]

    def is_file(self, path: str) -> bool:
        return path in self.files

    def read_file(self, path: str) -> str:
        if path not in self.files:
            raise TargetError(f"{path} is not a regular file")
        return self.files[path]

    def package_installed(self, name: str) -> bool:
        return name in self.installed_packages
