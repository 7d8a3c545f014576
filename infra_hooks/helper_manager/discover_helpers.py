from os import walk
from os.path import basename, samefile, abspath
from pathlib import Path
from typing import Optional

from pulumi import log

from infra_hooks.lib.utils import kebab_case
from .lazy_helper import LazyHelper

_package_name = "infra_hooks"
_helper_container_name = "helpers"


def _get_package_path(path: Optional[Path] = Path(abspath(__file__))) -> Path:
    if samefile(path, "/"):
        raise Exception(f"helper population failed: package is named something other than `{_package_name}`")
    elif basename(path) == _package_name:
        return path
    else:
        return _get_package_path(path.parent)


def _get_dirs(path: Path) -> list[str]:
    """Get all directories in ``path`` that don't start with underscore

    :param path: Path to start from
    :return: List of directories in ``path``
    """
    _, dirs, _ = next(walk(path))
    return sorted(d for d in dirs if not d.startswith("_"))


def discover_helpers() -> dict[str, dict[str, LazyHelper]]:
    """Find all helpers

    Assumes that the path to a helper is ``infra_hooks/helpers/{provider}/{helper}``.

    The helper folder name is converted from snake to kebab case for the nested dictionary key.

    Example::

        # infra_hooks
        # └── helpers
        #     └── aws
        #         ├── sqs
        #         └── event_bus

        {
            "aws": {
                "sqs": LazyHelper(provider='aws', name='sqs'),
                "event-bus": LazyHelper(provider='aws', name='event_bus'),
            },
        }

    :return: A mapping of providers to mappings of helper names to lazy helpers
    """
    package_path = _get_package_path()

    log.debug(f"identified package path for `{_package_name}` as `{str(package_path)}`")

    providers_path = package_path / _helper_container_name

    return {
        provider: {
            kebab_case(helper_name): LazyHelper(provider, helper_name)
            for helper_name in _get_dirs(providers_path / provider)
        }
        for provider in _get_dirs(providers_path)
    }
