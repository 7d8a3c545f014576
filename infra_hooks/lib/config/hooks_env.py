import logging
from collections import UserDict
from pathlib import Path
from typing import Optional

import hiyapyco

logger = logging.getLogger(__name__)


class HooksConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that automatically loads configuration from a tiered set of config files.

    This class will load `Hooks.common.yaml` from the working directory, and will walk the filesystem upwards a
    configurable number of times to find other `Hooks.common.yaml` files.

    The discovered files will be merged using a YAML object merger (HiYaPyCo), the file closest to the working
    directory wins.

    Example usage:
        from infra_hooks.lib.config import hooks_env

        hooks_env.get("service_name", "${self:custom.serviceName}")
        hooks_env.require("team")

    """

    def __init__(self, limit=5, filename="Hooks.common.yaml", start: Optional[Path] = None):
        """
        Create a HierarchicalConfig UserDict

        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        :param start: Directory to start from, defaults to the working directory
        """
        super().__init__()
        self.filename = filename
        configs = list(reversed(self._discover_configs(limit, start or Path.cwd())))
        logger.debug("Found configs in %s", configs)

        if configs:
            loader = hiyapyco.load([str(path) for path in configs])

            # expose the data from the loader as our UserDict backing store
            self.data = dict(loader or {})

    def require(self, key: str) -> any:
        """
        Require a key from the configuration and return it. If not found, throw a `HooksConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise HooksConfigException(key)

    def _discover_configs(self, limit: int, start: Path) -> list[Path]:
        """
        Walk upwards from ``start`` to find config files

        :param limit: Max parent directories to walk
        :param start: Directory to start from
        :return: Paths ordered from the closest to the farthest
        """
        config_paths = []

        start = start.absolute()
        logger.debug("Starting config discovery in %s", start)

        local_config = start / self.filename
        if local_config.exists():
            logger.debug("Detected local config [%s]", local_config)
            config_paths.append(local_config)

        if (start / ".git").is_dir():
            logger.debug("Started at project root, skipping parents")
            return config_paths

        # walk up the directory tree and find any files matching the name
        limited_parents = list(start.parents)[:limit]
        for path in limited_parents:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected parent config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # we do this last to allow a config file to exist at the project root level, but not higher.
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths


# Create our singleton object to avoid loading and merging configuration multiple times on import
hooks_env = HierarchicalConfig()
