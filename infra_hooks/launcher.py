import logging
import os

from pulumi import log

from infra_hooks.helper_manager import helper_manager
from infra_hooks.lib.types import HooksType


def run_helper(provider: str, helper_name: str, raw_config: dict) -> HooksType:
    """Invoke a helper with a hook config

    :param provider: A provider
    :param helper_name: The helper name
    :param raw_config: The hook config as written by the user
    :return: An ordered list of descriptors
    """
    helper = helper_manager.get_helper(provider, helper_name)

    log.debug(f"running helper `{helper_name}`")

    return helper.run(raw_config)


def get_permissions(provider: str, helper_name: str) -> HooksType:
    """Static IAM statements of a helper

    :param provider: A provider
    :param helper_name: The helper name
    :return: A list of ``iamStatement`` descriptors
    """
    return helper_manager.get_helper(provider, helper_name).permissions()


if os.getenv("HOOKS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "infra-hooks logging enabled"
    log.debug(msg)
    logging.debug(msg)
