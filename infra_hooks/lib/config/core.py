from functools import cache
from typing import Optional

from .hooks_env import hooks_env

tag_namespace = hooks_env.get("tag_namespace", "hooks")
"""Tags added to the generated resources use this to prefix their keys."""

tag_prefix = f"{tag_namespace}{hooks_env.get('tag_separator', ':')}"

service_name = hooks_env.get("service_name", "${self:custom.serviceName}")
"""Prefix of every generated queue name, usually an orchestrator variable resolved at deploy time."""

stage = hooks_env.get("stage", "${self:custom.stage}")

base_arn = hooks_env.get("base_arn", "arn:aws:sqs:${aws:region}:${aws:accountId}")
"""Everything in a queue ARN before the queue name."""

base_url = hooks_env.get("base_url", "https://sqs.${aws:region}.amazonaws.com/${aws:accountId}/")
"""Everything in a queue URL before the queue name."""

consumer_path = hooks_env.get("consumer_path", "src/sqs-consumer")
"""Directory holding the default consumer handlers."""


@cache
def get_team() -> Optional[str]:
    """
    Returns the team owning the generated resources, if configured

    :return: Team name or None
    """
    return hooks_env.get("team")
