from .core import (
    tag_namespace,
    tag_prefix,
    service_name,
    stage,
    base_arn,
    base_url,
    consumer_path,
    get_team,
)
from .mapper import get_helper_config, get_raw_helper_config
from .hooks_env import hooks_env, HierarchicalConfig, HooksConfigException
