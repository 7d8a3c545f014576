from ..config import (
    tag_prefix,
    service_name,
    stage,
    get_team,
)


def get_tags() -> dict:
    """
    Generate the tag dict shared by every generated resource

    example tags:
      orders service, default settings:
        hooks:createdby = infra-hooks
        hooks:service = ${self:custom.serviceName}
        hooks:stage = ${self:custom.stage}

      with `team: payments` and `tag_namespace: acme` in Hooks.common.yaml:
        acme:createdby = infra-hooks
        acme:service = ${self:custom.serviceName}
        acme:stage = ${self:custom.stage}
        acme:team = payments

    :return: Dict of tags
    """
    tags = {
        f"{tag_prefix}createdby": "infra-hooks",
        f"{tag_prefix}service": service_name,
        f"{tag_prefix}stage": stage,
    }

    if team := get_team():
        tags[f"{tag_prefix}team"] = team

    return tags


def get_resource_tags() -> list[dict]:
    """
    Generate the default tags in the ``Key``/``Value`` list form template resources expect

    :return: List of dicts of tags
    """
    return [{"Key": k, "Value": v} for k, v in get_tags().items()]
