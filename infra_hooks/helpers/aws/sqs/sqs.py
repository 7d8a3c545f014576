import json
from dataclasses import fields, replace
from typing import Any, Mapping, Optional, Type, TypeVar

from pulumi import log

from infra_hooks.lib.aws.base import AWSHelper
from infra_hooks.lib.config import base_url, consumer_path, get_helper_config, service_name
from infra_hooks.lib.errors import ConfigurationError
from infra_hooks.lib.iam import generate_sqs_statement
from infra_hooks.lib.tags import get_resource_tags
from infra_hooks.lib.types import Descriptor, DescriptorKind, HooksType
from infra_hooks.lib.utils import camel_from_snake
from . import defaults
from .arns import derive_arns
from .config import (
    BuildContext,
    ConsumerProperties,
    QueueProperties,
    QueueRole,
    SQSHooksConfig,
)
from .names import apply_fifo_suffix, derive_names

PropertiesType = TypeVar("PropertiesType", ConsumerProperties, QueueProperties)

# keys spread into the emitted descriptors, they must hold mappings
_nested_bags = ("rawProperties", "functionProperties", "eventProperties")

# config key -> entity name used in error messages
_property_bags = {
    "consumerProperties": "Main Consumer",
    "mainQueueProperties": "Main Queue",
    "delayConsumerProperties": "Delay Consumer",
    "delayQueueProperties": "Delay Queue",
    "dlqConsumerProperties": "DLQ Consumer",
    "dlqQueueProperties": "DLQ Queue",
}

# role -> (function name suffix, handler filename suffix)
_consumer_suffixes = {
    QueueRole.MAIN: ("", ""),
    QueueRole.DELAY: ("Delay", "-delay"),
    QueueRole.DLQ: ("DLQ", "-dlq"),
}

_env_var_suffixes = {
    QueueRole.MAIN: "SQS_QUEUE_URL",
    QueueRole.DLQ: "DLQ_QUEUE_URL",
    QueueRole.DELAY: "DELAY_QUEUE_URL",
}


def merge_properties(role_defaults: Mapping[str, Any], user_properties: Optional[Mapping[str, Any]]) -> dict:
    """Shallow merge user properties over the role defaults, field by field

    :param role_defaults: Defaults of the role
    :param user_properties: What the user configured, None if nothing
    :return: The merged properties
    """
    return {**role_defaults, **(user_properties or {})}


def to_properties(properties_cls: Type[PropertiesType], properties: dict) -> PropertiesType:
    """Map a merged property bag onto its typed record

    Keys the record does not know are kept in ``extra_properties``.

    :param properties_cls: ConsumerProperties or QueueProperties
    :param properties: The merged property bag, camelCase keys
    :return: The typed record
    """
    known_keys = {camel_from_snake(f.name) for f in fields(properties_cls)}
    known_keys.discard("extraProperties")

    for key in _nested_bags:
        value = properties.get(key)

        if key in known_keys and value is not None and not isinstance(value, Mapping):
            raise ConfigurationError(key, f"{key} must be an Object with configuration in SQS helper")

    record = get_helper_config(
        {k: v for k, v in properties.items() if k in known_keys},
        properties_cls,
        check_types=False,
    )

    return replace(record, extra_properties={k: v for k, v in properties.items() if k not in known_keys})


def should_add_consumer(properties: Optional[Mapping[str, Any]]) -> bool:
    """Whether a role gets a dedicated consumer function

    :param properties: Consumer properties of the role
    :return: True unless the properties are empty or the role uses the main handler
    """
    return bool(properties) and not properties.get("useMainHandler")


class SQSHelper(AWSHelper):
    """
    Derives a queue family (main queue, optional delay queue, dead-letter queue) and their consumer functions.

    Hooks are emitted in this order, dependencies first within each pair:
        - environment variables, only if any queue asks for them
        - main consumer, main queue
        - delay consumer (unless handled by the main consumer), delay queue, if a delay queue is configured
        - dead-letter queue
        - dead-letter consumer, if configured

    A single instance can be reused, every build works on its own ``BuildContext``.
    """

    @classmethod
    def permissions(cls) -> HooksType:
        return [generate_sqs_statement()]

    def validate(self, raw_config: dict) -> None:
        if not isinstance(raw_config, Mapping):
            raise ConfigurationError("config", "SQS helper configuration must be an Object")

        name = raw_config.get("name")

        if not isinstance(name, str) or not name:
            raise ConfigurationError("name", "Missing or empty name hook configuration in SQS helper")

        for key, entity in _property_bags.items():
            properties = raw_config.get(key)

            if properties is not None and not isinstance(properties, Mapping):
                raise ConfigurationError(key, f"{entity} Properties must be an Object with configuration in SQS helper")

    def build(self, config: SQSHooksConfig) -> HooksType:
        context = self.create_context(config)

        log.debug(
            f"building queue family `{context.names.title_name}` "
            f"(fifo: {context.fifo_queue}, delay queue: {context.use_delay_queue})"
        )

        hooks = []

        if env_vars := self._build_env_vars(context):
            hooks.append(env_vars)

        hooks.append(self._build_consumer_function(context, QueueRole.MAIN))
        hooks.append(self._build_queue_resource(context, QueueRole.MAIN))

        if context.use_delay_queue:
            if context.add_delay_consumer:
                hooks.append(self._build_consumer_function(context, QueueRole.DELAY))

            hooks.append(self._build_queue_resource(context, QueueRole.DELAY))

        hooks.append(self._build_queue_resource(context, QueueRole.DLQ))

        if context.add_dlq_consumer:
            hooks.append(self._build_consumer_function(context, QueueRole.DLQ))

        return hooks

    @staticmethod
    def create_context(config: SQSHooksConfig) -> BuildContext:
        """Resolve defaults, mode flags, names and ARNs of a build

        :param config: The validated hook config
        :return: The context every descriptor is built from
        """
        delay_consumer = merge_properties(defaults.delay_consumer_defaults, config.delay_consumer_properties)
        fifo_queue = bool((config.main_queue_properties or {}).get("fifoQueue"))
        names = derive_names(config.name)

        return BuildContext(
            names=names,
            arns=derive_arns(names, fifo_queue),
            consumer=to_properties(
                ConsumerProperties, merge_properties(defaults.consumer_defaults, config.consumer_properties)
            ),
            main_queue=to_properties(
                QueueProperties, merge_properties(defaults.main_queue_defaults, config.main_queue_properties)
            ),
            delay_consumer=to_properties(ConsumerProperties, delay_consumer),
            delay_queue=to_properties(
                QueueProperties, merge_properties(defaults.delay_queue_defaults, config.delay_queue_properties)
            ),
            dlq_consumer=to_properties(
                ConsumerProperties, merge_properties(defaults.dlq_consumer_defaults, config.dlq_consumer_properties)
            ),
            dlq=to_properties(
                QueueProperties, merge_properties(defaults.dlq_queue_defaults, config.dlq_queue_properties)
            ),
            fifo_queue=fifo_queue,
            # presence is enough, an empty dict means a delay queue with defaults
            use_delay_queue=config.delay_queue_properties is not None,
            add_delay_consumer=should_add_consumer(delay_consumer),
            # the DLQ consumer is opt-in, its defaults alone never create it
            add_dlq_consumer=should_add_consumer(config.dlq_consumer_properties),
        )

    def _build_env_vars(self, context: BuildContext) -> Optional[Descriptor]:
        env_vars = {}

        for role, suffix in _env_var_suffixes.items():
            if context.queue_properties(role).generate_env_vars:
                queue_name = apply_fifo_suffix(context.queue_name(role), context.fifo_queue)
                env_vars[f"{context.names.env_var_name}_{suffix}"] = f"{base_url}{service_name}{queue_name}"

        if not env_vars:
            return None

        return Descriptor(DescriptorKind.ENV_VARS, env_vars)

    def _build_consumer_function(self, context: BuildContext, role: QueueRole) -> Descriptor:
        properties = {
            QueueRole.MAIN: context.consumer,
            QueueRole.DELAY: context.delay_consumer,
            QueueRole.DLQ: context.dlq_consumer,
        }[role]

        name_suffix, file_suffix = _consumer_suffixes[role]
        function_name = f"{context.names.title_name}{name_suffix}"
        filename = f"{context.names.filename}{file_suffix}"

        if properties.prefix_path:
            filename = f"{properties.prefix_path}/{filename}"

        events = [self._create_event_source(context.queue_arn(role), properties)]

        if role is QueueRole.MAIN:
            if context.use_delay_queue and context.delay_consumer.use_main_handler:
                events.append(self._create_event_source(context.arns.delay_queue, context.delay_consumer))

            if context.dlq_consumer.use_main_handler:
                events.append(self._create_event_source(context.arns.dlq, context.dlq_consumer))

        log.debug(f"consumer `{function_name}QueueConsumer` listens to {len(events)} queues")

        return Descriptor(
            DescriptorKind.FUNCTION,
            {
                "functionName": f"{function_name}QueueConsumer",
                "handler": properties.handler or f"{consumer_path}/{filename}-consumer.handler",
                "description": properties.description or f"{function_name} SQS Queue Consumer",
                "timeout": properties.timeout,
                "rawProperties": {
                    # the queue must be declared before the function listening to it
                    "dependsOn": [context.queue_name(role)],
                    **(properties.raw_properties or {}),
                },
                "events": events,
                **properties.extra_properties,
                **(properties.function_properties or {}),
            },
        )

    @staticmethod
    def _create_event_source(arn: str, properties: ConsumerProperties) -> dict:
        sqs = {
            "arn": arn,
            "functionResponseType": "ReportBatchItemFailures",
        }

        if properties.batch_size:
            sqs["batchSize"] = properties.batch_size

        if properties.maximum_batching_window:
            sqs["maximumBatchingWindow"] = properties.maximum_batching_window

        return {"sqs": {**sqs, **(properties.event_properties or {})}}

    def _build_queue_resource(self, context: BuildContext, role: QueueRole) -> Descriptor:
        properties = context.queue_properties(role)
        name = context.queue_name(role)

        if role is QueueRole.MAIN:
            target = QueueRole.DELAY if context.use_delay_queue else QueueRole.DLQ
        elif role is QueueRole.DELAY:
            target = QueueRole.DLQ
        else:
            target = None

        queue = {"QueueName": f"{service_name}{apply_fifo_suffix(name, context.fifo_queue)}"}

        if properties.receive_message_wait_time_seconds is not None:
            queue["ReceiveMessageWaitTimeSeconds"] = properties.receive_message_wait_time_seconds

        if properties.visibility_timeout is not None:
            queue["VisibilityTimeout"] = properties.visibility_timeout

        if target:
            # AWS expects the policy as a JSON string
            queue["RedrivePolicy"] = json.dumps(
                {
                    "maxReceiveCount": properties.max_receive_count,
                    "deadLetterTargetArn": context.queue_arn(target),
                },
                separators=(",", ":"),
            )

        if properties.message_retention_period:
            queue["MessageRetentionPeriod"] = properties.message_retention_period

        if properties.delay_seconds:
            queue["DelaySeconds"] = properties.delay_seconds

        if context.fifo_queue:
            queue["FifoQueue"] = True

            if properties.fifo_throughput_limit:
                queue["FifoThroughputLimit"] = properties.fifo_throughput_limit

            if properties.deduplication_scope:
                queue["DeduplicationScope"] = properties.deduplication_scope

            if properties.content_based_deduplication:
                queue["ContentBasedDeduplication"] = True

        tags = [
            *get_resource_tags(),
            {"Key": "SQSConstruct", "Value": context.names.title_name},
        ]

        if role is QueueRole.DLQ:
            tags.append({"Key": "IsDLQ", "Value": "true"})
        elif role is QueueRole.DELAY:
            tags.append({"Key": "DelayQueue", "Value": "true"})

        queue["Tags"] = [*tags, *(properties.add_tags or [])]

        resource = {
            "Type": "AWS::SQS::Queue",
            "Properties": {**queue, **properties.extra_properties},
        }

        if target:
            resource["DependsOn"] = [context.queue_name(target)]

        return Descriptor(DescriptorKind.RESOURCE, {"name": name, "resource": resource})


def build_hooks(raw_config: dict) -> HooksType:
    """Build the hooks of a queue family

    :param raw_config: The hook config as written by the user
    :return: An ordered list of descriptors
    """
    return SQSHelper().run(raw_config)


def sqs_permissions() -> Descriptor:
    return generate_sqs_statement()
