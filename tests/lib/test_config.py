import json

import pytest

from infra_hooks.helpers.aws.sqs.config import SQSHooksConfig
from infra_hooks.lib.config import (
    HierarchicalConfig,
    HooksConfigException,
    get_helper_config,
    get_raw_helper_config,
)
from infra_hooks.lib.errors import ConfigurationError


class TestHierarchicalConfig:
    def test_closest_file_wins(self, git_root):
        (git_root / "Hooks.common.yaml").write_text("team: payments\nservice_name: orders\n")
        service = git_root / "service"
        service.mkdir()
        (service / "Hooks.common.yaml").write_text("service_name: orders-api\n")

        config = HierarchicalConfig(start=service)

        assert config.get("service_name") == "orders-api"
        assert config.get("team") == "payments"

    def test_stops_at_project_root(self, tmp_path):
        (tmp_path / "Hooks.common.yaml").write_text("team: platform\n")
        project = tmp_path / "project"
        (project / ".git").mkdir(parents=True)

        config = HierarchicalConfig(start=project)

        assert config.get("team") is None

    def test_no_files(self, git_root):
        config = HierarchicalConfig(start=git_root)

        assert config.get("service_name", "fallback") == "fallback"

    def test_require(self, git_root):
        (git_root / "Hooks.common.yaml").write_text("team: payments\n")

        config = HierarchicalConfig(start=git_root)

        assert config.require("team") == "payments"
        with pytest.raises(HooksConfigException, match="stage"):
            config.require("stage")


class TestMapper:
    def test_camel_case_keys(self):
        config = get_helper_config(
            {"name": "Orders", "delayQueueProperties": {}, "mainQueueProperties": {"fifoQueue": True}},
            SQSHooksConfig,
        )

        assert config == SQSHooksConfig(
            name="Orders",
            delay_queue_properties={},
            main_queue_properties={"fifoQueue": True},
        )

    def test_unknown_keys_are_ignored(self):
        assert get_helper_config({"name": "Orders", "owner": "me"}, SQSHooksConfig) == SQSHooksConfig(name="Orders")

    @pytest.mark.parametrize("raw_config", [{}, {"name": 3}, {"name": "Orders", "consumerProperties": [1]}])
    def test_invalid_config(self, raw_config):
        with pytest.raises(ConfigurationError) as e:
            get_helper_config(raw_config, SQSHooksConfig)

        assert e.value.field == "SQSHooksConfig"

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "orders.yml"
        path.write_text("name: Orders\ndelayQueueProperties: {}\n")

        assert get_raw_helper_config(path) == {"name": "Orders", "delayQueueProperties": {}}

    def test_json_file(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text(json.dumps({"name": "Orders", "dlqConsumerProperties": {"useMainHandler": True}}))

        assert get_raw_helper_config(path) == {"name": "Orders", "dlqConsumerProperties": {"useMainHandler": True}}

    @pytest.mark.parametrize("content", ["- name: Orders\n", "just a string\n", "name: [Orders\n"])
    def test_file_must_hold_a_mapping(self, tmp_path, content):
        path = tmp_path / "orders.yml"
        path.write_text(content)

        with pytest.raises(ConfigurationError):
            get_raw_helper_config(path)
