import json

from click.testing import CliRunner

from infra_hooks.lib.cli.cli import cli


def read_hooks(path):
    return json.loads(path.read_text())


def test_list():
    result = CliRunner().invoke(cli, ["list"])

    assert result.exit_code == 0
    assert "aws" in result.output
    assert "sqs" in result.output


def test_build_from_json(tmp_path):
    output = tmp_path / "hooks.json"

    result = CliRunner().invoke(cli, ["build", "sqs", "--json", '{"name": "Orders"}', "-o", str(output)])

    assert result.exit_code == 0
    hooks = read_hooks(output)
    assert [hook[0] for hook in hooks] == ["function", "resource", "resource"]
    assert hooks[1][1]["name"] == "OrdersQueue"


def test_build_from_file_with_permissions(tmp_path):
    config = tmp_path / "orders.yml"
    config.write_text("name: Orders\ndelayQueueProperties: {}\n")
    output = tmp_path / "hooks.json"

    result = CliRunner().invoke(
        cli, ["build", "sqs", "--file", str(config), "--with-permissions", "--output", str(output)]
    )

    assert result.exit_code == 0
    hooks = read_hooks(output)
    assert [hook[0] for hook in hooks] == ["iamStatement", "function", "resource", "function", "resource", "resource"]


def test_permissions(tmp_path):
    output = tmp_path / "permissions.json"

    result = CliRunner().invoke(cli, ["permissions", "sqs", "-o", str(output)])

    assert result.exit_code == 0
    [[kind, statement]] = read_hooks(output)
    assert kind == "iamStatement"
    assert "sqs:ReceiveMessage" in statement["action"]


def test_invalid_config_is_a_usage_error():
    result = CliRunner().invoke(cli, ["build", "sqs", "--json", '{"name": ""}'])

    assert result.exit_code == 2
    assert "Missing or empty name" in result.output


def test_unknown_helper_is_a_usage_error():
    result = CliRunner().invoke(cli, ["build", "sns", "--json", '{"name": "Orders"}'])

    assert result.exit_code == 2
    assert "sns" in result.output


def test_config_source_is_required():
    result = CliRunner().invoke(cli, ["build", "sqs"])

    assert result.exit_code == 2
