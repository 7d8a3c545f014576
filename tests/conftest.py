import pytest

from infra_hooks.helpers.aws.sqs import SQSHelper, derive_names, derive_arns


@pytest.fixture
def helper():
    return SQSHelper()


@pytest.fixture
def orders_arns():
    return derive_arns(derive_names("Orders"), False)


@pytest.fixture
def orders_fifo_arns():
    return derive_arns(derive_names("Orders"), True)


@pytest.fixture
def git_root(tmp_path):
    """A directory marked as project root, config discovery never walks above it"""
    (tmp_path / ".git").mkdir()
    return tmp_path
