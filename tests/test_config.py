import logging
from pathlib import Path

import pytest

from autodraft.config import AppConfig
from autodraft.exceptions import InvalidConfigurationException
from autodraft.notifications import Notifier


def test_defaults_point_at_home_directory():
    config = AppConfig.from_env({})

    assert config.data_dir == Path.home() / ".autodraft"
    assert config.roster_file == Path.home() / ".autodraft" / "roster.json"
    assert config.log_level == "INFO"
    assert config.log_file is None
    assert config.seed is None


def test_values_from_environment(tmp_path):
    config = AppConfig.from_env(
        {
            "AUTODRAFT_DATA_DIR": str(tmp_path),
            "AUTODRAFT_LOG_LEVEL": "debug",
            "AUTODRAFT_LOG_FILE": str(tmp_path / "draft.log"),
            "AUTODRAFT_SEED": "99",
        }
    )

    assert config.roster_file == tmp_path / "roster.json"
    assert config.log_level == "DEBUG"
    assert config.log_file == tmp_path / "draft.log"
    assert config.seed == 99
    assert config.to_dict()["seed"] == 99


@pytest.mark.parametrize(
    "env",
    [{"AUTODRAFT_LOG_LEVEL": "chatty"}, {"AUTODRAFT_SEED": "abc"}],
)
def test_invalid_values_raise(env):
    with pytest.raises(InvalidConfigurationException):
        AppConfig.from_env(env)


def test_notices_are_logged_and_published(caplog):
    notifier = Notifier()
    received = []
    notifier.subscribe(received.append)

    with caplog.at_level(logging.INFO, logger="autodraft.notifications"):
        notifier.notify("elimination", "Ana has been eliminated!")
        notifier.notify("warning", "Ben is looking unhealthy with 8 poison...")

    assert [n.kind for n in received] == ["elimination", "warning"]
    levels = {r.getMessage(): r.levelno for r in caplog.records}
    assert levels["[elimination] Ana has been eliminated!"] == logging.INFO
    assert levels["[warning] Ben is looking unhealthy with 8 poison..."] == logging.WARNING

    notifier.unsubscribe(received.append)
    notifier.notify("champion", "Ana is the Champion!")
    assert len(received) == 2
    assert notifier.messages("champion") == ["Ana is the Champion!"]

    notifier.clear()
    assert notifier.messages() == []
