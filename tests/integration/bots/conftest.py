from pathlib import Path

import pytest
import yaml

BOTS = [
    {
        "id": "editorial-bot",
        "display_name": "Editorial Bot",
        "description": "Assists with manuscript editorial workflows",
        "role": "Editorial Assistant",
    },
    {
        "id": "stats-helper",
        "display_name": "Stats Helper",
        "description": "Checks reported statistics",
        "role": "Statistics Reviewer",
    },
]


@pytest.fixture(scope="module")
def bots_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write one YAML file per bot once per module."""
    dir_path: Path = tmp_path_factory.mktemp("bots")
    for bot in BOTS:
        with open(dir_path / f"{bot['id']}.yaml", "w") as f:
            yaml.safe_dump(bot, f)
    (dir_path / "README.md").write_text("not a bot definition")
    return dir_path


@pytest.fixture
def invalid_bots_dir(tmp_path: Path) -> Path:
    with open(tmp_path / "broken.yaml", "w") as f:
        yaml.safe_dump({"id": "broken-bot", "display_name": "Broken"}, f)
    return tmp_path
