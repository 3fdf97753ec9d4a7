import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolate_user_config():
    """Point the user-level configuration directory at an empty temp dir.

    Tests must not pick up a real ``~/.commitwizard/config.json`` from the
    machine running them.
    """
    with tempfile.TemporaryDirectory(prefix="commitwizard_home_") as tmp:
        with patch("commitwizard.config.loader._get_config_directory", return_value=Path(tmp)):
            yield Path(tmp)
