import runpy

from mock import patch

import imview
from imview import models


def test_public_api_is_exported():
    for name in imview.__all__:
        assert hasattr(imview, name), name


def test_models_public_api_is_exported():
    for name in models.__all__:
        assert hasattr(models, name), name


def test_version_metadata():
    assert imview.__version__ == "1.0"
    assert imview.__license__ == "MIT"


def test_python_m_runs_cli():
    with patch("imview.cli.run") as mock_run:
        runpy.run_module("imview", run_name="__main__")
    mock_run.assert_called_once_with()
