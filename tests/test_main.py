import json
from unittest.mock import patch

import main
from errors import FetchError
from models import TocEntry


@patch('main.setup_logging')
@patch('main.run_mirror')
def test_main_success(mock_run_mirror, mock_setup_logging):
    mock_run_mirror.return_value = [TocEntry("Foreword", "/foreword", 0)]

    assert main.main([]) == 0

    config = mock_run_mirror.call_args[0][0]
    assert config['toc_url'] == "https://redislabs.com/ebook/redis-in-action"
    mock_setup_logging.assert_called_once_with(config['log_file'], config['log_level'])


@patch('main.setup_logging')
@patch('main.run_mirror', side_effect=FetchError("https://redislabs.com/page5", "HTTP status 503"))
def test_main_mirror_error_exit_status(mock_run_mirror, mock_setup_logging, caplog):
    assert main.main([]) == 1
    assert "Mirror run aborted: Failed to fetch https://redislabs.com/page5" in caplog.text


@patch('main.setup_logging')
@patch('main.run_mirror')
def test_main_uses_config_file(mock_run_mirror, mock_setup_logging, tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"output_dir": str(tmp_path / "out"), "log_file": str(tmp_path / "run.log"), "log_level": "DEBUG"}))
    mock_run_mirror.return_value = []

    assert main.main([str(config_file)]) == 0

    assert mock_run_mirror.call_args[0][0]['output_dir'] == str(tmp_path / "out")
    mock_setup_logging.assert_called_once_with(str(tmp_path / "run.log"), "DEBUG")


@patch('main.run_mirror')
def test_main_bad_config(mock_run_mirror, tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.json")]) == 1
    assert "Invalid configuration" in capsys.readouterr().err
    mock_run_mirror.assert_not_called()
