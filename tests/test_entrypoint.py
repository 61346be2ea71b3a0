"""
Tests for the process entry point.
"""
from unittest.mock import patch

from calcapp import __main__ as entrypoint
from calcapp.config import HOST, PORT
from calcapp.main import app


class TestMain:
    """Tests for main()."""

    def test_runs_app_with_configured_address(self):
        with patch("calcapp.__main__.uvicorn.run") as mock_run:
            result = entrypoint.main()

        mock_run.assert_called_once_with(app, host=HOST, port=PORT)
        assert result is None
