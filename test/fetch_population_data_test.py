from contextlib import redirect_stderr
from io import StringIO
import unittest
from unittest.mock import Mock, patch

import requests

from ssb_api.constants import SSB_URL
from ssb_api.fetch_population_data import SsbFetchError, fetch_dataset, load_dataset


def _response(content: bytes, status_error=None):
    response = Mock()
    response.url = SSB_URL
    response.content = content
    if status_error:
        response.raise_for_status.side_effect = status_error
    return response


class FetchDatasetTests(unittest.TestCase):
    def test_returns_body_text(self):
        body = '"K-0301 Oslo - Oslove","2022","Persons",699827\n'.encode("utf-8")
        with patch("ssb_api.fetch_population_data.requests.get", return_value=_response(body)) as get:
            with redirect_stderr(StringIO()):
                text = fetch_dataset()
        get.assert_called_once_with(SSB_URL, timeout=None)
        self.assertEqual(text, body.decode("utf-8"))

    def test_invalid_bytes_become_replacement_characters(self):
        body = b'"K-1122 Gjesdal H\xf8yland","2022","Persons",12262'
        with patch("ssb_api.fetch_population_data.requests.get", return_value=_response(body)):
            with redirect_stderr(StringIO()):
                text = fetch_dataset()
        self.assertIn("H\ufffdyland", text)

    def test_http_error_raises_fetch_error(self):
        error = requests.HTTPError("503 Server Error")
        with patch(
            "ssb_api.fetch_population_data.requests.get",
            return_value=_response(b"", status_error=error),
        ):
            with redirect_stderr(StringIO()):
                with self.assertRaises(SsbFetchError) as ctx:
                    fetch_dataset()
        self.assertIs(ctx.exception.__cause__, error)

    def test_connection_error_raises_fetch_error(self):
        with patch(
            "ssb_api.fetch_population_data.requests.get",
            side_effect=requests.ConnectionError("unreachable"),
        ):
            with self.assertRaises(SsbFetchError):
                fetch_dataset()


class LoadDatasetTests(unittest.TestCase):
    def test_failure_returns_none(self):
        with patch(
            "ssb_api.fetch_population_data.requests.get",
            side_effect=requests.ConnectionError("unreachable"),
        ):
            stderr = StringIO()
            with redirect_stderr(stderr):
                self.assertIsNone(load_dataset())
        self.assertIn("Failed to fetch population dataset", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
