"""
Unit tests for Authorization header parsing.
"""

import pytest

from lancer.infrastructure.auth.dependencies import extract_bearer_token


class TestExtractBearerToken:

    @pytest.mark.parametrize("header, expected", [
        ("Bearer abc.def", "abc.def"),
        ("bearer abc.def", "abc.def"),
        ("BEARER   abc.def  ", "abc.def"),
        ("abc.def", "abc.def"),
        ("Bearer ", None),
        ("", None),
        (None, None),
    ])
    def test_extract(self, header, expected):
        assert extract_bearer_token(header) == expected
