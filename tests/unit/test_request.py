"""Tests for sfrest.request."""

import pytest

from sfrest.exceptions import NoSessionError
from sfrest.request import RequestOptions, build_request


class TestBuildRequest:
    def test_base_request(self, token):
        req = build_request(token, "get", "/services/data/v60.0/sobjects/")

        assert req.method == "GET"
        assert req.url == "https://example.my.salesforce.com/services/data/v60.0/sobjects/"
        assert req.headers == {"Authorization": "Bearer 00DFAKE-TOKEN"}
        assert req.params == {}
        assert req.parse == "json"
        assert req.json is None

    @pytest.mark.parametrize("missing", [None, ""])
    def test_missing_token_raises(self, missing):
        with pytest.raises(NoSessionError):
            build_request(missing, "GET", "/services/data/")

    def test_patch_is_tunnelled_through_post(self, token):
        req = build_request(token, "PATCH", "/x", RequestOptions(json={"Name": "Acme"}))

        assert req.method == "POST"
        assert req.params == {"_HttpMethod": "PATCH"}
        assert req.json == {"Name": "Acme"}

    def test_params_and_headers_merge_one_level(self, token):
        opts = RequestOptions(
            params={"q": "select Id from Account"},
            headers={"Sforce-Query-Options": "batchSize=200"},
        )
        req = build_request(token, "PATCH", "/x", opts)

        assert req.params == {"_HttpMethod": "PATCH", "q": "select Id from Account"}
        assert req.headers == {
            "Authorization": "Bearer 00DFAKE-TOKEN",
            "Sforce-Query-Options": "batchSize=200",
        }

    def test_option_values_win(self, token):
        opts = RequestOptions(headers={"Authorization": "OAuth other"}, params={"_HttpMethod": "PUT"})
        req = build_request(token, "PATCH", "/x", opts)

        assert req.headers["Authorization"] == "OAuth other"
        assert req.params["_HttpMethod"] == "PUT"

    def test_scalar_options_replace(self, token):
        req = build_request(token, "GET", "/x", RequestOptions(timeout=5.0, parse="text"))

        assert req.timeout == 5.0
        assert req.parse == "text"

    def test_unknown_parse_mode(self, token):
        with pytest.raises(ValueError):
            build_request(token, "GET", "/x", RequestOptions(parse="xml"))

    def test_token_is_not_mutated(self, token):
        before = (token.instance_url, token.access_token, token.api_version)
        build_request(token, "PATCH", "/x", RequestOptions(headers={"A": "b"}))
        assert (token.instance_url, token.access_token, token.api_version) == before
