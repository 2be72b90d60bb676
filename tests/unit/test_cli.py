"""Unit tests for the command line interface."""

import argparse
import json

import pytest

from person_lookup_sdk import cli
from person_lookup_sdk.api.client import LookupClient
from tests.helpers.upstream_mocks import UpstreamStub, make_settings


class TestParseParams:
    def test_pairs(self):
        assert cli.parse_params(["phone=555 123 4567", "firstName=Jane"]) == {
            "phone": "555 123 4567",
            "firstName": "Jane",
        }

    def test_value_may_contain_equals(self):
        assert cli.parse_params(["sql=SELECT * FROM person WHERE a=1"]) == {"sql": "SELECT * FROM person WHERE a=1"}

    def test_rejects_bare_words(self):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_params(["phone"])


class TestMain:
    """Test the CLI against a stub upstream."""

    @pytest.fixture
    def upstream(self, monkeypatch):
        stub = UpstreamStub(json_body={"carrier": {"type": "mobile"}})
        monkeypatch.setattr(
            cli,
            "LookupClient",
            lambda: LookupClient(settings=make_settings(), http_client=stub.client()),
        )
        return stub

    def test_prints_envelope(self, upstream, capsys):
        exit_code = cli.main(["twilio", "phone=5551234567"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert payload == {"status": 200, "error": None, "data": {"carrier": {"type": "mobile"}}}
        assert upstream.last_request.url.params["Type"] == "carrier"

    def test_body_selects_twilio_action(self, upstream, capsys):
        cli.main(["twilio", "--body", '{"phone": "5551234567", "action": "caller_name"}'])

        assert upstream.last_request.url.params["Fields"] == "caller_name"

    def test_validation_failure_exit_code(self, upstream, capsys):
        exit_code = cli.main(["trestle", "--endpoint", "phone_intel", "phone=123"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert payload["error"]["type"] == "invalid_phone_length"
        assert not upstream.called

    def test_unknown_provider_rejected(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["whitepages", "phone=5551234567"])
