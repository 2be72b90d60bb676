"""Unit tests for the Twilio Lookup provider."""

import base64

import pytest

from person_lookup_sdk.models.lookup import TwilioAction
from person_lookup_sdk.models.query import CanonicalQuery
from person_lookup_sdk.providers.twilio import TwilioProvider, decode_request_body
from tests.helpers.upstream_mocks import UpstreamStub, make_settings


def query(**params) -> CanonicalQuery:
    return CanonicalQuery.from_mapping(params)


class TestRequestBodyDecoding:
    """Test POST body decoding, including the pattern fallback."""

    def test_mapping_used_as_is(self):
        assert decode_request_body({"phone": "5551234567"}) == {"phone": "5551234567"}

    def test_json_text(self):
        assert decode_request_body('{"phone": "5551234567", "action": "caller_name"}') == {
            "phone": "5551234567",
            "action": "caller_name",
        }

    def test_json_bytes(self):
        assert decode_request_body(b'{"phone": "5551234567"}') == {"phone": "5551234567"}

    def test_double_encoded_json(self):
        assert decode_request_body('"{\\"phone\\": \\"5551234567\\"}"') == {"phone": "5551234567"}

    def test_pattern_fallback(self):
        raw = "{phone: +1 5551234567, \"action\": \"sms_pumping\""
        decoded = decode_request_body(raw)
        assert decoded["action"] == "sms_pumping"
        assert decoded["phone"] == "5551234567"

    def test_pattern_fallback_unquoted_action(self):
        decoded = decode_request_body("phone=+15551234567&action=caller_name")
        assert decoded == {"phone": "+15551234567", "action": "caller_name"}

    def test_pattern_fallback_single_quotes(self):
        decoded = decode_request_body("{'phone': '5551234567', 'action': 'identity'}")
        assert decoded["phone"] == "5551234567"

    def test_unusable_body(self):
        assert decode_request_body("not json at all") == {}
        assert decode_request_body(b"") == {}
        assert decode_request_body(None) == {}
        assert decode_request_body("[1, 2]") == {}


class TestTwilioRequests:
    """Test outbound request encoding."""

    @pytest.fixture
    def provider(self, settings, offline_invoker):
        return TwilioProvider(settings, offline_invoker)

    def test_carrier_target(self, provider):
        request = provider.normalize_request(query(phone="(555) 123-4567"), TwilioAction.CARRIER)
        assert request.method == "GET"
        assert request.target == "https://lookups.twilio.com/v1/PhoneNumbers/+15551234567?Type=carrier"

    def test_identity_target(self, provider):
        request = provider.normalize_request(
            query(phone="5551234567", given_name="Jane", family_name="Doe", city="Austin", postal_code="78701"),
            TwilioAction.IDENTITY,
        )
        assert request.url == "https://lookups.twilio.com/v2/PhoneNumbers/+15551234567"
        assert request.params == {
            "Fields": "identity_match",
            "FirstName": "Jane",
            "LastName": "Doe",
            "City": "Austin",
            "PostalCode": "78701",
        }

    def test_caller_name_and_sms_pumping_fields(self, provider):
        caller = provider.normalize_request(query(phone="5551234567", given_name="Jane"), TwilioAction.CALLER_NAME)
        pumping = provider.normalize_request(query(phone="5551234567"), TwilioAction.SMS_PUMPING)
        assert caller.params == {"Fields": "caller_name"}
        assert pumping.params == {"Fields": "sms_pumping_risk"}

    def test_basic_auth_kept_out_of_headers(self, provider):
        request = provider.normalize_request(query(phone="5551234567"), TwilioAction.CARRIER)
        assert request.auth == ("ACtest", "test-token")
        assert "Authorization" not in request.redacted_headers()
        assert "test-token" not in repr(request)


class TestTwilioLookup:
    """Test the full pipeline against a stub upstream."""

    @pytest.mark.asyncio
    async def test_carrier_success(self, settings):
        body = {"phone_number": "+15551234567", "carrier": {"type": "mobile"}}
        stub = UpstreamStub(json_body=body)
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="5551234567"), "carrier")

        assert result.status == 200
        assert result.data == body
        assert stub.last_request.url.path == "/v1/PhoneNumbers/+15551234567"
        assert stub.last_request.url.params["Type"] == "carrier"

    @pytest.mark.asyncio
    async def test_default_action_is_identity(self, settings):
        stub = UpstreamStub(json_body={"identity_match": {}})
        provider = TwilioProvider(settings, stub.invoker())

        await provider.lookup(query(phone="5551234567"))

        assert stub.last_request.url.params["Fields"] == "identity_match"

    @pytest.mark.asyncio
    async def test_invalid_action(self, settings):
        stub = UpstreamStub()
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="5551234567"), "line_type")

        assert result.status == 400
        assert result.error.type == "invalid_action"
        assert result.error.message.startswith("Invalid action")
        assert not stub.called

    @pytest.mark.asyncio
    async def test_carrier_checks_phone_before_credentials(self):
        stub = UpstreamStub()
        provider = TwilioProvider(make_settings(twilio_token=None), stub.invoker())

        result = await provider.lookup(query(), "carrier")

        assert result.status == 400
        assert result.error.type == "missing_phone"
        assert not stub.called

    @pytest.mark.asyncio
    async def test_carrier_missing_credentials(self):
        stub = UpstreamStub()
        provider = TwilioProvider(make_settings(twilio_token=None), stub.invoker())

        result = await provider.lookup(query(phone="5551234567"), "carrier")

        assert result.status == 400
        assert result.error.type == "missing_credentials"
        assert result.error.message == "Twilio credentials not configured on server. Set TWILIO_SID and TWILIO_TOKEN."
        assert not stub.called

    @pytest.mark.asyncio
    async def test_identity_checks_credentials_before_phone(self):
        stub = UpstreamStub()
        provider = TwilioProvider(make_settings(twilio_sid=None), stub.invoker())

        result = await provider.lookup(query(), "identity")

        assert result.status == 400
        assert result.error.type == "missing_credentials"

    @pytest.mark.asyncio
    async def test_basic_auth_sent_upstream(self, settings):
        stub = UpstreamStub(json_body={"phone_number": "+15551234567"})
        provider = TwilioProvider(settings, stub.invoker())

        await provider.lookup(query(phone="5551234567"), "carrier")

        expected = base64.b64encode(b"ACtest:test-token").decode("ascii")
        assert stub.last_request.headers["Authorization"] == f"Basic {expected}"

    @pytest.mark.asyncio
    async def test_missing_phone(self, settings):
        stub = UpstreamStub()
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(), "identity")

        assert result.status == 400
        assert result.error.type == "missing_phone"
        assert not stub.called

    @pytest.mark.asyncio
    async def test_not_found(self, settings):
        stub = UpstreamStub(status_code=404, json_body={"code": 20404, "message": "The requested resource was not found", "status": 404})
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="5551234567"), "carrier")

        assert result.status == 200
        assert result.error.type == "not_found"
        assert result.error.message == "The requested resource was not found"
        assert result.error.status == 404

    @pytest.mark.asyncio
    async def test_upstream_error(self, settings):
        stub = UpstreamStub(status_code=401, json_body={"code": 20003, "message": "Authenticate"})
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="5551234567"), "caller_name")

        assert result.status == 200
        assert result.error.type == "upstream_error"
        assert result.error.status == 401

    @pytest.mark.asyncio
    async def test_non_json_passthrough(self, settings):
        stub = UpstreamStub(status_code=503, text="Service Unavailable")
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="5551234567"), "carrier")

        assert result.status == 503
        assert result.error.type == "upstream_non_json"
        assert result.error.message == "Service Unavailable"
        assert result.error.status == 503

    @pytest.mark.asyncio
    async def test_non_json_debug_passthrough(self, settings):
        stub = UpstreamStub(status_code=502, text="<html>bad gateway</html>")
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="5551234567", _debug="1"), "identity")

        assert result.status == 502
        assert result.error is None
        assert result.data == {"__debug_raw": "<html>bad gateway</html>", "__debug_status": 502}

    @pytest.mark.asyncio
    async def test_empty_body_is_empty_success(self, settings):
        stub = UpstreamStub(text="")
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="5551234567"), "sms_pumping")

        assert result.status == 200
        assert result.data == {}

    @pytest.mark.asyncio
    async def test_null_body_is_empty_success(self, settings):
        stub = UpstreamStub(text="null")
        provider = TwilioProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="5551234567"), "carrier")

        assert result.status == 200
        assert result.error is None
        assert result.data == {}
