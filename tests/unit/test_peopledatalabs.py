"""Unit tests for the PeopleDataLabs provider."""

import json

import pytest

from person_lookup_sdk.models.lookup import PeopleDataLabsEndpoint
from person_lookup_sdk.models.query import CanonicalQuery
from person_lookup_sdk.providers.peopledatalabs import PeopleDataLabsProvider
from person_lookup_sdk.providers.peopledatalabs.payloads import (
    build_identifier_params,
    build_search_params,
    search_size,
    synthesize_search_query,
)
from tests.helpers.upstream_mocks import UpstreamStub


def query(**params) -> CanonicalQuery:
    return CanonicalQuery.from_mapping(params)


class TestPeopleDataLabsPayloads:
    """Test query string encoding."""

    def test_phone_defaults_to_e164(self):
        assert build_identifier_params(query(phone="(555) 123-4567")) == {"phone": "+15551234567"}

    def test_national_phone_format(self):
        params = build_identifier_params(query(phone="+1 555 123 4567", phoneFormat="national"))
        assert params == {"phone": "5551234567"}

    def test_uninterpretable_phone_dropped(self):
        assert build_identifier_params(query(phone="12345", email="jane@example.com")) == {
            "email": "jane@example.com"
        }

    def test_identifier_names(self):
        params = build_identifier_params(query(profile="linkedin.com/in/jdoe", company="Acme", lid="123"))
        assert params == {"profile": "linkedin.com/in/jdoe", "company": "Acme", "lid": "123"}

    def test_synthesized_search_query(self):
        dsl = synthesize_search_query(query(phone="5551234567", email="Jane@Example.com", firstName="Jane", name="Jane Doe"))
        assert dsl == {
            "bool": {
                "must": [
                    {"term": {"phone_numbers": "+15551234567"}},
                    {"term": {"emails.address": "jane@example.com"}},
                    {"match": {"first_name": "jane"}},
                    {"match": {"full_name": "jane doe"}},
                ]
            }
        }

    def test_no_search_criteria(self):
        assert synthesize_search_query(query(company="Acme")) is None
        assert build_search_params(query()) == {"size": "1", "pretty": "true"}

    @pytest.mark.parametrize("size,expected", [(None, 1), ("3", 3), ("50", 10), ("0", 1), ("abc", 1)])
    def test_search_size(self, size, expected):
        params = {"size": size} if size is not None else {}
        assert search_size(query(**params)) == expected

    def test_explicit_query_mapping_is_serialized(self):
        dsl = {"term": {"job_company_name": "acme"}}
        params = build_search_params(query(query=dsl, firstName="Jane"))
        assert json.loads(params["query"]) == dsl

    def test_explicit_query_string_passed_as_is(self):
        params = build_search_params(query(query='{"match_all": {}}'))
        assert params["query"] == '{"match_all": {}}'

    def test_sql(self):
        params = build_search_params(query(sql="SELECT * FROM person WHERE location_country='mexico'"))
        assert params["sql"].startswith("SELECT")
        assert "query" not in params


class TestPeopleDataLabsLookup:
    """Test the full pipeline against a stub upstream."""

    @pytest.mark.asyncio
    async def test_enrich_success(self, settings):
        body = {"status": 200, "likelihood": 9, "data": {"full_name": "jane doe"}}
        stub = UpstreamStub(json_body=body)
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="555-123-4567", email="jane@example.com"))

        assert result.status == 200
        assert result.data == body
        request = stub.last_request
        assert request.url.path == "/v5/person/enrich"
        assert request.url.params["phone"] == "+15551234567"
        assert request.url.params["email"] == "jane@example.com"
        assert request.url.params["pretty"] == "true"
        assert request.headers["X-Api-Key"] == "test-pdl-key"

    @pytest.mark.asyncio
    async def test_identify_endpoint(self, settings):
        stub = UpstreamStub(json_body={"status": 200, "matches": []})
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(name="Jane Doe", location="Austin"), "identify")

        assert result.status == 200
        assert stub.last_request.url.path == "/v5/person/identify"

    @pytest.mark.asyncio
    async def test_search_request(self, settings):
        stub = UpstreamStub(json_body={"status": 200, "data": [], "total": 0})
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        await provider.lookup(query(email="jane@example.com", size="25"), PeopleDataLabsEndpoint.SEARCH)

        params = stub.last_request.url.params
        assert stub.last_request.url.path == "/v5/person/search"
        assert params["size"] == "10"
        assert json.loads(params["query"]) == {"bool": {"must": [{"term": {"emails.address": "jane@example.com"}}]}}

    @pytest.mark.asyncio
    async def test_search_without_criteria_is_forwarded(self, settings):
        stub = UpstreamStub(status_code=400, json_body={"error": {"type": "invalid_request_error", "message": "query or sql required"}})
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(), "search")

        assert stub.called
        assert result.status == 200
        assert result.error.type == "upstream_error"
        assert result.error.message == "query or sql required"
        assert result.error.status == 400

    @pytest.mark.asyncio
    async def test_missing_identifiers(self, settings):
        stub = UpstreamStub()
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(phone="123"))

        assert result.status == 400
        assert result.error.type == "missing_criteria"
        assert not stub.called

    @pytest.mark.asyncio
    async def test_missing_api_key(self, empty_settings):
        stub = UpstreamStub()
        provider = PeopleDataLabsProvider(empty_settings, stub.invoker())

        result = await provider.lookup(query(email="jane@example.com"))

        assert result.status == 400
        assert result.error.type == "missing_credentials"
        assert "PEOPLEDATALABS_API_KEY" in result.error.message
        assert not stub.called

    @pytest.mark.asyncio
    async def test_not_found(self, settings):
        stub = UpstreamStub(status_code=404, json_body={
            "status": 404,
            "error": {"type": "not_found", "message": "No records were found matching your request"},
        })
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(email="nobody@example.com"))

        assert result.to_payload() == {
            "status": 200,
            "error": {
                "type": "not_found",
                "message": "No records were found matching your request",
                "status": 404,
            },
            "data": None,
        }

    @pytest.mark.asyncio
    async def test_payment_required(self, settings):
        stub = UpstreamStub(status_code=402, json_body={"error": {"message": "You have hit your account maximum"}})
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(email="jane@example.com"))

        assert result.status == 200
        assert result.error.type == "payment_required"
        assert result.error.message == "You have hit your account maximum"
        assert result.error.status == 402
        assert result.data is None

    @pytest.mark.asyncio
    async def test_upstream_error_passthrough(self, settings):
        stub = UpstreamStub(status_code=401, json_body={"error": {"type": "authentication_error", "message": "Invalid API key"}})
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(email="jane@example.com"))

        assert result.status == 200
        assert result.error.type == "upstream_error"
        assert result.error.status == 401

    @pytest.mark.asyncio
    async def test_non_json_body(self, settings):
        stub = UpstreamStub(status_code=502, text="Bad Gateway")
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(email="jane@example.com"))

        assert result.status == 500
        assert result.error.type == "upstream_non_json"
        assert result.error.status == 502
        assert result.error.response_preview == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_null_body_is_empty_success(self, settings):
        stub = UpstreamStub(text="null")
        provider = PeopleDataLabsProvider(settings, stub.invoker())

        result = await provider.lookup(query(email="jane@example.com"))

        assert result.status == 200
        assert result.error is None
        assert result.data == {}
