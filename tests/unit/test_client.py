"""Tests for the generic request dispatcher and custom field subsystem."""

import httpx
import pytest
from httpx import Response

from phpipam_sdk.api.client import Client
from phpipam_sdk.api.response_models import APIResponse, CustomField
from phpipam_sdk.api.session import Session
from phpipam_sdk.controllers.subnets import SubnetsController
from phpipam_sdk.observability.logger import _log_context
from phpipam_sdk.utils.exceptions import (
    AuthenticationError,
    PHPIPAMAPIError,
    ResourceNotFoundError,
)

SCHEMA = {
    "asset_tag": {
        "name": "asset_tag",
        "type": "varchar(64)",
        "Comment": "Inventory tag",
        "Null": "YES",
        "Default": None,
    },
    "notes": {"name": "notes", "type": "text", "Comment": "", "Null": "YES", "Default": None},
}


@pytest.fixture
def client(session):
    return Client(session)


class TestSendRequest:
    """Test request dispatching."""

    def test_sends_token_header_and_returns_envelope(self, client, respx_mock, make_envelope):
        route = respx_mock.get("/sections/").mock(
            return_value=Response(200, json=make_envelope(data=[{"id": "1"}]))
        )

        envelope = client.send_request("GET", "/sections/")

        assert envelope.success is True
        assert envelope.data == [{"id": "1"}]
        assert route.calls.last.request.headers["token"] == "test-token"

    def test_get_sends_no_body(self, client, respx_mock, make_envelope):
        route = respx_mock.get("/sections/").mock(
            return_value=Response(200, json=make_envelope(data=[]))
        )

        client.send_request("GET", "/sections/")

        assert route.calls.last.request.content == b""

    def test_payload_sent_as_json(self, client, respx_mock, make_envelope, sent_json):
        route = respx_mock.post("/sections/").mock(
            return_value=Response(201, json=make_envelope(message="Section created", code=201))
        )

        envelope = client.send_request("POST", "/sections/", payload={"name": "Lab"})

        assert sent_json(route) == {"name": "Lab"}
        assert envelope.message == "Section created"

    def test_query_params(self, client, respx_mock, make_envelope):
        route = respx_mock.get("/l2domains/").mock(
            return_value=Response(200, json=make_envelope(data=[]))
        )

        client.send_request("GET", "/l2domains/", params={"filter_by": "name", "filter_value": "dc"})

        params = route.calls.last.request.url.params
        assert params["filter_by"] == "name"
        assert params["filter_value"] == "dc"

    def test_authenticates_lazily(self, phpipam_config, respx_mock, make_envelope):
        sess = Session(phpipam_config)
        login = respx_mock.post("/user/").mock(
            return_value=Response(200, json=make_envelope(data={"token": "fresh"}))
        )
        route = respx_mock.get("/sections/").mock(
            return_value=Response(200, json=make_envelope(data=[]))
        )

        Client(sess).send_request("GET", "/sections/")

        assert login.call_count == 1
        assert route.calls.last.request.headers["token"] == "fresh"
        sess.close()

    def test_no_content_response(self, client, respx_mock):
        respx_mock.delete("/sections/3/").mock(return_value=Response(204))

        envelope = client.send_request("DELETE", "/sections/3/")

        assert envelope.code == 204
        assert envelope.data is None


class TestErrorMapping:
    """Test mapping of failures onto SDK exceptions."""

    def test_not_found(self, client, respx_mock):
        respx_mock.get("/subnets/99/").mock(
            return_value=Response(
                404, json={"code": 404, "success": False, "message": "No subnets found"}
            )
        )

        with pytest.raises(ResourceNotFoundError) as exc_info:
            client.send_request("GET", "/subnets/99/")

        assert exc_info.value.status_code == 404
        assert "No subnets found" in str(exc_info.value)
        assert exc_info.value.path == "/subnets/99/"

    def test_unauthorized(self, client, respx_mock):
        respx_mock.get("/sections/").mock(
            return_value=Response(
                401, json={"code": 401, "success": False, "message": "Token expired"}
            )
        )

        with pytest.raises(AuthenticationError, match="Token expired"):
            client.send_request("GET", "/sections/")

    def test_server_error_uses_envelope_message(self, client, respx_mock):
        respx_mock.post("/subnets/").mock(
            return_value=Response(
                409, json={"code": 409, "success": False, "message": "Subnet overlaps"}
            )
        )

        with pytest.raises(PHPIPAMAPIError) as exc_info:
            client.send_request("POST", "/subnets/", payload={"subnet": "10.0.0.0"})

        assert exc_info.value.status_code == 409
        assert str(exc_info.value) == "API Error 409: Subnet overlaps"

    def test_server_error_with_text_body(self, client, respx_mock):
        respx_mock.get("/sections/").mock(return_value=Response(502, text="Bad Gateway"))

        with pytest.raises(PHPIPAMAPIError, match="API Error 502: Bad Gateway"):
            client.send_request("GET", "/sections/")

    def test_unsuccessful_envelope_with_ok_status(self, client, respx_mock):
        respx_mock.patch("/vlans/").mock(
            return_value=Response(
                200, json={"code": 500, "success": False, "message": "Invalid VLAN number"}
            )
        )

        with pytest.raises(PHPIPAMAPIError) as exc_info:
            client.send_request("PATCH", "/vlans/", payload={"id": 1})

        assert exc_info.value.status_code == 500

    def test_malformed_json(self, client, respx_mock):
        respx_mock.get("/sections/").mock(return_value=Response(200, text="<html>oops</html>"))

        with pytest.raises(PHPIPAMAPIError, match="Malformed response"):
            client.send_request("GET", "/sections/")

    def test_transport_error_is_wrapped(self, client, respx_mock):
        respx_mock.get("/sections/").mock(side_effect=httpx.ConnectTimeout)

        with pytest.raises(PHPIPAMAPIError, match="HTTP request failed") as exc_info:
            client.send_request("GET", "/sections/")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)

    def test_no_retry_on_failure(self, client, respx_mock):
        route = respx_mock.get("/sections/").mock(return_value=Response(503, text="busy"))

        with pytest.raises(PHPIPAMAPIError):
            client.send_request("GET", "/sections/")

        assert route.call_count == 1


class TestCustomFields:
    """Test the generic custom field subsystem."""

    def test_get_schema(self, client, respx_mock, make_envelope):
        respx_mock.get("/subnets/custom_fields/").mock(
            return_value=Response(200, json=make_envelope(data=SCHEMA))
        )

        schema = client.get_custom_fields_schema("subnets")

        assert set(schema) == {"asset_tag", "notes"}
        assert isinstance(schema["asset_tag"], CustomField)
        assert schema["asset_tag"].type == "varchar(64)"
        assert schema["asset_tag"].comment == "Inventory tag"
        assert schema["asset_tag"].null == "YES"

    def test_malformed_schema_descriptor(self, client, respx_mock, make_envelope):
        respx_mock.get("/subnets/custom_fields/").mock(
            return_value=Response(200, json=make_envelope(data={"asset_tag": "varchar(64)"}))
        )

        with pytest.raises(PHPIPAMAPIError, match="Malformed custom field schema for subnets"):
            client.get_custom_fields_schema("subnets")

    def test_empty_schema(self, client, respx_mock, make_envelope):
        respx_mock.get("/vlans/custom_fields/").mock(
            return_value=Response(200, json=make_envelope(message="No custom fields defined"))
        )

        assert client.get_custom_fields_schema("vlans") == {}

    def test_get_custom_fields_filters_to_schema(self, client, respx_mock, make_envelope):
        respx_mock.get("/addresses/custom_fields/").mock(
            return_value=Response(200, json=make_envelope(data=SCHEMA))
        )
        respx_mock.get("/addresses/55/").mock(
            return_value=Response(
                200,
                json=make_envelope(
                    data={"id": "55", "ip": "10.0.0.1", "asset_tag": "A123", "notes": None}
                ),
            )
        )

        fields = client.get_custom_fields(55, "addresses")

        assert fields == {"asset_tag": "A123", "notes": None}

    def test_update_custom_fields(self, client, respx_mock, make_envelope, sent_json):
        route = respx_mock.patch("/subnets/").mock(
            return_value=Response(200, json=make_envelope(message="Subnet updated"))
        )

        message = client.update_custom_fields(7, {"asset_tag": "B9"}, "subnets")

        assert message == "Subnet updated"
        assert sent_json(route) == {"asset_tag": "B9", "id": 7}

    def test_custom_field_calls_bind_log_context(self, client, mocker, make_envelope):
        seen = []

        def record_context(*args, **kwargs):
            seen.append(dict(_log_context.get()))
            return APIResponse.model_validate(make_envelope(message="Address updated"))

        mocker.patch.object(client, "send_request", side_effect=record_context)

        client.update_custom_fields(55, {"asset_tag": "A1"}, "addresses")

        assert seen[0]["controller"] == "addresses"
        assert seen[0]["resource_id"] == 55
        assert "resource_id" not in _log_context.get()


class TestMalformedRecords:
    """Wrong-typed fields surface as SDK errors through the controllers."""

    def test_wrong_field_type_in_record(self, session, respx_mock, make_envelope):
        respx_mock.get("/subnets/3/").mock(
            return_value=Response(
                200, json=make_envelope(data={"id": "3", "gateway": "10.0.0.1"})
            )
        )

        with pytest.raises(PHPIPAMAPIError, match="Malformed SubnetWire record"):
            SubnetsController(session).get_subnet_by_id(3)
