"""Pytest configuration and shared fixtures.

Fixtures are organized by category:
- Config fixtures: connection settings
- Session fixtures: pre-authenticated sessions for controller tests
- Mock fixtures: respx routers bound to the test application URL
- Data fixtures: phpIPAM JSON payloads as the server sends them
"""

import json
from typing import Any

import pytest
import respx

from phpipam_sdk.api.session import Session
from phpipam_sdk.config import PHPIPAMConfig

ENDPOINT = "https://ipam.example.com/api"
APP_ID = "testapp"
BASE_URL = f"{ENDPOINT}/{APP_ID}"


def envelope(data: Any = None, message: str = "", code: int = 200, **extra: Any) -> dict:
    """Build a phpIPAM response envelope."""
    body: dict[str, Any] = {"code": code, "success": True, "time": 0.003}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    body.update(extra)
    return body


def request_json(route: respx.Route) -> Any:
    """Decode the JSON body of the last request sent to a route."""
    return json.loads(route.calls.last.request.content)


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def phpipam_config() -> PHPIPAMConfig:
    return PHPIPAMConfig(
        app_id=APP_ID,
        username="admin",
        password="secret",
        endpoint=ENDPOINT,
    )


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def session(phpipam_config: PHPIPAMConfig):
    """Session with a token already set, so no login request is made."""
    sess = Session(phpipam_config)
    sess.token = "test-token"
    yield sess
    sess.close()


@pytest.fixture
def respx_mock():
    """respx router scoped to the test application's base URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def section_json() -> dict[str, Any]:
    return {
        "id": "3",
        "name": "Customers",
        "description": "Customer allocations",
        "masterSection": "0",
        "permissions": '{"3":"1","2":"2"}',
        "strictMode": "1",
        "subnetOrdering": "default",
        "order": None,
        "editDate": "2024-03-01 10:22:13",
        "showVLAN": "1",
        "showVRF": "0",
        "showSupernetOnly": "0",
        "DNS": None,
    }


@pytest.fixture
def subnet_json() -> dict[str, Any]:
    return {
        "id": "7",
        "subnet": "10.10.1.0",
        "mask": "24",
        "sectionId": "3",
        "description": "Server LAN",
        "linked_subnet": None,
        "vlanId": "4",
        "vrfId": "0",
        "masterSubnetId": "0",
        "nameserverId": "0",
        "showName": "1",
        "permissions": '{"3":"1"}',
        "DNSrecursive": "0",
        "DNSrecords": "0",
        "allowRequests": "1",
        "scanAgent": "1",
        "pingSubnet": "0",
        "discoverSubnet": "0",
        "resolveDNS": "0",
        "isFolder": "0",
        "isFull": "0",
        "isPool": "0",
        "state": "2",
        "threshold": "80",
        "location": None,
        "editDate": None,
        "gateway": {"ip_addr": "10.10.1.1", "id": "55"},
        "gatewayId": "55",
    }


@pytest.fixture
def address_json() -> dict[str, Any]:
    return {
        "id": "55",
        "subnetId": "7",
        "ip": "10.10.1.1",
        "is_gateway": "1",
        "description": "Core router",
        "hostname": "gw1.example.com",
        "mac": "00:11:22:33:44:55",
        "owner": "netops",
        "tag": "2",
        "deviceId": "12",
        "location": None,
        "port": "Gi0/1",
        "note": None,
        "lastSeen": "2024-03-02 08:00:00",
        "excludePing": "0",
        "PTRignore": "0",
        "PTR": "0",
        "firewallAddressObject": None,
        "editDate": None,
        "customer_id": None,
    }


@pytest.fixture
def vlan_json() -> dict[str, Any]:
    return {
        "id": "4",
        "domainId": "1",
        "name": "servers",
        "number": "100",
        "description": "Server VLAN",
        "editDate": None,
        "customer_id": None,
    }


@pytest.fixture
def l2domain_json() -> dict[str, Any]:
    return {"id": "2", "name": "datacenter", "description": "DC fabric", "sections": "3;4"}


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def make_envelope():
    """Factory for phpIPAM response envelopes."""
    return envelope


@pytest.fixture
def sent_json():
    """Decode the JSON body of the last request a respx route received."""
    return request_json
