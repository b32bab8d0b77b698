"""Tests for SectionsController."""

import pytest
from httpx import Response

from phpipam_sdk.controllers.sections import SectionsController
from phpipam_sdk.models.sections import Section
from phpipam_sdk.utils.exceptions import (
    MalformedScalarError,
    PHPIPAMAPIError,
    ResourceNotFoundError,
)


@pytest.fixture
def controller(session):
    return SectionsController(session)


class TestReadSections:
    """Test section read operations."""

    def test_list_sections(self, controller, respx_mock, make_envelope, section_json):
        second = dict(section_json, id="4", name="Lab")
        respx_mock.get("/sections/").mock(
            return_value=Response(200, json=make_envelope(data=[section_json, second]))
        )

        sections = controller.list_sections()

        assert [s.name for s in sections] == ["Customers", "Lab"]
        assert sections[0].id == 3
        assert sections[0].strict_mode is True
        assert sections[0].show_vlan is True
        assert sections[0].show_vrf is False
        assert sections[0].order == 0
        assert sections[0].dns == 0

    def test_list_sections_empty(self, controller, respx_mock, make_envelope):
        respx_mock.get("/sections/").mock(return_value=Response(200, json=make_envelope(data=[])))

        assert controller.list_sections() == []

    def test_get_section_by_id(self, controller, respx_mock, make_envelope, section_json):
        respx_mock.get("/sections/3/").mock(
            return_value=Response(200, json=make_envelope(data=section_json))
        )

        section = controller.get_section_by_id(3)

        assert section.id == 3
        assert section.description == "Customer allocations"
        assert section.permissions == '{"3":"1","2":"2"}'

    def test_get_section_by_name(self, controller, respx_mock, make_envelope, section_json):
        route = respx_mock.get("/sections/Customers/").mock(
            return_value=Response(200, json=make_envelope(data=section_json))
        )

        section = controller.get_section_by_name("Customers")

        assert route.called
        assert isinstance(section, Section)
        assert section.name == "Customers"

    def test_get_section_not_found(self, controller, respx_mock):
        respx_mock.get("/sections/99/").mock(
            return_value=Response(
                404, json={"code": 404, "success": False, "message": "Section not found"}
            )
        )

        with pytest.raises(ResourceNotFoundError):
            controller.get_section_by_id(99)

    def test_get_subnets_in_section(self, controller, respx_mock, make_envelope, subnet_json):
        respx_mock.get("/sections/3/subnets/").mock(
            return_value=Response(200, json=make_envelope(data=[subnet_json]))
        )

        subnets = controller.get_subnets_in_section(3)

        assert len(subnets) == 1
        assert subnets[0].subnet_address == "10.10.1.0"
        assert subnets[0].mask == 24
        assert subnets[0].section_id == 3

    def test_malformed_integer_aborts(self, controller, respx_mock, make_envelope, section_json):
        section_json["masterSection"] = "root"
        respx_mock.get("/sections/3/").mock(
            return_value=Response(200, json=make_envelope(data=section_json))
        )

        with pytest.raises(MalformedScalarError):
            controller.get_section_by_id(3)

    def test_unexpected_data_shape(self, controller, respx_mock, make_envelope):
        respx_mock.get("/sections/").mock(
            return_value=Response(200, json=make_envelope(data={"id": "1"}))
        )

        with pytest.raises(PHPIPAMAPIError, match="Expected a JSON array"):
            controller.list_sections()


class TestWriteSections:
    """Test section mutations."""

    def test_create_section(self, controller, respx_mock, make_envelope, sent_json):
        route = respx_mock.post("/sections/").mock(
            return_value=Response(
                201, json=make_envelope(message="Section created", code=201, id="12")
            )
        )

        message = controller.create_section(
            Section(name="Lab", description="Lab gear", strict_mode=True)
        )

        assert message == "Section created"
        assert sent_json(route) == {
            "name": "Lab",
            "description": "Lab gear",
            "strictMode": "1",
        }

    def test_update_section(self, controller, respx_mock, make_envelope, sent_json):
        route = respx_mock.patch("/sections/").mock(
            return_value=Response(200, json=make_envelope(message="Section updated"))
        )

        result = controller.update_section(Section(id=3, name="Customers", master_section=1))

        assert result is None
        assert sent_json(route) == {"id": "3", "name": "Customers", "masterSection": "1"}

    def test_delete_section_sends_one_request(self, controller, respx_mock, make_envelope):
        route = respx_mock.delete("/sections/3/").mock(
            return_value=Response(200, json=make_envelope(message="Section deleted"))
        )

        assert controller.delete_section(3) is None
        assert route.call_count == 1
        assert len(respx_mock.calls) == 1
