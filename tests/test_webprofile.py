"""
Web experience profile CRUD against the fake profile server.
"""

import pytest

from mock_paypal import API_BASE, PROFILE_ID, request_json
from paypalsdk import APIError, InvalidRequestError
from paypalsdk.types import (
    AddressOverride,
    FlowConfig,
    InputFields,
    LandingPageType,
    NoShipping,
    Presentation,
    WebProfile,
)


def test_create_web_profile_valid(webprofile_client, webprofile_server):
    wp = WebProfile(
        name="YeowZa! T-Shirt Shop",
        presentation=Presentation(
            brand_name="YeowZa! Paypal",
            logo_image="http://www.yeowza.com",
            locale_code="US",
        ),
        input_fields=InputFields(
            allow_note=True,
            no_shipping=NoShipping.display,
            address_override=AddressOverride.from_call,
        ),
        flow_config=FlowConfig(
            landing_page_type=LandingPageType.billing,
            bank_txn_pending_url="http://www.yeowza.com",
        ),
    )

    res = webprofile_client.create_web_profile(wp)

    assert res.id == PROFILE_ID
    sent = request_json(webprofile_server.last_request)
    assert sent["name"] == "YeowZa! T-Shirt Shop"
    assert sent["input_fields"] == {
        "allow_note": True,
        "no_shipping": 0,
        "address_override": 1,
    }
    assert sent["flow_config"]["landing_page_type"] == "Billing"
    assert "id" not in sent


def test_create_web_profile_invalid(webprofile_client):
    """A profile without a name is rejected by PayPal."""
    with pytest.raises(APIError) as exc:
        webprofile_client.create_web_profile(WebProfile())

    assert exc.value.status_code == 400
    assert exc.value.name == "VALIDATION_ERROR"


def test_get_web_profile_valid(webprofile_client, webprofile_server):
    res = webprofile_client.get_web_profile(PROFILE_ID)

    assert res.id == PROFILE_ID
    assert res.name == "YeowZa! T-Shirt Shop"
    assert res.presentation.brand_name == "YeowZa! Paypal"
    assert res.input_fields.address_override is AddressOverride.from_call
    assert res.flow_config.landing_page_type is LandingPageType.billing

    req = webprofile_server.last_request
    assert req.method == "GET"
    assert req.url == f"{API_BASE}/v1/payment-experience/web-profiles/{PROFILE_ID}"
    assert req.headers["Authorization"] == "Bearer token-1"


def test_get_web_profile_invalid(webprofile_client):
    with pytest.raises(APIError) as exc:
        webprofile_client.get_web_profile("foobar")

    assert exc.value.status_code == 404
    assert exc.value.name == "INVALID_RESOURCE_ID"


def test_get_web_profiles(webprofile_client):
    res = webprofile_client.get_web_profiles()

    assert len(res) == 2
    assert res[0].id == PROFILE_ID
    assert res[1].id == "XP-96H8-MVN2-CP6S-W9DY"


def test_set_web_profile_valid(webprofile_client, webprofile_server):
    wp = WebProfile(id=PROFILE_ID, name="Shop T-Shirt YeowZa!")

    assert webprofile_client.set_web_profile(wp) is None
    assert webprofile_server.last_request.method == "PUT"
    assert request_json(webprofile_server.last_request) == {
        "id": PROFILE_ID,
        "name": "Shop T-Shirt YeowZa!",
    }


def test_set_web_profile_unknown_id(webprofile_client):
    with pytest.raises(APIError) as exc:
        webprofile_client.set_web_profile(WebProfile(id="foobar"))

    assert exc.value.status_code == 404


def test_set_web_profile_missing_id(webprofile_client, webprofile_server):
    """Updates without an id fail before any request is made."""
    with pytest.raises(InvalidRequestError):
        webprofile_client.set_web_profile(WebProfile(name="Shop"))

    assert webprofile_server.requests == []


def test_set_web_profile_empty_name(webprofile_client):
    with pytest.raises(APIError) as exc:
        webprofile_client.set_web_profile(WebProfile(id=PROFILE_ID))

    assert exc.value.name == "VALIDATION_ERROR"


def test_delete_web_profile_valid(webprofile_client, webprofile_server):
    assert webprofile_client.delete_web_profile(PROFILE_ID) is None
    assert webprofile_server.last_request.method == "DELETE"


def test_delete_web_profile_invalid(webprofile_client):
    with pytest.raises(APIError) as exc:
        webprofile_client.delete_web_profile("foobar")

    assert exc.value.status_code == 404
    assert exc.value.name == "INVALID_RESOURCE_ID"


def test_token_shared_across_profile_calls(webprofile_client, webprofile_server):
    webprofile_client.get_web_profiles()
    webprofile_client.get_web_profile(PROFILE_ID)
    webprofile_client.delete_web_profile(PROFILE_ID)

    assert webprofile_server.token_calls == 1


def test_get_web_profile_id_is_quoted(webprofile_client, webprofile_server):
    """Reserved characters in an id stay inside the path segment."""
    with pytest.raises(APIError):
        webprofile_client.get_web_profile("foobar?x=1")

    req = webprofile_server.last_request
    assert req.url == f"{API_BASE}/v1/payment-experience/web-profiles/foobar%3Fx%3D1"
