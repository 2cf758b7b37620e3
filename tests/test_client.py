import pytest
import responses

from civoclient.api import CivoError
from civoclient.client import Client, VolumeType

BASE_URL = "https://api.example.com"


@pytest.fixture
def mock_api():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    with Client(api_key="placeholder", region="TEST", base_url=BASE_URL) as api:
        yield api


def test_list_volume_types(mock_api, client):
    mock_api.add(
        responses.GET,
        BASE_URL + "/v2/volumetypes",
        body="""[{
            "name": "my-volume-type",
            "description": "a volume type",
            "enabled": true,
            "labels": ["label"]
        }]""",
        status=200,
    )

    got = client.list_volume_types()

    assert got == [
        VolumeType(
            name="my-volume-type",
            description="a volume type",
            enabled=True,
            labels=["label"],
        )
    ]


def test_list_volume_types_sends_region_and_auth(mock_api, client):
    mock_api.add(responses.GET, BASE_URL + "/v2/volumetypes", body="[]", status=200)

    got = client.list_volume_types()

    assert got == []
    request = mock_api.calls[0].request
    assert "region=TEST" in request.url
    assert request.headers["Authorization"] == "bearer placeholder"


def test_list_volume_types_missing_labels_defaults_to_empty(mock_api, client):
    mock_api.add(
        responses.GET,
        BASE_URL + "/v2/volumetypes",
        body='[{"name": "ssd", "labels": null}]',
        status=200,
    )

    got = client.list_volume_types()

    assert got == [VolumeType(name="ssd", description="", enabled=False, labels=[])]


def test_list_volume_types_error_status(mock_api, client):
    mock_api.add(responses.GET, BASE_URL + "/v2/volumetypes", body="boom", status=500)

    with pytest.raises(CivoError) as excinfo:
        client.list_volume_types()
    assert excinfo.value.status_code == 500


def test_list_volume_types_invalid_json(mock_api, client):
    mock_api.add(responses.GET, BASE_URL + "/v2/volumetypes", body="not json", status=200)

    with pytest.raises(CivoError):
        client.list_volume_types()


def test_client_offers_calls_from_every_group(mock_api, client):
    mock_api.add(
        responses.GET,
        BASE_URL + "/v2/roles",
        body='[{"id":"12345","name":"admin","permissions":"*.*","built_in":true}]',
        status=200,
    )
    mock_api.add(
        responses.DELETE,
        BASE_URL + "/v2/webhooks/abc",
        body='{"result": "success"}',
        status=200,
    )

    roles = client.list_roles()
    deleted = client.delete_webhook("abc")

    assert roles[0].name == "admin"
    assert roles[0].built_in is True
    assert deleted.result == "success"


def test_client_quota_through_full_client(mock_api, client):
    mock_api.add(
        responses.GET,
        BASE_URL + "/v2/quota",
        body='{"id": "quota-1", "instance_count_limit": 16}',
        status=200,
    )

    quota = client.get_quota()

    assert quota.id == "quota-1"
    assert quota.instance_count_limit == 16
    assert quota.cpu_core_limit == 0