"""TwitterApiClient — construction, cached services, end-to-end signed calls.

Tests cover:
    - None session raises InvalidArgumentError before any transport is built
    - Typed accessors return one instance per service type, from any thread
    - Custom ApiService subclasses work through get_service()
    - Invalid service types raise ConfigurationError
    - Calls go through the mock transport signed, decoded, null lists normalized
    - from_core() builds a client from a TwitterCore provider
"""

import threading

import httpx
import pytest

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.core.errors import ConfigurationError, InvalidArgumentError, TwitterApiError
from twitter_core.core.twitter_api import TwitterApi
from twitter_core.infrastructure.rest_adapter import RestAdapter
from twitter_core.schemas.configuration import Configuration
from twitter_core.services import api_client as api_client_module
from twitter_core.services.api_client import TwitterApiClient
from twitter_core.services.core_provider import TwitterCore
from twitter_core.services.define_account_service import AccountService
from twitter_core.services.define_collection_service import CollectionService
from twitter_core.services.define_configuration_service import ConfigurationService
from twitter_core.services.define_favorite_service import FavoriteService
from twitter_core.services.define_list_service import ListService
from twitter_core.services.define_media_service import MediaService
from twitter_core.services.define_search_service import SearchService
from twitter_core.services.define_statuses_service import StatusesService


# ─── construction ────────────────────────────────────────────────

def test_none_session_raises_before_transport(auth_config, settings, monkeypatch):
    built = []
    monkeypatch.setattr(
        api_client_module, "build_http_client", lambda *a, **kw: built.append(a),
    )
    with pytest.raises(InvalidArgumentError) as info:
        TwitterApiClient(auth_config, None, settings=settings)
    assert info.value.argument == "session"
    assert "Session must not be null" in info.value.message
    assert built == []


def test_none_auth_config_raises(session, settings):
    with pytest.raises(InvalidArgumentError) as info:
        TwitterApiClient(None, session, settings=settings)
    assert info.value.argument == "auth_config"


def test_session_property(client, session):
    assert client.session is session


# ─── services ────────────────────────────────────────────────────

def test_accessors_return_cached_instances(client):
    accessors = {
        AccountService: client.get_account_service,
        FavoriteService: client.get_favorite_service,
        StatusesService: client.get_statuses_service,
        SearchService: client.get_search_service,
        ListService: client.get_list_service,
        CollectionService: client.get_collection_service,
        ConfigurationService: client.get_configuration_service,
        MediaService: client.get_media_service,
    }
    for service_type, accessor in accessors.items():
        service = accessor()
        assert isinstance(service, service_type)
        assert accessor() is service
        assert client.get_service(service_type) is service


def test_distinct_clients_have_distinct_services(auth_config, session, settings, mock_api):
    one = TwitterApiClient(auth_config, session, settings=settings, transport=mock_api["transport"])
    two = TwitterApiClient(auth_config, session, settings=settings, transport=mock_api["transport"])
    assert one.get_favorite_service() is not two.get_favorite_service()


def test_concurrent_first_access_yields_one_instance(
    auth_config, session, settings, mock_api, monkeypatch,
):
    created = []
    lock = threading.Lock()
    real_create = RestAdapter.create

    def counting_create(self, service_type):
        with lock:
            created.append(service_type)
        return real_create(self, service_type)

    monkeypatch.setattr(RestAdapter, "create", counting_create)
    client = TwitterApiClient(
        auth_config, session, settings=settings, transport=mock_api["transport"],
    )
    barrier = threading.Barrier(50)
    results = [None] * 50

    def worker(i):
        barrier.wait()
        results[i] = client.get_favorite_service()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r is results[0] for r in results)
    assert 1 <= len(created) <= 50
    assert client.get_favorite_service() is results[0]


def test_custom_service_subclass(client, mock_api):
    class TrendsService(ApiService):
        place = Endpoint("GET", "/1.1/trends/place.json", query=("id",), required=("id",),
                         response=list[dict])

    mock_api["routes"]["/1.1/trends/place.json"] = httpx.Response(200, json=[{"trends": []}])
    service = client.get_service(TrendsService)
    assert service.place(id=1) == [{"trends": []}]
    assert client.get_service(TrendsService) is service
    assert mock_api["requests"][0].url.params["id"] == "1"


def test_invalid_service_type_raises(client):
    class Empty(ApiService):
        pass

    with pytest.raises(ConfigurationError, match="declares no endpoints"):
        client.get_service(Empty)
    with pytest.raises(ConfigurationError):
        client.get_service(str)


# ─── end-to-end ──────────────────────────────────────────────────

def test_favorites_list_normalizes_null_lists(client, mock_api):
    mock_api["routes"]["/1.1/favorites/list.json"] = httpx.Response(200, json=[
        {
            "id": 1, "full_text": "hello",
            "entities": {"urls": None, "hashtags": None, "user_mentions": None},
            "display_text_range": None,
        },
    ])
    [tweet] = client.get_favorite_service().list(count=1)
    assert tweet.display_text == "hello"
    assert tweet.entities.urls == []
    assert tweet.entities.hashtags == []
    assert tweet.display_text_range == []

    request = mock_api["requests"][0]
    assert request.url.params["tweet_mode"] == "extended"
    assert request.headers["Authorization"].startswith("OAuth ")


def test_statuses_update_signs_form_body(client, mock_api):
    mock_api["routes"]["/1.1/statuses/update.json"] = httpx.Response(
        200, json={"id": 99, "text": "Hello Ladies + Gentlemen"},
    )
    tweet = client.get_statuses_service().update(status="Hello Ladies + Gentlemen")
    assert tweet.id == 99

    request = mock_api["requests"][0]
    assert request.method == "POST"
    assert request.content == b"status=Hello+Ladies+%2B+Gentlemen"
    header = request.headers["Authorization"]
    assert 'oauth_consumer_key="ck-123"' in header
    assert 'oauth_signature_method="HMAC-SHA1"' in header


def test_timeline_with_arguments_requests_extended_tweets(client, mock_api):
    mock_api["routes"]["/1.1/statuses/home_timeline.json"] = httpx.Response(200, json=[])
    assert client.get_statuses_service().home_timeline(count=5) == []
    params = mock_api["requests"][0].url.params
    assert params["tweet_mode"] == "extended"
    assert params["include_cards"] == "true"
    assert params["count"] == "5"


def test_get_service_rejects_unhashable_argument(client):
    with pytest.raises(ConfigurationError, match="not an ApiService subclass"):
        client.get_service(["x"])


def test_statuses_retweet_path_param(client, mock_api):
    mock_api["routes"]["/1.1/statuses/retweet/12345.json"] = httpx.Response(200, json={"id": 7})
    assert client.get_statuses_service().retweet(id=12345).id == 7


def test_api_error_surfaces(client):
    with pytest.raises(TwitterApiError) as info:
        client.get_account_service().verify_credentials()
    assert info.value.status_code == 404
    assert info.value.api_error_code == 34


def test_configuration_fetch(client, mock_api):
    mock_api["routes"]["/1.1/help/configuration.json"] = httpx.Response(200, json={
        "short_url_length_https": 23, "non_username_paths": None,
    })
    configuration = client.get_configuration_service().configuration()
    assert isinstance(configuration, Configuration)
    assert configuration.non_username_paths == []


# ─── from_core ───────────────────────────────────────────────────

def test_from_core(auth_config, session, settings, mock_api):
    core = TwitterCore(
        auth_config=auth_config,
        api=TwitterApi(base_host_url="https://api.example.test"),
        settings=settings,
    )
    mock_api["routes"]["/1.1/help/configuration.json"] = httpx.Response(200, json={})
    with TwitterApiClient.from_core(session, core, transport=mock_api["transport"]) as client:
        client.get_configuration_service().configuration()
    assert mock_api["requests"][0].url.host == "api.example.test"


def test_from_core_none_session(auth_config, settings):
    core = TwitterCore(auth_config=auth_config, settings=settings)
    with pytest.raises(InvalidArgumentError):
        TwitterApiClient.from_core(None, core)
