"""Tests for catalog providers."""
import json

import httpx
import pytest

from divepal.catalog import (
    CatalogError,
    RemoteCatalogProvider,
    StaticCatalogProvider,
    build_provider,
    site_from_dict,
)
from divepal.config import Settings

ROW = {
    "id": 7,
    "name": "Cenote Dos Ojos",
    "location": "Tulum, Mexico",
    "lat": 20.325,
    "lon": -87.3911,
    "temp_min": 24,
    "temp_max": 25,
    "marine_life": ["mollies"],
    "coral_type": None,
    "visibility_min": 50,
    "site_type": ["cavern"],
    "access_type": "shore",
    "entry_difficulty": "beginner",
    "description": None,
    "image_url": "/images/dos-ojos.jpg",
}


class TestSiteFromDict:
    def test_normalizes_row(self):
        site = site_from_dict(ROW)
        assert site.id == 7
        assert site.temp_min == 24.0
        assert site.marine_life == ("mollies",)
        assert site.coral_type == ()
        assert site.description == ""

    def test_missing_field_raises(self):
        row = {k: v for k, v in ROW.items() if k != "lat"}
        with pytest.raises(CatalogError):
            site_from_dict(row)

    def test_bad_number_raises(self):
        with pytest.raises(CatalogError):
            site_from_dict({**ROW, "visibility_min": "clear"})


class TestStaticCatalogProvider:
    def test_bundled_catalog_loads(self):
        sites = StaticCatalogProvider().load_catalog()
        assert len(sites) >= 10
        assert len({s.id for s in sites}) == len(sites)

    def test_custom_path(self, tmp_path):
        path = tmp_path / "sites.json"
        path.write_text(json.dumps([ROW]), encoding="utf-8")
        sites = StaticCatalogProvider(path).load_catalog()
        assert [s.name for s in sites] == ["Cenote Dos Ojos"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(CatalogError):
            StaticCatalogProvider(tmp_path / "nope.json").load_catalog()

    def test_non_list_payload_raises(self, tmp_path):
        path = tmp_path / "sites.json"
        path.write_text(json.dumps({"sites": [ROW]}), encoding="utf-8")
        with pytest.raises(CatalogError):
            StaticCatalogProvider(path).load_catalog()


class TestRemoteCatalogProvider:
    def _provider(self, handler):
        return RemoteCatalogProvider(
            "https://demo.supabase.co/",
            "anon-key",
            transport=httpx.MockTransport(handler),
        )

    def test_fetches_and_normalizes(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            seen["headers"] = request.headers
            return httpx.Response(200, json=[ROW])

        sites = self._provider(handler).load_catalog()

        assert [s.id for s in sites] == [7]
        assert seen["url"].path == "/rest/v1/dive_sites"
        assert seen["url"].params["select"] == "*"
        assert seen["headers"]["apikey"] == "anon-key"
        assert seen["headers"]["authorization"] == "Bearer anon-key"

    def test_http_error_status(self):
        provider = self._provider(lambda request: httpx.Response(401, json={"message": "no"}))
        with pytest.raises(CatalogError, match="HTTP 401"):
            provider.load_catalog()

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CatalogError, match="request failed"):
            self._provider(handler).load_catalog()

    def test_invalid_json(self):
        provider = self._provider(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(CatalogError):
            provider.load_catalog()

    def test_malformed_row(self):
        provider = self._provider(lambda request: httpx.Response(200, json=[{"id": 1}]))
        with pytest.raises(CatalogError):
            provider.load_catalog()

    def test_missing_credentials(self):
        with pytest.raises(CatalogError, match="required"):
            RemoteCatalogProvider("", "").load_catalog()

    def test_ping_hits_rest_root(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["apikey"] = request.headers["apikey"]
            return httpx.Response(200, json={"swagger": "2.0"})

        self._provider(handler).ping()
        assert seen == {"path": "/rest/v1/", "apikey": "anon-key"}

    def test_ping_reports_rejected_key(self):
        provider = self._provider(lambda request: httpx.Response(401))
        with pytest.raises(CatalogError, match="HTTP 401"):
            provider.ping()

    def test_ping_requires_credentials(self):
        with pytest.raises(CatalogError, match="required"):
            RemoteCatalogProvider("https://demo.supabase.co", "").ping()


class TestBuildProvider:
    def test_static_by_default(self):
        assert isinstance(build_provider(Settings()), StaticCatalogProvider)

    def test_remote_when_configured(self):
        settings = Settings(
            data_source="remote",
            supabase_url="https://demo.supabase.co",
            supabase_key="k",
            remote_table="sites",
            http_timeout=3.0,
        )
        provider = build_provider(settings)
        assert isinstance(provider, RemoteCatalogProvider)
        assert provider.table == "sites"
        assert provider.timeout == 3.0

    def test_remote_without_credentials_falls_back_to_static(self):
        provider = build_provider(Settings(data_source="remote"))
        assert isinstance(provider, StaticCatalogProvider)
