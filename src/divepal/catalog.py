"""Catalog providers. A bundled JSON asset or a Supabase REST table, same record shape."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

import httpx

from divepal.config import Settings
from divepal.models import DiveSite

logger = logging.getLogger(__name__)

RESOURCES = Path(__file__).parent / "resources"
DEFAULT_CATALOG_PATH = RESOURCES / "dive_sites.json"


class CatalogError(Exception):
    """Catalog could not be loaded or parsed."""


class CatalogProvider(Protocol):
    name: str

    def load_catalog(self) -> tuple[DiveSite, ...]: ...


def _str_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


def site_from_dict(row: dict[str, Any]) -> DiveSite:
    """Normalize one JSON/REST row into a DiveSite.

    Raises:
        CatalogError: When a required field is missing or has the wrong type.
    """
    try:
        return DiveSite(
            id=int(row["id"]),
            name=str(row["name"]),
            location=str(row["location"]),
            lat=float(row["lat"]),
            lon=float(row["lon"]),
            temp_min=float(row["temp_min"]),
            temp_max=float(row["temp_max"]),
            marine_life=_str_tuple(row.get("marine_life")),
            coral_type=_str_tuple(row.get("coral_type")),
            visibility_min=float(row["visibility_min"]),
            site_type=_str_tuple(row.get("site_type")),
            access_type=str(row["access_type"]),
            entry_difficulty=str(row["entry_difficulty"]),
            description=str(row.get("description") or ""),
            image_url=str(row.get("image_url") or ""),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise CatalogError(f"Malformed dive site record: {e!r}") from e


def sites_from_rows(rows: Any) -> tuple[DiveSite, ...]:
    if not isinstance(rows, list):
        raise CatalogError(f"Expected a list of sites, got {type(rows).__name__}")
    return tuple(site_from_dict(row) for row in rows)


@lru_cache(maxsize=4)
def _load_json_catalog(path: Path) -> tuple[DiveSite, ...]:
    try:
        with path.open(encoding="utf-8") as f:
            rows = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    sites = sites_from_rows(rows)
    logger.info("Loaded %d dive sites from %s", len(sites), path)
    return sites


class StaticCatalogProvider:
    """Bundled dive-site catalog. Parsed once per path and cached."""

    name = "static"

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or DEFAULT_CATALOG_PATH

    def load_catalog(self) -> tuple[DiveSite, ...]:
        return _load_json_catalog(self.path)


class RemoteCatalogProvider:
    """Supabase (PostgREST) table holding dive-site rows."""

    name = "remote"

    def __init__(
        self,
        url: str,
        key: str,
        table: str = "dive_sites",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.key = key
        self.table = table
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.key,
            "Authorization": f"Bearer {self.key}",
            "Accept": "application/json",
        }

    def _get(self, path: str, params: dict[str, str] | None = None) -> httpx.Response:
        if not self.url or not self.key:
            raise CatalogError("Supabase URL and key are required")
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                resp = client.get(
                    f"{self.url}/rest/v1/{path}", params=params, headers=self._headers()
                )
                resp.raise_for_status()
                return resp
        except httpx.HTTPStatusError as e:
            raise CatalogError(
                f"HTTP {e.response.status_code}: {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise CatalogError(f"Supabase request failed: {e}") from e

    def ping(self) -> None:
        """Check that the REST root answers with these credentials.

        Raises:
            CatalogError: When credentials are missing or the request fails.
        """
        self._get("")
        logger.info("Supabase connection to %s OK", self.url)

    def load_catalog(self) -> tuple[DiveSite, ...]:
        """Fetch every row of the table, ordered by id.

        Raises:
            CatalogError: On transport failure, HTTP error status, or bad payload.
        """
        resp = self._get(self.table, params={"select": "*", "order": "id"})
        try:
            rows = resp.json()
        except json.JSONDecodeError as e:
            raise CatalogError(f"Supabase returned invalid JSON: {e}") from e

        sites = sites_from_rows(rows)
        logger.info("Fetched %d dive sites from %s", len(sites), self.url)
        return sites


def build_provider(settings: Settings) -> CatalogProvider:
    """Select the catalog provider named by configuration.

    Falls back to the static provider when remote is requested without
    credentials.
    """
    if settings.data_source == "remote":
        if settings.supabase_url and settings.supabase_key:
            return RemoteCatalogProvider(
                settings.supabase_url,
                settings.supabase_key,
                table=settings.remote_table,
                timeout=settings.http_timeout,
            )
        logger.warning("Remote data source selected without Supabase credentials")
    return StaticCatalogProvider()
