"""Site search: preference filtering over the catalog and provider fallback."""

import logging
from collections.abc import Iterable, Sequence

from divepal.catalog import CatalogError, CatalogProvider, StaticCatalogProvider
from divepal.models import ANY_ACCESS, DiveSite, PreferenceQuery, SearchResult

logger = logging.getLogger(__name__)


def _matches_any(terms: Sequence[str], values: Iterable[str]) -> bool:
    """True if some term is a case-insensitive substring of some value."""
    lowered = [v.lower() for v in values]
    return any(term.lower() in value for term in terms for value in lowered)


def site_matches(site: DiveSite, query: PreferenceQuery) -> bool:
    """Check a single site against every constraint present in the query.

    Temperature is a range-overlap test: a site passes `temp_min` when its
    warmest water reaches the floor, and `temp_max` when its coldest water
    does not start above the ceiling.

    Numeric preferences apply whenever they are not None, so a floor of 0 °C
    or 0 m still filters. A browser form that reads 0 as "unanswered" would
    skip it; callers wanting that must pass None.
    """
    if query.temp_min is not None and site.temp_max < query.temp_min:
        return False
    if query.temp_max is not None and site.temp_min > query.temp_max:
        return False
    if query.visibility_min is not None and site.visibility_min < query.visibility_min:
        return False
    if query.marine_life and not _matches_any(query.marine_life, site.marine_life):
        return False
    if query.coral_type and not _matches_any(query.coral_type, site.coral_type):
        return False
    if query.site_type and not _matches_any(query.site_type, site.site_type):
        return False
    if (
        query.access_type
        and query.access_type != ANY_ACCESS
        and site.access_type != query.access_type
    ):
        return False
    if query.entry_difficulty and site.entry_difficulty != query.entry_difficulty:
        return False
    return True


def filter_sites(
    catalog: Sequence[DiveSite], query: PreferenceQuery
) -> tuple[DiveSite, ...]:
    """Return the sites satisfying every present constraint, in catalog order.

    Args:
        catalog: Loaded dive sites.
        query: Sparse preferences. An empty query matches the whole catalog.

    Returns:
        Tuple of matching sites. Empty when nothing matches.
    """
    return tuple(site for site in catalog if site_matches(site, query))


def search_sites(
    query: PreferenceQuery,
    provider: CatalogProvider,
    fallback: CatalogProvider | None = None,
) -> SearchResult:
    """Top-level entry point: load the catalog from `provider` and filter it.

    When the provider raises CatalogError, the static catalog (or `fallback`)
    is used instead and the error message is carried on the result.

    Args:
        query: Parsed user preferences.
        provider: Active catalog provider.
        fallback: Provider used on failure. Defaults to the bundled catalog.

    Returns:
        SearchResult with the filtered sites and the source that served them.
    """
    try:
        catalog = provider.load_catalog()
        source = provider.name
        error = None
    except CatalogError as e:
        logger.warning("Catalog provider %s failed, using fallback: %s", provider.name, e)
        catalog = (fallback or StaticCatalogProvider()).load_catalog()
        source = "static_fallback"
        error = str(e)

    sites = filter_sites(catalog, query)
    logger.info("Search over %d %s sites matched %d", len(catalog), source, len(sites))
    return SearchResult(sites=sites, source=source, error=error)


def merge_sites(
    primary: Sequence[DiveSite], secondary: Sequence[DiveSite]
) -> tuple[DiveSite, ...]:
    """Combine two catalogs by id. Sites in `primary` win on id collisions."""
    seen = {site.id for site in primary}
    return (*primary, *(site for site in secondary if site.id not in seen))


def resolve_site(site_id: int | None, *catalogs: Sequence[DiveSite]) -> DiveSite | None:
    """Look `site_id` up in each catalog in turn. None when nowhere to be found."""
    if site_id is None:
        return None
    for catalog in catalogs:
        for site in catalog:
            if site.id == site_id:
                return site
    return None
