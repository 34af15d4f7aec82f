"""
Query builder for the appdetails endpoint.

Turns a locale, a currency and a list of appids into the request URL.
"""

from dataclasses import dataclass
from typing import Dict, Sequence

from steamstore.config import DEFAULT_BASE_URL


@dataclass(frozen=True)
class StoreQuery:
    """
    Locale, currency and API version shared by every request of a call.

    Attributes:
        locale: Language of the returned texts, e.g. 'english'
        currency: Country code selecting the price currency, e.g. 'us'
        version: API version sent as the v= parameter
        base_url: appdetails endpoint
    """

    locale: str
    currency: str
    version: int = 1
    base_url: str = DEFAULT_BASE_URL

    def params(self, app_ids: Sequence[int]) -> Dict[str, str]:
        """Get the query parameters for the given appids, in URL order."""
        return {
            "l": self.locale,
            "cc": self.currency,
            "v": str(self.version),
            "appids": ",".join(str(app_id) for app_id in app_ids),
        }

    def to_url(self, app_ids: Sequence[int]) -> str:
        """
        Build the full request URL.

        The appids are joined with plain commas in the order given; the
        endpoint does not reliably accept URL-encoded commas.

        Args:
            app_ids: Appids to query, may be empty

        Returns:
            The request URL
        """
        query = "&".join(f"{key}={value}" for key, value in self.params(app_ids).items())
        return f"{self.base_url}?{query}"
