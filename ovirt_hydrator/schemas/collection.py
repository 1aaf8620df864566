"""
Collection descriptor built from top-level API links.
"""

from urllib.parse import quote

from pydantic import BaseModel, Field

from ovirt_hydrator.utils.patterns import extract_search_base

SEARCH_PLACEHOLDER = "{query}"


class Collection(BaseModel):
    """
    A browsable set of resources exposed by the API root.

    Owns at most one search href template and any number of named
    special object shortcuts.
    """

    name: str
    href: str
    search_href: str | None = Field(default=None, serialization_alias="search")
    special_objects: dict[str, str] = Field(
        default_factory=dict, serialization_alias="specialObjects"
    )

    def set_search_option(self, href: str) -> None:
        """Attach the search href template."""
        self.search_href = href

    def add_special_object(self, name: str, href: str) -> None:
        """Register a named shortcut href; a repeated name replaces the old href."""
        self.special_objects[name] = href

    def special_object_href(self, name: str) -> str | None:
        return self.special_objects.get(name)

    @property
    def searchable(self) -> bool:
        return self.search_href is not None

    def search_url(self, query: str) -> str | None:
        """
        Build a search href for a query.

        Fills the ``{query}`` placeholder of the search template, or appends
        to the ``?search=`` base when the template has no placeholder.

        Returns:
            Search href, or None if the collection is not searchable
        """
        if self.search_href is None:
            return None

        encoded = quote(query, safe="")
        if SEARCH_PLACEHOLDER in self.search_href:
            return self.search_href.replace(SEARCH_PLACEHOLDER, encoded)

        base = extract_search_base(self.search_href)
        if base is None:
            return None
        return f"{base}{encoded}"
