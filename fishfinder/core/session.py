"""
Interactive search session state.

Holds what the user is currently looking at: search mode, query, spot policy,
the last results and which reference view is open. All searching is delegated
to the pure functions in ``filters``; this class only decides when to rerun
them and what to reset.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .filters import SearchMode, SpotPolicy, search, table_view
from .models import FishRecord


@dataclass
class SearchSession:
    """Per-user browsing state over a loaded catalog."""

    catalog: Sequence[FishRecord] = ()
    mode: SearchMode = SearchMode.NAME
    policy: SpotPolicy = SpotPolicy.INCLUDE_ANY
    query: str = ""
    results: tuple[FishRecord, ...] = field(default_factory=tuple)

    show_map: bool = False
    show_info: bool = False
    show_table: bool = False

    @property
    def searchable(self) -> bool:
        """Searching is closed while the table of all fish is shown."""
        return not self.show_table

    def set_mode(self, mode: SearchMode | str) -> bool:
        """
        Switch search mode. Any pending query and results are dropped.

        Returns False, leaving the session untouched, while the table is shown.
        """
        mode = SearchMode(mode)
        if not self.searchable:
            return False
        self.mode = mode
        self.query = ""
        self.results = ()
        return True

    def set_query(self, query: str) -> tuple[FishRecord, ...]:
        # The table keeps showing the full catalog until it is closed
        if not self.searchable:
            return self.results
        self.query = query
        return self._refresh()

    def set_policy(self, policy: SpotPolicy | str) -> tuple[FishRecord, ...]:
        self.policy = SpotPolicy(policy)
        if not self.searchable:
            return self.results
        return self._refresh()

    def toggle_table(self) -> tuple[FishRecord, ...]:
        """
        Flip the table view; either way the results become the full catalog.

        Closing the table leaves every fish listed until the next search.
        """
        self.show_table = not self.show_table
        self.show_map = False
        self.show_info = False
        self.query = ""
        self.results = table_view(self.catalog)
        return self.results

    def toggle_map(self) -> bool:
        # Unavailable while the table or the info sheet is open
        if self.show_table or self.show_info:
            return False
        self.show_map = not self.show_map
        return True

    def toggle_info(self) -> bool:
        if self.show_table or self.show_map:
            return False
        self.show_info = not self.show_info
        return True

    def _refresh(self) -> tuple[FishRecord, ...]:
        self.results = search(self.catalog, self.mode, self.query, self.policy)
        return self.results
