"""Batched atomic property updates."""
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

if TYPE_CHECKING:
    from flowviz.properties.store import PropertyStore

logger = logging.getLogger(__name__)

SET_PROPERTY = "setProperty"
VALUE = "value"


@dataclass(frozen=True)
class UpdateItem:
    """A named field of one update, e.g. propertyName or value."""

    key: str
    value: str


@dataclass
class Update:
    """A single write operation inside an UpdateBatch."""

    operation: str
    items: List[UpdateItem] = field(default_factory=list)

    def add_item(self, key: str, value: str) -> None:
        self.items.append(UpdateItem(key=key, value=value))

    def item(self, key: str) -> Optional[str]:
        """Return the first item value with the given key."""
        for entry in self.items:
            if entry.key == key:
                return entry.value
        return None


@dataclass(frozen=True)
class UpdateHandle:
    """Position of an update within its batch."""

    index: int


class UpdateBatch:
    """
    Collects updates and commits them as one unit.

    Either every update in the batch takes effect or none does. There is
    no error suppression on the write path.
    """

    def __init__(self):
        self._updates: List[Update] = []
        self._executed = False

    @property
    def updates(self) -> Tuple[Update, ...]:
        return tuple(self._updates)

    def add_update(
        self, operation: str, items: Iterable[Tuple[str, str]] = ()
    ) -> UpdateHandle:
        """
        Append an update to the batch.

        Args:
            operation: Store operation name, e.g. "setProperty"
            items: Ordered (key, value) pairs

        Returns:
            Handle referring to the new update.
        """
        self._require_pending()
        update = Update(operation=operation)
        for key, value in items:
            update.add_item(key, value)
        self._updates.append(update)
        return UpdateHandle(index=len(self._updates) - 1)

    def update(self, handle: UpdateHandle) -> Update:
        """Get an update so more items can be added before execution."""
        self._require_pending()
        return self._updates[handle.index]

    def execute(self, store: "PropertyStore") -> None:
        """
        Commit all updates atomically.

        Raises:
            PropertyStoreError: If any update fails; nothing is applied.
            RuntimeError: If the batch was already executed.
        """
        self._require_pending()
        self._executed = True

        if not self._updates:
            return

        logger.debug(f"Executing update batch of {len(self._updates)} updates")
        store.execute_updates(self.updates)

    def _require_pending(self) -> None:
        if self._executed:
            raise RuntimeError("UpdateBatch already executed")
