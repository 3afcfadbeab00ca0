"""Client-local ordering of the bookmark collection."""

import logging
from typing import Callable, Optional, Sequence

from linksaver.core.entities import Bookmark
from linksaver.core.errors import ReorderError

logger = logging.getLogger(__name__)

Listener = Callable[[tuple[Bookmark, ...]], None]


class OrderingReconciler:
    """Ordered view of the bookmarks last fetched from the repository.
    
    The repository decides which bookmarks exist; this object only decides
    the order in which they are shown. ``refresh`` is the only way members
    enter or leave the collection, and ``reorder`` is always a permutation.
    Manual order is never written back and is discarded by the next refresh.
    """
    
    def __init__(self) -> None:
        self._items: list[Bookmark] = []
        self._listeners: list[Listener] = []
        self._dragging: Optional[str] = None
        self._deferred: Optional[list[Bookmark]] = None
    
    @property
    def items(self) -> tuple[Bookmark, ...]:
        return tuple(self._items)
    
    @property
    def ids(self) -> list[str]:
        return [bookmark.id for bookmark in self._items]
    
    @property
    def is_dragging(self) -> bool:
        return self._dragging is not None
    
    def __len__(self) -> int:
        return len(self._items)
    
    def add_listener(self, listener: Listener) -> None:
        """Register a callback invoked with the new order after each change."""
        self._listeners.append(listener)
    
    def refresh(self, server_list: Sequence[Bookmark]) -> None:
        """Replace the collection with the server's list and order.
        
        While a drag is in progress the refresh is held back and applied
        once the drag ends, so the drag never moves a stale element.
        """
        bookmarks = list(server_list)
        ids = [bookmark.id for bookmark in bookmarks]
        if len(set(ids)) != len(ids):
            raise ValueError("Server list contains duplicate bookmark ids")
        
        if self._dragging is not None:
            logger.debug("Refresh deferred until drag of %s completes", self._dragging)
            self._deferred = bookmarks
            return
        
        self._items = bookmarks
        self._notify()
    
    def reorder(self, from_index: int, to_index: int) -> bool:
        """Move the element at from_index to to_index.
        
        Returns:
            True if the order changed, False for a move onto itself
        
        Raises:
            ReorderError: If either index is out of bounds.
        """
        size = len(self._items)
        for index in (from_index, to_index):
            if not 0 <= index < size:
                raise ReorderError(f"Position {index} out of range for {size} bookmarks")
        
        if from_index == to_index:
            return False
        
        moved = self._items.pop(from_index)
        self._items.insert(to_index, moved)
        logger.debug("Moved %s from %d to %d", moved.id, from_index, to_index)
        self._notify()
        return True
    
    def move_bookmark(self, bookmark_id: str, target_id: str) -> bool:
        """Move a bookmark to the current position of another one."""
        return self.reorder(self._index_of(bookmark_id), self._index_of(target_id))
    
    def begin_drag(self, bookmark_id: str) -> None:
        """Start a drag gesture on a bookmark."""
        if self._dragging is not None:
            raise ReorderError(f"Drag of {self._dragging} already in progress")
        self._index_of(bookmark_id)
        self._dragging = bookmark_id
    
    def end_drag(self, target_id: str) -> bool:
        """Drop the dragged bookmark onto target_id.
        
        Positions are resolved against the order at release time. Any
        refresh that arrived during the drag is applied afterwards.
        """
        if self._dragging is None:
            raise ReorderError("No drag in progress")
        
        source_id = self._dragging
        try:
            if target_id == source_id:
                return False
            return self.move_bookmark(source_id, target_id)
        finally:
            self._finish_drag()
    
    def cancel_drag(self) -> None:
        """Abandon the current drag without moving anything."""
        if self._dragging is not None:
            self._finish_drag()
    
    def _finish_drag(self) -> None:
        self._dragging = None
        if self._deferred is not None:
            deferred, self._deferred = self._deferred, None
            self.refresh(deferred)
    
    def _index_of(self, bookmark_id: str) -> int:
        for index, bookmark in enumerate(self._items):
            if bookmark.id == bookmark_id:
                return index
        raise ReorderError(f"Bookmark {bookmark_id} is not in the collection")
    
    def _notify(self) -> None:
        snapshot = self.items
        for listener in self._listeners:
            listener(snapshot)
