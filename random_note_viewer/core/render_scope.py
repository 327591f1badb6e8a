from __future__ import annotations

"""Disposable render scopes.

A :class:`RenderScope` owns everything drawn for one selection: widget event
bindings, renderer hooks and nested child scopes. Disposing it releases all
of them synchronously, in reverse order of registration.

:class:`ScopeSlot` models the single "currently live" scope of a panel.
"""

import logging
from typing import Any, Callable, List, Optional

from random_note_viewer.core.interfaces import ChildScopeOwner

logger = logging.getLogger(__name__)

__all__ = ["RenderScope", "ScopeSlot"]


class RenderScope:
    """Owns cleanups and child scopes; disposal is idempotent.

    Parameters
    ----------
    label : str
        Free-form name used in log messages only.
    """

    def __init__(self, label: str = "") -> None:
        self.label = label
        self._cleanups: List[Callable[[], None]] = []
        self._children: List["RenderScope"] = []
        self._parent: Optional["RenderScope"] = None
        self._disposed = False

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else "live"
        return f"RenderScope({self.label!r}, {state})"

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def children(self) -> List["RenderScope"]:
        return list(self._children)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(self, cleanup: Callable[[], None]) -> None:
        """Register a cleanup callable. Runs immediately if already disposed."""
        if self._disposed:
            self._run_cleanup(cleanup)
            return
        self._cleanups.append(cleanup)

    def register_event(self, widget: Any, sequence: str, handler: Callable[..., Any]) -> Optional[str]:
        """Bind ``handler`` on ``widget`` and unbind it when the scope is disposed.

        ``widget`` follows the Tk binding API: ``bind(sequence, func, add)``
        returns a function id accepted by ``unbind(sequence, funcid)``.
        """
        if self._disposed:
            logger.debug("Ignoring %s binding on disposed scope %r", sequence, self)
            return None
        funcid = widget.bind(sequence, handler, "+")

        def _unbind() -> None:
            widget.unbind(sequence, funcid)

        self._cleanups.append(_unbind)
        return funcid

    def add_child(self, scope: "RenderScope") -> "RenderScope":
        if scope._parent is not None and scope._parent is not self:
            scope._parent.remove_child(scope)
        scope._parent = self
        if scope not in self._children:
            self._children.append(scope)
        if self._disposed:
            scope.dispose()
        return scope

    def remove_child(self, scope: "RenderScope") -> None:
        try:
            self._children.remove(scope)
        except ValueError:
            return
        scope._parent = None

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def dispose(self) -> None:
        """Release children, then cleanups, both in reverse order.

        A second call is a no-op. Cleanup failures are logged and do not
        stop the remaining cleanups.
        """
        if self._disposed:
            return
        self._disposed = True

        children, self._children = self._children, []
        for child in reversed(children):
            child._parent = None
            child.dispose()

        cleanups, self._cleanups = self._cleanups, []
        for cleanup in reversed(cleanups):
            self._run_cleanup(cleanup)

        parent = self._parent
        if parent is not None:
            parent.remove_child(self)

    def _run_cleanup(self, cleanup: Callable[[], None]) -> None:
        try:
            cleanup()
        except Exception as exc:
            # Widgets may already be destroyed by a content clear
            logger.debug("Cleanup failed in %r: %s", self, exc)


class ScopeSlot:
    """Nullable single-owner slot holding the live :class:`RenderScope`.

    ``replace`` disposes and detaches the previous scope before installing
    the new one, so at most one scope is ever live in the slot.

    Parameters
    ----------
    owner : ChildScopeOwner, optional
        Any object with ``add_child``/``remove_child``. Installed scopes
        are attached to it and detached again on replacement.
    """

    def __init__(self, owner: Optional[ChildScopeOwner] = None) -> None:
        if owner is not None and not isinstance(owner, ChildScopeOwner):
            raise TypeError(f"ScopeSlot owner must implement add_child/remove_child, got {type(owner).__name__}")
        self._owner = owner
        self._scope: Optional[RenderScope] = None

    @property
    def current(self) -> Optional[RenderScope]:
        return self._scope

    def is_live(self, scope: Optional[RenderScope]) -> bool:
        return scope is not None and scope is self._scope and not scope.disposed

    def replace(self, scope: RenderScope) -> RenderScope:
        self.clear()
        if self._owner is not None:
            self._owner.add_child(scope)
        self._scope = scope
        return scope

    def clear(self) -> None:
        old, self._scope = self._scope, None
        if old is None:
            return
        old.dispose()
        if self._owner is not None:
            self._owner.remove_child(old)
