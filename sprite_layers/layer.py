"""Composite container that moves a group of sprites as one unit."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from sprite_layers.errors import AlreadyAttachedError, NotAttachedError
from sprite_layers.member import LayerMember

if TYPE_CHECKING:
    from sprite_layers.draw_component import DrawComponent

_LOGGER = logging.getLogger("SpriteLayers.Layer")


class Layer(LayerMember):
    """Adjust X, Y and z-index of a group of sprites at once.

    Callers ``add`` sprites (or other layers) to the layer, then ``attach`` it
    to a :class:`DrawComponent`, which registers every sprite found in the tree.
    From then on the setters (``set_x`` and friends) reposition every member.

    A layer never schedules redraws: call ``DrawComponent.redraw_surface()``
    after mutating it.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y, 0)
        self._members: List[LayerMember] = []
        self._surface: Optional["DrawComponent"] = None
        self._attached = False

    def __repr__(self) -> str:
        return f"Layer(x={self._local_x!r}, y={self._local_y!r}, z_index={self._local_z!r}, members={len(self._members)})"

    @property
    def members(self) -> Tuple[LayerMember, ...]:
        return tuple(self._members)

    @property
    def surface(self) -> Optional["DrawComponent"]:
        """Surface recorded by the last ``attach``; kept after ``detach``."""

        return self._surface

    @property
    def attached(self) -> bool:
        return self._attached

    # -- membership -----------------------------------------------------------

    def add(self, member: LayerMember) -> None:
        """Append ``member`` and resolve it against this layer's offset.

        Adding the same member twice lists it twice; adding a member owned by
        another layer only moves its back-reference.
        """

        self._members.append(member)
        member.layer = self
        member.local_x = member.local_x
        member.local_y = member.local_y
        member.local_z = member.local_z

    def attach(self, surface: "DrawComponent") -> None:
        """Register every sprite of this tree with ``surface``.

        Sprites that already report a component are skipped, so attaching the
        same tree twice never registers a sprite twice. The whole tree is
        checked before anything is registered; on ``AlreadyAttachedError``
        nothing has changed.
        """

        self._check_attachable(surface)
        self._register(surface)
        _LOGGER.debug("Attached layer with %d member(s)", len(self._members))

    def _register(self, surface: "DrawComponent") -> None:
        self._surface = surface
        self._attached = True
        for member in self._members:
            member._deploy_to(surface)

    def detach(self) -> None:
        """Unregister every sprite of this tree from the attached surface.

        Membership is left intact so the layer can be attached again. The
        surface reference is not cleared.
        """

        surface = self._surface
        if surface is None:
            raise NotAttachedError("layer was never attached to a surface")
        for member in self._members:
            member._undeploy_from(surface)
        self._attached = False
        _LOGGER.debug("Detached layer with %d member(s)", len(self._members))

    def remove(self, target: LayerMember) -> None:
        """Remove ``target`` from this layer or any nested layer.

        Direct members are checked first; on a miss every nested layer is
        searched in turn. A target that is nowhere in the tree is ignored.
        Removing a nested layer detaches its sprites but keeps its own members.
        """

        if not self._remove_member(target):
            _LOGGER.debug("remove(%r): target not found", target)

    def _remove_member(self, target: LayerMember) -> bool:
        for index, member in enumerate(self._members):
            if member is target:
                del self._members[index]
                member._discard_from(self)
                return True

        # No early exit: every nested layer is searched even after a hit.
        found = False
        for member in list(self._members):
            if member._remove_nested(target):
                found = True
        return found

    def clear(self) -> None:
        while self._members:
            self.remove(self._members[0])

    def has_sprite(self, target: LayerMember) -> bool:
        for member in self._members:
            if member._contains(target):
                return True
        return False

    def set_member_cursor(self, cursor: Any) -> None:
        """Assign ``cursor`` to every sprite in the tree."""

        for member in self._members:
            member._apply_cursor(cursor)

    # -- transform ------------------------------------------------------------

    @property
    def x(self) -> float:
        return self._local_x

    @property
    def y(self) -> float:
        return self._local_y

    @property
    def z_index(self) -> int:
        return self._local_z

    def get_x(self) -> float:
        return self._local_x

    def get_y(self) -> float:
        return self._local_y

    def get_z_index(self) -> int:
        return self._local_z

    def set_x(self, value: float) -> None:
        if value == self._local_x:
            return
        self._local_x = value
        self._resolve_x()

    def set_y(self, value: float) -> None:
        if value == self._local_y:
            return
        self._local_y = value
        self._resolve_y()

    def set_z_index(self, value: int) -> None:
        if value == self._local_z:
            return
        self._local_z = value
        self._resolve_z()

    @property
    def absolute_x(self) -> float:
        return self._local_x + self._owner_x()

    @property
    def absolute_y(self) -> float:
        return self._local_y + self._owner_y()

    @property
    def absolute_z(self) -> int:
        return self._local_z + self._owner_z()

    # -- LayerMember hooks (this layer nested inside another) -----------------

    def _resolve_x(self) -> None:
        for member in self._members:
            member.local_x = member.local_x

    def _resolve_y(self) -> None:
        for member in self._members:
            member.local_y = member.local_y

    def _resolve_z(self) -> None:
        for member in self._members:
            member.local_z = member.local_z

    def _check_attachable(self, surface: "DrawComponent") -> None:
        if self._attached and self._surface is not surface:
            _LOGGER.warning("Layer %r is already attached to another surface; detach it first", self)
            raise AlreadyAttachedError("layer is already attached to a different surface")
        for member in self._members:
            member._check_attachable(surface)

    def _deploy_to(self, surface: "DrawComponent") -> None:
        self._register(surface)

    def _undeploy_from(self, surface: Optional["DrawComponent"]) -> None:
        if self._surface is None:
            # Added after the parent was attached and never attached itself.
            return
        self.detach()

    def _discard_from(self, owner: "Layer") -> None:
        if self._surface is not None:
            self.detach()

    def _remove_nested(self, target: LayerMember) -> bool:
        return self._remove_member(target)

    def _contains(self, target: LayerMember) -> bool:
        return self.has_sprite(target)

    def _apply_cursor(self, cursor: Any) -> None:
        self.set_member_cursor(cursor)
