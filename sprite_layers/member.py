"""Capability shared by everything a Layer can hold (sprites and nested layers)."""
from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from sprite_layers.draw_component import DrawComponent
    from sprite_layers.layer import Layer


class LayerMember(ABC):
    """Something with a local position that a Layer can own.

    Local coordinates are relative to the owning layer. Writing one of them
    resolves the member against the owner's absolute offset, so a layer pushes
    its own offset down by round-tripping ``member.local_x = member.local_x``.

    The owning layer is held through a weak reference; the layer's member list
    is the only strong edge between the two.
    """

    def __init__(self, local_x: float = 0.0, local_y: float = 0.0, local_z: int = 0) -> None:
        self._local_x = local_x
        self._local_y = local_y
        self._local_z = local_z
        self._layer_ref: Optional["weakref.ReferenceType[Layer]"] = None
        self._cursor: Any = None

    # -- owner back-reference -------------------------------------------------

    @property
    def layer(self) -> Optional["Layer"]:
        ref = self._layer_ref
        if ref is None:
            return None
        return ref()

    @layer.setter
    def layer(self, value: Optional["Layer"]) -> None:
        self._layer_ref = weakref.ref(value) if value is not None else None

    def _owner_x(self) -> float:
        layer = self.layer
        return layer.absolute_x if layer is not None else 0.0

    def _owner_y(self) -> float:
        layer = self.layer
        return layer.absolute_y if layer is not None else 0.0

    def _owner_z(self) -> int:
        layer = self.layer
        return layer.absolute_z if layer is not None else 0

    # -- local coordinates ----------------------------------------------------

    @property
    def local_x(self) -> float:
        return self._local_x

    @local_x.setter
    def local_x(self, value: float) -> None:
        self._local_x = value
        self._resolve_x()

    @property
    def local_y(self) -> float:
        return self._local_y

    @local_y.setter
    def local_y(self, value: float) -> None:
        self._local_y = value
        self._resolve_y()

    @property
    def local_z(self) -> int:
        return self._local_z

    @local_z.setter
    def local_z(self, value: int) -> None:
        self._local_z = value
        self._resolve_z()

    @property
    def cursor(self) -> Any:
        return self._cursor

    @cursor.setter
    def cursor(self, value: Any) -> None:
        self._cursor = value

    # -- hooks implemented by Sprite and Layer --------------------------------

    @abstractmethod
    def _resolve_x(self) -> None: ...

    @abstractmethod
    def _resolve_y(self) -> None: ...

    @abstractmethod
    def _resolve_z(self) -> None: ...

    def _check_attachable(self, surface: "DrawComponent") -> None:
        """Raise before anything is registered if ``surface`` would conflict."""

    @abstractmethod
    def _deploy_to(self, surface: "DrawComponent") -> None: ...

    @abstractmethod
    def _undeploy_from(self, surface: Optional["DrawComponent"]) -> None: ...

    @abstractmethod
    def _discard_from(self, owner: "Layer") -> None:
        """Tear down after ``owner`` dropped this member from its list."""

    def _remove_nested(self, target: "LayerMember") -> bool:
        return False

    @abstractmethod
    def _contains(self, target: "LayerMember") -> bool: ...

    @abstractmethod
    def _apply_cursor(self, cursor: Any) -> None: ...
