from __future__ import annotations

import gc
from typing import List, Tuple

import pytest

from sprite_layers.draw_component import DrawComponent
from sprite_layers.errors import AlreadyAttachedError, NotAttachedError
from sprite_layers.layer import Layer
from sprite_layers.member import LayerMember
from sprite_layers.sprites import RectSprite, Sprite


class _RecordingSprite(Sprite):
    """Sprite that records every write to its local coordinates."""

    def __init__(self, x: float = 0.0, y: float = 0.0, z_index: int = 0) -> None:
        super().__init__(x, y, z_index)
        self.writes: List[Tuple[str, float]] = []

    def _resolve_x(self) -> None:
        self.writes.append(("x", self._local_x))
        super()._resolve_x()

    def _resolve_y(self) -> None:
        self.writes.append(("y", self._local_y))
        super()._resolve_y()

    def _resolve_z(self) -> None:
        self.writes.append(("z", self._local_z))
        super()._resolve_z()

    def paint(self, adapter) -> None:  # noqa: ANN001
        return None


class _RecordingSurface(DrawComponent):
    def __init__(self) -> None:
        super().__init__()
        self.calls: List[Tuple[str, Sprite]] = []

    def add_sprite(self, sprite: Sprite) -> None:
        self.calls.append(("add", sprite))
        super().add_sprite(sprite)

    def remove_sprite(self, sprite: Sprite) -> None:
        self.calls.append(("remove", sprite))
        super().remove_sprite(sprite)


def test_add_resolves_member_against_layer_offset() -> None:
    layer = Layer(10, 20)
    sprite = RectSprite(1, 2, 5, 5)
    layer.set_z_index(3)

    layer.add(sprite)

    assert (sprite.x, sprite.y, sprite.z_index) == (11, 22, 3)
    assert (sprite.local_x, sprite.local_y, sprite.local_z) == (1, 2, 0)
    assert sprite.layer is layer
    assert layer.members == (sprite,)


def test_add_round_trips_each_axis_once() -> None:
    layer = Layer()
    sprite = _RecordingSprite(4, 5, 6)

    layer.add(sprite)

    assert sprite.writes == [("x", 4), ("y", 5), ("z", 6)]


def test_adding_twice_duplicates_member() -> None:
    layer = Layer()
    sprite = RectSprite()
    layer.add(sprite)
    layer.add(sprite)
    assert layer.members == (sprite, sprite)


def test_readding_elsewhere_moves_back_reference_only() -> None:
    first = Layer(5, 0)
    second = Layer(50, 0)
    sprite = RectSprite(1, 0)
    first.add(sprite)
    second.add(sprite)

    assert sprite.layer is second
    assert sprite.x == 51
    assert first.members == (sprite,)


def test_back_reference_is_weak() -> None:
    sprite = RectSprite()
    layer = Layer()
    layer.add(sprite)
    del layer
    gc.collect()
    assert sprite.layer is None


def test_set_x_same_value_skips_propagation() -> None:
    layer = Layer(7, 0)
    sprite = _RecordingSprite()
    layer.add(sprite)
    sprite.writes.clear()

    layer.set_x(7)
    layer.set_y(0)
    layer.set_z_index(0)

    assert sprite.writes == []


def test_set_x_propagates_once_per_direct_member() -> None:
    layer = Layer()
    first = _RecordingSprite(1, 0)
    second = _RecordingSprite(2, 0)
    layer.add(first)
    layer.add(second)
    first.writes.clear()
    second.writes.clear()

    layer.set_x(10)

    assert first.writes == [("x", 1)]
    assert second.writes == [("x", 2)]
    assert (first.x, second.x) == (11, 12)
    assert layer.x == 10
    assert layer.get_x() == 10


def test_set_y_and_z_index_propagate() -> None:
    layer = Layer()
    sprite = RectSprite(0, 3, z_index=2)
    layer.add(sprite)

    layer.set_y(-4)
    layer.set_z_index(5)

    assert sprite.y == -1
    assert sprite.z_index == 7
    assert (layer.get_y(), layer.get_z_index()) == (-4, 5)


def test_nested_layer_propagation_uses_member_round_trip(monkeypatch: pytest.MonkeyPatch) -> None:
    outer = Layer()
    inner = Layer(3, 0)
    leaf = RectSprite(1, 1)
    inner.add(leaf)
    outer.add(inner)

    calls: List[float] = []
    monkeypatch.setattr(inner, "set_x", lambda value: calls.append(value))

    outer.set_x(10)

    assert calls == []
    assert inner.x == 3
    assert inner.absolute_x == 13
    assert leaf.x == 14


def test_attach_registers_every_sprite_in_insertion_order() -> None:
    surface = _RecordingSurface()
    root = Layer()
    first = RectSprite()
    nested = Layer()
    deep = RectSprite()
    last = RectSprite()
    nested.add(deep)
    root.add(first)
    root.add(nested)
    root.add(last)

    root.attach(surface)

    assert surface.calls == [("add", first), ("add", deep), ("add", last)]
    assert root.surface is surface
    assert nested.surface is surface
    assert root.attached


def test_attach_twice_with_same_surface_is_idempotent() -> None:
    surface = _RecordingSurface()
    root = Layer()
    sprite = RectSprite()
    root.add(sprite)

    root.attach(surface)
    root.attach(surface)

    assert surface.calls == [("add", sprite)]
    assert len(surface) == 1


def test_attach_skips_sprite_registered_elsewhere() -> None:
    other = DrawComponent()
    surface = _RecordingSurface()
    sprite = RectSprite()
    other.add_sprite(sprite)
    root = Layer()
    root.add(sprite)

    root.attach(surface)

    assert surface.calls == []
    assert sprite.component is other


def test_attach_to_different_surface_while_attached_raises() -> None:
    root = Layer()
    root.add(RectSprite())
    root.attach(DrawComponent())

    with pytest.raises(AlreadyAttachedError):
        root.attach(DrawComponent())


def test_attach_to_new_surface_after_detach_is_allowed() -> None:
    first = DrawComponent()
    second = DrawComponent()
    root = Layer()
    sprite = RectSprite()
    root.add(sprite)

    root.attach(first)
    root.detach()
    root.attach(second)

    assert sprite.component is second
    assert root.surface is second
    assert len(first) == 0


def test_detach_unregisters_but_keeps_tree_and_surface() -> None:
    surface = DrawComponent()
    root = Layer()
    nested = Layer()
    a = RectSprite()
    b = RectSprite()
    nested.add(b)
    root.add(a)
    root.add(nested)
    root.attach(surface)

    root.detach()

    assert len(surface) == 0
    assert a.component is None and b.component is None
    assert root.members == (a, nested)
    assert nested.members == (b,)
    assert root.surface is surface
    assert not root.attached


def test_detach_never_attached_raises() -> None:
    with pytest.raises(NotAttachedError):
        Layer().detach()


def test_detach_skips_nested_layer_added_after_attach() -> None:
    surface = DrawComponent()
    root = Layer()
    root.add(RectSprite())
    root.attach(surface)
    late = Layer()
    late.add(RectSprite())
    root.add(late)

    root.detach()

    assert len(surface) == 0


def test_remove_direct_sprite_unregisters_it() -> None:
    surface = _RecordingSurface()
    root = Layer()
    keep = RectSprite()
    drop = RectSprite()
    root.add(keep)
    root.add(drop)
    root.attach(surface)

    root.remove(drop)

    assert root.members == (keep,)
    assert not root.has_sprite(drop)
    assert drop.component is None
    assert surface.calls[-1] == ("remove", drop)


def test_remove_before_attach_only_drops_membership() -> None:
    root = Layer()
    sprite = RectSprite()
    root.add(sprite)
    root.remove(sprite)
    assert root.members == ()


def test_remove_nested_layer_detaches_but_keeps_its_members() -> None:
    surface = DrawComponent()
    root = Layer()
    nested = Layer()
    child = RectSprite()
    nested.add(child)
    root.add(nested)
    root.attach(surface)

    root.remove(nested)

    assert root.members == ()
    assert nested.members == (child,)
    assert child.component is None
    assert len(surface) == 0


def test_remove_searches_nested_layers() -> None:
    surface = DrawComponent()
    root = Layer()
    middle = Layer()
    bottom = Layer()
    target = RectSprite()
    bottom.add(target)
    middle.add(bottom)
    root.add(middle)
    root.attach(surface)

    root.remove(target)

    assert bottom.members == ()
    assert not root.has_sprite(target)
    assert target.component is None


def test_remove_visits_every_nested_layer() -> None:
    root = Layer()
    left = Layer()
    right = Layer()
    shared = RectSprite()
    left.add(shared)
    right.add(shared)
    root.add(left)
    root.add(right)

    assert root._remove_member(shared) is True
    assert left.members == ()
    assert right.members == ()


def test_remove_prefers_direct_member_over_nested_copy() -> None:
    root = Layer()
    nested = Layer()
    sprite = RectSprite()
    nested.add(sprite)
    root.add(sprite)
    root.add(nested)

    root.remove(sprite)

    assert root.members == (nested,)
    assert nested.members == (sprite,)


def test_remove_absent_target_is_silent() -> None:
    root = Layer()
    nested = Layer()
    nested.add(RectSprite())
    root.add(nested)

    root.remove(RectSprite())

    assert root._remove_member(RectSprite()) is False
    assert len(root.members) == 1
    assert len(nested.members) == 1


def test_clear_empties_members_and_unregisters() -> None:
    surface = DrawComponent()
    root = Layer()
    nested = Layer()
    sprites = [RectSprite() for _ in range(3)]
    nested.add(sprites[2])
    root.add(sprites[0])
    root.add(nested)
    root.add(sprites[1])
    root.attach(surface)

    root.clear()

    assert root.members == ()
    assert len(surface) == 0
    assert all(sprite.component is None for sprite in sprites)


def test_has_sprite_is_depth_first_identity_query() -> None:
    root = Layer()
    nested = Layer()
    deep = RectSprite()
    nested.add(deep)
    root.add(nested)

    assert root.has_sprite(deep)
    assert not root.has_sprite(RectSprite())
    assert not root.has_sprite(nested)


def test_set_member_cursor_reaches_every_sprite() -> None:
    root = Layer()
    nested = Layer()
    a = RectSprite()
    b = RectSprite()
    nested.add(b)
    root.add(a)
    root.add(nested)

    root.set_member_cursor("crosshair")

    assert a.cursor == "crosshair"
    assert b.cursor == "crosshair"


def test_failed_attach_leaves_tree_untouched() -> None:
    first = DrawComponent()
    second = DrawComponent()
    outer = Layer()
    leading = RectSprite()
    inner = Layer()
    inner_sprite = RectSprite()
    inner.add(inner_sprite)
    inner.attach(second)
    outer.add(leading)
    outer.add(inner)

    with pytest.raises(AlreadyAttachedError):
        outer.attach(first)

    assert not outer.attached
    assert outer.surface is None
    assert len(first) == 0
    assert leading.component is None
    assert inner.surface is second
    assert inner_sprite.component is second


def test_failed_attach_on_deep_conflict_registers_nothing() -> None:
    surface = DrawComponent()
    outer = Layer()
    middle = Layer()
    bottom = Layer()
    bottom.add(RectSprite())
    bottom.attach(DrawComponent())
    middle.add(RectSprite())
    middle.add(bottom)
    outer.add(RectSprite())
    outer.add(middle)

    with pytest.raises(AlreadyAttachedError):
        outer.attach(surface)

    assert len(surface) == 0
    assert not middle.attached


def test_attach_succeeds_once_conflicting_nested_layer_is_detached() -> None:
    surface = DrawComponent()
    elsewhere = DrawComponent()
    outer = Layer()
    inner = Layer()
    sprite = RectSprite()
    inner.add(sprite)
    inner.attach(elsewhere)
    outer.add(inner)

    inner.detach()
    outer.attach(surface)

    assert sprite.component is surface
    assert len(elsewhere) == 0


def test_reattach_after_nested_layer_removed_and_readded() -> None:
    surface = DrawComponent()
    outer = Layer()
    inner = Layer()
    sprite = RectSprite()
    inner.add(sprite)
    outer.add(inner)
    outer.attach(surface)

    outer.remove(inner)
    assert not inner.attached
    assert sprite.component is None

    outer.add(inner)
    outer.attach(surface)

    assert inner.attached
    assert sprite.component is surface
    assert len(surface) == 1


def test_readded_nested_layer_attached_elsewhere_blocks_reattach() -> None:
    surface = DrawComponent()
    elsewhere = DrawComponent()
    outer = Layer()
    inner = Layer()
    inner.add(RectSprite())
    outer.add(inner)
    outer.attach(surface)
    outer.remove(inner)
    inner.attach(elsewhere)
    outer.add(inner)

    with pytest.raises(AlreadyAttachedError):
        outer.attach(surface)

    assert inner.surface is elsewhere
    assert len(surface) == 0
    assert len(elsewhere) == 1


def test_remove_after_detach_skips_stale_surface() -> None:
    surface = _RecordingSurface()
    layer = Layer()
    sprite = RectSprite()
    layer.add(sprite)
    layer.attach(surface)
    layer.detach()
    surface.calls.clear()

    layer.remove(sprite)

    assert surface.calls == []
    assert layer.members == ()


def test_incomplete_member_subclass_cannot_be_created() -> None:
    class _HalfBuilt(LayerMember):
        def _resolve_x(self) -> None:
            return None

    with pytest.raises(TypeError):
        _HalfBuilt()
