"""Tests for the display order primitives."""

import pytest
from pydantic import TypeAdapter

from app.schemas.ordering import (
    AnyOrderedItem,
    OrderedItem,
    PositionUpdate,
    QRCodeItem,
    SocialLinkItem,
)
from app.services.ordering import (
    insert_at,
    is_canonical,
    move_to_position,
    next_append_position,
    position_payload,
    remove_and_repair,
    reorder,
    repair,
    sort_by_position,
)
from tests.conftest import ids_of, make_items, positions_of


class TestReorder:
    """Tests for reorder()."""

    def test_move_first_to_last(self):
        """a,b,c with 0 -> 2 gives b,c,a renumbered."""
        result = reorder(make_items("a", "b", "c"), 0, 2)

        assert [(i.id, i.position) for i in result] == [("b", 0), ("c", 1), ("a", 2)]

    def test_move_last_to_first(self):
        result = reorder(make_items("a", "b", "c", "d"), 3, 0)

        assert ids_of(result) == ["d", "a", "b", "c"]
        assert positions_of(result) == [0, 1, 2, 3]

    def test_elements_outside_range_keep_order(self):
        result = reorder(make_items("a", "b", "c", "d", "e"), 1, 3)

        assert ids_of(result) == ["a", "c", "d", "b", "e"]

    def test_same_index_returns_input(self):
        items = make_items("a", "b", "c")

        assert reorder(items, 1, 1) is items

    def test_same_index_on_corrupted_input_repairs(self):
        items = [OrderedItem(id="a", position=3), OrderedItem(id="b", position=7)]

        result = reorder(items, 0, 0)

        assert positions_of(result) == [0, 1]

    def test_indices_are_clamped(self):
        items = make_items("a", "b", "c")

        assert ids_of(reorder(items, 0, 99)) == ["b", "c", "a"]
        assert ids_of(reorder(items, 99, -4)) == ["c", "a", "b"]

    def test_empty_list(self):
        assert reorder([], 0, 3) == []

    def test_does_not_mutate_input(self):
        items = make_items("a", "b", "c")
        snapshot = [item.model_copy() for item in items]

        reorder(items, 0, 2)

        assert items == snapshot

    def test_payload_fields_survive(self):
        items = [
            SocialLinkItem(id="x", position=0, platform="instagram", url="https://instagram.com/me", label="IG"),
            SocialLinkItem(id="y", position=1, platform="twitch", url="https://twitch.tv/me", label="Live"),
        ]

        result = reorder(items, 1, 0)

        assert result[0].label == "Live"
        assert result[0].position == 0
        assert isinstance(result[1], SocialLinkItem)

    @pytest.mark.parametrize("size", [1, 2, 5])
    def test_every_move_is_canonical_and_keeps_length(self, size):
        items = make_items(*[f"id-{n}" for n in range(size)])

        for from_index in range(size):
            for to_index in range(size):
                result = reorder(items, from_index, to_index)
                assert is_canonical(result)
                assert len(result) == size
                assert sorted(ids_of(result)) == sorted(ids_of(items))


class TestMoveToPosition:
    """Tests for move_to_position()."""

    def test_moves_by_id(self):
        result = move_to_position(make_items("a", "b", "c"), "c", 0)

        assert ids_of(result) == ["c", "a", "b"]
        assert is_canonical(result)

    def test_unknown_id_is_noop(self):
        items = make_items("a", "b")

        assert move_to_position(items, "zzz", 0) is items


class TestInsertAt:
    """Tests for insert_at()."""

    def test_insert_in_middle(self):
        result = insert_at(make_items("a", "b", "c"), OrderedItem(id="n", position=0), 1)

        assert ids_of(result) == ["a", "n", "b", "c"]
        assert positions_of(result) == [0, 1, 2, 3]

    def test_insert_at_start_and_end(self):
        items = make_items("a", "b")

        assert ids_of(insert_at(items, OrderedItem(id="n", position=9), 0)) == ["n", "a", "b"]
        assert ids_of(insert_at(items, OrderedItem(id="n", position=0), 2)) == ["a", "b", "n"]

    def test_out_of_range_positions_clamp(self):
        items = make_items("a", "b")

        assert ids_of(insert_at(items, OrderedItem(id="n", position=0), 50)) == ["a", "b", "n"]
        assert ids_of(insert_at(items, OrderedItem(id="n", position=0), -3)) == ["n", "a", "b"]

    def test_insert_into_empty(self):
        result = insert_at([], OrderedItem(id="n", position=4), 2)

        assert [(i.id, i.position) for i in result] == [("n", 0)]

    def test_insert_into_gapped_list_is_canonical(self):
        items = [OrderedItem(id="a", position=0), OrderedItem(id="b", position=5), OrderedItem(id="c", position=6)]

        result = insert_at(items, OrderedItem(id="n", position=0), 2)

        assert ids_of(result) == ["a", "b", "n", "c"]
        assert is_canonical(result)

    def test_length_grows_by_one(self):
        items = make_items("a", "b", "c")

        for position in range(-1, 5):
            assert len(insert_at(items, OrderedItem(id="n", position=0), position)) == 4


class TestRemoveAndRepair:
    """Tests for remove_and_repair()."""

    def test_remove_middle(self):
        result = remove_and_repair(make_items("a", "b", "c"), "b")

        assert [(i.id, i.position) for i in result] == [("a", 0), ("c", 1)]

    def test_remove_only_item(self):
        assert remove_and_repair(make_items("a"), "a") == []

    def test_unknown_id_is_noop(self):
        items = make_items("a", "b")

        assert remove_and_repair(items, "nope") is items

    def test_every_removal_is_canonical(self):
        items = make_items("a", "b", "c", "d")

        for item in items:
            result = remove_and_repair(items, item.id)
            assert len(result) == 3
            assert is_canonical(result)


class TestSequenceHelpers:
    """Tests for sort/validate/repair helpers."""

    def test_sort_is_stable_and_pure(self):
        items = [
            OrderedItem(id="a", position=2),
            OrderedItem(id="b", position=1),
            OrderedItem(id="c", position=2),
        ]

        result = sort_by_position(items)

        assert ids_of(result) == ["b", "a", "c"]
        assert ids_of(items) == ["a", "b", "c"]

    def test_is_canonical(self):
        assert is_canonical([])
        assert is_canonical(make_items("a", "b"))
        assert is_canonical([OrderedItem(id="a", position=1), OrderedItem(id="b", position=0)])
        assert not is_canonical([OrderedItem(id="a", position=1)])
        assert not is_canonical([OrderedItem(id="a", position=0), OrderedItem(id="b", position=0)])
        assert not is_canonical([OrderedItem(id="a", position=0), OrderedItem(id="b", position=2)])

    def test_repair_ties_keep_input_order(self):
        items = [OrderedItem(id="a", position=5), OrderedItem(id="b", position=5)]

        result = repair(items)

        assert [(i.id, i.position) for i in result] == [("a", 0), ("b", 1)]

    def test_repair_sorts_by_position(self):
        items = [OrderedItem(id="a", position=10), OrderedItem(id="b", position=3)]

        assert [(i.id, i.position) for i in repair(items)] == [("b", 0), ("a", 1)]

    def test_repair_canonical_returns_same_object(self):
        items = make_items("a", "b", "c")

        assert repair(items) is items

    def test_repair_is_idempotent(self):
        repaired = repair([OrderedItem(id="a", position=4), OrderedItem(id="b", position=9)])

        assert repair(repaired) is repaired

    def test_next_append_position(self):
        assert next_append_position([]) == 0
        assert next_append_position(make_items("a", "b")) == 2
        assert next_append_position([OrderedItem(id="a", position=0), OrderedItem(id="b", position=5)]) == 6

    def test_position_payload(self):
        payload = position_payload(reorder(make_items("a", "b"), 0, 1))

        assert payload == [PositionUpdate(id="b", position=0), PositionUpdate(id="a", position=1)]


class TestOrderedItemVariants:
    """Tests for the tagged item union."""

    def test_discriminator_selects_variant(self):
        adapter = TypeAdapter(AnyOrderedItem)

        item = adapter.validate_python({
            "kind": "qr_code",
            "id": "q1",
            "position": 0,
            "type": "social",
            "name": "My IG",
            "data_content": "https://instagram.com/me",
            "linked_social_link_id": "s1",
        })

        assert isinstance(item, QRCodeItem)
        assert item.linked_social_link_id == "s1"

    def test_items_are_frozen(self):
        item = OrderedItem(id="a", position=0)

        with pytest.raises(Exception):
            item.position = 3
