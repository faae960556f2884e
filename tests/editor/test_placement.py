"""Tests for node placement and drop decoding."""

import pytest

from flowbuilder.editor.placement import (
    DRAG_MIME_TYPE,
    canvas_position,
    decode_drop,
    drag_payload,
    place,
)
from flowbuilder.graph.models import Node, Position
from flowbuilder.registry.errors import UnknownKindError
from flowbuilder.registry.kinds import NodeKind, default_data


class TestPlace:
    def test_first_node(self, store):
        node = place(store, NodeKind.INPUT, Position(x=10, y=20))

        assert node.id == "input-1"
        assert node.kind == NodeKind.INPUT
        assert node.position == Position(x=10, y=20)
        assert node.data == {"query": ""}
        assert store.nodes == [node]

    def test_ordinal_counts_all_kinds(self, store):
        place(store, NodeKind.LLM_ENGINE, Position(x=0, y=0))
        place(store, NodeKind.OUTPUT, Position(x=0, y=0))

        node = place(store, NodeKind.INPUT, Position(x=0, y=0))
        assert node.id == "input-3"

    def test_interleaved_ids(self, store):
        ids = [
            place(store, kind, Position(x=0, y=0)).id
            for kind in (NodeKind.INPUT, NodeKind.LLM_ENGINE, NodeKind.INPUT, NodeKind.OUTPUT)
        ]
        assert ids == ["input-1", "llm-2", "input-3", "output-4"]

    def test_skips_id_added_outside_placement(self, store):
        store.add_node(
            Node(
                id="llm-2",
                kind=NodeKind.LLM_ENGINE,
                position=Position(x=0, y=0),
                data=default_data(NodeKind.LLM_ENGINE),
            )
        )

        node = place(store, NodeKind.LLM_ENGINE, Position(x=0, y=0))

        assert node.id == "llm-3"
        assert [n.id for n in store.nodes] == ["llm-2", "llm-3"]

    def test_data_keys_match_schema(self, store):
        node = place(store, NodeKind.LLM_ENGINE, Position(x=0, y=0))
        assert set(node.data) == {"model", "apiBase", "apiKey", "maxTokens", "temperature"}

    def test_nodes_do_not_share_data(self, store):
        a = place(store, NodeKind.INPUT, Position(x=0, y=0))
        b = place(store, NodeKind.INPUT, Position(x=0, y=0))
        assert a.data is not b.data

    def test_negative_and_overlapping_positions(self, store):
        a = place(store, NodeKind.OUTPUT, Position(x=-40, y=-5))
        b = place(store, NodeKind.OUTPUT, Position(x=-40, y=-5))
        assert a.position == b.position == Position(x=-40, y=-5)
        assert len(store) == 2

    def test_string_kind(self, store):
        assert place(store, "output", Position(x=0, y=0)).kind == NodeKind.OUTPUT

    def test_unknown_kind_raises(self, store):
        with pytest.raises(UnknownKindError):
            place(store, "database", Position(x=0, y=0))
        assert len(store) == 0

    def test_wires_change_handler(self, store):
        calls = []
        node = place(store, NodeKind.INPUT, Position(x=0, y=0), on_change=lambda *a: calls.append(a))

        node.on_change(node.id, "query", "hi")
        assert calls == [("input-1", "query", "hi")]


class TestDropHelpers:
    def test_drag_payload(self):
        assert drag_payload(NodeKind.LLM_ENGINE) == {DRAG_MIME_TYPE: "llm"}
        assert drag_payload("output") == {"application/reactflow": "output"}

    def test_decode_drop(self):
        assert decode_drop({DRAG_MIME_TYPE: "input"}) is NodeKind.INPUT

    @pytest.mark.parametrize(
        "transfer",
        [{}, {DRAG_MIME_TYPE: ""}, {DRAG_MIME_TYPE: "chart"}, {"text/plain": "input"}],
    )
    def test_decode_drop_unknown(self, transfer):
        assert decode_drop(transfer) is None

    def test_canvas_position_subtracts_offset(self):
        assert canvas_position(150, 80) == Position(x=50, y=30)

    def test_canvas_position_custom_offset(self):
        assert canvas_position(10, 10, (20, 0)) == Position(x=-10, y=10)
