"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from flowbuilder.config import EditorSettings
from flowbuilder.editor.scheduler import VirtualScheduler
from flowbuilder.editor.session import WorkflowEditor
from flowbuilder.graph.models import Position
from flowbuilder.graph.store import GraphStore
from flowbuilder.registry.kinds import NodeKind
from flowbuilder.editor.placement import place


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def store() -> GraphStore:
    """Return an empty graph store."""
    return GraphStore()


@pytest.fixture
def pipeline_store(store) -> GraphStore:
    """Return a store holding input-1, llm-2 and output-3."""
    place(store, NodeKind.INPUT, Position(x=0, y=0))
    place(store, NodeKind.LLM_ENGINE, Position(x=300, y=0))
    place(store, NodeKind.OUTPUT, Position(x=600, y=0))
    return store


@pytest.fixture
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture
def editor(scheduler) -> WorkflowEditor:
    """Return an editor with default settings and a virtual clock."""
    return WorkflowEditor(settings=EditorSettings(), scheduler=scheduler)


@pytest.fixture
def pipeline_yaml() -> str:
    """Return a script building a full pipeline."""
    return """
name: Pipeline
events:
  - drop: {kind: input, x: 150, y: 80}
  - drop: {kind: llm, x: 450, y: 80}
  - drop: {kind: output, x: 750, y: 80}
  - set_field: {node: llm-2, field: temperature, value: "0.9"}
  - connect: {source: input-1, target: llm-2}
  - connect: {source: llm-2, target: output-3}
  - run
"""
