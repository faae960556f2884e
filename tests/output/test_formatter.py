"""Tests for report formatting."""

import json

from flowbuilder.output.formatter import SECRET_MASK, format_kinds, format_replay_result
from flowbuilder.script.loader import parse_script_from_string
from flowbuilder.script.replay import replay_script


def _replay(yaml: str):
    return replay_script(parse_script_from_string(yaml))


class TestFormatReplayText:
    def test_sections(self, pipeline_yaml):
        output = format_replay_result(_replay(pipeline_yaml))

        assert "SCRIPT: Pipeline" in output
        assert "NODES:" in output
        assert "llm-2 [LLM ENGINE] at (350, 30)" in output
        assert "input-1 -> llm-2" in output
        assert "✔ Flow ran successfully" in output
        assert "3 node(s), 2 edge(s), 0 rejected connection(s)" in output

    def test_empty_session(self):
        output = format_replay_result(_replay("events: []"))
        assert output.count("(none)") == 5

    def test_rejection_marked(self):
        output = format_replay_result(
            _replay(
                "events:\n"
                "  - drop: {kind: llm}\n"
                "  - drop: {kind: llm}\n"
                "  - connect: {source: llm-1, target: llm-2}\n"
            )
        )
        assert "✘ 3. connect: rejected llm-1 -> llm-2" in output
        assert "✘ LLM nodes can only connect to Output nodes" in output

    def test_secret_masked(self):
        output = format_replay_result(
            _replay(
                "events:\n"
                "  - drop: {kind: llm}\n"
                "  - set_field: {node: llm-1, field: apiKey, value: sk-secret}\n"
            )
        )
        assert "sk-secret" not in output
        assert SECRET_MASK in output


class TestFormatReplayJson:
    def test_structure(self, pipeline_yaml):
        data = json.loads(format_replay_result(_replay(pipeline_yaml), "json"))

        assert data["name"] == "Pipeline"
        assert [n["id"] for n in data["nodes"]] == ["input-1", "llm-2", "output-3"]
        assert data["nodes"][0]["kind"] == "input"
        assert data["nodes"][0]["position"] == {"x": 50.0, "y": 30.0}
        assert "on_change" not in data["nodes"][0]
        assert data["nodes"][1]["data"]["temperature"] == "0.9"
        assert data["edges"][0]["source"] == "input-1"
        assert data["displayed"] == {"message": "Flow ran successfully", "type": "success"}
        assert data["rejected_count"] == 0

    def test_secret_masked(self):
        data = json.loads(
            format_replay_result(
                _replay(
                    "events:\n"
                    "  - drop: {kind: llm}\n"
                    "  - set_field: {node: llm-1, field: apiKey, value: sk-secret}\n"
                ),
                "json",
            )
        )
        assert data["nodes"][0]["data"]["apiKey"] == SECRET_MASK


class TestFormatKinds:
    def test_text(self):
        output = format_kinds()
        assert "LLM Engine (llm) - LLM ENGINE" in output
        assert "model: enum = 'gpt-3.5' (options: gpt-3.5, gpt-4)" in output
        assert "input -> output: REJECT - Input nodes can only connect to LLM nodes" in output
        assert "output -> input: ALLOW" in output

    def test_json(self):
        data = json.loads(format_kinds("json"))
        assert [k["kind"] for k in data["kinds"]] == ["input", "llm", "output"]
        assert data["kinds"][1]["fields"][4]["name"] == "temperature"
        assert len(data["connections"]) == 9
        allowed = [c for c in data["connections"] if c["allowed"]]
        assert len(allowed) == 5
