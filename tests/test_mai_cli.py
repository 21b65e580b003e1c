import json

import pytest

from Mai.cli import main

CONTEXT = {
    "currentApp": "Chrome",
    "browserCtx": {"building": "HubSpot", "apartment": "Project Alpha", "room": "Deals"},
    "recentActions": [
        {"time": "11:00", "category": "Slack", "duration_s": 45},
        {"time": "11:01", "building": "HubSpot", "apartment": "Project Alpha", "room": "Deals", "duration_s": 30, "typed": True},
    ],
    "timeOfDay": {"hour": 11, "dayName": "Friday"},
}


@pytest.fixture
def context_file(tmp_path):
    path = tmp_path / "context.json"
    path.write_text(json.dumps(CONTEXT), encoding="utf-8")
    return path


def test_hpf_command_prints_local_result(context_file, capsys):
    main(["hpf", "--context", str(context_file)])
    result = json.loads(capsys.readouterr().out)
    assert result["H"] == "Before this, you were in Slack for ~45s."
    assert result["P"] == "You're in HubSpot › Deals › Project Alpha — actively typing."
    assert len(result["F"]) == 2


def test_prompt_command_prints_both_prompts(context_file, capsys):
    main(["prompt", "--context", str(context_file)])
    out = capsys.readouterr().out
    assert "You are Mai." in out
    assert "NOW: HubSpot › Deals › Project Alpha" in out
    assert "11:01 — HubSpot › Deals › Project Alpha 30s [typed]" in out


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
