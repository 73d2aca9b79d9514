import json
from pathlib import Path

import pytest

from autopush import server as server_module
from autopush.git.contracts import Outcome, RunState, WorkflowResult
from autopush.server import AutoPushMCPServer


@pytest.fixture
def server() -> AutoPushMCPServer:
    return AutoPushMCPServer()


class TestHealthCheck:
    def test_returns_ok_status(self, server: AutoPushMCPServer) -> None:
        data = json.loads(server._handle_health_check({})[0].text)

        assert data["status"] == "ok"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data


class TestCommitAndPush:
    def test_rejects_missing_directory(self, server: AutoPushMCPServer, tmp_path: Path) -> None:
        data = json.loads(server._handle_commit_and_push({"project_path": str(tmp_path / "nope")})[0].text)

        assert data["status"] == "error"
        assert "Not a directory" in data["error"]

    def test_missing_key_is_reported(self, server, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "")

        data = json.loads(server._handle_commit_and_push({"project_path": str(tmp_path)})[0].text)

        assert data == {"status": "error", "error": "GEMINI_API_KEY is not set"}

    def test_returns_workflow_result(self, server, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "abc")
        monkeypatch.delenv("AUTOPUSH_TIMEOUT", raising=False)
        seen = []

        def fake_run(path, settings):
            seen.append(path)
            return WorkflowResult(state=RunState.DONE, outcome=Outcome.UP_TO_DATE)

        monkeypatch.setattr(server_module, "run_workflow", fake_run)

        data = json.loads(server._handle_commit_and_push({"project_path": str(tmp_path)})[0].text)

        assert seen == [tmp_path]
        assert data["outcome"] == "up to date"
        assert data["state"] == "done"


@pytest.mark.asyncio
async def test_tools_registered(server: AutoPushMCPServer) -> None:
    tools = await server._list_tools()

    assert [t.name for t in tools] == ["commit_and_push", "health_check"]


@pytest.mark.asyncio
async def test_unknown_tool(server: AutoPushMCPServer) -> None:
    result = await server._call_tool("rebase_everything", {})

    assert result[0].text == "Unknown tool: rebase_everything"


def test_dotenv_of_one_project_does_not_leak_into_the_next(server, tmp_path, monkeypatch) -> None:
    for name in ("GEMINI_API_KEY", "AUTOPUSH_REMOTE", "AUTOPUSH_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    project_a = tmp_path / "a"
    project_b = tmp_path / "b"
    project_a.mkdir()
    project_b.mkdir()
    (project_a / ".env").write_text("GEMINI_API_KEY=key-a\nAUTOPUSH_REMOTE=mirror\n", encoding="utf-8")
    seen = []

    def fake_run(path, settings):
        seen.append(settings)
        return WorkflowResult(state=RunState.DONE, outcome=Outcome.UP_TO_DATE)

    monkeypatch.setattr(server_module, "run_workflow", fake_run)

    server._handle_commit_and_push({"project_path": str(project_a)})
    data = json.loads(server._handle_commit_and_push({"project_path": str(project_b)})[0].text)

    assert [(s.api_key, s.remote) for s in seen] == [("key-a", "mirror")]
    assert data == {"status": "error", "error": "GEMINI_API_KEY is not set"}
