import json
import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from linkmaker.constants import REPORT_WIDTH_ENV  # noqa: E402
from linkmaker.models import CommandInvocation, ProcessResult  # noqa: E402


class RecordingRunner:
    def __init__(self, result: ProcessResult | None = None) -> None:
        self.result = result or ProcessResult(
            stdout="symbolic link created\n", stderr="", exit_code=0
        )
        self.calls: list[CommandInvocation] = []

    def run(self, invocation: CommandInvocation) -> ProcessResult:
        self.calls.append(invocation)
        return self.result


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.delenv(REPORT_WIDTH_ENV, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "linkmaker" / "config.json"


@pytest.fixture
def write_config(config_path: Path):
    def _write(payload: Any) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(payload), encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def python_tool() -> dict[str, Any]:
    """Tool profile that runs the current interpreter instead of mklink."""
    return {
        "executable": sys.executable,
        "base_arguments": ["-c", "import sys; print('linked', *sys.argv[1:])"],
    }


@pytest.fixture
def failing_tool() -> dict[str, Any]:
    return {
        "executable": sys.executable,
        "base_arguments": [
            "-c",
            "import sys; sys.stderr.write('Cannot create a file when that file "
            "already exists.'); sys.exit(1)",
        ],
    }


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    data = tmp_path / "data"
    data.mkdir()
    (data / "file.txt").write_text("payload", encoding="utf-8")
    return data


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def failing_runner() -> RecordingRunner:
    return RecordingRunner(
        ProcessResult(
            stdout="",
            stderr="Cannot create a file when that file already exists.\n",
            exit_code=1,
        )
    )


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
