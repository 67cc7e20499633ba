"""Tests for the example type-check runner."""

from __future__ import annotations

import asyncio
import json
import subprocess
from pathlib import Path
from typing import Dict, List, Mapping

import pytest

from tsdocgen.config import Settings
from tsdocgen.errors import ExampleVerificationError, ResourceError
from tsdocgen.examples import ExampleRunner, spawn
from tsdocgen.examples.runner import aggregator_source
from tsdocgen.filesystem import File, FileSystem


class RecordingSpawn:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: List[tuple] = []
        self.snapshot: Dict[str, str] = {}
        self.error = error

    def __call__(self, command: str, executable: str, env: Mapping[str, str]) -> None:
        self.calls.append((command, executable, dict(env)))
        directory = Path(executable).parent
        self.snapshot = {path.name: path.read_text(encoding="utf-8") for path in directory.iterdir()}
        if self.error is not None:
            raise self.error


def _settings(tmp_path: Path) -> Settings:
    return Settings(out_dir=str(tmp_path / "docs"), examples_compiler_options={"strict": True})


def test_runner_writes_examples_index_and_tsconfig_then_cleans_up(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    examples_dir = tmp_path / "docs" / "examples"
    example = File(str(examples_dir / "src-index.ts-function-f-0.ts"), "f(1)\n", overwrite=True)
    fake = RecordingSpawn()

    asyncio.run(ExampleRunner(command="ts-node", spawn_fn=fake).run([example], settings))

    ((command, executable, env),) = fake.calls
    assert command == "ts-node"
    assert executable == str(examples_dir / "index.ts")
    assert env == {"TS_NODE_PROJECT": str(examples_dir / "tsconfig.json")}
    assert fake.snapshot["index.ts"] == "import './src-index.ts-function-f-0.ts'\n\n"
    assert json.loads(fake.snapshot["tsconfig.json"]) == {"compilerOptions": {"strict": True}}
    assert fake.snapshot["src-index.ts-function-f-0.ts"] == "f(1)\n"
    assert not examples_dir.exists()


def test_runner_cleans_up_after_failure(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    examples_dir = tmp_path / "docs" / "examples"
    example = File(str(examples_dir / "a.ts"), "f(1)\n", overwrite=True)
    fake = RecordingSpawn(ExampleVerificationError("TS2304: Cannot find name 'f'"))

    with pytest.raises(ExampleVerificationError, match="TS2304"):
        asyncio.run(ExampleRunner(spawn_fn=fake).run([example], settings))

    assert not examples_dir.exists()


def test_runner_without_examples_only_removes_directory(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    stale = tmp_path / "docs" / "examples" / "old.ts"
    stale.parent.mkdir(parents=True)
    stale.write_text("x", encoding="utf-8")
    fake = RecordingSpawn()

    asyncio.run(ExampleRunner(spawn_fn=fake).run([], settings))

    assert fake.calls == []
    assert not stale.parent.exists()


def test_aggregator_imports_each_example_by_basename() -> None:
    examples = [File("docs/examples/a.ts", ""), File("docs/examples/b.ts", "")]

    assert aggregator_source(examples) == "import './a.ts'\nimport './b.ts'\n\n"


def test_spawn_raises_with_stderr_on_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: Dict[str, object] = {}

    def fake_run(args, **kwargs):
        captured["args"] = args
        captured["env"] = kwargs["env"]
        return subprocess.CompletedProcess(args, 1, stdout="", stderr="type error")

    monkeypatch.setattr("tsdocgen.examples.runner.subprocess.run", fake_run)

    with pytest.raises(ExampleVerificationError) as excinfo:
        spawn("ts-node", "/tmp/index.ts", {"TS_NODE_PROJECT": "/tmp/tsconfig.json"})

    assert excinfo.value.stderr == "type error"
    assert captured["args"] == ["ts-node", "/tmp/index.ts"]
    assert captured["env"]["TS_NODE_PROJECT"] == "/tmp/tsconfig.json"


def test_spawn_succeeds_on_zero_exit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "tsdocgen.examples.runner.subprocess.run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 0, stdout="", stderr=""),
    )

    spawn("ts-node", "index.ts", {})


def test_spawn_reports_missing_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    def missing(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr("tsdocgen.examples.runner.subprocess.run", missing)

    with pytest.raises(ExampleVerificationError, match="not found"):
        spawn("ts-node", "index.ts", {})


class FailingRemoveFileSystem(FileSystem):
    async def remove(self, pattern: str) -> None:
        raise ResourceError(pattern, f"Unable to remove {pattern}: busy")


def test_type_check_error_survives_a_failed_cleanup(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    example = File(str(tmp_path / "docs" / "examples" / "a.ts"), "f(1)\n", overwrite=True)
    fake = RecordingSpawn(ExampleVerificationError("TS2304: Cannot find name 'f'"))
    runner = ExampleRunner(FailingRemoveFileSystem(), spawn_fn=fake)

    with pytest.raises(ExampleVerificationError) as excinfo:
        asyncio.run(runner.run([example], settings))

    assert excinfo.value.stderr == "TS2304: Cannot find name 'f'"


def test_cleanup_failure_after_success_is_reported(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    example = File(str(tmp_path / "docs" / "examples" / "a.ts"), "f(1)\n", overwrite=True)
    runner = ExampleRunner(FailingRemoveFileSystem(), spawn_fn=RecordingSpawn())

    with pytest.raises(ResourceError, match="busy"):
        asyncio.run(runner.run([example], settings))
