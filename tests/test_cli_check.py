"""Tests for the `stateauditor check` command."""

import json

import pytest
from click.testing import CliRunner

from stateauditor.cli import cli
from stateauditor.utils.exit_codes import ExitCodes

MISNAMED = "import { useState } from 'react'\nconst [color, setFlavor] = useState()\n"
CLEAN = "import { useState } from 'react'\nconst [color, setColor] = useState()\n"


@pytest.fixture
def project(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "App.jsx").write_text(MISNAMED)
    (src / "Clean.tsx").write_text(CLEAN)
    (src / "notes.md").write_text(MISNAMED)
    vendored = tmp_path / "node_modules" / "lib"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text(MISNAMED)
    return tmp_path


def _invoke(*args):
    runner = CliRunner()
    with runner.isolated_filesystem():
        return runner.invoke(cli, ["check", *args])


class TestCheckCommand:
    def test_json_output(self, project):
        result = _invoke("--config", str(project / "pyproject.toml"), "--json", str(project))

        assert result.exit_code == ExitCodes.FINDINGS_PRESENT
        findings = json.loads(result.stdout)
        assert len(findings) == 1
        assert findings[0]["file"].endswith("App.jsx")
        assert findings[0]["line"] == 2
        assert findings[0]["rule"] == "react-hook-use-state"

    def test_clean_file_exits_zero(self, project):
        result = _invoke("--config", str(project / "pyproject.toml"), str(project / "src" / "Clean.tsx"))
        assert result.exit_code == ExitCodes.SUCCESS

    def test_fix_rewrites_file(self, project):
        result = _invoke("--config", str(project / "pyproject.toml"), "--fix", str(project / "src"))

        assert result.exit_code == ExitCodes.SUCCESS
        assert (project / "src" / "App.jsx").read_text() == CLEAN

    def test_config_table_is_honoured(self, project):
        (project / "pyproject.toml").write_text('[tool.stateauditor]\ntracked_module = "preact/hooks"\n')
        result = _invoke("--config", str(project / "pyproject.toml"), "--json", str(project / "src"))

        assert result.exit_code == ExitCodes.SUCCESS
        assert json.loads(result.stdout) == []

    def test_bad_config_is_reported(self, project):
        (project / "pyproject.toml").write_text("[tool.stateauditor]\nbogus = 'x'\n")
        result = _invoke("--config", str(project / "pyproject.toml"), str(project / "src"))

        assert result.exit_code != ExitCodes.SUCCESS
        assert "ConfigError" in result.output
