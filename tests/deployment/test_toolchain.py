"""Tests for the native toolchain compiler."""

import asyncio
from pathlib import Path

import pytest

from contract_builder.config.defaults import ToolchainParams
from contract_builder.deployment import toolchain
from contract_builder.deployment.toolchain import MxpyCompiler, write_crate
from contract_builder.errors import CompileError

SOURCE = "#[multiversx_sc::contract]\npub trait Demo {}"


class FakeProcess:
    """Stand-in for asyncio.subprocess.Process."""

    def __init__(self, returncode: int = 0, stderr: bytes = b"", hang: bool = False):
        self.returncode = returncode
        self.stderr = stderr
        self.hang = hang
        self.killed = False
        self.reaped = False

    async def communicate(self):
        if self.hang:
            await asyncio.Event().wait()
        return b"", self.stderr

    def kill(self):
        self.killed = True

    async def wait(self):
        self.reaped = True
        return -9


@pytest.fixture
def build_runs(monkeypatch):
    """
    Replace subprocess creation; returns the list of recorded runs.

    Each run dict holds argv, cwd and the crate files seen at build time.
    Set `runs.behaviour` to control the outcome.
    """
    class Runs(list):
        behaviour = "success"
        process = None

    runs = Runs()

    async def fake_exec(*argv, cwd=None, stdout=None, stderr=None):
        crate = Path(cwd)
        runs.append({
            "argv": list(argv),
            "cwd": crate,
            "lib_rs": (crate / "src" / "lib.rs").read_text(),
            "cargo_toml": (crate / "Cargo.toml").read_text(),
        })
        if runs.behaviour == "missing-tool":
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        if runs.behaviour == "fail":
            return FakeProcess(returncode=1, stderr=b"error[E0425]: cannot find value `x`")
        if runs.behaviour == "hang":
            runs.process = FakeProcess(hang=True)
            return runs.process
        if runs.behaviour == "success":
            (crate / "output").mkdir()
            (crate / "output" / "multiversx-contract.wasm").write_bytes(b"\x00asm\x01\x00\x00\x00")
        return FakeProcess()

    monkeypatch.setattr(toolchain.asyncio, "create_subprocess_exec", fake_exec)
    return runs


class TestWriteCrate:
    """Test the throwaway crate layout."""

    def test_layout(self, tmp_path):
        """Test Cargo.toml pins the framework and lib.rs holds the source."""
        contract_dir = tmp_path / "contract"
        params = ToolchainParams(crate_name="demo", framework_version="0.50.1")

        write_crate(contract_dir, SOURCE, params)

        cargo = (contract_dir / "Cargo.toml").read_text()
        assert 'name = "demo"' in cargo
        assert 'multiversx-sc = "0.50.1"' in cargo
        assert (contract_dir / "src" / "lib.rs").read_text() == SOURCE


class TestMxpyCompiler:
    """Test compilation through the external build command."""

    @pytest.mark.asyncio
    async def test_successful_build(self, build_runs):
        """Test the wasm output is read back into the artifact."""
        artifact = await MxpyCompiler().compile(SOURCE)

        assert artifact.wasm.startswith(b"\x00asm")
        assert len(artifact.source_hash) == 64
        assert artifact.metadata["build_command"] == "mxpy contract build"

        run = build_runs[0]
        assert run["argv"] == ["mxpy", "contract", "build"]
        assert run["lib_rs"] == SOURCE
        assert "multiversx-sc" in run["cargo_toml"]

    @pytest.mark.asyncio
    async def test_temporary_crate_removed(self, build_runs):
        """Test the temporary directory is deleted after the build."""
        await MxpyCompiler().compile(SOURCE)

        assert not build_runs[0]["cwd"].exists()
        assert not build_runs[0]["cwd"].parent.exists()

    @pytest.mark.asyncio
    async def test_build_failure_carries_stderr(self, build_runs):
        """Test a non-zero exit becomes CompileError with the compiler output."""
        build_runs.behaviour = "fail"

        with pytest.raises(CompileError) as exc_info:
            await MxpyCompiler().compile(SOURCE)

        assert str(exc_info.value).startswith("Compilation failed: error[E0425]")
        assert "cannot find value" in exc_info.value.stderr
        assert exc_info.value.step_id == "compile"
        assert not build_runs[0]["cwd"].exists()

    @pytest.mark.asyncio
    async def test_missing_build_tool(self, build_runs):
        """Test an absent build tool is reported as a compile error."""
        build_runs.behaviour = "missing-tool"

        with pytest.raises(CompileError, match="Build tool not found: mxpy"):
            await MxpyCompiler().compile(SOURCE)

    @pytest.mark.asyncio
    async def test_missing_wasm_output(self, build_runs):
        """Test a build that produces no wasm file fails to read the output."""
        build_runs.behaviour = "no-output"

        with pytest.raises(CompileError, match="Error reading compiled WASM file"):
            await MxpyCompiler().compile(SOURCE)

    @pytest.mark.asyncio
    async def test_custom_build_command(self, build_runs):
        """Test the build command is split shell-style from configuration."""
        params = ToolchainParams(build_command="sc-meta all build --locked")

        await MxpyCompiler(params).compile(SOURCE)

        assert build_runs[0]["argv"] == ["sc-meta", "all", "build", "--locked"]

    @pytest.mark.asyncio
    async def test_cancelled_build_is_killed_and_reaped(self, build_runs):
        """Test cancelling compile kills the build process and waits for it."""
        build_runs.behaviour = "hang"
        task = asyncio.create_task(MxpyCompiler().compile(SOURCE))
        for _ in range(100):
            if build_runs.process is not None:
                break
            await asyncio.sleep(0)
        await asyncio.sleep(0)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert build_runs.process.killed is True
        assert build_runs.process.reaped is True
        assert not build_runs[0]["cwd"].exists()
