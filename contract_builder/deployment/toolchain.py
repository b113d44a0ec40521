"""
Native toolchain compiler.

Builds contract source with the MultiversX toolchain: a throwaway crate is
written to a temporary directory, the build command runs there, and the
resulting wasm is read back. Requires Rust and mxpy on the host.
"""

import asyncio
import hashlib
import secrets
import shlex
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from ..config.defaults import ToolchainParams
from ..errors import CompileError
from ..logging.config import get_logger
from .models import CompiledArtifact

logger = get_logger(__name__)

CARGO_TOML = """[package]
name = "{crate_name}"
version = "0.1.0"
edition = "2021"

[lib]
path = "src/lib.rs"

[dependencies]
multiversx-sc = "{framework_version}"

[dev-dependencies]
multiversx-sc-scenario = "{framework_version}"
"""


def write_crate(contract_dir: Path, source: str, params: ToolchainParams) -> None:
    """Lay out Cargo.toml and src/lib.rs for a single-file contract."""
    (contract_dir / "src").mkdir(parents=True)
    (contract_dir / "Cargo.toml").write_text(CARGO_TOML.format(
        crate_name=params.crate_name,
        framework_version=params.framework_version,
    ))
    (contract_dir / "src" / "lib.rs").write_text(source)


class MxpyCompiler:
    """ArtifactCompiler backed by `mxpy contract build`."""

    def __init__(self, params: Optional[ToolchainParams] = None):
        self.params = params or ToolchainParams()
        self.logger = logger

    async def compile(self, source: str) -> CompiledArtifact:
        tmp_dir = Path(tempfile.mkdtemp(prefix="multiversx-contract-"))
        contract_dir = tmp_dir / f"contract-{secrets.token_hex(8)}"

        try:
            write_crate(contract_dir, source, self.params)
            await self._build(contract_dir)
            wasm = self._read_output(contract_dir)
        finally:
            shutil.rmtree(tmp_dir, ignore_errors=True)

        self.logger.info("Contract compiled", wasm_size=len(wasm))
        return CompiledArtifact(
            wasm=wasm,
            source_hash=hashlib.sha256(source.encode("utf-8")).hexdigest(),
            metadata={"build_command": self.params.build_command},
        )

    async def _build(self, contract_dir: Path) -> None:
        argv = shlex.split(self.params.build_command)
        self.logger.info("Running contract build", command=argv, cwd=str(contract_dir))

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                cwd=str(contract_dir),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise CompileError(
                f"Build tool not found: {argv[0]}",
                stderr=str(e)
            ) from e

        try:
            _stdout, stderr = await proc.communicate()
        except asyncio.CancelledError:
            proc.kill()
            await proc.wait()
            raise

        stderr_text = stderr[-self.params.max_output_bytes:].decode("utf-8", errors="replace")

        if proc.returncode != 0:
            self.logger.warning(
                "Contract build failed",
                returncode=proc.returncode,
                stderr=stderr_text[-2000:]
            )
            raise CompileError(f"Compilation failed: {stderr_text}", stderr=stderr_text)

    def _read_output(self, contract_dir: Path) -> bytes:
        wasm_path = contract_dir / "output" / f"{self.params.crate_name}.wasm"
        try:
            return wasm_path.read_bytes()
        except OSError as e:
            raise CompileError(
                "Error reading compiled WASM file",
                context={"path": str(wasm_path)}
            ) from e
