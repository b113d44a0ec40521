"""Default configuration parameters for the contract builder."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DeploymentParams:
    """Deployment defaults."""
    default_network: str = "testnet"


@dataclass(frozen=True)
class SimulationParams:
    """Latency of the simulated collaborators, in seconds."""
    connect_delay: float = 1.5
    compile_delay: float = 2.0
    submit_delay: float = 9.0              # prepare + approve + confirm
    verify_delay: float = 0.5


@dataclass(frozen=True)
class ToolchainParams:
    """Native compiler toolchain parameters."""
    build_command: str = "mxpy contract build"
    crate_name: str = "multiversx-contract"
    framework_version: str = "0.43.4"
    max_output_bytes: int = 5 * 1024 * 1024


@dataclass(frozen=True)
class CompletionParams:
    """Prompt completion service parameters."""
    api_url: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-4-turbo"
    api_key_env: str = "OPENAI_API_KEY"
    max_tokens: int = 4000
    temperature: float = 0.5
    timeout_seconds: int = 120


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams = field(default_factory=LoggingParams)
    deployment: DeploymentParams = field(default_factory=DeploymentParams)
    simulation: SimulationParams = field(default_factory=SimulationParams)
    toolchain: ToolchainParams = field(default_factory=ToolchainParams)
    completion: CompletionParams = field(default_factory=CompletionParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
        deployment=DeploymentParams(),
        simulation=SimulationParams(),
        toolchain=ToolchainParams(),
        completion=CompletionParams(),
    )
