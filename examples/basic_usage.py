#!/usr/bin/env python3
"""
Basic Usage Example - MultiversX Contract Builder

This script demonstrates composing a contract from catalog modules and
deploying it through the step-by-step orchestrator with simulated
collaborators. It shows how to:
- Pick and reorder modules
- Inspect the generated source
- Watch step transitions while a deployment runs
- Reset a deployment that is still in flight

Run: python examples/basic_usage.py
"""

import asyncio
import json

from contract_builder.assembler import add_component, compose, move_component, resolve_selection
from contract_builder.config.defaults import SimulationParams
from contract_builder.deployment.models import DeploymentSession, StepStatus
from contract_builder.deployment.orchestrator import DeploymentOrchestrator
from contract_builder.deployment.simulated import simulated_collaborators
from contract_builder.logging.config import configure_logging
from contract_builder.registry import default_registry

FAST = SimulationParams(connect_delay=0.2, compile_delay=0.3, submit_delay=0.5, verify_delay=0.1)


def print_session(session: DeploymentSession) -> None:
    marks = {
        StepStatus.PENDING: "·",
        StepStatus.CURRENT: "…",
        StepStatus.COMPLETED: "✓",
        StepStatus.ERROR: "✗",
    }
    steps = " ".join(f"{marks[status]}{step.value}" for step, status in session.step_statuses.items())
    print(f"  [{session.overall_status.value:>10}] {steps}")


def demonstrate_composition():
    """Build a selection, reorder it and compose the contract."""
    print("🧩 Composing a contract")
    print("-" * 40)

    registry = default_registry()
    selection = resolve_selection(registry, ["erc20", "access"])
    selection = add_component(selection, registry.get("gas-optimizer"))
    selection = move_component(selection, 2, 0)

    assembled = compose(selection)
    print(f"Modules:      {', '.join(assembled.ordered_module_ids)}")
    print(f"Capabilities: {' + '.join(assembled.capabilities)}")
    print(f"Source:       {len(assembled.generated_source.splitlines())} lines")
    print()
    return selection


async def demonstrate_deployment(selection):
    """Deploy the composed contract to devnet."""
    print("🚀 Deploying to devnet")
    print("-" * 40)

    orchestrator = DeploymentOrchestrator(*simulated_collaborators(FAST))
    orchestrator.subscribe(print_session)

    result = await orchestrator.deploy_modules(selection, "devnet")
    print(json.dumps(result.to_dict(), indent=2))
    print()


async def demonstrate_reset(selection):
    """Reset a deployment while the compile step is running."""
    print("⏹  Resetting mid-deployment")
    print("-" * 40)

    orchestrator = DeploymentOrchestrator(*simulated_collaborators(FAST))
    orchestrator.subscribe(print_session)

    task = asyncio.create_task(orchestrator.deploy_modules(selection, "testnet"))
    await asyncio.sleep(FAST.connect_delay + FAST.compile_delay / 2)
    orchestrator.reset()

    result = await task
    print(f"Detached run reported: {result.error_code}")
    print()


async def main():
    configure_logging(level="WARNING")

    print("MultiversX Contract Builder - Basic Usage")
    print("=" * 40)
    print()

    selection = demonstrate_composition()
    await demonstrate_deployment(selection)
    await demonstrate_reset(selection)

    print("🎉 Done")


if __name__ == "__main__":
    asyncio.run(main())
