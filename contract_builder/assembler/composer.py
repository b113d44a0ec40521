"""
Contract source composition.

Builds one contract unit from an ordered module selection: every module's
template is stripped of comments and blank lines, its trait name is collected
into a composite header, and the cleaned bodies follow in selection order.
The result depends only on the module sequence.
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ..logging.config import get_assembler_logger
from ..registry.catalog import ContractModule

logger = get_assembler_logger(__name__)

BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
LINE_COMMENT_RE = re.compile(r"//.*")
BLANK_RUN_RE = re.compile(r"\n\s*\n")
TRAIT_HEADER_RE = re.compile(r"\bpub\s+trait\s+([A-Za-z_][A-Za-z0-9_]*)")

# Inherited when no selected module declares a trait
DEFAULT_BASE_CAPABILITY = "Clone"

PLACEHOLDER_CONTRACT = """// No components selected
// Add components from the left panel to generate code

#[multiversx_sc::contract]
pub trait EmptyContract {
    #[init]
    fn init(&self) {
        // Initialize contract
    }
}"""

COMPOSITE_HEADER = """// MultiversX Smart Contract
// Generated with MultiversX Builder

#[multiversx_sc::contract]
pub trait MultiversXGeneratedContract: {capabilities}
{{
    #[init]
    fn init(&self) {{
        // Initialize contract state
    }}

    // View function to get contract info
    #[view(getContractInfo)]
    fn get_contract_info(&self) -> ManagedBuffer {{
        ManagedBuffer::from(b"MultiversX Contract built with MultiversX builder")
    }}
}}

// Dynamically Composed Contract Components"""


@dataclass(frozen=True)
class AssembledContract:
    """Result of one composition call."""

    ordered_module_ids: tuple[str, ...]
    generated_source: str
    capabilities: tuple[str, ...] = ()
    skipped_module_ids: tuple[str, ...] = ()


def clean_template(template: str) -> str:
    """Strip block and line comments and collapse blank-line runs."""
    cleaned = BLOCK_COMMENT_RE.sub("", template)
    cleaned = LINE_COMMENT_RE.sub("", cleaned)
    cleaned = "\n".join(line.rstrip() for line in cleaned.split("\n"))
    cleaned = BLANK_RUN_RE.sub("\n", cleaned)
    return cleaned.strip()


def extract_capability(cleaned_body: str) -> Optional[str]:
    """Trait name of the first `pub trait` declaration, if any."""
    match = TRAIT_HEADER_RE.search(cleaned_body)
    return match.group(1) if match else None


def build_header(capabilities: Sequence[str]) -> str:
    """Composite contract declaration inheriting every capability."""
    inherited = " + ".join(capabilities) if capabilities else DEFAULT_BASE_CAPABILITY
    return COMPOSITE_HEADER.format(capabilities=inherited)


def compose(selected_modules: Sequence[ContractModule]) -> AssembledContract:
    """
    Compose an ordered module selection into one contract source.

    Args:
        selected_modules: Modules in user (drag) order; duplicates allowed

    Returns:
        AssembledContract with the generated source and the inherited
        capabilities in first-seen order
    """
    ordered_ids = tuple(getattr(module, "id", "") for module in selected_modules)

    if not selected_modules:
        return AssembledContract(
            ordered_module_ids=(),
            generated_source=PLACEHOLDER_CONTRACT,
        )

    bodies: list[str] = []
    capabilities: list[str] = []
    skipped: list[str] = []

    for position, module in enumerate(selected_modules):
        module_id = getattr(module, "id", None) or f"#{position}"
        template = getattr(module, "source_template", None)

        if not isinstance(template, str):
            logger.warning(
                "Skipping malformed module",
                module_id=module_id,
                position=position,
                template_type=type(template).__name__
            )
            skipped.append(module_id)
            continue

        body = clean_template(template)
        capability = extract_capability(body)

        if capability is None:
            logger.warning(
                "Module declares no trait; omitted from composite header",
                module_id=module_id,
                position=position
            )
        elif capability not in capabilities:
            capabilities.append(capability)

        if body:
            bodies.append(body)

    source = build_header(capabilities)
    if bodies:
        source += "\n" + "\n\n".join(bodies)

    logger.debug(
        "Composed contract",
        module_ids=list(ordered_ids),
        capabilities=capabilities,
        skipped=skipped,
        source_length=len(source)
    )

    return AssembledContract(
        ordered_module_ids=ordered_ids,
        generated_source=source,
        capabilities=tuple(capabilities),
        skipped_module_ids=tuple(skipped),
    )


def compose_source(selected_modules: Sequence[ContractModule]) -> str:
    """Generated source only."""
    return compose(selected_modules).generated_source
