#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from contract_builder.config.loader import ConfigLoader
from contract_builder.config.validation import ConfigIssue, ConfigValidator
from contract_builder.errors import ConfigurationError


def validate_file(config_file: Optional[Path]) -> List[ConfigIssue]:
    """Validate the merged configuration for one YAML file."""
    loader = ConfigLoader.create(config_file=config_file)
    try:
        loader.load()
    except ConfigurationError as e:
        if e.issues:
            return list(e.issues)
        return [ConfigIssue(field=e.source or "<file>", message=str(e), value=None)]
    return []


def main():
    """Main validation function."""
    print("🔍 Validating contract builder configuration...")

    config_files = [Path(arg) for arg in sys.argv[1:]] or [None]
    all_valid = True

    for config_file in config_files:
        label = str(config_file) if config_file else "config/contract_builder.yaml"
        print(f"\n📄 Validating {label}...")

        issues = validate_file(config_file)
        if issues:
            print(f"❌ Found {len(issues)} validation errors:")
            for issue in issues:
                print(f"  • {issue.field}: {issue.message} (value: {issue.value})")
            all_valid = False
        else:
            print(f"✅ {label} is valid")

    # Test CLI-level overrides
    print("\n📋 Testing command line overrides...")
    loader = ConfigLoader.create()
    config = loader.merge_config({"logging": {"level": "DEBUG"}, "deployment": {"default_network": "devnet"}})
    issues = ConfigValidator.validate_config(config)

    if issues:
        print("❌ Override validation failed:")
        for issue in issues:
            print(f"  • {issue.field}: {issue.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
