"""
octiline init: write a starter network file
"""

from pathlib import Path
from typing import Optional

from .config_template import MINIMAL_CONFIG_TEMPLATE
from .config_discovery import DEFAULT_CONFIG_NAME


def run_init_command(force: bool = False, path: Optional[str] = None) -> int:
    """
    Write the starter network to path (default ./network.yaml)

    Returns:
        Exit code (0 = success, 1 = error)
    """
    target = Path(path or DEFAULT_CONFIG_NAME).resolve()

    if target.exists() and not force:
        print(f"❌ Network file already exists: {target}")
        print("   Pass --force to replace it")
        return 1

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(MINIMAL_CONFIG_TEMPLATE, encoding='utf-8')
    except OSError as e:
        print(f"❌ Could not write {target}: {e}")
        return 1

    print(f"✅ Network file created: {target}")
    print("\nNext steps:")
    print(f"  1. Place your stations and lines in {target}")
    print(f"  2. Run: octiline route {target}")

    return 0
