#!/usr/bin/env python3
"""
Initialize the freight board.

This script sets up the project by:
- Checking the Python version
- Checking for the .env file and store credentials
- Validating the configuration file
- Checking that required packages import
"""

import os
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv


def check_python_version() -> bool:
    """Verify Python version is 3.10 or higher."""
    if sys.version_info < (3, 10):
        print(f"❌ Python 3.10+ required. Current version: {sys.version}")
        return False
    print(f"✅ Python version: {sys.version_info.major}.{sys.version_info.minor}")
    return True


def check_env_file() -> bool:
    """Check if .env file exists."""
    env_path = Path(".env")
    if not env_path.exists():
        print("❌ .env file not found")
        print("   Run: cp .env.example .env")
        print("   Then edit .env with your store credentials")
        return False
    print("✅ .env file exists")
    return True


def load_and_validate_env(backend: str) -> bool:
    """Load environment variables and check the ones the store backend needs."""
    load_dotenv()

    if backend != "postgrest":
        print(f"✅ Store backend '{backend}' needs no credentials")
        return True

    missing = []
    for var in ("SUPABASE_URL", "SUPABASE_KEY"):
        value = os.getenv(var)
        if not value or value.startswith("your_") or "your-project" in value:
            missing.append(var)

    if missing:
        print(f"❌ Missing or placeholder store credentials: {', '.join(missing)}")
        print("   Edit .env file with actual values")
        return False

    print("✅ Store credentials set")
    return True


def read_config() -> dict:
    """Parse config/config.yaml, returning an empty dict when absent or invalid."""
    path = Path("config/config.yaml")
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError:
        return {}


def check_config_files() -> bool:
    """Validate the configuration file exists and is valid."""
    path = Path("config/config.yaml")
    if not path.exists():
        print("❌ Main configuration not found: config/config.yaml")
        return False
    print("✅ Main configuration exists")

    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print(f"❌ Error parsing config.yaml: {e}")
        return False

    if not config:
        print("❌ config.yaml is empty")
        return False

    backend = (config.get("store") or {}).get("backend", "memory")
    if backend not in ("memory", "postgrest"):
        print(f"❌ Unknown store backend: {backend}")
        return False

    print("✅ config.yaml is valid YAML")
    return True


def test_imports() -> bool:
    """Test that critical packages can be imported."""
    required_packages = [
        "pydantic",
        "pydantic_settings",
        "structlog",
        "yaml",
        "dotenv",
        "httpx",
    ]

    missing = []
    for package in required_packages:
        try:
            __import__(package)
        except ImportError:
            missing.append(package)

    if missing:
        print(f"❌ Missing packages: {', '.join(missing)}")
        print("   Run: pip install -e '.[test]'")
        return False

    print("✅ All required packages installed")
    return True


def display_next_steps():
    """Show user what to do next."""
    print("\n" + "=" * 60)
    print("🎉 Project initialization complete!")
    print("=" * 60)
    print("\nNext steps:")
    print("\n1. Review config/config.yaml (store backend, labels, logging)")
    print("2. Run the test suite:")
    print("   pytest")
    print("3. Render a stored freight:")
    print("   python scripts/render_freight.py path/to/freight.json")
    print("\n" + "=" * 60)


def main():
    """Run all initialization checks."""
    print("=" * 60)
    print("Freight Board - Initialization")
    print("=" * 60)
    print()

    backend = (read_config().get("store") or {}).get("backend", "memory")

    checks = [
        ("Python version", check_python_version),
        (".env file", check_env_file),
        ("Environment variables", lambda: load_and_validate_env(backend)),
        ("Configuration files", check_config_files),
        ("Package imports", test_imports),
    ]

    passed = 0
    failed = 0

    for name, check_func in checks:
        print(f"\nChecking {name}...")
        if check_func():
            passed += 1
        else:
            failed += 1

    print("\n" + "=" * 60)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 60)

    if failed == 0:
        display_next_steps()
        return 0
    else:
        print("\n❌ Some checks failed. Please fix the issues above.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
