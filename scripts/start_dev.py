#!/usr/bin/env python3
"""
Development startup script.

Starts the order pricing service in development mode.
"""

import os
import sys
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent
PORT = os.getenv("PORT", "8002")


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        import dotenv
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_env():
    """Check if .env file exists."""
    env_file = PROJECT_ROOT / "config" / ".env"
    env_example = PROJECT_ROOT / "config" / ".env.example"

    if env_file.exists():
        print("✓ Configuration file found")
        return True
    elif env_example.exists():
        print("! Configuration file not found, copying from example...")
        import shutil
        shutil.copy(env_example, env_file)
        print("✓ Created config/.env from example")
        print("  Please edit config/.env with your settings")
        return True
    else:
        print("✗ No configuration file found")
        return False


def start_service():
    """Start the order service in development mode."""
    print(f"\n💅 Starting Order Pricing Service on http://localhost:{PORT} ...")
    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "app.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", PORT,
        ],
        cwd=PROJECT_ROOT / "order-service",
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT / "shared")},
    )

    print("\n" + "=" * 60)
    print("Service started successfully!")
    print("=" * 60)
    print(f"\n📍 Pricing API: http://localhost:{PORT}/docs")
    print("\nPress Ctrl+C to stop")
    print("=" * 60)

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Service stopped.")


def main():
    print("=" * 60)
    print("Order Pricing - Development Server")
    print("=" * 60)

    # Pre-flight checks
    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    if not check_env():
        sys.exit(1)

    print("\n✓ All checks passed!")

    start_service()


if __name__ == "__main__":
    main()
