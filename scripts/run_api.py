#!/usr/bin/env python
"""
Run the apparel pricing API with uvicorn.

Usage:
    python scripts/run_api.py [--host 0.0.0.0] [--port 8000] [--no-reload]
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path


def src_env(project_root: Path) -> dict:
    """Environment with src/ prepended to PYTHONPATH."""
    env = os.environ.copy()
    src_path = str(project_root / "src")
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = f"{src_path}{os.pathsep}{existing}" if existing else src_path
    return env


def main():
    parser = argparse.ArgumentParser(description="Run the Apparel Pricing API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent

    cmd = [
        sys.executable, "-m", "uvicorn",
        "apparel_pricing.api.main:app",
        "--host", args.host,
        "--port", str(args.port),
    ]
    if not args.no_reload:
        cmd.append("--reload")

    print(f"Starting Apparel Pricing API on {args.host}:{args.port}...")
    try:
        subprocess.run(cmd, cwd=str(project_root), env=src_env(project_root))
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
