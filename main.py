"""Presentor storage API launcher. Starts the backend in watch mode."""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = os.getenv("PORT", "13015")


def main():
    parser = argparse.ArgumentParser(description="Presentor storage API")
    parser.add_argument("--storage-dir", type=Path, default=None,
                        help="Storage root (default: <documents>/Presentor)")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Settings directory (default: platform config dir)")
    parser.add_argument("--no-reload", action="store_true",
                        help="Disable auto-reload")
    args = parser.parse_args()

    # Subprocess picks these up through os.getenv
    env = os.environ.copy()
    if args.storage_dir:
        env["PRESENTOR_HOME"] = str(args.storage_dir.resolve())
    if args.config_dir:
        env["PRESENTOR_CONFIG_DIR"] = str(args.config_dir.resolve())

    cmd = [sys.executable, "-m", "uvicorn", "presentor.app:app", "--host", HOST, "--port", PORT]
    if not args.no_reload:
        cmd.append("--reload")

    print(f"Starting Presentor storage API on http://{HOST}:{PORT} ...")
    proc = subprocess.Popen(cmd, cwd=ROOT, env=env)
    try:
        proc.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
        proc.terminate()
        proc.wait()


if __name__ == "__main__":
    main()
