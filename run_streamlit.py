"""
Launcher script for the meeting notes Streamlit app.
"""

import os
import sys
import argparse
import subprocess
from pathlib import Path

from meeting_notes.config import config

APP_PATH = Path(__file__).parent.absolute() / "meeting_notes" / "frontend" / "streamlit_app.py"


def build_command(port: int):
    return [
        "streamlit", "run", str(APP_PATH),
        "--server.port", str(port),
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
    ]


def main():
    """Launch the Streamlit frontend against a running API server."""
    parser = argparse.ArgumentParser(description="Meeting Notes Generator Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--api-url", default=config.PUBLIC_URL, help="URL of the API server")
    args = parser.parse_args()

    env = os.environ.copy()
    env["API_URL"] = args.api_url
    # Streamlit runs the script directly, so the project root must be importable
    env["PYTHONPATH"] = str(APP_PATH.parents[2]) + os.pathsep + env.get("PYTHONPATH", "")

    print(f"Starting {config.APP_NAME} frontend on port {args.port} (API: {args.api_url})")

    try:
        subprocess.run(build_command(args.port), env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except (OSError, subprocess.CalledProcessError) as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
