"""URB Companion — dev launcher. Starts the backend in watch mode."""

import argparse
import logging
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def main():
    parser = argparse.ArgumentParser(description="URB Companion dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data storage directory (default: ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Clean and create demo session data")
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--port", type=int, default=int(BACKEND_PORT))
    args = parser.parse_args()

    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # The backend reads DATA_DIR when uvicorn imports backend.app
    if args.data_dir:
        os.environ["DATA_DIR"] = str(args.data_dir.resolve())

    if args.demo:
        from backend.demo import create_demo_data
        from urb_companion.storage import Storage
        demo = create_demo_data(Storage(args.data_dir or ROOT / "data"))
        print(f"Created demo session {demo.id} ({demo.name})")

    print(f"Starting backend on http://localhost:{args.port} ...")
    uvicorn.run("backend.app:app", host=args.host, port=args.port, reload=True,
                log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
