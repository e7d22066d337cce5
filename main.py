"""Critter Village — dev launcher. Starts the API server with uvicorn."""

import argparse
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "8080")


def main():
    parser = argparse.ArgumentParser(description="Critter Village dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data storage directory (default: ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Wipe players and create demo accounts and villagers")
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--port", type=int, default=int(PORT))
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args()

    from village.logging_config import configure_logging
    configure_logging()

    # Handle --demo: init storage and populate before the server starts
    if args.demo or args.data_dir:
        from village import storage
        data_dir = args.data_dir or Path("data")
        storage.init_storage(data_dir)
        if args.demo:
            from village.demo import create_demo_data
            create_demo_data()

    # The server process picks up the same data dir through the environment
    if args.data_dir:
        os.environ["DATA_DIR"] = str(args.data_dir.resolve())

    print(f"Starting Critter Village API on http://localhost:{args.port} ...")
    uvicorn.run("village.app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
