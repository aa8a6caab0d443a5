from __future__ import annotations

import argparse
import os

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the spelling check API")
    parser.add_argument("--host", default=os.getenv("HOWDOYOUSPELL_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("HOWDOYOUSPELL_PORT", "8000")))
    args = parser.parse_args()
    uvicorn.run("howdoyouspell.app:app", host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
