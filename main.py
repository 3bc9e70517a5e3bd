import argparse

import uvicorn

from app.core import config


def main():
    parser = argparse.ArgumentParser(description="AI Travel Companion API server")
    parser.add_argument("--host", type=str, default=config.HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to listen on")
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes (development)"
    )

    args = parser.parse_args()

    print(f"--- Serving AI Travel Companion API on http://{args.host}:{args.port} ---")
    print("Note: all data lives in memory and is lost when the server stops.")

    # Reload needs an import string rather than an app object
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
