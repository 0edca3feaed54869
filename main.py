#!/usr/bin/env python3
"""
Intelligent Code Analysis API - Main Entry Point

Run the API server locally.

Usage:
    # Run with settings from the environment / .env (needs GEMINI_API_KEY)
    python main.py

    # Run with specific host/port
    python main.py --host 0.0.0.0 --port 8080

    # Run without a Gemini key, using canned responses
    python main.py --mock
"""

import argparse
import os
import sys
import uvicorn

from config.settings import reload_settings


def parse_args():
    parser = argparse.ArgumentParser(
        description="Intelligent Code Analysis API - AI code review, explanation and improvement",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                          # Real provider (GEMINI_API_KEY required)
  python main.py --mock                   # Mock mode (testing)
  python main.py --host 0.0.0.0 --port 8080
        """
    )

    # Server settings
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server (default: HOST or 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server (default: PORT or 3000)"
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Run in mock mode (no Gemini calls, for testing)"
    )

    # Server options
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes (default: WORKERS or 1)"
    )

    return parser.parse_args()


def print_banner(host: str, port: int, settings):
    """Print startup banner."""
    print()
    print("=" * 60)
    print("  Intelligent Code Analysis API")
    print("=" * 60)
    print()
    print(f"  Server:  http://{host}:{port}")
    print(f"  Docs:    http://{host}:{port}/docs")
    print(f"  Health:  http://{host}:{port}/health")
    print()

    if settings.mock_mode:
        print("  Mode:    MOCK (for testing)")
    else:
        print("  Mode:    GEMINI")
        print(f"  Model:   {settings.gemini_model}")
        if not settings.gemini_api_key:
            print("  Warning: GEMINI_API_KEY is not set")

    print()
    print("  Endpoints:")
    print("    POST /api/review   - Code review")
    print("    POST /api/explain  - Code explanation")
    print("    POST /api/improve  - Improvement suggestions")
    print()
    print("=" * 60)
    print()


def main():
    args = parse_args()

    # Worker processes re-read settings from the environment
    if args.mock:
        os.environ["MOCK_MODE"] = "true"

    settings = reload_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    workers = args.workers or settings.workers

    print_banner(host, port, settings)

    # Run server
    try:
        uvicorn.run(
            "api.main:app",
            host=host,
            port=port,
            reload=args.reload,
            workers=workers if not args.reload else 1,
            log_level=settings.log_level.lower()
        )
    except KeyboardInterrupt:
        print("\nShutting down...")
    except Exception as e:
        print(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
