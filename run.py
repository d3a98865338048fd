#!/usr/bin/env python3
"""
Runner for the Well Reports API.
This script provides different modes for running the application.
"""
import sys
import argparse

from well_reports.shared.config.settings import get_settings


def run_development(log_level: str):
    """Run in development mode with auto-reload"""
    import uvicorn

    settings = get_settings()

    print("Starting Well Reports API in DEVELOPMENT mode...")
    print(f"API Documentation: http://localhost:{settings.SERVER_PORT}/docs")
    print(f"Health Check: http://localhost:{settings.SERVER_PORT}/health")

    uvicorn.run(
        "well_reports.main:create_app",
        factory=True,
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=True,
        reload_dirs=["well_reports"],
        log_level=log_level.lower(),
        access_log=True
    )


def run_production(log_level: str):
    """Run in production mode"""
    import uvicorn

    settings = get_settings()

    print("Starting Well Reports API in PRODUCTION mode...")

    uvicorn.run(
        "well_reports.main:create_app",
        factory=True,
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=log_level.lower(),
        access_log=True,
        workers=1
    )


def health_check() -> bool:
    """Perform a health check of the running API"""
    import httpx
    import time

    settings = get_settings()
    url = f"http://localhost:{settings.SERVER_PORT}/health"
    max_attempts = 3

    print("Performing health check...")

    for attempt in range(max_attempts):
        try:
            response = httpx.get(url, timeout=10)
            data = response.json()
            if response.status_code == 200:
                print("Health check PASSED")
                print(f"   Status: {data.get('status', 'unknown')}")
                print(f"   Database: {data.get('dependencies', {}).get('database', 'unknown')}")
                print(f"   Version: {data.get('version', 'unknown')}")
                return True
            print(f"Health check failed with status {response.status_code}: {data.get('status')}")
            return False
        except httpx.ConnectError:
            print(f"Attempt {attempt + 1}/{max_attempts}: API not responding...")
            if attempt < max_attempts - 1:
                time.sleep(2)
        except (httpx.HTTPError, ValueError) as e:
            print(f"Health check error: {e}")
            return False

    print("Health check FAILED after all attempts")
    return False


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Well Reports API Runner")
    parser.add_argument(
        "command",
        choices=["dev", "prod", "health"],
        help="Command to run"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level"
    )

    args = parser.parse_args()

    if args.command == "dev":
        run_development(args.log_level)
    elif args.command == "prod":
        run_production(args.log_level)
    elif args.command == "health":
        success = health_check()
        sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
