"""Invoke tasks for BeerStock application management."""

import sys
from pathlib import Path

from invoke import task
from invoke.context import Context

# Log file location (must match beerstock/cli/server.py)
LOG_FILE = Path("data/beerstock.log")


@task
def start(ctx: Context, host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the BeerStock FastAPI server in the foreground.

    Args:
        ctx: Invoke context
        host: Host to bind to (default: 127.0.0.1)
        port: Port to bind to (default: 8000)
        reload: Enable auto-reload for development
    """
    cmd = f"beerstock-server start --host {host} --port {port} --foreground"
    if reload:
        cmd += " --reload"

    try:
        ctx.run(cmd, pty=True)
    except KeyboardInterrupt:
        print("\nServer stopped")
        sys.exit(0)


@task(name="start-background")
def start_background(ctx: Context, host: str = "127.0.0.1", port: int = 8000) -> None:
    """Start the BeerStock FastAPI server in the background."""
    ctx.run(f"beerstock-server start --host {host} --port {port}")


@task
def stop(ctx: Context) -> None:
    """Stop the BeerStock FastAPI server."""
    ctx.run("beerstock-server stop")


@task
def status(ctx: Context) -> None:
    """Check the status of the BeerStock server."""
    ctx.run("beerstock-server status")


@task
def logs(ctx: Context, follow: bool = False, lines: int = 50) -> None:
    """View the BeerStock server logs.

    Args:
        ctx: Invoke context
        follow: Follow log output (like tail -f)
        lines: Number of lines to show (default: 50)
    """
    if not LOG_FILE.exists():
        print("No log file found. Server may not have been started in background mode.")
        return

    if follow:
        ctx.run(f"tail -f {LOG_FILE}", pty=True)
    else:
        ctx.run(f"tail -n {lines} {LOG_FILE}")


@task
def test(ctx: Context, verbose: bool = False, coverage: bool = False) -> None:
    """Run the test suite.

    Args:
        ctx: Invoke context
        verbose: Enable verbose output
        coverage: Run with coverage report
    """
    cmd = "pytest"
    if verbose:
        cmd += " -v"
    if coverage:
        cmd += " --cov=beerstock --cov-report=term-missing"
    ctx.run(cmd, pty=True)


@task
def clean(ctx: Context) -> None:
    """Clean up caches and build artifacts."""
    for pattern in ["__pycache__", "*.pyc", "*.pyo", ".pytest_cache"]:
        ctx.run(f"find . -name '{pattern}' -exec rm -rf {{}} + 2>/dev/null || true", warn=True)

    for path in ["build", "dist", "*.egg-info", ".eggs", "docs/_build"]:
        ctx.run(f"rm -rf {path} 2>/dev/null || true", warn=True)

    print("Cleanup complete")


@task(name="docs-build")
def docs_build(ctx: Context) -> None:
    """Build the Sphinx documentation."""
    ctx.run("sphinx-build -b html docs docs/_build/html", pty=True)
    print("Documentation built at docs/_build/html/index.html")
