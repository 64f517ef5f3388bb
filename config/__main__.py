"""Command line interface for testing configuration loading"""
from pathlib import Path

from . import load_config, DEFAULTS

def write_example(examples_dir: Path = Path("examples")) -> Path:
    """Write settings.conf.example populated with the default settings."""
    examples_dir.mkdir(exist_ok=True)
    example_path = examples_dir / "settings.conf.example"

    lines = [
        "[DEFAULT]",
        "# GraphQL endpoint of the marketplace subgraph",
        f"subgraph_endpoint = {DEFAULTS['subgraph_endpoint']}",
        "# API server bind address",
        f"host = {DEFAULTS['host']}",
        f"port = {DEFAULTS['port']}",
        "# Seconds to wait for each upstream query",
        f"request_timeout = {DEFAULTS['request_timeout']}",
        f"log_level = {DEFAULTS['log_level']}",
    ]
    example_path.write_text("\n".join(lines) + "\n")
    return example_path

def main():
    """Display loaded configuration"""
    settings = load_config()

    print("\nSettings Configuration:")
    print("-" * 50)
    for key, value in settings.items():
        print(f"{key}: {value}")

    example_path = write_example()
    print(f"\nWrote {example_path}")

if __name__ == "__main__":
    main()
