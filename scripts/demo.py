"""Demo: merge scripts/config/ into a typed model."""

from pathlib import Path

from pydantic import BaseModel

from merge_config import parse_config_paths
from merge_config.utils.logging import setup_logging

CONFIG_DIR = Path(__file__).parent / "config"


class ServiceConfig(BaseModel):
    name: str
    addresses: list[str]
    values: dict[str, str]


def main():
    setup_logging(level="DEBUG")

    print("=" * 60)
    print(f"Merging {CONFIG_DIR}")
    print("=" * 60)

    config = parse_config_paths(
        [CONFIG_DIR], merge_nested=True, extend_array=True, target=ServiceConfig
    )

    print(f"\nName: {config.name}")
    print(f"Addresses ({len(config.addresses)}):")
    for address in config.addresses:
        print(f"  - {address}")
    print("Values:")
    for key, value in config.values.items():
        print(f"  {key} = {value}")


if __name__ == "__main__":
    main()
