"""Example script showing how to parse and build resource references programmatically."""
from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from resref import Builder, ResourceReference  # type: ignore  # noqa: E402


def main() -> None:
    parsed = ResourceReference.of("rr://PROD/billing/acme-corp/invoice/2024-001")
    print(parsed.jsonl())

    built = Builder("Billing", "prod", "acme-corp").add_property("invoice").add_property("2024-002").build()
    print(built.value)
    print(built == ResourceReference.of(built.value))


if __name__ == "__main__":
    main()
