#!/usr/bin/env python3
"""Write or verify requirements.txt from pyproject.toml dependencies and extras.

    python scripts/generate_requirements.py          # rewrite requirements.txt
    python scripts/generate_requirements.py --check  # fail if it is stale
"""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
REQUIREMENTS = ROOT / "requirements.txt"
EXTRAS = ("test",)


def expected_requirements() -> list[str]:
    """Base dependencies plus the pinned extras, sorted."""
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    deps = set(project.get("dependencies", []))
    for extra in EXTRAS:
        deps.update(project.get("optional-dependencies", {}).get(extra, []))
    return sorted(dep.strip() for dep in deps if dep.strip())


def render(reqs: list[str]) -> str:
    header = (
        f"# Generated from pyproject.toml (base + extras: {','.join(EXTRAS)})\n"
        "# Do not edit manually; run: uv run python scripts/generate_requirements.py\n\n"
    )
    return header + "\n".join(reqs) + "\n"


def listed_requirements() -> set[str]:
    lines = REQUIREMENTS.read_text(encoding="utf-8").splitlines()
    return {line.split("#", 1)[0].strip() for line in lines} - {""}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--check", action="store_true", help="verify instead of writing")
    args = parser.parse_args(argv)

    reqs = expected_requirements()
    if not args.check:
        REQUIREMENTS.write_text(render(reqs), encoding="utf-8")
        print(f"Wrote {len(reqs)} requirements to {REQUIREMENTS.name}")
        return

    missing = sorted(set(reqs) - listed_requirements())
    unexpected = sorted(listed_requirements() - set(reqs))
    if missing or unexpected:
        report = ["requirements.txt is out of sync with pyproject.toml."]
        report += [f"missing: {req}" for req in missing]
        report += [f"unexpected: {req}" for req in unexpected]
        raise SystemExit("\n".join(report))
    print("requirements.txt is in sync.")


if __name__ == "__main__":
    main()
