#!/usr/bin/env python3
"""Benchmark script for compscan performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of compscan package."""
    start = time.perf_counter()
    import compscan  # noqa: F401

    return time.perf_counter() - start


def _build_snapshot(components: int):
    from compscan.domain.model.snapshot import (
        ComponentSnapshot,
        ContainerSnapshot,
        SerializedComponent,
        SerializedRelationship,
    )

    by_name = {
        f"Component{i}": SerializedComponent(
            name=f"Component{i}",
            description=f"Component discovered by benchmark {i}",
            technology="Java",
            tags=frozenset({"Annotated", f"group-{i % 10}"}),
            relationships=tuple(
                SerializedRelationship(target=f"Component{(i + k) % components}", type="uses")
                for k in range(1, 4)
            ),
        )
        for i in range(components)
    }
    return ComponentSnapshot(
        timestamp="2024-01-01T00:00:00",
        containers={"core": ContainerSnapshot(container_name="core", components=by_name)},
    )


def benchmark_content_hash(components: int, *, parallel: bool) -> float:
    """Measure content hash of a snapshot with many components."""
    from compscan.application.snapshot import content_hash

    snapshot = _build_snapshot(components)
    start = time.perf_counter()
    content_hash(snapshot, parallel=parallel)
    return time.perf_counter() - start


def benchmark_matchers() -> float:
    """Measure matcher evaluation over synthetic types."""
    from compscan.domain.matchers import has_annotation, has_name_matching
    from compscan.domain.model.annotation import AnnotationEntry, to_type_descriptor
    from compscan.domain.model.type_info import TypeInfo

    annotation = AnnotationEntry(to_type_descriptor("com.acme.Service"))
    types = [
        TypeInfo.from_fqn(f"com.acme.pkg{i % 50}.Type{i}", (annotation,) if i % 3 == 0 else ())
        for i in range(10000)
    ]
    matchers = (has_annotation("com.acme.Service"), has_name_matching(r"com\.acme\.pkg1\d\..*"))

    start = time.perf_counter()
    for matcher in matchers:
        for type_info in types:
            matcher(type_info)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run compscan benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--components",
        type=int,
        default=5000,
        help="Components in the hashed snapshot",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    # Content hash, sequential and parallel sort
    for parallel in (False, True):
        label = "parallel" if parallel else "sequential"
        results.append(
            {
                "name": f"Content Hash ({args.components} components, {label})",
                "unit": "seconds",
                "value": benchmark_content_hash(args.components, parallel=parallel),
            }
        )

    # Matchers
    results.append(
        {
            "name": "Matchers (2 x 10k types)",
            "unit": "seconds",
            "value": benchmark_matchers(),
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
