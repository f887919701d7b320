from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from dcb.colorings.base import color_histogram
from dcb.graph import cross_check
from dcb.registry import GENERATORS
from dcb.report import print_coloring, print_header, print_verdict
from dcb.utils.config import RunSpec, load_config, run_specs
from dcb.utils.logging import setup_logging
from dcb.validate import ValidationResult, validate

import dcb.colorings  # registers generators

logger = logging.getLogger("dcb")

def run_dimension(
    generator: str,
    ndim: int,
    out: TextIO,
    progress: bool = False,
    check_graph: bool = False,
) -> ValidationResult:
    coloring = GENERATORS.build(generator, ndim)
    print_header(ndim, out)
    print_coloring(coloring, ndim, out)
    result = validate(coloring, ndim, out=out, progress=progress)
    print_verdict(result, out)
    out.flush()

    if logger.isEnabledFor(logging.DEBUG) and ndim <= 16:
        logger.debug("%s n=%d color counts: %s", generator, ndim, color_histogram(coloring, ndim).tolist())
    if check_graph:
        verdict = cross_check(coloring, ndim)
        if verdict is None:
            logger.info("%s n=%d: graph cross-check skipped", generator, ndim)
        elif verdict != result.ok:
            logger.warning("%s n=%d: graph view says %s, bitmask validator says %s", generator, ndim, verdict, result.ok)
    return result

def run_all(specs: List[RunSpec], out: TextIO, progress: bool = False, check_graph: bool = False) -> List[ValidationResult]:
    results = []
    for spec in specs:
        logger.info("running %s over dims %s", spec.generator, spec.dims)
        for ndim in spec.dims:
            results.append(run_dimension(spec.generator, ndim, out, progress=progress, check_graph=check_graph))
    return results

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dcb",
        description="Generate and validate Devil's Checkerboard colorings of the n-cube.",
    )
    ap.add_argument("--config", default=None, help="YAML run plan (see configs/default.yaml)")
    ap.add_argument("--generator", choices=GENERATORS.names(), default=None, help="run a single generator")
    ap.add_argument("--dims", type=int, nargs="+", default=None, help="dimensions for --generator")
    ap.add_argument("--progress", action="store_true", help="show a progress bar while validating")
    ap.add_argument("--cross-check", action="store_true", help="re-check verdicts on a networkx hypercube")
    ap.add_argument("--strict", action="store_true", help="exit with status 1 if any coloring fails")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    if args.dims is not None and args.generator is None:
        ap.error("--dims needs --generator")

    try:
        cfg = load_config(args.config)
        if args.generator is not None:
            dims = args.dims if args.dims is not None else [2, 3, 4]
            cfg["runs"] = [{"generator": args.generator, "dims": dims}]
        specs = run_specs(cfg)
        for spec in specs:
            for ndim in spec.dims:
                GENERATORS.check_ndim(spec.generator, ndim)
    except (OSError, ValueError, KeyError) as e:
        ap.error(str(e))

    progress = args.progress or bool(cfg["progress"])
    check_graph = args.cross_check or bool(cfg["cross_check"])
    strict = args.strict or bool(cfg["strict"])

    results = run_all(specs, sys.stdout, progress=progress, check_graph=check_graph)
    failed = sum(1 for r in results if not r)
    logger.info("%d of %d colorings validated", len(results) - failed, len(results))
    if strict and failed:
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
