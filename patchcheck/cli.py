# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Command line entry point.

Usage:
    patchcheck                              # build with patches, write ./result
    patchcheck --manifest pkg/package.json --out out/result
    patchcheck --resolve-only               # print resolved patches, no build
"""

import argparse
import json
import logging
from typing import List, Optional

from . import config
from .backends import get_backend
from .errors import PatchCheckError
from .pipeline import describe_patches, run_patch_test

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patchcheck",
        description="Verify that a package's patchedDependencies are applied during its build.",
    )
    parser.add_argument("--manifest", default=config.PATCHCHECK_MANIFEST, help="path to package.json")
    parser.add_argument("--lockfile", default=config.PATCHCHECK_LOCKFILE, help="path to the lockfile")
    parser.add_argument("--out", default=config.PATCHCHECK_OUT, help="success marker location")
    parser.add_argument("--backend", default=config.PATCHCHECK_BACKEND, help="build backend: bun or npm")
    parser.add_argument("--script", default=config.PATCHCHECK_BUILD_SCRIPT, help="build script to run")
    parser.add_argument(
        "--strict-paths",
        action="store_true",
        default=config.PATCHCHECK_STRICT_PATHS,
        help="reject empty, absolute, escaping or missing patch paths",
    )
    parser.add_argument(
        "--resolve-only",
        action="store_true",
        help="print the resolved patches as JSON and exit without building",
    )
    parser.add_argument("--log-level", default=config.PATCHCHECK_LOG_LEVEL)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        backend = get_backend(args.backend)
        if args.resolve_only:
            report = describe_patches(args.manifest, backend, strict_paths=args.strict_paths)
            print(json.dumps(report, indent=2))
            return 0

        marker = run_patch_test(
            args.manifest,
            args.out,
            backend,
            lock_path=args.lockfile,
            build_script=args.script,
            strict_paths=args.strict_paths,
        )
    except (PatchCheckError, ValueError) as e:
        logger.error(str(e))
        return 1

    logger.info(f"Patch test passed, marker written to {marker}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
