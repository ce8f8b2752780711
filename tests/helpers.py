"""Shared test helpers: a fake metaschema-cli, release archives, SARIF logs."""

from __future__ import annotations

import io
import sys
import zipfile
from typing import Any

import pytest

# A stand-in for metaschema-cli: a Python script run through its shebang.
#   echo ARGS...   -> prints ARGS to stdout, a note to stderr, exit 0
#   fail ARGS...   -> prints "findings: ARGS" to stdout, "boom: ARGS" to
#                     stderr, exit 3
#   validate MODE  -> MODE pass|partial copies $FAKE_TOOL_LOG to the -o path,
#                     garbage writes "not json" there;
#                     partial|nolog then fail with exit 1
#   anything else  -> prints "metaschema-cli 1.1.0", exit 0
FAKE_TOOL_SOURCE = '''#!{python}
import os
import shutil
import sys

args = sys.argv[1:]
command = args[0] if args else ""

if command == "echo":
    sys.stdout.write(" ".join(args[1:]))
    sys.stderr.write("note on stderr")
    sys.exit(0)

if command == "fail":
    sys.stdout.write("findings: " + " ".join(args[1:]))
    sys.stderr.write("boom: " + " ".join(args[1:]))
    sys.exit(3)

if command == "validate":
    mode = args[1] if len(args) > 1 else "pass"
    out = args[args.index("-o") + 1] if "-o" in args else None
    if out and mode in ("pass", "partial"):
        shutil.copyfile(os.environ["FAKE_TOOL_LOG"], out)
    if out and mode == "garbage":
        with open(out, "w", encoding="utf-8") as fh:
            fh.write("not json")
    if mode in ("partial", "nolog"):
        sys.stderr.write("validation failed for " + mode)
        sys.exit(1)
    sys.stdout.write("validated")
    sys.exit(0)

sys.stdout.write("metaschema-cli 1.1.0")
'''

posix_only = pytest.mark.skipif(
    sys.platform == "win32", reason="fake tool relies on a POSIX shebang"
)


def fake_tool_source() -> str:
    return FAKE_TOOL_SOURCE.format(python=sys.executable)


def make_archive(launcher: str | None = None) -> bytes:
    """Build an in-memory release zip shaped like the real one."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        zf.writestr("bin/metaschema-cli", launcher or fake_tool_source())
        zf.writestr("bin/metaschema-cli.bat", "@echo off\r\njava -jar ..\\lib\\cli.jar %*\r\n")
        zf.writestr("lib/metaschema-cli.jar", b"PK-not-really-a-jar")
    return buf.getvalue()


def sarif_log(*levels: str) -> dict[str, Any]:
    """Build a minimal SARIF 2.1.0 log with one result per level."""
    results = [
        {
            "ruleId": f"rule-{i}",
            "level": level,
            "kind": "pass" if level == "none" else "fail",
            "message": {"text": f"finding {i} ({level})"},
            "locations": [
                {"physicalLocation": {"artifactLocation": {"uri": "file:///module.xml"}}}
            ],
        }
        for i, level in enumerate(levels)
    ]
    return {
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "version": "2.1.0",
        "runs": [
            {
                "tool": {"driver": {"name": "metaschema-java", "version": "1.1.0"}},
                "results": results,
            }
        ],
    }
