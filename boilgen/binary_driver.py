"""Drivers that run as separate executables and speak JSON on stdin/stdout."""

from __future__ import annotations

import json
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from boilgen.driverconfig import DriverConfig
from boilgen.schema import DBInfo


class DriverError(Exception):
    """A driver executable failed or produced unusable output."""


def _json_default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"{type(obj).__name__} is not JSON serialisable")


def execute(
    executable: str,
    method: str,
    payload: Any = None,
    err_stream: TextIO | None = None,
) -> Any:
    """Run ``executable method``, feeding ``payload`` as JSON; return its parsed output.

    The driver's standard error is copied to ``err_stream`` (standard error
    by default). A non-zero exit raises DriverError.
    """
    run_kwargs: dict[str, Any] = {"capture_output": True, "check": False}
    if payload is not None:
        try:
            run_kwargs["input"] = json.dumps(payload, default=_json_default).encode()
        except (TypeError, ValueError) as exc:
            raise DriverError("failed to json-ify driver configuration") from exc
    else:
        run_kwargs["stdin"] = subprocess.DEVNULL

    try:
        proc = subprocess.run([executable, method], **run_kwargs)
    except OSError as exc:
        raise DriverError(
            "something totally unexpected happened when running "
            f"the binary driver {executable}: {exc}"
        ) from exc

    stream = err_stream if err_stream is not None else sys.stderr
    if proc.stderr:
        stream.write(proc.stderr.decode(errors="replace"))

    if proc.returncode > 0:
        raise DriverError(
            f"driver ({executable}) exited non-zero: exit status {proc.returncode}"
        )
    if proc.returncode < 0:
        raise DriverError(
            "something totally unexpected happened when running the binary "
            f"driver {executable}: killed by signal {-proc.returncode}"
        )

    try:
        return json.loads(proc.stdout)
    except json.JSONDecodeError as exc:
        raise DriverError(f"failed to marshal json from binary: {exc}") from exc


@dataclass(frozen=True)
class BinaryDriver:
    """A driver implemented by an external executable."""

    executable: str

    def assemble(self, config: Mapping[str, Any] | None) -> DBInfo:
        """Ask the driver for the database's tables and dialect."""
        payload = dict(config) if config is not None else {}
        return DBInfo.from_dict(execute(self.executable, "assemble", payload))

    def templates(self) -> dict[str, str]:
        """Template names mapped to base64 contents that the driver adds or replaces."""
        return dict(execute(self.executable, "templates") or {})

    def imports(self) -> dict[str, Any]:
        """The driver's import collection."""
        return dict(execute(self.executable, "imports") or {})


def driver_main(driver: Any, argv: Sequence[str] | None = None) -> int:
    """Serve one driver request: ``assemble``, ``templates`` or ``imports``.

    ``assemble`` reads its configuration as JSON from standard input. The
    result is written as JSON to standard output. Returns the exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: driver assemble|templates|imports", file=sys.stderr)
        return 1
    method = args[0]

    try:
        if method == "assemble":
            raw = sys.stdin.read()
            try:
                config = DriverConfig(json.loads(raw) or {})
            except (json.JSONDecodeError, TypeError, ValueError) as exc:
                print(f"failed to parse json from stdin: {exc}\n{raw}", file=sys.stderr)
                return 1
            output = driver.assemble(config)
        elif method == "templates":
            output = driver.templates()
        elif method == "imports":
            output = driver.imports()
        else:
            output = None
    except Exception as exc:  # the driver's own failure is reported, not raised
        print(exc, file=sys.stderr)
        return 1

    try:
        text = json.dumps(output, default=_json_default)
    except (TypeError, ValueError) as exc:
        print("failed to marshal json:", exc, file=sys.stderr)
        return 1

    sys.stdout.write(text)
    return 0