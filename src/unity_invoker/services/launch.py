"""LaunchService: build, preview, and run Unity invocations for the CLI.

Pipeline: MERGE OPTIONS → RESOLVE EXECUTABLE → RUN → REPORT

Library exceptions are mapped to :class:`ServiceError` codes here so the
CLI can render them uniformly.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

from unity_invoker.finder import UnsupportedPlatformError, get_unity_path
from unity_invoker.invoker import UnityCrashError
from unity_invoker.logger import SimpleLogger, noop_logger
from unity_invoker.options import is_known_option
from unity_invoker.process import UnityProcess, invoke_headless_unity, invoke_unity
from unity_invoker.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from unity_invoker.config.settings import InvokerSettings
    from unity_invoker.options import OptionValue

logger = logging.getLogger(__name__)


class LaunchService:
    """Turns CLI input plus ``[run]`` defaults into Unity invocations."""

    def __init__(self, settings: InvokerSettings) -> None:
        self._settings = settings

    def build_process(
        self,
        *,
        headless: bool | None = None,
        project_path: Path | None = None,
        build_target: str | None = None,
        execute_method: str | None = None,
        options: Mapping[str, OptionValue] | None = None,
    ) -> UnityProcess:
        """Assemble a UnityProcess; explicit arguments override ``[run]`` defaults."""
        defaults = self._settings.run
        if headless is None:
            headless = defaults.headless
        process = invoke_headless_unity() if headless else invoke_unity()
        process.with_options(defaults.extra_options)

        project = project_path or defaults.project_path
        if project is not None:
            process.project_path(project)
        target = build_target or defaults.build_target
        if target:
            process.build_target(target)
        if execute_method:
            process.execute_method(execute_method)
        if options:
            process.with_options(options)
        return process

    def argv(self, process: UnityProcess) -> ServiceResult:
        """Preview the argument vector without spawning anything."""
        argv = process.argv()
        return ServiceResult(
            ok=True,
            op="argv",
            data={"argv": argv, "count": len(argv)},
            warnings=_unknown_option_warnings(process.options),
        )

    def locate(self) -> ServiceResult:
        """Report the resolved Unity executable and whether it exists."""
        op = "locate"
        try:
            path = get_unity_path()
        except UnsupportedPlatformError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNSUPPORTED_PLATFORM",
                    message=str(exc),
                    detail={"platform": exc.platform},
                ),
            )
        exists = Path(path).is_file()
        warnings = [] if exists else [f"Unity executable not found at {path}"]
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": path, "exists": exists},
            warnings=warnings,
        )

    def run(
        self,
        process: UnityProcess,
        log: SimpleLogger = noop_logger,
        *,
        dry_run: bool = False,
    ) -> ServiceResult:
        """Launch Unity and report its outcome.

        With *dry_run*, only the argument vector is reported.
        """
        op = "run"
        argv = process.argv()
        warnings = _unknown_option_warnings(process.options)
        if dry_run:
            return ServiceResult(
                ok=True,
                op=op,
                data={"argv": argv, "dry_run": True},
                warnings=warnings,
            )

        start = time.perf_counter()
        try:
            output = process.run(log, crash_log=self._settings.unity.crash_log)
        except UnityCrashError as exc:
            return self._failure(
                op,
                "UNITY_CRASHED",
                str(exc),
                start,
                warnings,
                exit_code=exc.exit_code,
                crash_log_path=str(exc.crash_log_path) if exc.crash_log_path else None,
            )
        except UnsupportedPlatformError as exc:
            return self._failure(op, "UNSUPPORTED_PLATFORM", str(exc), start, warnings)
        except (FileNotFoundError, NotADirectoryError) as exc:
            project = process.options.get("projectPath")
            code = (
                "PROJECT_NOT_FOUND"
                if project and exc.filename == project
                else "EXECUTABLE_NOT_FOUND"
            )
            return self._failure(op, code, str(exc), start, warnings, path=exc.filename)
        except OSError as exc:
            logger.debug("Unity launch failed", exc_info=True)
            return self._failure(op, "LAUNCH_FAILED", str(exc), start, warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "argv": argv,
                "lines": len(output.splitlines()),
                "output": output,
            },
            warnings=warnings,
            meta={"duration_ms": _elapsed_ms(start), "exit_code": 0},
        )

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        start: float,
        warnings: list[str],
        **detail: Any,
    ) -> ServiceResult:
        meta: dict[str, Any] = {"duration_ms": _elapsed_ms(start)}
        if detail.get("exit_code") is not None:
            meta["exit_code"] = detail["exit_code"]
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings,
            error=ServiceError(
                code=code,
                message=message,
                detail={k: v for k, v in detail.items() if v is not None},
            ),
            meta=meta,
        )


def _unknown_option_warnings(options: Mapping[str, OptionValue]) -> list[str]:
    return [
        f"Unknown Unity option passed through: -{key}"
        for key, value in options.items()
        if value and not is_known_option(key)
    ]


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
