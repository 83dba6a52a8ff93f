"""
Child process termination.

``terminate`` signals an asyncio subprocess and resolves once it has
exited, which is how Haveno test harnesses stop the daemons and wallet
RPC servers they spawn.
"""

from __future__ import annotations

import asyncio
import logging
import signal

from haveno_utils.config import ProcessConfig

log = logging.getLogger("haveno.process")


def resolve_signal(name: str | int | signal.Signals) -> signal.Signals:
    """Map ``"SIGTERM"``, ``"term"``, ``15`` or ``Signals.SIGTERM`` to a signal."""
    if isinstance(name, signal.Signals):
        return name
    if isinstance(name, int) and not isinstance(name, bool):
        try:
            return signal.Signals(name)
        except ValueError:
            raise ValueError(f"Unknown signal: {name!r}") from None
    if not isinstance(name, str):
        raise ValueError(f"Unknown signal: {name!r}")
    key = name.strip().upper()
    if not key.startswith("SIG"):
        key = "SIG" + key
    try:
        return signal.Signals[key]
    except KeyError:
        raise ValueError(f"Unknown signal: {name!r}") from None


async def terminate(
    process: asyncio.subprocess.Process,
    signal_name: str | int | signal.Signals = "SIGINT",
    timeout: float | None = None,
) -> int:
    """Send *signal_name* to *process* and wait for it to exit.

    Returns the process return code.  A process that has already exited
    is not signalled.  ``asyncio.TimeoutError`` propagates if *timeout*
    seconds pass first; the process is left running in that case.
    """
    sig = resolve_signal(signal_name)
    if process.returncode is not None:
        return process.returncode

    try:
        process.send_signal(sig)
        log.debug("Sent %s to pid %s", sig.name, process.pid)
    except ProcessLookupError:
        # exited between the returncode check and the signal
        log.debug("pid %s already gone before %s", process.pid, sig.name)

    if timeout is None:
        return await process.wait()
    return await asyncio.wait_for(process.wait(), timeout)


async def terminate_with_config(
    process: asyncio.subprocess.Process, cfg: ProcessConfig,
) -> int:
    """``terminate`` using the ``[process]`` signal and timeout."""
    return await terminate(process, cfg.kill_signal, cfg.kill_timeout)
