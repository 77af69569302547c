from __future__ import annotations
import asyncio, logging

logger = logging.getLogger(__name__)

async def run_command(argv: list[str], timeout: float) -> tuple[int, str]:
    """Run an external command without blocking the loop.

    Raises OSError if it cannot be started and asyncio.TimeoutError once
    `timeout` expires. Whenever the wait ends early (timeout or the calling
    task being cancelled) the child is killed and reaped first.
    """
    proc = await asyncio.create_subprocess_exec(
        *argv,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.DEVNULL,
    )
    try:
        out, _ = await asyncio.wait_for(proc.communicate(), timeout)
    except asyncio.TimeoutError:
        logger.debug("command timed out after %.1fs: %s", timeout, argv[0])
        raise
    finally:
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                pass  # exited between the check and the kill
            await proc.wait()
    return proc.returncode, out.decode("utf-8", errors="replace")
