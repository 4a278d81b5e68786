# ============================================================================
# OUTPUT WRITER
# ============================================================================
# STATUS: Infrastructure - Artifact persistence
# PURPOSE: Write generated files atomically, alone or as a set
# CREATED: 19 OCT 2026
# EXPORTS: OutputWriter, atomic_write
# ============================================================================
"""
Output Writer

Artifacts are written to a temporary file in the destination directory
and moved over the target with os.replace. A failure at any point
removes the temporary file and leaves any previous artifact untouched.
write_all applies the same to a set of artifacts: all are staged before
any target is replaced, and replaced targets are restored on failure.

Usage:
    writer = OutputWriter()
    writer.write("models/user_generated.py", source_text)
    writer.write_all([(sql_path, ddl_text), (module_path, source_text)])

    with atomic_write("schema/user.sql") as handle:
        handle.write(ddl_text)
"""

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple, Union

from model_maker.core.errors import OutputWriteError
from model_maker.core.logging import get_logger, ComponentType

logger = get_logger(__name__, ComponentType.WRITER)


@contextmanager
def atomic_write(
    path: Union[str, Path],
    mode: int = 0o644,
    encoding: str = "utf-8",
) -> Iterator[TextIO]:
    """
    Context manager yielding a text handle whose content replaces path
    only when the block exits without an exception.

    Args:
        path: Destination file
        mode: Permission bits of the final file
        encoding: Text encoding
    """
    path = Path(path)
    directory = path.parent

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(directory)
    )
    try:
        # No newline translation
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class OutputWriter:
    """Writes generated artifacts to disk."""

    def __init__(self, file_mode: int = 0o644):
        self.file_mode = file_mode

    def write(self, path: Union[str, Path], text: str) -> Path:
        """
        Atomically write text to path.

        Returns:
            The written path

        Raises:
            OutputWriteError: if the directory is missing or not writable
        """
        path = Path(path)
        try:
            with atomic_write(path, mode=self.file_mode) as handle:
                handle.write(text)
        except OSError as e:
            raise OutputWriteError(str(path), e.strerror or str(e)) from e

        logger.info(f"Wrote {path}", extra={"bytes": len(text.encode("utf-8"))})
        return path

    def write_all(self, items: Sequence[Tuple[Union[str, Path], str]]) -> List[Path]:
        """
        Write several artifacts so that either all of them land or none do.

        Every text is first staged to a temporary file beside its target.
        Targets are replaced only once all staging succeeded; if a
        replacement fails, targets already replaced are restored to their
        previous content (or removed when they did not exist).

        Returns:
            The written paths, in order

        Raises:
            OutputWriteError: naming the artifact that could not be written
        """
        targets = [(Path(path), text) for path, text in items]
        staged: List[Tuple[Path, str]] = []
        committed: List[Tuple[Path, Optional[bytes]]] = []

        try:
            for path, text in targets:
                try:
                    staged.append((path, self._stage(path, text)))
                except OSError as e:
                    raise OutputWriteError(str(path), e.strerror or str(e)) from e

            for path, tmp_name in staged:
                try:
                    previous = path.read_bytes() if path.is_file() else None
                    os.replace(tmp_name, path)
                except OSError as e:
                    self._roll_back(committed)
                    raise OutputWriteError(str(path), e.strerror or str(e)) from e
                committed.append((path, previous))
        finally:
            for _, tmp_name in staged:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)

        for path, text in targets:
            logger.info(f"Wrote {path}", extra={"bytes": len(text.encode("utf-8"))})
        return [path for path, _ in targets]

    def _stage(self, path: Path, text: str) -> str:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_name, self.file_mode)
        except BaseException:
            os.unlink(tmp_name)
            raise
        return tmp_name

    def _roll_back(self, committed: List[Tuple[Path, Optional[bytes]]]) -> None:
        for path, previous in reversed(committed):
            try:
                if previous is None:
                    path.unlink()
                else:
                    path.write_bytes(previous)
            except OSError as e:
                logger.error(f"Could not restore {path}: {e}")
            else:
                logger.warning(f"Restored {path} after a failed write")


__all__ = ["OutputWriter", "atomic_write"]
