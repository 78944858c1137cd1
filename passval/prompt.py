import logging
import sys
import threading
from collections import namedtuple
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, TextIO

from passval.rules import validate

logger = logging.getLogger(__name__)

POOL_SIZE = 4

Summary = namedtuple("Summary", "submitted checked valid")


def _read_line(stream: TextIO) -> Optional[str]:
    line = stream.readline()
    if line == "":
        return None  # end of input
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class _Tally:
    """Counts finished jobs without holding on to their verdicts."""

    def __init__(self):
        self.lock = threading.Lock()
        self.submitted = 0
        self.checked = 0
        self.valid = 0

    def submit(self):
        with self.lock:
            self.submitted += 1
            return self.submitted

    def record(self, future: Future):
        exc = future.exception()
        if exc is not None:
            logger.error("Validation job failed: %s", exc, exc_info=exc)
            return
        is_valid = future.result().valid
        with self.lock:
            self.checked += 1
            if is_valid:
                self.valid += 1

    def summary(self) -> Summary:
        with self.lock:
            return Summary(self.submitted, self.checked, self.valid)


class PasswordPrompt:
    banner = "\n=== Validador de Contraseñas ===\nEscribe 'exit' para terminar.\n\n"
    prompt = "Ingresa la contraseña a validar: "
    exit_command = "exit"

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        workers: int = POOL_SIZE,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.workers = workers

    def is_exit(self, line: str) -> bool:
        # upper() folds the dotless "ı" onto "I", casefold() covers the rest
        word = line.strip()
        return (
            word.upper() == self.exit_command.upper()
            or word.casefold() == self.exit_command
        )

    def read_passwords(self):
        while True:
            print(self.prompt, end="", file=self.stdout, flush=True)
            try:
                line = _read_line(self.stdin)
            except KeyboardInterrupt:
                logger.debug("Interrupted at the prompt")
                return
            if line is None or self.is_exit(line):
                return
            yield line

    def run(self) -> Summary:
        """
        Prompt for passwords until 'exit' or end of input.

        Each password is validated on the worker pool while the prompt moves
        on to the next read. Leaving the loop waits for every submitted job.
        Only counts survive a job, never the password it checked.
        """
        print(self.banner, end="", file=self.stdout, flush=True)
        tally = _Tally()
        logger.debug("Starting validation pool with %d workers", self.workers)
        with ThreadPoolExecutor(
            max_workers=self.workers, thread_name_prefix="passval"
        ) as executor:
            for password in self.read_passwords():
                executor.submit(validate, password, self.stdout).add_done_callback(
                    tally.record
                )
                logger.debug("Submitted job %d", tally.submit())
            logger.debug("Waiting for submitted jobs to finish")
        logger.debug("Validation pool drained")
        return tally.summary()
