import logging
import subprocess
from typing import List, Optional

from .config import Config
from .pipeline import EventPipeline

logger = logging.getLogger(__name__)

DEFAULT_PACKAGES = ["./..."]


class RunnerError(Exception):
    pass


class GoTestRunner:
    def __init__(self, cfg: Config):
        self.cfg = cfg

    def command(self, packages: Optional[List[str]] = None):
        return [self.cfg.go_bin, "test", "-json", *self.cfg.test_args, *(packages or DEFAULT_PACKAGES)]

    def run(self, packages: Optional[List[str]], pipeline: EventPipeline) -> int:
        cmd = self.command(packages)
        logger.info("run %s", " ".join(cmd))

        try:
            proc = subprocess.Popen(cmd, stdout=subprocess.PIPE)
        except OSError as e:
            raise RunnerError(f"unable to run {self.cfg.go_bin}: {e}") from e

        # raw bytes: undecodable lines go through the decode error policy
        try:
            with proc:
                try:
                    for line in proc.stdout:
                        pipeline.put(line)
                except BaseException:
                    proc.kill()
                    raise
        finally:
            pipeline.finish()

        logger.debug("%s exited with %s", self.cfg.go_bin, proc.returncode)
        return proc.returncode
