# io/search_logging.py
import json
import logging
import sys

from graph_pathfinder.io.recorder import Recorder
from graph_pathfinder.search.hooks import NoopHooks


def _default_json_logger(name="graph_pathfinder", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for engine runs. Run boundaries and negative cycles are
    INFO; per-vertex traffic is DEBUG and only emitted with `debug=True`,
    sampled every `sample_every` events.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._events = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def _sampled(self) -> bool:
        self._events += 1
        return self.debug and (self._events % self.sample_every) == 0

    # engine lifecycle

    def run_start(self, *, algorithm, start, end, vertices, edges):
        self._emit(
            "INFO", "run_start", algorithm=algorithm, start=start, end=end,
            vertices=vertices, edges=edges,
        )

    def run_end(self, *, algorithm, result):
        self._emit(
            "INFO",
            "run_end",
            algorithm=algorithm,
            found=result.found,
            path=result.path_ids,
            cost=result.cost,
            vertices_visited=result.vertices_visited,
            edge_relaxations=result.edge_relaxations,
            negative_cycle=result.has_negative_cycle,
            ms=round(result.elapsed_seconds * 1000, 3),
        )
        if self.recorder:
            self.recorder.emit(result)

    def finalize(self, vertex, *, cost):
        if self._sampled():
            self._emit("DEBUG", "finalize", vertex=vertex, cost=cost)

    def relax(self, u, v, *, cost):
        if self._sampled():
            self._emit("DEBUG", "relax", u=u, v=v, cost=cost)

    def negative_cycle(self, cycle, *, algorithm):
        self._emit("INFO", "negative_cycle", algorithm=algorithm, cycle=list(cycle))

    def error(self, *, algorithm, reason: str, **extra):
        self._emit("ERROR", "search_error", algorithm=algorithm, reason=reason, **extra)
