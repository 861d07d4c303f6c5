# io/recorder.py
import json
import logging
import sys
from typing import Protocol

from graph_pathfinder.search.result import Result

log = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, result: Result) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, result: Result) -> None:
        self.fp.write(json.dumps(result.to_dict()) + "\n")


class MemorySink:
    def __init__(self):
        self.results: list[Result] = []

    def write(self, result: Result) -> None:
        self.results.append(result)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks

    def emit(self, result: Result) -> None:
        for s in self.sinks:
            try:
                s.write(result)
            except Exception:
                # sink failures are logged; the remaining sinks still receive the result
                log.exception("result sink %s failed", type(s).__name__)
