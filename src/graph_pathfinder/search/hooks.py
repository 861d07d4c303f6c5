# search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def run_start(self, *, algorithm, start, end, vertices, edges): ...
    def run_end(self, *, algorithm, result): ...
    def finalize(self, vertex: int, *, cost): ...
    def relax(self, u: int, v: int, *, cost): ...
    def negative_cycle(self, cycle: list[int], *, algorithm): ...
    def error(self, *, algorithm, reason: str, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def finalize(self, *_, **__):
        pass

    def relax(self, *_, **__):
        pass

    def negative_cycle(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
