# main.py
import json
import sys

from graph_pathfinder.app.build import build


def run(path: str) -> int:
    with open(path, encoding="utf-8") as f:
        cfg = json.load(f)

    # results are printed below; no JSONL copy on stdout
    app = build(cfg, sinks=[])
    for result in app.run():
        print(result)
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python main.py SCENARIO.json", file=sys.stderr)
        sys.exit(2)
    sys.exit(run(sys.argv[1]))
