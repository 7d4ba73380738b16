# scripts/smoke.py
"""
Smoke Test Script for the rvedit history engine.

Usage
-----
1. Run the built-in capacity scenario:
    $ python scripts/smoke.py

2. Replay an edit script instead:
    $ python scripts/smoke.py --file scripts/example_script.json
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from rvedit.core.history import HistoryManager
from rvedit.core.replay import load_script, replay

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


def run_builtin() -> None:
    """Capacity-3 walk-through: overflow evicts s0, a new push kills redo."""
    history: HistoryManager[str] = HistoryManager(capacity=3)
    history.initialize("s0")
    for snap in ("s1", "s2", "s3", "s4"):
        history.push(snap)
    print(f"past={list(history.past())} present={history.get_present()!r}")

    print(f"undo -> {history.undo()!r}  {history.status()}")
    history.push("s5")
    print(f"push 's5' -> {history.status()}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run rvedit smoke test")
    parser.add_argument("--file", "-f", type=str, help="Path to a JSON edit script")
    args = parser.parse_args()

    if not args.file:
        run_builtin()
        return

    loaded = load_script(Path(args.file))
    if loaded.is_err():
        print(f"❌ {loaded.unwrap_err()}")
        return

    report = replay(loaded.unwrap())
    for step in report.steps:
        print(
            f"  {step.index:02d}. {step.op.op:<5} "
            f"returned={step.returned!r} present={step.present!r}"
        )
    print(f"\n✅ Final: {report.final_status}")


if __name__ == "__main__":
    main()
