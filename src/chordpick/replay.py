from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from chordpick.overlay.presenter import LoggingPresenter
from chordpick.selection.config import SelectionConfig, load_config
from chordpick.selection.ir import KeyEvent, KeySymbol, Screen, Target
from chordpick.selection.session import NoGrab, assign_chords, build_overlays, select_target


class ScriptedKeySource:
    """Key source that replays a fixed list of key presses."""

    def __init__(self, symbols: Iterable[KeySymbol]) -> None:
        self._events = [KeyEvent(symbol=s) for s in symbols]
        self._pos = 0

    def next_key_event(self) -> KeyEvent:
        if self._pos >= len(self._events):
            raise EOFError("key script exhausted before the selection finished")
        event = self._events[self._pos]
        self._pos += 1
        return event


def chord_table(config: SelectionConfig, handles: Sequence[str]) -> List[Dict[str, Any]]:
    """Chords a session would show for ``handles``, in assignment order."""

    screen = Screen(targets=tuple(Target(handle=h) for h in handles))
    overlays = build_overlays(config, assign_chords(config, [screen]), text_height=0)
    return [{"target": o.target.handle, "chord": list(o.chord)} for o in overlays]


def replay(config: SelectionConfig, handles: Sequence[str], keys: Sequence[KeySymbol]) -> Any:
    """Run a full session over ``handles`` with ``keys`` as the typed input."""

    return select_target(
        config,
        targets=[Target(handle=h) for h in handles],
        source=ScriptedKeySource(keys),
        presenter=LoggingPresenter(),
        grab=NoGrab(),
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show chord assignments for targets, or replay a key sequence against them."
    )
    parser.add_argument("config", help="Selection config toml path")
    parser.add_argument("targets", nargs="+", help="Target names, in enumeration order")
    parser.add_argument("--keys", help="Comma separated key presses to replay (e.g. s,d)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every redraw")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(Path(args.config))
    if args.keys is None:
        result: Any = chord_table(config, args.targets)
    else:
        keys = [k.strip() for k in args.keys.split(",") if k.strip()]
        try:
            selected = replay(config, args.targets, keys)
        except EOFError:
            parser.error(f"--keys {args.keys!r} ran out before the selection finished")
        result = {"selected": selected}

    print(json.dumps(result, indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
