# pathviz/app/settings.py
#!/usr/bin/env python3
"""
Viewer configuration.

- ENV: PATHVIZ_ALGO, PATHVIZ_ROWS, PATHVIZ_COLS, PATHVIZ_MAP, PATHVIZ_SPEED
- CLI: --algo=astar|dijkstra|dfs --rows=N --cols=N --map=<key or path> --speed=X

CLI wins over ENV. Bad values are reported and replaced by the default.
"""

import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

from pathviz.core.runner import ALGORITHMS, DEFAULT_ALGORITHM
from pathviz.core.types import ROWS, COLS


@dataclass
class Settings:
    algo: str = DEFAULT_ALGORITHM
    rows: int = ROWS
    cols: int = COLS
    map: Optional[str] = None
    speed: float = 1.0


def _raw_options(argv: List[str], environ: Dict[str, str]) -> Dict[str, str]:
    opts: Dict[str, str] = {}
    for key in ("algo", "rows", "cols", "map", "speed"):
        v = environ.get(f"PATHVIZ_{key.upper()}")
        if v:
            opts[key] = v
    for arg in argv:
        if arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            opts[key.lower()] = value
    return opts


def resolve_settings(argv: Optional[List[str]] = None,
                     environ: Optional[Dict[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    opts = _raw_options(argv, environ)
    s = Settings()

    algo = opts.get("algo", s.algo).lower()
    if algo in ALGORITHMS:
        s.algo = algo
    else:
        print(f"Unknown algorithm {algo!r}, using {s.algo}")

    for key in ("rows", "cols"):
        if key in opts:
            try:
                n = int(opts[key])
                if n < 2:
                    raise ValueError(n)
                setattr(s, key, n)
            except ValueError:
                print(f"Bad --{key}={opts[key]!r}, using {getattr(s, key)}")

    if "speed" in opts:
        try:
            sp = float(opts["speed"])
            if sp <= 0:
                raise ValueError(sp)
            s.speed = sp
        except ValueError:
            print(f"Bad --speed={opts['speed']!r}, using {s.speed}")

    s.map = opts.get("map") or None
    return s
