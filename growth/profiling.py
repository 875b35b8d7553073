"""
Timing of the growth hot paths: the tick and the collision scan.

Disabled by default; call profiler.enable() (or run main.py --profile) to
collect timings and print a summary when the process exits.
"""

import time
from functools import wraps
from collections import defaultdict
from typing import Dict
import atexit

TICK = 'GrowthModel.grow'
COLLISION_SCAN = 'grow_seed.collision_scan'


class Profiler:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.stats: Dict[str, Dict] = defaultdict(lambda: {'calls': 0, 'total_time': 0.0})
        self.enabled = False
        self._report_registered = False

    def enable(self, report_at_exit: bool = True):
        self.enabled = True
        if report_at_exit and not self._report_registered:
            atexit.register(self.print_stats)
            self._report_registered = True

    def disable(self):
        self.enabled = False

    def record(self, name: str, elapsed: float):
        if not self.enabled:
            return
        entry = self.stats[name]
        entry['calls'] += 1
        entry['total_time'] += elapsed

    def calls(self, name: str) -> int:
        return self.stats[name]['calls'] if name in self.stats else 0

    def scans_per_tick(self) -> float:
        ticks = self.calls(TICK)
        return self.calls(COLLISION_SCAN) / ticks if ticks else 0.0

    def summary(self) -> Dict[str, float]:
        ticks = self.calls(TICK)
        scan_time = self.stats[COLLISION_SCAN]['total_time'] if COLLISION_SCAN in self.stats else 0.0
        tick_time = self.stats[TICK]['total_time'] if TICK in self.stats else 0.0
        return {
            'ticks': ticks,
            'collision_scans': self.calls(COLLISION_SCAN),
            'scans_per_tick': self.scans_per_tick(),
            'scan_share': scan_time / tick_time if tick_time > 0 else 0.0,
        }

    def print_stats(self):
        if not self.stats:
            return

        summary = self.summary()
        print("\n" + "=" * 60)
        print("GROWTH PROFILE")
        print("=" * 60)
        print(f"Ticks: {summary['ticks']}   Collision scans: {summary['collision_scans']}   "
              f"Scans/tick: {summary['scans_per_tick']:.1f}")
        print(f"Time spent scanning for collisions: {summary['scan_share']:.0%} of tick time")
        print("-" * 60)
        for name, data in sorted(self.stats.items(), key=lambda x: x[1]['total_time'], reverse=True):
            calls = data['calls']
            avg_ms = data['total_time'] / calls * 1000 if calls else 0
            print(f"{name:<32} {calls:>8} {data['total_time']:>9.3f}s {avg_ms:>8.3f}ms")
        print("=" * 60)

    def reset(self):
        self.stats.clear()


profiler = Profiler()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not profiler.enabled:
            return func(*args, **kwargs)
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            profiler.record(func.__qualname__, time.perf_counter() - start)
    return wrapper


class profile_block:
    """Times the enclosed block under `name` while the profiler is enabled."""

    def __init__(self, name: str):
        self.name = name
        self.start = None

    def __enter__(self):
        if profiler.enabled:
            self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        if self.start is not None:
            profiler.record(self.name, time.perf_counter() - self.start)
            self.start = None
