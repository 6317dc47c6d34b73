"""Fixed-tick frame pacing on a monotonic nanosecond clock"""
import time

NS_PER_FRAME = 16_666_667  # 60 Hz


class FrameClock:
    def __init__(self, ns_per_frame: int = NS_PER_FRAME):
        self.ns_per_frame = ns_per_frame
        self._start = time.monotonic_ns()

    def begin_frame(self):
        self._start = time.monotonic_ns()

    def end_frame(self):
        elapsed = time.monotonic_ns() - self._start
        if elapsed < self.ns_per_frame:
            time.sleep((self.ns_per_frame - elapsed) / 1e9)

    def pause(self, ms: int):
        time.sleep(ms / 1000)
