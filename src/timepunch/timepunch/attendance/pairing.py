from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..core.enums import PairingState, PunchType
from .model import BreakInterval, ShiftPair

logger = logging.getLogger(__name__)

OVERNIGHT_SHIFT = timedelta(hours=24)


class PunchPairingMachine:
    """State machine pairing one employee-day's sorted punches.

    States: IDLE, AWAITING_CHECKOUT (one open check-in), ON_BREAK (one open
    break-start, with or without an open check-in underneath). At most one
    check-in and one break-start are open at any time.

    Rules:
    - a new check-in replaces an open one; the replaced check-in never counts.
    - check-out closes the open check-in. ``delta <= 0`` is an overnight shift
      (+24h); a delta that is negative or above ``max_shift_hours`` after that
      is malformed and discarded.
    - check-outs seen before the first check-in of the day are kept; if the day
      ends with an open check-in, the last of them closes it as an overnight
      shift (the shift ended in the morning of the same stamped date), but only
      when that shift is at most ``max_overnight_closure_hours`` long.
      Otherwise the open check-in is dangling and contributes nothing.
    - matched break-start/break-end become intervals; every break marker that
      cannot be paired is counted in ``unmatched_break_markers``.
    """

    def __init__(self, *, max_shift_hours: int = 24, max_overnight_closure_hours: int = 16):
        self._max_shift = timedelta(hours=max_shift_hours)
        self._max_overnight_closure = timedelta(hours=max_overnight_closure_hours)
        self._open_check_in: Optional[datetime] = None
        self._open_break: Optional[datetime] = None
        self._seen_check_in = False
        self._leading_check_outs: list[datetime] = []
        self._finished = False

        self.pairs: list[ShiftPair] = []
        self.breaks: list[BreakInterval] = []
        self.unmatched_break_markers = 0
        self.discarded_pairs = 0
        self.discarded_check_ins = 0
        self.stray_check_outs = 0

    @property
    def state(self) -> PairingState:
        if self._open_break is not None:
            return PairingState.ON_BREAK
        if self._open_check_in is not None:
            return PairingState.AWAITING_CHECKOUT
        return PairingState.IDLE

    @property
    def has_open_check_in(self) -> bool:
        return self._open_check_in is not None

    def feed(self, kind: PunchType, at: datetime) -> None:
        if self._finished:
            raise RuntimeError("pairing machine already finished")

        if kind == PunchType.CHECK_IN:
            self._on_check_in(at)
        elif kind == PunchType.CHECK_OUT:
            self._on_check_out(at)
        elif kind == PunchType.BREAK_START:
            self._on_break_start(at)
        elif kind == PunchType.BREAK_END:
            self._on_break_end(at)

    def finish(self) -> None:
        if self._finished:
            return
        self._finished = True

        if self._open_break is not None:
            self.unmatched_break_markers += 1
            self._open_break = None

        if self._open_check_in is not None and self._leading_check_outs:
            check_in = self._open_check_in
            check_out = self._leading_check_outs[-1]
            if check_out + OVERNIGHT_SHIFT - check_in <= self._max_overnight_closure:
                self._open_check_in = None
                self._close(check_in, check_out)

        if self._open_check_in is not None:
            logger.debug("dangling check-in at %s contributes no hours", self._open_check_in)
            self._open_check_in = None

    def _on_check_in(self, at: datetime) -> None:
        if self._open_check_in is not None:
            self.discarded_check_ins += 1
            logger.debug("check-in at %s replaced by check-in at %s", self._open_check_in, at)
        self._open_check_in = at
        self._seen_check_in = True

    def _on_check_out(self, at: datetime) -> None:
        if self._open_check_in is None:
            if not self._seen_check_in:
                self._leading_check_outs.append(at)
            else:
                self.stray_check_outs += 1
            return

        check_in = self._open_check_in
        self._open_check_in = None
        self._close(check_in, at)

    def _close(self, check_in: datetime, check_out: datetime) -> None:
        effective_out = check_out
        overnight = False
        if check_out - check_in <= timedelta(0):
            effective_out = check_out + OVERNIGHT_SHIFT
            overnight = True

        delta = effective_out - check_in
        if delta < timedelta(0) or delta > self._max_shift:
            self.discarded_pairs += 1
            logger.debug("discarded malformed pair %s -> %s (%s)", check_in, check_out, delta)
            return

        self.pairs.append(ShiftPair(check_in=check_in, check_out=effective_out, overnight=overnight))

    def _on_break_start(self, at: datetime) -> None:
        if self._open_break is not None:
            self.unmatched_break_markers += 1
        self._open_break = at

    def _on_break_end(self, at: datetime) -> None:
        # Grouped punches arrive sorted; the ordering check only matters for direct feed() callers.
        if self._open_break is None or at < self._open_break:
            self.unmatched_break_markers += 1
            return
        self.breaks.append(BreakInterval(start=self._open_break, end=at))
        self._open_break = None
