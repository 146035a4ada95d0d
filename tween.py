# tween.py
"""
Tween Module

Time-based visual interpolation advanced by the frame driver. A tween animates
named attributes of a target from their values at start to the given end
values. Interrupting one is just replacing it with another, so there are no
competing timers.
"""

import math


def ease_in_out(t):
    """Sine ease-in-out on [0, 1]."""
    return 0.5 - 0.5 * math.cos(math.pi * t)


def linear(t):
    return t


class Tween:
    def __init__(self, target, end_values, duration, delay=0.0, easing=ease_in_out, on_complete=None):
        """
        Parameters:
            target: Any object whose attributes are animated (a Transform, an
                entity with an `alpha` attribute, a panel, ...).
            end_values (dict): Attribute name -> final value.
            duration (float): Length of the interpolation in frames.
            delay (float): Frames to wait before interpolation starts.
            easing (callable): Maps linear progress in [0, 1] to eased progress.
            on_complete (callable): Called once, with the tween, when it finishes.

        Start values are read when the delay has elapsed, so a delayed tween
        starts from wherever the target is at that moment.
        """
        self.target = target
        self.end_values = dict(end_values)
        self.duration = max(0.0, float(duration))
        self.delay = max(0.0, float(delay))
        self.easing = easing
        self.on_complete = on_complete
        self.elapsed = 0.0
        self.start_values = None
        self.done = False
        self.cancelled = False

    @property
    def progress(self):
        if self.done:
            return 1.0
        active = self.elapsed - self.delay
        if active <= 0:
            return 0.0
        if self.duration == 0:
            return 1.0
        return min(1.0, active / self.duration)

    def update(self, delta):
        """
        Advances the tween.

        Returns:
            bool: True once the tween has finished (including on this call).
        """
        if self.done:
            return True
        self.elapsed += delta
        if self.elapsed < self.delay:
            return False
        if self.start_values is None:
            self.start_values = {key: getattr(self.target, key) for key in self.end_values}

        t = self.progress
        if t >= 1.0:
            # Land exactly on the end values.
            for key, value in self.end_values.items():
                setattr(self.target, key, value)
            self.done = True
            if self.on_complete is not None:
                self.on_complete(self)
            return True

        eased = self.easing(t)
        for key, end in self.end_values.items():
            start = self.start_values[key]
            setattr(self.target, key, start + (end - start) * eased)
        return False

    def cancel(self):
        """Stops the tween where it is. The completion callback never fires."""
        self.cancelled = True
        self.done = True

    def retarget(self, end_values):
        """Changes end values mid-flight, continuing from the current values."""
        self.end_values.update(end_values)
        if self.start_values is not None:
            # Rebase so the remaining interpolation starts from the present value.
            t = self.easing(self.progress)
            for key, end in end_values.items():
                current = getattr(self.target, key)
                if t < 1.0:
                    self.start_values[key] = (current - end * t) / (1.0 - t)
                else:
                    self.start_values[key] = current


class TweenGroup:
    """An ordered set of tweens advanced together."""

    def __init__(self):
        self.tweens = []

    def add(self, tween):
        self.tweens.append(tween)
        return tween

    def update(self, delta):
        for tween in list(self.tweens):
            tween.update(delta)
        self.tweens = [t for t in self.tweens if not t.done]

    def cancel_all(self):
        for tween in self.tweens:
            tween.cancel()
        self.tweens = []

    def find(self, target):
        for tween in self.tweens:
            if tween.target is target:
                return tween
        return None

    @property
    def active(self):
        return any(not t.done for t in self.tweens)

    def __len__(self):
        return len(self.tweens)
