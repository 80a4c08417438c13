"""Interface abstractions for the stopwatch model.

Defines behavioral contracts that all implementations must satisfy:
- Design: complete clocked system (abstract base class)
- IClock, ClockSubscriber: clock source and its subscribers
"""

from stopwatch.interfaces.clock import ClockSubscriber, IClock
from stopwatch.interfaces.design import Design

__all__ = [
    "ClockSubscriber",
    "Design",
    "IClock",
]
