from typing import Optional, Sequence, Tuple


class CriticalMacroTracker:
    """Tracks the prolog / loop_start / loop_end / epilog sequence of a block.

    ``stage`` is the index of the stage still awaited; ``len(stages)`` means
    the block is satisfied, which is also the state before the first label.
    """

    def __init__(self, stages: Sequence[Sequence[str]]):
        self.stages: Tuple[Tuple[str, ...], ...] = tuple(tuple(stage) for stage in stages)
        self.stage = len(self.stages)

    @property
    def satisfied(self) -> bool:
        return self.stage == len(self.stages)

    def expected_message(self) -> str:
        names = ' or '.join(f"'{name}'" for name in self.stages[self.stage])
        return f"Expected critical macro {names}"

    def enter_label(self) -> Optional[str]:
        """Start a new block; returns a message when the previous one was incomplete"""
        message = None if self.satisfied else self.expected_message()
        self.stage = 0
        return message

    def consume(self, mnemonic: str) -> bool:
        if self.satisfied or mnemonic not in self.stages[self.stage]:
            return False
        self.stage += 1
        return True

    def finish(self) -> Optional[str]:
        if self.satisfied:
            return None
        return self.expected_message()
